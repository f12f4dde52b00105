"""
Padding Transformation.

Adds padding inside the bitmap: the output keeps the source size, is filled
with the padding colour, and the source is scaled into the interior
rectangle. Use it to add a coloured border, or transparent room so a Shadow
is not clipped.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from PIL import Image

from BT_Libs.constants import BUFFER_MODE, ID_PADDING, TRANSPARENT
from BT_Libs.TransformLib.base import BitmapTransformation, ensure_image
from BT_Libs.TransformLib.colours import (
    ColourResources,
    normalize_colour,
    resolve_colour_res,
    to_rgba,
)
from BT_Libs.TransformLib.fingerprint import FingerprintWriter, to_int32


@dataclass(frozen=True, eq=False)
class Padding(BitmapTransformation):
    """Padding configuration.

    Attributes:
        left: Left padding in pixels (>= 0)
        right: Right padding in pixels (>= 0)
        top: Top padding in pixels (>= 0)
        bottom: Bottom padding in pixels (>= 0)
        colour: Packed ARGB padding colour (transparent by default)
    """
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0
    colour: int = TRANSPARENT

    ID: ClassVar[str] = ID_PADDING

    def __post_init__(self):
        for name in ("left", "right", "top", "bottom"):
            object.__setattr__(self, name, to_int32(max(0, int(getattr(self, name)))))
        object.__setattr__(self, "colour", normalize_colour(self.colour))

    @classmethod
    def uniform(cls, padding: int, colour: Any = TRANSPARENT) -> "Padding":
        return cls(padding, padding, padding, padding, colour)

    @classmethod
    def builder(cls, resources: Optional[ColourResources] = None) -> "PaddingBuilder":
        return PaddingBuilder(resources)

    def interior(self, width: int, height: int) -> Tuple[int, int, int, int]:
        """(left, top, inner_width, inner_height) the source is drawn into."""
        inner_width = max(0, width - (self.left + self.right))
        inner_height = max(0, height - (self.top + self.bottom))
        return self.left, self.top, inner_width, inner_height

    def transform(self, image: Any) -> Any:
        source = ensure_image(image)
        result = Image.new(BUFFER_MODE, source.size, to_rgba(self.colour))
        left, top, inner_width, inner_height = self.interior(*source.size)

        if inner_width > 0 and inner_height > 0:
            inner = source.resize((inner_width, inner_height), Image.Resampling.BILINEAR)
            result.alpha_composite(inner, dest=(left, top))

        return result

    def write_fields(self, writer: FingerprintWriter) -> None:
        (writer.put_int(self.left)
            .put_int(self.right)
            .put_int(self.top)
            .put_int(self.bottom)
            .put_colour(self.colour))


class PaddingBuilder:
    """Fluent builder for Padding."""

    def __init__(self, resources: Optional[ColourResources] = None):
        self._resources = resources
        self._params: Dict[str, Any] = {}

    def set_padding(
        self,
        left: int,
        right: Optional[int] = None,
        top: Optional[int] = None,
        bottom: Optional[int] = None,
    ) -> "PaddingBuilder":
        """
        Set padding widths in pixels.

        With a single argument the same width is used on every side.
        """
        if right is None and top is None and bottom is None:
            right = top = bottom = left
        self._params.update(
            left=left,
            right=right or 0,
            top=top or 0,
            bottom=bottom or 0,
        )
        return self

    def set_colour(self, colour: Any) -> "PaddingBuilder":
        self._params["colour"] = normalize_colour(colour)
        return self

    def set_colour_res(
        self,
        res_id: int,
        resources: Optional[ColourResources] = None,
    ) -> "PaddingBuilder":
        self._params["colour"] = resolve_colour_res(res_id, resources or self._resources)
        return self

    def build(self) -> Padding:
        return Padding(**self._params)
