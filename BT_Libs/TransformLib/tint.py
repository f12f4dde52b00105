"""
Tint Transformation.

Draws the image unmodified and then composites a flat tint colour over it
with a BlendMode. The default (SRC_IN with 50% black) darkens the opaque
parts of the image and leaves transparent parts transparent.

Example:
    >>> sepia = (
    ...     Tint.builder()
    ...     .set_tint_mode(BlendMode.MULTIPLY)
    ...     .set_tint_colour((112, 66, 20, 255))
    ...     .build()
    ... )
    >>> result = sepia.transform(img)
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from BT_Libs.constants import HALF_BLACK, ID_TINT
from BT_Libs.TransformLib.base import BitmapTransformation, coerce_enum, ensure_image
from BT_Libs.TransformLib.colours import ColourResources, normalize_colour, resolve_colour_res
from BT_Libs.TransformLib.compositing import BlendMode, draw_colour
from BT_Libs.TransformLib.fingerprint import FingerprintWriter


@dataclass(frozen=True, eq=False)
class Tint(BitmapTransformation):
    """Tint configuration.

    Attributes:
        mode: BlendMode used to draw the tint colour over the image
        colour: Packed ARGB tint colour (50% black by default)
    """
    mode: BlendMode = BlendMode.SRC_IN
    colour: int = HALF_BLACK

    ID: ClassVar[str] = ID_TINT
    ENUM_FIELDS: ClassVar[Dict[str, Any]] = {"mode": BlendMode}

    def __post_init__(self):
        object.__setattr__(self, "mode", coerce_enum(BlendMode, self.mode))
        object.__setattr__(self, "colour", normalize_colour(self.colour))

    @classmethod
    def builder(cls, resources: Optional[ColourResources] = None) -> "TintBuilder":
        return TintBuilder(resources)

    def transform(self, image: Any) -> Any:
        return draw_colour(ensure_image(image), self.colour, self.mode)

    def write_fields(self, writer: FingerprintWriter) -> None:
        writer.put_colour(self.colour).put_int(int(self.mode))


class TintBuilder:
    """Fluent builder for Tint."""

    def __init__(self, resources: Optional[ColourResources] = None):
        self._resources = resources
        self._params: Dict[str, Any] = {}

    def set_tint_mode(self, mode: Any) -> "TintBuilder":
        """
        Set the blend mode.

        Raises:
            InvalidArgument: If mode is not a BlendMode member, name or value
        """
        self._params["mode"] = coerce_enum(BlendMode, mode)
        return self

    def set_tint_colour(self, colour: Any) -> "TintBuilder":
        self._params["colour"] = normalize_colour(colour)
        return self

    def set_tint_colour_res(
        self,
        res_id: int,
        resources: Optional[ColourResources] = None,
    ) -> "TintBuilder":
        self._params["colour"] = resolve_colour_res(res_id, resources or self._resources)
        return self

    def build(self) -> Tint:
        return Tint(**self._params)
