"""
Drop Shadow Transformation.

Draws a blurred, coloured silhouette of the image behind it, offset by an
elevation along an angle. Useful for images with complex shapes that cannot
get a shadow any other way. The colour of the shadow, its blur radius and its
offset can all be configured.

Angle convention: 0 degrees casts the shadow east (due right) and angles
grow counter-clockwise, so 90 degrees casts it north (up). The offset is
``(elevation * cos(angle), -elevation * sin(angle))`` in image coordinates.

The output has the source size. Images should be padded with transparent
pixels by at least the blur radius plus the elevation so the shadow is not
clipped (see Padding).

Example:
    >>> framed = Padding.uniform(20).transform(img)
    >>> shadow = (
    ...     Shadow.builder()
    ...     .set_blur_radius(8)
    ...     .set_elevation(6)
    ...     .set_direction(Compass.SOUTHEAST)
    ...     .build()
    ... )
    >>> result = shadow.transform(framed)
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from PIL import Image

from BT_Libs.constants import HALF_BLACK, ID_SHADOW
from BT_Libs.TransformLib.base import BitmapTransformation, coerce_enum, ensure_image
from BT_Libs.TransformLib.colours import ColourResources, normalize_colour, resolve_colour_res
from BT_Libs.TransformLib.compositing import BlendMode, draw_colour
from BT_Libs.TransformLib.directions import Compass
from BT_Libs.TransformLib.fingerprint import FingerprintWriter, to_float32
from BT_Libs.TransformLib.gaussian_blur import approximate_blur


@dataclass(frozen=True, eq=False)
class Shadow(BitmapTransformation):
    """Drop shadow configuration.

    Attributes:
        blur_radius: Shadow blur radius in pixels (>= 0)
        elevation: Offset distance of the shadow in pixels (>= 0)
        angle: Direction of the offset in degrees, counter-clockwise from east
        colour: Packed ARGB shadow colour (50% black by default)
    """
    blur_radius: float = 0.0
    elevation: float = 0.0
    angle: float = 0.0
    colour: int = HALF_BLACK

    ID: ClassVar[str] = ID_SHADOW

    def __post_init__(self):
        object.__setattr__(self, "blur_radius", to_float32(max(0.0, float(self.blur_radius))))
        object.__setattr__(self, "elevation", to_float32(max(0.0, float(self.elevation))))
        object.__setattr__(self, "angle", to_float32(self.angle))
        object.__setattr__(self, "colour", normalize_colour(self.colour))

    @classmethod
    def builder(cls, resources: Optional[ColourResources] = None) -> "ShadowBuilder":
        return ShadowBuilder(resources)

    def offset(self) -> Tuple[float, float]:
        """Shadow offset (dx, dy) in image coordinates (y grows downward)."""
        radians = math.radians(self.angle)
        dx = round(self.elevation * math.cos(radians), 6)
        dy = round(-self.elevation * math.sin(radians), 6)
        return dx + 0.0, dy + 0.0

    def silhouette(self, image: Any) -> Any:
        """Blurred copy of the image recoloured with the shadow colour."""
        blurred = approximate_blur(image, self.blur_radius)
        return draw_colour(blurred, self.colour, BlendMode.SRC_IN)

    def transform(self, image: Any) -> Any:
        source = ensure_image(image)
        dx, dy = self.offset()
        shadow = self.silhouette(source)
        if dx or dy:
            shadow = shadow.transform(
                source.size,
                Image.Transform.AFFINE,
                (1, 0, -dx, 0, 1, -dy),
                resample=Image.Resampling.BILINEAR,
            )
        return Image.alpha_composite(shadow, source)

    def write_fields(self, writer: FingerprintWriter) -> None:
        (writer.put_float(self.blur_radius)
            .put_float(self.elevation)
            .put_float(self.angle)
            .put_colour(self.colour))


class ShadowBuilder:
    """Fluent builder for Shadow."""

    def __init__(self, resources: Optional[ColourResources] = None):
        self._resources = resources
        self._params: Dict[str, Any] = {}

    def set_blur_radius(self, blur_radius: float) -> "ShadowBuilder":
        self._params["blur_radius"] = blur_radius
        return self

    def set_elevation(self, elevation: float) -> "ShadowBuilder":
        self._params["elevation"] = elevation
        return self

    def set_angle(self, angle: float) -> "ShadowBuilder":
        self._params["angle"] = angle
        return self

    def set_direction(self, direction: Any) -> "ShadowBuilder":
        """Cast the shadow towards a Compass direction."""
        self._params["angle"] = coerce_enum(Compass, direction).angle
        return self

    def set_shadow_colour(self, colour: Any) -> "ShadowBuilder":
        self._params["colour"] = normalize_colour(colour)
        return self

    def set_shadow_colour_res(
        self,
        res_id: int,
        resources: Optional[ColourResources] = None,
    ) -> "ShadowBuilder":
        self._params["colour"] = resolve_colour_res(res_id, resources or self._resources)
        return self

    def build(self) -> Shadow:
        return Shadow(**self._params)
