"""
Ellipse Crop Transformation.

Crops the image to a centred circle or ellipse. Pixels outside the shape are
replaced by a fill colour (transparent by default). Sizes are given either in
pixels or as fractions of the source dimensions:
- Circles: fraction of the smaller source dimension
- Ellipses: fraction of each axis independently

Ellipses can be rotated about the image centre; 0 degrees is unrotated and
positive angles rotate counter-clockwise. Circles ignore the angle.

Example:
    >>> from PIL import Image
    >>> img = Image.open("avatar.png")
    >>>
    >>> # Circular avatar covering 80% of the short side
    >>> crop = Ellipse.builder().set_circle_size_fraction(0.8).build()
    >>> avatar = crop.transform(img)
    >>>
    >>> # Wide ellipse tilted by 30 degrees on a white background
    >>> oval = (
    ...     Ellipse.builder()
    ...     .set_size(200, 100)
    ...     .set_angle(30)
    ...     .set_colour(0xFFFFFFFF)
    ...     .build()
    ... )
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw

from BT_Libs.constants import (
    ELLIPSE_MASK_MAX_PIXELS,
    ELLIPSE_MAX_VERTICES,
    ELLIPSE_SUPERSAMPLE,
    ELLIPSE_VERTEX_SPACING,
    ID_ELLIPSE,
    TRANSPARENT,
)
from BT_Libs.TransformLib.base import BitmapTransformation, coerce_enum, ensure_image
from BT_Libs.TransformLib.colours import ColourResources, normalize_colour, resolve_colour_res
from BT_Libs.TransformLib.compositing import BlendMode, apply_mask, draw_colour
from BT_Libs.TransformLib.directions import Compass
from BT_Libs.TransformLib.fingerprint import FingerprintWriter, to_float32

Bounds = Tuple[float, float, float, float]


def mask_scale(width: int, height: int) -> int:
    """Supersampling factor for a mask of the given size, within ELLIPSE_MASK_MAX_PIXELS."""
    pixels = max(1, width * height)
    scale = ELLIPSE_SUPERSAMPLE
    while scale > 1 and pixels * scale * scale > ELLIPSE_MASK_MAX_PIXELS:
        scale -= 1
    return scale


def rotated_ellipse_points(
    box: Bounds,
    angle: float,
    pivot: Tuple[float, float],
) -> List[Tuple[float, float]]:
    """
    Polygon outline of the ellipse inscribed in ``box``, rotated about ``pivot``.

    Args:
        box: (left, top, right, bottom) of the unrotated ellipse
        angle: Rotation in degrees, counter-clockwise on screen
        pivot: (x, y) centre of rotation

    Returns:
        List of (x, y) vertices
    """
    left, top, right, bottom = box
    cx, cy = (left + right) / 2, (top + bottom) / 2
    rx, ry = (right - left) / 2, (bottom - top) / 2
    count = math.ceil(math.pi * (rx + ry) / ELLIPSE_VERTEX_SPACING)
    count = max(16, min(ELLIPSE_MAX_VERTICES, count))

    radians = math.radians(angle)
    cos_a, sin_a = math.cos(radians), math.sin(radians)
    px, py = pivot

    points = []
    for i in range(count):
        t = 2 * math.pi * i / count
        dx = cx + rx * math.cos(t) - px
        dy = cy + ry * math.sin(t) - py
        # y grows downward, so a counter-clockwise turn subtracts from y
        points.append((px + dx * cos_a + dy * sin_a, py - dx * sin_a + dy * cos_a))
    return points


@dataclass(frozen=True, eq=False)
class Ellipse(BitmapTransformation):
    """Ellipse crop configuration.

    Attributes:
        x_diameter: Horizontal diameter (pixels, or fraction 0.0-1.0)
        y_diameter: Vertical diameter (pixels, or fraction 0.0-1.0)
        angle: Rotation in degrees, counter-clockwise
        is_fraction: Whether diameters are fractions of the source size
        is_circle: Whether the shape is a circle (y_diameter follows x_diameter)
        colour: Packed ARGB fill colour for the area outside the shape
    """
    x_diameter: float = 1.0
    y_diameter: float = 1.0
    angle: float = 0.0
    is_fraction: bool = True
    is_circle: bool = False
    colour: int = TRANSPARENT

    ID: ClassVar[str] = ID_ELLIPSE

    def __post_init__(self):
        x_diameter = max(0.0, float(self.x_diameter))
        y_diameter = max(0.0, float(self.y_diameter))
        if self.is_fraction:
            x_diameter = min(1.0, x_diameter)
            y_diameter = min(1.0, y_diameter)
        if self.is_circle:
            y_diameter = x_diameter
        object.__setattr__(self, "x_diameter", to_float32(x_diameter))
        object.__setattr__(self, "y_diameter", to_float32(y_diameter))
        object.__setattr__(self, "angle", to_float32(self.angle))
        object.__setattr__(self, "is_fraction", bool(self.is_fraction))
        object.__setattr__(self, "is_circle", bool(self.is_circle))
        object.__setattr__(self, "colour", normalize_colour(self.colour))

    @classmethod
    def builder(cls, resources: Optional[ColourResources] = None) -> "EllipseBuilder":
        return EllipseBuilder(resources)

    def resolve_diameters(self, width: int, height: int) -> Tuple[float, float]:
        """
        Resolve diameters in pixels for a source of the given size.

        Args:
            width: Source width in pixels
            height: Source height in pixels

        Returns:
            (x_diameter, y_diameter) in pixels
        """
        if not self.is_fraction:
            return self.x_diameter, self.y_diameter
        if self.is_circle:
            side = min(width, height)
            return self.x_diameter * side, self.y_diameter * side
        return self.x_diameter * width, self.y_diameter * height

    def ellipse_bounds(self, width: int, height: int) -> Bounds:
        """Axis-aligned (left, top, right, bottom) of the unrotated ellipse."""
        x_diameter, y_diameter = self.resolve_diameters(width, height)
        left = (width - x_diameter) / 2
        top = (height - y_diameter) / 2
        return left, top, left + x_diameter, top + y_diameter

    def build_mask(self, width: int, height: int) -> Any:
        """
        Rasterize the (rotated) ellipse coverage mask.

        The ellipse is drawn at ``mask_scale(width, height)`` times the target
        size and box-filtered down, which antialiases the edge. Rotated
        ellipses are drawn as a rotated polygon into the same buffer.

        Returns:
            PIL Image in L mode, 255 inside the ellipse
        """
        scale = mask_scale(width, height)
        mask = Image.new("L", (width * scale, height * scale), 0)
        left, top, right, bottom = self.ellipse_bounds(width, height)

        if (right - left) * scale >= 1 and (bottom - top) * scale >= 1:
            box = (left * scale, top * scale, right * scale - 1, bottom * scale - 1)
            draw = ImageDraw.Draw(mask)
            if self.is_circle or not math.isfinite(self.angle) or not self.angle % 360:
                draw.ellipse(box, fill=255)
            else:
                pivot = ((width // 2) * scale, (height // 2) * scale)
                draw.polygon(rotated_ellipse_points(box, self.angle, pivot), fill=255)

        return mask.resize((width, height), Image.Resampling.BOX)

    def transform(self, image: Any) -> Any:
        source = ensure_image(image)
        mask = self.build_mask(*source.size)
        cropped = apply_mask(source, mask)
        return draw_colour(cropped, self.colour, BlendMode.DST_OVER)

    def write_fields(self, writer: FingerprintWriter) -> None:
        (writer.put_float(self.x_diameter)
            .put_float(self.y_diameter)
            .put_float(self.angle)
            .put_colour(self.colour)
            .put_bool(self.is_circle)
            .put_bool(self.is_fraction))


class EllipseBuilder:
    """Fluent builder for Ellipse. Size setters overwrite each other."""

    def __init__(self, resources: Optional[ColourResources] = None):
        self._resources = resources
        self._params: Dict[str, Any] = {}

    def _set_size(self, x: float, y: float, is_fraction: bool, is_circle: bool) -> "EllipseBuilder":
        self._params.update(
            x_diameter=x, y_diameter=y, is_fraction=is_fraction, is_circle=is_circle
        )
        return self

    def set_circle_size(self, size: int) -> "EllipseBuilder":
        """Circle with a diameter of ``size`` pixels."""
        return self._set_size(int(size), int(size), False, True)

    def set_circle_size_fraction(self, fraction: float) -> "EllipseBuilder":
        """Circle with a diameter of ``fraction`` times the smaller source side."""
        return self._set_size(fraction, fraction, True, True)

    def set_size(self, x: int, y: int) -> "EllipseBuilder":
        """Ellipse of ``x`` by ``y`` pixels."""
        return self._set_size(int(x), int(y), False, False)

    def set_size_fraction(self, x: float, y: float) -> "EllipseBuilder":
        """Ellipse sized as fractions of the source width and height."""
        return self._set_size(x, y, True, False)

    def set_angle(self, angle: float) -> "EllipseBuilder":
        self._params["angle"] = angle
        return self

    def set_direction(self, direction: Any) -> "EllipseBuilder":
        """Rotate the ellipse to point along a Compass direction."""
        self._params["angle"] = coerce_enum(Compass, direction).angle
        return self

    def set_colour(self, colour: Any) -> "EllipseBuilder":
        self._params["colour"] = normalize_colour(colour)
        return self

    def set_colour_res(
        self,
        res_id: int,
        resources: Optional[ColourResources] = None,
    ) -> "EllipseBuilder":
        self._params["colour"] = resolve_colour_res(res_id, resources or self._resources)
        return self

    def build(self) -> Ellipse:
        return Ellipse(**self._params)
