"""
Mosaic Transformation.

Applies a mosaic or pixellation effect: the image is resized down to a coarse
pixel grid and back up to its original size, both with nearest-neighbour
sampling, so each grid cell becomes a solid block.

The grid is chosen by exactly one of:
- width in pixels (height follows the source aspect ratio)
- height in pixels (width follows the source aspect ratio)
- a downsizing factor applied to both axes

Without configuration the transformation returns a copy of the image.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

from PIL import Image

from BT_Libs.constants import ID_MOSAIC, UNSET_PIXELS
from BT_Libs.TransformLib.base import BitmapTransformation, ensure_image, round_half_up
from BT_Libs.TransformLib.fingerprint import FingerprintWriter, to_float32, to_int32


@dataclass(frozen=True, eq=False)
class Mosaic(BitmapTransformation):
    """Mosaic configuration.

    Attributes:
        x_pixels: Grid width in pixels, or UNSET_PIXELS
        y_pixels: Grid height in pixels, or UNSET_PIXELS
        factor: Downsizing factor (>= 1), used when neither axis is set
    """
    x_pixels: int = UNSET_PIXELS
    y_pixels: int = UNSET_PIXELS
    factor: float = 1.0

    ID: ClassVar[str] = ID_MOSAIC

    def __post_init__(self):
        x_pixels = UNSET_PIXELS if self.x_pixels is None else int(self.x_pixels)
        y_pixels = UNSET_PIXELS if self.y_pixels is None else int(self.y_pixels)
        factor = max(1.0, float(self.factor))
        # Width wins when both axes were given; a pixel target overrides the factor
        if x_pixels != UNSET_PIXELS:
            x_pixels, y_pixels, factor = max(1, x_pixels), UNSET_PIXELS, 1.0
        elif y_pixels != UNSET_PIXELS:
            y_pixels, factor = max(1, y_pixels), 1.0
        object.__setattr__(self, "x_pixels", to_int32(x_pixels))
        object.__setattr__(self, "y_pixels", to_int32(y_pixels))
        object.__setattr__(self, "factor", to_float32(factor))

    @classmethod
    def builder(cls) -> "MosaicBuilder":
        return MosaicBuilder()

    def resolve_grid(self, width: int, height: int) -> Tuple[int, int]:
        """
        Resolve the pixel grid for a source of the given size.

        Targets larger than the source are clamped to the source size.

        Returns:
            (grid_width, grid_height), each at least 1
        """
        if self.x_pixels != UNSET_PIXELS:
            grid_width = min(width, self.x_pixels)
            grid_height = round_half_up(height / max(1.0, width / grid_width))
        elif self.y_pixels != UNSET_PIXELS:
            grid_height = min(height, self.y_pixels)
            grid_width = round_half_up(width / max(1.0, height / grid_height))
        else:
            grid_width = round_half_up(width / self.factor)
            grid_height = round_half_up(height / self.factor)
        return max(1, grid_width), max(1, grid_height)

    def transform(self, image: Any) -> Any:
        source = ensure_image(image)
        grid = self.resolve_grid(*source.size)
        if grid == source.size:
            return source
        scaled = source.resize(grid, Image.Resampling.NEAREST)
        return scaled.resize(source.size, Image.Resampling.NEAREST)

    def write_fields(self, writer: FingerprintWriter) -> None:
        writer.put_int(self.x_pixels).put_int(self.y_pixels).put_float(self.factor)


class MosaicBuilder:
    """Fluent builder for Mosaic. Each setter replaces the previous one."""

    def __init__(self):
        self._params: Dict[str, Any] = {}

    def set_by_width(self, width_pixels: int) -> "MosaicBuilder":
        """Grid ``width_pixels`` wide; height keeps the aspect ratio."""
        self._params = {"x_pixels": max(1, int(width_pixels))}
        return self

    def set_by_height(self, height_pixels: int) -> "MosaicBuilder":
        """Grid ``height_pixels`` high; width keeps the aspect ratio."""
        self._params = {"y_pixels": max(1, int(height_pixels))}
        return self

    def set_by_factor(self, downsize_factor: float) -> "MosaicBuilder":
        """Divide both dimensions by ``downsize_factor`` (values <= 1 do nothing)."""
        self._params = {"factor": max(1.0, float(downsize_factor))}
        return self

    def build(self) -> Mosaic:
        return Mosaic(**self._params)
