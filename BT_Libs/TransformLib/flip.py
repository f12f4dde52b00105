"""
Flip Transformation.

Mirrors the image about its own centre, horizontally (left-right),
vertically (top-bottom) or both.

Example:
    >>> mirrored = Flip.from_direction(FlipDirection.HORIZONTAL).transform(img)
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from PIL import Image

from BT_Libs.constants import ID_FLIP
from BT_Libs.TransformLib.base import BitmapTransformation, coerce_enum, ensure_image
from BT_Libs.TransformLib.directions import FlipDirection
from BT_Libs.TransformLib.fingerprint import FingerprintWriter

_SCALES = {
    FlipDirection.HORIZONTAL: (-1.0, 1.0),
    FlipDirection.VERTICAL: (1.0, -1.0),
    FlipDirection.BOTH: (-1.0, -1.0),
}


@dataclass(frozen=True, eq=False)
class Flip(BitmapTransformation):
    """Flip configuration, stored as resolved axis scales.

    Attributes:
        x_scale: -1.0 to mirror left-right, 1.0 otherwise
        y_scale: -1.0 to mirror top-bottom, 1.0 otherwise
    """
    x_scale: float = -1.0
    y_scale: float = 1.0

    ID: ClassVar[str] = ID_FLIP

    def __post_init__(self):
        object.__setattr__(self, "x_scale", -1.0 if self.x_scale < 0 else 1.0)
        object.__setattr__(self, "y_scale", -1.0 if self.y_scale < 0 else 1.0)

    @classmethod
    def from_direction(cls, direction: Any) -> "Flip":
        """
        Create a flip for a direction.

        Args:
            direction: FlipDirection member, name or value

        Raises:
            InvalidArgument: If direction is not a FlipDirection
        """
        x_scale, y_scale = _SCALES[coerce_enum(FlipDirection, direction)]
        return cls(x_scale, y_scale)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Flip":
        if "direction" in data:
            return cls.from_direction(data["direction"])
        return super().from_dict(data)

    def transform(self, image: Any) -> Any:
        result = ensure_image(image)
        if self.x_scale < 0:
            result = result.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        if self.y_scale < 0:
            result = result.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return result

    def write_fields(self, writer: FingerprintWriter) -> None:
        writer.put_float(self.x_scale).put_float(self.y_scale)
