"""
Gaussian Blur Transformation.

Blurs with a bounded blur primitive whose radius is capped at
MAX_BLUR_RADIUS (25 px). Larger radii are approximated: the image is
downscaled by MAX_BLUR_RADIUS / radius, blurred at the cap, and scaled back
up with bilinear filtering. The approximation keeps the cost bounded and is
intentional.

Blurring is done on premultiplied pixels so transparent areas do not bleed
dark fringes into opaque ones.

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.png")
    >>>
    >>> soft = GaussianBlur(radius=8).transform(img)
    >>>
    >>> # Radius 100 blurs a quarter-size copy at radius 25
    >>> dreamy = GaussianBlur(radius=100).transform(img)
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from PIL import Image, ImageFilter

from BT_Libs.constants import (
    BLUR_SIGMA_OFFSET,
    BLUR_SIGMA_SCALE,
    BUFFER_MODE,
    ID_GAUSSIAN_BLUR,
    MAX_BLUR_RADIUS,
    PREMULTIPLIED_MODE,
)
from BT_Libs.TransformLib.base import BitmapTransformation, ensure_image, round_half_up
from BT_Libs.TransformLib.fingerprint import FingerprintWriter, to_float32

logger = logging.getLogger(__name__)


# ============================================================================
# Blur Primitives
# ============================================================================

def bounded_blur(image: Any, radius: float) -> Any:
    """
    Blur with a kernel radius of at most MAX_BLUR_RADIUS.

    The kernel radius maps to a Gaussian standard deviation of
    ``0.4 * radius + 0.6``.

    Args:
        image: PIL Image (converted to RGBA)
        radius: Kernel radius in pixels, clamped to 0-MAX_BLUR_RADIUS

    Returns:
        Blurred RGBA PIL Image
    """
    source = ensure_image(image)
    radius = max(0.0, min(MAX_BLUR_RADIUS, float(radius)))
    if radius == 0:
        return source

    sigma = BLUR_SIGMA_SCALE * radius + BLUR_SIGMA_OFFSET
    premultiplied = source.convert(PREMULTIPLIED_MODE)
    blurred = premultiplied.filter(ImageFilter.GaussianBlur(radius=sigma))
    return blurred.convert(BUFFER_MODE)


def scaled_size(width: int, height: int, scale: float) -> tuple:
    """Size of a ``width`` x ``height`` image scaled by ``scale``, at least 1x1."""
    return (
        max(1, round_half_up(width * scale)),
        max(1, round_half_up(height * scale)),
    )


def approximate_blur(image: Any, radius: float) -> Any:
    """
    Blur at any radius, downscaling first when radius exceeds the cap.

    Args:
        image: PIL Image (converted to RGBA)
        radius: Blur radius in pixels (>= 0)

    Returns:
        New blurred RGBA PIL Image of the source size
    """
    source = ensure_image(image)
    radius = max(0.0, float(radius))
    if radius <= MAX_BLUR_RADIUS:
        return bounded_blur(source, radius)

    width, height = source.size
    small_size = scaled_size(width, height, MAX_BLUR_RADIUS / radius)
    logger.debug(
        f"Blur radius {radius} exceeds {MAX_BLUR_RADIUS}, "
        f"blurring at {small_size[0]}x{small_size[1]}"
    )
    small = source.resize(small_size, Image.Resampling.BILINEAR)
    blurred = bounded_blur(small, MAX_BLUR_RADIUS)
    return blurred.resize((width, height), Image.Resampling.BILINEAR)


# ============================================================================
# Gaussian Blur Transformation
# ============================================================================

@dataclass(frozen=True, eq=False)
class GaussianBlur(BitmapTransformation):
    """Gaussian blur configuration.

    Attributes:
        radius: Blur radius in pixels (>= 0, unbounded)
    """
    radius: float = 0.0

    ID: ClassVar[str] = ID_GAUSSIAN_BLUR

    def __post_init__(self):
        object.__setattr__(self, "radius", to_float32(max(0.0, float(self.radius))))

    def transform(self, image: Any) -> Any:
        return approximate_blur(image, self.radius)

    def write_fields(self, writer: FingerprintWriter) -> None:
        writer.put_float(self.radius)
