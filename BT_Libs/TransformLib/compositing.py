"""
Alpha Compositing Operations.

Implements the Porter-Duff operators and the separable blend modes used by
the transformations, on premultiplied float pixel arrays:
- Porter-Duff: CLEAR, SRC, DST, SRC_OVER, DST_OVER, SRC_IN, DST_IN,
  SRC_OUT, DST_OUT, SRC_ATOP, DST_ATOP, XOR
- Blend modes: DARKEN, LIGHTEN, MULTIPLY, SCREEN, ADD, OVERLAY

In every formula "src" is the content being drawn and "dst" is the content
already on the canvas.

Example:
    >>> from PIL import Image
    >>> img = Image.new("RGBA", (10, 10), (255, 0, 0, 255))
    >>> tinted = draw_colour(img, 0x800000FF, BlendMode.SRC_ATOP)
"""

from enum import IntEnum
from typing import Any

import numpy as np
from PIL import Image

from BT_Libs.constants import BUFFER_MODE
from BT_Libs.TransformLib.colours import to_rgba


class BlendMode(IntEnum):
    """Compositing modes; values are stable and used in fingerprints."""
    CLEAR = 0
    SRC = 1
    DST = 2
    SRC_OVER = 3
    DST_OVER = 4
    SRC_IN = 5
    DST_IN = 6
    SRC_OUT = 7
    DST_OUT = 8
    SRC_ATOP = 9
    DST_ATOP = 10
    XOR = 11
    DARKEN = 12
    LIGHTEN = 13
    MULTIPLY = 14
    SCREEN = 15
    ADD = 16
    OVERLAY = 17


# ============================================================================
# Pixel Array Conversion
# ============================================================================

def to_premultiplied(image: Any) -> np.ndarray:
    """
    Convert an image to a premultiplied float array.

    Args:
        image: PIL Image (converted to RGBA)

    Returns:
        float64 array of shape (H, W, 4), values 0.0-1.0, colour premultiplied
    """
    arr = np.asarray(image.convert(BUFFER_MODE), dtype=np.float64) / 255.0
    arr[..., :3] *= arr[..., 3:4]
    return arr


def from_premultiplied(arr: np.ndarray) -> Any:
    """Convert a premultiplied float array back to an RGBA image."""
    alpha = np.clip(arr[..., 3:4], 0.0, 1.0)
    colour = np.zeros_like(arr[..., :3])
    np.divide(arr[..., :3], alpha, out=colour, where=alpha > 0)
    out = np.concatenate([np.clip(colour, 0.0, 1.0), alpha], axis=-1)
    return Image.fromarray(np.rint(out * 255.0).astype(np.uint8))


def solid_premultiplied(colour: int, width: int, height: int) -> np.ndarray:
    """Premultiplied float array filled with one packed colour."""
    red, green, blue, alpha = (c / 255.0 for c in to_rgba(colour))
    pixel = np.array([red * alpha, green * alpha, blue * alpha, alpha])
    return np.broadcast_to(pixel, (height, width, 4)).copy()


# ============================================================================
# Compositing
# ============================================================================

def composite(src: np.ndarray, dst: np.ndarray, mode: BlendMode) -> np.ndarray:
    """
    Composite two premultiplied arrays of equal shape.

    Args:
        src: Premultiplied source array (H, W, 4)
        dst: Premultiplied destination array (H, W, 4)
        mode: BlendMode to apply

    Returns:
        Premultiplied result array (H, W, 4)
    """
    sc, sa = src[..., :3], src[..., 3:4]
    dc, da = dst[..., :3], dst[..., 3:4]

    if mode == BlendMode.CLEAR:
        return np.zeros_like(dst)
    if mode == BlendMode.SRC:
        return src.copy()
    if mode == BlendMode.DST:
        return dst.copy()

    if mode == BlendMode.SRC_OVER:
        out_a = sa + (1 - sa) * da
        out_c = sc + (1 - sa) * dc
    elif mode == BlendMode.DST_OVER:
        out_a = da + (1 - da) * sa
        out_c = dc + (1 - da) * sc
    elif mode == BlendMode.SRC_IN:
        out_a = sa * da
        out_c = sc * da
    elif mode == BlendMode.DST_IN:
        out_a = da * sa
        out_c = dc * sa
    elif mode == BlendMode.SRC_OUT:
        out_a = sa * (1 - da)
        out_c = sc * (1 - da)
    elif mode == BlendMode.DST_OUT:
        out_a = da * (1 - sa)
        out_c = dc * (1 - sa)
    elif mode == BlendMode.SRC_ATOP:
        out_a = da.copy()
        out_c = da * sc + (1 - sa) * dc
    elif mode == BlendMode.DST_ATOP:
        out_a = sa.copy()
        out_c = sa * dc + (1 - da) * sc
    elif mode == BlendMode.XOR:
        out_a = sa + da - 2 * sa * da
        out_c = (1 - da) * sc + (1 - sa) * dc
    else:
        out_a = sa + da - sa * da
        outside = sc * (1 - da) + dc * (1 - sa)
        if mode == BlendMode.DARKEN:
            out_c = outside + np.minimum(sc * da, dc * sa)
        elif mode == BlendMode.LIGHTEN:
            out_c = outside + np.maximum(sc * da, dc * sa)
        elif mode == BlendMode.MULTIPLY:
            out_a = sa * da
            out_c = sc * dc
        elif mode == BlendMode.SCREEN:
            out_c = sc + dc - sc * dc
        elif mode == BlendMode.ADD:
            out_a = np.minimum(sa + da, 1.0)
            out_c = np.minimum(sc + dc, 1.0)
        elif mode == BlendMode.OVERLAY:
            low = 2 * sc * dc
            high = sa * da - 2 * (da - dc) * (sa - sc)
            out_c = outside + np.where(2 * dc <= da, low, high)
        else:
            raise ValueError(f"Unhandled blend mode: {mode!r}")

    return np.concatenate([out_c, out_a], axis=-1)


def composite_images(src: Any, dst: Any, mode: BlendMode) -> Any:
    """Composite two same-size images and return a new RGBA image."""
    return from_premultiplied(composite(to_premultiplied(src), to_premultiplied(dst), mode))


def draw_colour(image: Any, colour: int, mode: BlendMode) -> Any:
    """
    Draw a flat colour over an image with the given mode.

    The colour is the source and the image the destination, so
    ``DST_OVER`` fills beneath the image and ``SRC_IN`` recolours it.
    """
    width, height = image.size
    flat = solid_premultiplied(colour, width, height)
    return from_premultiplied(composite(flat, to_premultiplied(image), mode))


def apply_mask(image: Any, mask: Any) -> Any:
    """
    Keep image pixels only where the mask is opaque (source-in).

    Args:
        image: PIL Image drawn as the source
        mask: PIL Image in L mode, 0 = transparent, 255 = opaque

    Returns:
        New RGBA image
    """
    src = to_premultiplied(image)
    coverage = np.asarray(mask.convert("L"), dtype=np.float64)[..., np.newaxis] / 255.0
    dst = np.concatenate([np.repeat(coverage, 3, axis=-1), coverage], axis=-1)
    return from_premultiplied(composite(src, dst, BlendMode.SRC_IN))
