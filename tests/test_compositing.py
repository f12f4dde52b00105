"""
Unit tests for the compositing module.

Checks the Porter-Duff operators and blend modes on single pixels, where
the expected values can be worked out by hand.
"""

import numpy as np
import pytest
from PIL import Image

from BT_Libs.TransformLib.compositing import (
    BlendMode,
    apply_mask,
    composite,
    composite_images,
    draw_colour,
    from_premultiplied,
    to_premultiplied,
)


def pixel(r, g, b, a):
    """1x1 premultiplied array from 0-1 straight channels."""
    return np.array([[[r * a, g * a, b * a, a]]], dtype=np.float64)


class TestPremultipliedConversion:
    """Tests for to_premultiplied / from_premultiplied."""

    def test_round_trip_preserves_pixels(self, noise_image):
        result = from_premultiplied(to_premultiplied(noise_image))
        original = np.asarray(noise_image)
        restored = np.asarray(result)
        assert np.array_equal(original[..., 3], restored[..., 3])
        visible = original[..., 3] > 0
        assert np.abs(original[visible].astype(int) - restored[visible].astype(int)).max() <= 1

    def test_transparent_pixels_become_zero(self):
        image = Image.new("RGBA", (2, 2), (200, 100, 50, 0))
        result = from_premultiplied(to_premultiplied(image))
        assert result.getpixel((0, 0)) == (0, 0, 0, 0)


class TestPorterDuff:
    """Tests for composite on single pixels."""

    def setup_method(self):
        self.src = pixel(1.0, 0.0, 0.0, 0.5)
        self.dst = pixel(0.0, 0.0, 1.0, 1.0)

    def test_src_over(self):
        out = composite(self.src, self.dst, BlendMode.SRC_OVER)[0, 0]
        assert out == pytest.approx([0.5, 0.0, 0.5, 1.0])

    def test_dst_over_keeps_opaque_destination(self):
        out = composite(self.src, self.dst, BlendMode.DST_OVER)[0, 0]
        assert out == pytest.approx([0.0, 0.0, 1.0, 1.0])

    def test_src_in_scales_by_destination_alpha(self):
        half_dst = pixel(0.0, 0.0, 1.0, 0.5)
        out = composite(self.src, half_dst, BlendMode.SRC_IN)[0, 0]
        assert out == pytest.approx([0.25, 0.0, 0.0, 0.25])

    def test_clear(self):
        out = composite(self.src, self.dst, BlendMode.CLEAR)[0, 0]
        assert out == pytest.approx([0.0, 0.0, 0.0, 0.0])

    def test_xor_with_opaque_both_is_empty(self):
        opaque = pixel(1.0, 1.0, 1.0, 1.0)
        out = composite(opaque, self.dst, BlendMode.XOR)[0, 0]
        assert out == pytest.approx([0.0, 0.0, 0.0, 0.0])

    def test_multiply(self):
        grey = pixel(0.5, 0.5, 0.5, 1.0)
        out = composite(grey, pixel(1.0, 0.5, 0.0, 1.0), BlendMode.MULTIPLY)[0, 0]
        assert out == pytest.approx([0.5, 0.25, 0.0, 1.0])

    def test_screen(self):
        grey = pixel(0.5, 0.5, 0.5, 1.0)
        out = composite(grey, pixel(0.5, 0.0, 1.0, 1.0), BlendMode.SCREEN)[0, 0]
        assert out == pytest.approx([0.75, 0.5, 1.0, 1.0])

    def test_darken_and_lighten(self):
        a = pixel(0.2, 0.8, 0.5, 1.0)
        b = pixel(0.6, 0.4, 0.5, 1.0)
        assert composite(a, b, BlendMode.DARKEN)[0, 0] == pytest.approx([0.2, 0.4, 0.5, 1.0])
        assert composite(a, b, BlendMode.LIGHTEN)[0, 0] == pytest.approx([0.6, 0.8, 0.5, 1.0])

    def test_add_saturates(self):
        a = pixel(0.8, 0.1, 0.0, 1.0)
        out = composite(a, a, BlendMode.ADD)[0, 0]
        assert out == pytest.approx([1.0, 0.2, 0.0, 1.0])

    def test_overlay_opaque(self):
        src = pixel(0.5, 0.5, 0.5, 1.0)
        dst = pixel(0.25, 0.75, 0.5, 1.0)
        out = composite(src, dst, BlendMode.OVERLAY)[0, 0]
        # Dark destination multiplies, light destination screens
        assert out == pytest.approx([0.25, 0.75, 0.5, 1.0])

    def test_every_mode_is_handled(self):
        for mode in BlendMode:
            out = composite(self.src, self.dst, mode)
            assert out.shape == (1, 1, 4)


class TestImageHelpers:
    """Tests for draw_colour, apply_mask and composite_images."""

    def test_draw_colour_dst_over_fills_transparent_area(self):
        image = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
        image.putpixel((0, 0), (255, 0, 0, 255))
        result = draw_colour(image, 0xFF0000FF, BlendMode.DST_OVER)
        assert result.getpixel((0, 0)) == (255, 0, 0, 255)
        assert result.getpixel((3, 3)) == (0, 0, 255, 255)

    def test_apply_mask_keeps_covered_pixels(self):
        image = Image.new("RGBA", (4, 1), (10, 20, 30, 255))
        mask = Image.new("L", (4, 1), 0)
        mask.putpixel((1, 0), 255)
        result = apply_mask(image, mask)
        assert result.getpixel((1, 0)) == (10, 20, 30, 255)
        assert result.getpixel((0, 0)) == (0, 0, 0, 0)

    def test_composite_images_src_over(self):
        top = Image.new("RGBA", (2, 2), (255, 255, 255, 255))
        bottom = Image.new("RGBA", (2, 2), (0, 0, 0, 255))
        result = composite_images(top, bottom, BlendMode.SRC_OVER)
        assert result.getpixel((1, 1)) == (255, 255, 255, 255)
