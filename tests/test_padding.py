"""
Tests for the Padding transformation.
"""

import unittest

import numpy as np
from PIL import Image

from BT_Libs.TransformLib import InvalidArgument, MappingColourResources, Padding
from helpers import pixels


class TestPadding(unittest.TestCase):
    """Test Padding configuration and output."""

    def setUp(self):
        self.source = Image.new("RGBA", (100, 100), (10, 200, 30, 255))

    def test_uniform_padding_border_and_interior(self):
        padding = Padding.builder().set_padding(10).set_colour(0xFFFF0000).build()
        result = padding.transform(self.source)
        rgba = pixels(result)

        self.assertEqual(result.size, (100, 100))
        red = np.array([255, 0, 0, 255])
        for border in (rgba[:10, :], rgba[90:, :], rgba[:, :10], rgba[:, 90:]):
            self.assertTrue((border == red).all())

        interior = rgba[10:90, 10:90]
        self.assertEqual(interior.shape[:2], (80, 80))
        self.assertTrue((np.abs(interior - np.array([10, 200, 30, 255])) <= 1).all())

    def test_default_colour_is_transparent(self):
        result = Padding.uniform(5).transform(self.source)
        self.assertEqual(result.getpixel((0, 0)), (0, 0, 0, 0))
        self.assertEqual(result.getpixel((50, 50)), (10, 200, 30, 255))

    def test_uneven_padding_interior(self):
        padding = Padding.builder().set_padding(1, 2, 3, 4).build()
        self.assertEqual(padding.interior(100, 100), (1, 3, 97, 93))
        result = padding.transform(self.source)
        self.assertEqual(result.getpixel((0, 50))[3], 0)
        self.assertEqual(result.getpixel((1, 50))[3], 255)
        self.assertEqual(result.getpixel((98, 50))[3], 0)
        self.assertEqual(result.getpixel((50, 96))[3], 0)

    def test_padding_larger_than_image_fills_everything(self):
        padding = Padding(60, 60, 0, 0, 0xFF0000FF)
        self.assertEqual(padding.interior(100, 100), (60, 0, 0, 100))
        result = padding.transform(self.source)
        self.assertEqual(result.getcolors(), [(100 * 100, (0, 0, 255, 255))])

    def test_negative_padding_clamped(self):
        self.assertEqual(Padding(-5, 2, -1, 0), Padding(0, 2, 0, 0))

    def test_source_scaled_not_cropped(self):
        source = Image.new("RGBA", (100, 100), (0, 0, 0, 255))
        source.paste(Image.new("RGBA", (50, 100), (255, 255, 255, 255)), (50, 0))
        result = Padding.uniform(10).transform(source)
        # Left half dark, right half light inside the padded area
        self.assertLess(result.getpixel((20, 50))[0], 10)
        self.assertGreater(result.getpixel((80, 50))[0], 245)

    def test_semi_transparent_padding_colour(self):
        result = Padding.uniform(10, colour=0x80FFFFFF).transform(self.source)
        self.assertEqual(result.getpixel((0, 0)), (255, 255, 255, 128))

    def test_colour_resource(self):
        resources = MappingColourResources({1: 0xFF00FF00})
        padding = Padding.builder().set_colour_res(1, resources).build()
        self.assertEqual(padding.colour, 0xFF00FF00)
        with self.assertRaises(InvalidArgument):
            Padding.builder().set_colour_res(2, resources)


if __name__ == "__main__":
    unittest.main()
