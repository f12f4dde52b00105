"""
Tests for the drop Shadow transformation.
"""

import unittest

import numpy as np
from PIL import Image

from BT_Libs.TransformLib import Compass, InvalidArgument, MappingColourResources, Shadow
from helpers import make_square_image, pixels


def assert_black(testcase, rgba):
    testcase.assertGreater(rgba[3], 250)
    testcase.assertTrue(all(c < 5 for c in rgba[:3]), rgba)


class TestShadowOffset(unittest.TestCase):
    """Test the angle convention of the shadow offset."""

    def test_east(self):
        self.assertEqual(Shadow(elevation=10, angle=0).offset(), (10.0, 0.0))

    def test_north_is_up(self):
        self.assertEqual(Shadow(elevation=10, angle=90).offset(), (0.0, -10.0))

    def test_west(self):
        self.assertEqual(Shadow(elevation=10, angle=180).offset(), (-10.0, 0.0))

    def test_southeast_direction(self):
        shadow = Shadow.builder().set_elevation(10).set_direction(Compass.SOUTHEAST).build()
        self.assertEqual(shadow.angle, 315.0)
        dx, dy = shadow.offset()
        self.assertAlmostEqual(dx, 7.071068)
        self.assertAlmostEqual(dy, 7.071068)

    def test_zero_elevation_has_no_offset(self):
        self.assertEqual(Shadow(angle=123).offset(), (0.0, 0.0))

    def test_negative_values_clamped(self):
        shadow = Shadow(blur_radius=-3, elevation=-2)
        self.assertEqual((shadow.blur_radius, shadow.elevation), (0.0, 0.0))


class TestShadowTransform(unittest.TestCase):
    """Test shadow placement and compositing."""

    def setUp(self):
        # Opaque white square covering pixels 8-11 on both axes
        self.source = make_square_image(size=20, square=4)

    def test_shadow_cast_east(self):
        shadow = Shadow.builder().set_elevation(4).set_shadow_colour(0xFF000000).build()
        result = shadow.transform(self.source)

        self.assertEqual(result.size, (20, 20))
        assert_black(self, result.getpixel((14, 10)))
        self.assertEqual(result.getpixel((5, 10))[3], 0)
        # Source drawn on top of its shadow
        self.assertTrue(all(c >= 254 for c in result.getpixel((10, 10))))

    def test_shadow_cast_north(self):
        shadow = Shadow.builder().set_elevation(4).set_angle(90).set_shadow_colour(0xFF000000).build()
        result = shadow.transform(self.source)
        assert_black(self, result.getpixel((10, 5)))
        self.assertEqual(result.getpixel((10, 14))[3], 0)

    def test_default_colour_is_half_black(self):
        result = Shadow.builder().set_elevation(4).build().transform(self.source)
        r, g, b, a = result.getpixel((14, 10))
        self.assertEqual((r, g, b), (0, 0, 0))
        self.assertTrue(126 <= a <= 129)

    def test_blurred_shadow_spreads(self):
        sharp = Shadow(elevation=4, colour=0xFF000000).transform(self.source)
        soft = Shadow(blur_radius=3, elevation=4, colour=0xFF000000).transform(self.source)
        self.assertEqual(sharp.getpixel((17, 10))[3], 0)
        self.assertGreater(soft.getpixel((17, 10))[3], 0)

    def test_opaque_source_unchanged(self):
        source = Image.new("RGBA", (30, 30), (10, 200, 30, 255))
        result = Shadow(blur_radius=5, elevation=3).transform(source)
        diff = np.abs(pixels(result) - pixels(source))
        self.assertLessEqual(diff.max(), 1)

    def test_large_blur_radius_keeps_size(self):
        result = Shadow(blur_radius=60, elevation=2).transform(self.source)
        self.assertEqual(result.size, self.source.size)

    def test_source_not_modified(self):
        before = self.source.tobytes()
        Shadow(blur_radius=2, elevation=4).transform(self.source)
        self.assertEqual(self.source.tobytes(), before)


class TestShadowBuilder(unittest.TestCase):
    """Test builder setters and resources."""

    def test_colour_resource(self):
        resources = MappingColourResources({7: 0x40FF0000})
        shadow = Shadow.builder(resources).set_shadow_colour_res(7).build()
        self.assertEqual(shadow.colour, 0x40FF0000)

    def test_missing_resources(self):
        with self.assertRaises(InvalidArgument):
            Shadow.builder().set_shadow_colour_res(7)

    def test_invalid_direction(self):
        with self.assertRaises(InvalidArgument):
            Shadow.builder().set_direction("UP")


if __name__ == "__main__":
    unittest.main()
