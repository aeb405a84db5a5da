"""
Palette behaviour: anchors, clamping and 8-bit wrap.
Run from project root: python -m pytest tests/ -v
"""
import unittest

import numpy as np

from ledtable.graphics.color import (
    BLACK,
    BLUE,
    Color,
    blue,
    get_palette,
    hsv_to_rgb,
    lerp,
    rainbow,
    sky,
    to_byte,
)
from ledtable.graphics.mapper import image_from_gradient


class TestLerpPalette(unittest.TestCase):
    """lerp(a, b) holds its anchors flat near both ends."""

    def setUp(self):
        self.a = Color(10, 20, 30)
        self.b = Color(200, 100, 0)
        self.palette = lerp(self.a, self.b)

    def test_endpoints_are_exact(self):
        self.assertEqual(self.palette(0.0), self.a)
        self.assertEqual(self.palette(1.0), self.b)

    def test_clamps_near_ends(self):
        self.assertEqual(self.palette(0.005), self.a)
        self.assertEqual(self.palette(0.995), self.b)

    def test_negative_and_large_inputs_clamp(self):
        self.assertEqual(self.palette(-0.3), self.a)
        self.assertEqual(self.palette(1.7), self.b)

    def test_monotonic_between_anchors(self):
        palette = lerp(BLACK, BLUE)
        values = [palette(x).b for x in np.linspace(0.0, 1.0, 200)]
        self.assertEqual(values, sorted(values))
        self.assertEqual(values[0], 0)
        self.assertEqual(values[-1], 255)

    def test_descending_channel_is_monotonic(self):
        values = [self.palette(x).r for x in np.linspace(0.0, 1.0, 200)]
        self.assertEqual(values, sorted(values))
        greens = [lerp(Color(0, 255, 0), BLACK)(x).g for x in np.linspace(0.0, 1.0, 200)]
        self.assertEqual(greens, sorted(greens, reverse=True))

    def test_midpoint_uses_eased_value(self):
        # 0.5 ** 1.5 = 0.35355...
        self.assertEqual(lerp(BLACK, BLUE)(0.5), Color(0, 0, 90))


class TestRainbowPalette(unittest.TestCase):

    def test_zero_is_red(self):
        self.assertEqual(rainbow(0.0), Color(255, 0, 0))

    def test_one_is_hue_359(self):
        color = rainbow(1.0)
        self.assertEqual(color.r, 255)
        self.assertEqual(color.g, 0)
        self.assertEqual(color.b, 4)

    def test_primary_hues(self):
        self.assertEqual(hsv_to_rgb(120.0, 1.0, 1.0), Color(0, 255, 0))
        self.assertEqual(hsv_to_rgb(240.0, 1.0, 1.0), Color(0, 0, 255))

    def test_hue_out_of_range_is_black(self):
        self.assertEqual(rainbow(-0.1), Color(0, 0, 0))


class TestChannelPalettes(unittest.TestCase):

    def test_sky(self):
        self.assertEqual(sky(0.0), Color(255, 255, 255))
        self.assertEqual(sky(1.0), Color(0, 0, 255))
        self.assertEqual(sky(0.5), Color(128, 128, 255))

    def test_blue(self):
        self.assertEqual(blue(0.0), Color(0, 0, 0))
        self.assertEqual(blue(1.0), Color(0, 0, 255))

    def test_out_of_range_wraps_instead_of_saturating(self):
        # -25.5 truncates to -25, low byte 231
        self.assertEqual(blue(-0.1), Color(0, 0, 231))
        # 382.5 truncates to 382, low byte 126
        self.assertEqual(blue(1.5), Color(0, 0, 126))
        self.assertEqual(to_byte(256.9), 0)
        self.assertEqual(to_byte(-1.0), 255)


class TestPaletteRegistry(unittest.TestCase):

    def test_known_names(self):
        self.assertIs(get_palette("rainbow"), rainbow)
        self.assertEqual(get_palette("deep_blue")(1.0), BLUE)
        self.assertEqual(get_palette("DIM_BLUE")(1.0), Color(0, 0, 192))

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            get_palette("plaid")


class TestImageFromGradient(unittest.TestCase):

    def test_maps_elementwise_in_order(self):
        image = image_from_gradient(np.array([0.0, 1.0, 0.5]), blue)
        self.assertEqual(image.shape, (3, 3))
        self.assertEqual(image.dtype, np.uint8)
        self.assertEqual(image.tolist(), [[0, 0, 0], [0, 0, 255], [0, 0, 127]])


if __name__ == "__main__":
    unittest.main()
