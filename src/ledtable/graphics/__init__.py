"""Graphics module for the LED table: colors, noise and field normalization."""

from ledtable.graphics.color import (
    Color,
    ColorGradient,
    rainbow,
    sky,
    blue,
    lerp,
    get_palette,
)
from ledtable.graphics.noise import PerlinNoise
from ledtable.graphics.normalize import normalize, RunningExtrema
from ledtable.graphics.mapper import image_from_gradient

__all__ = [
    # Colors
    "Color",
    "ColorGradient",
    "rainbow",
    "sky",
    "blue",
    "lerp",
    "get_palette",
    # Fields
    "PerlinNoise",
    "normalize",
    "RunningExtrema",
    "image_from_gradient",
]
