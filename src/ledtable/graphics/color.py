"""Color model and gradient-to-color palettes.

A palette maps a normalized intensity (nominally 0.0 to 1.0) to a Color.
Channel values are converted to bytes the way the table firmware expects
them: truncated toward zero and then wrapped to the low 8 bits, never
saturated. Fields that stray outside [0, 1] therefore wrap around instead
of clipping, except where a palette clamps explicitly (``lerp``).
"""

import math
from typing import Callable, NamedTuple


class Color(NamedTuple):
    """An immutable 8-bit RGB triple."""

    r: int
    g: int
    b: int


# Type alias for palette functions
ColorGradient = Callable[[float], Color]

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
BLUE = Color(0, 0, 255)


def to_byte(value: float) -> int:
    """Truncate a channel value to an unsigned byte (wrapping, not clamping)."""
    return int(value) & 0xFF


def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    """Convert HSV to RGB.

    Args:
        h: Hue in degrees, valid range [0, 360)
        s: Saturation 0.0 to 1.0
        v: Value 0.0 to 1.0

    Returns:
        Color with channels rounded to the nearest byte. Hues outside
        [0, 360) select no sector and yield black.
    """
    hp = h / 60.0
    c = v * s
    x = c * (1 - abs(math.fmod(hp, 2.0) - 1))
    m = v - c

    r = g = b = 0.0
    if 0 <= hp < 1:
        r, g = c, x
    elif 1 <= hp < 2:
        r, g = x, c
    elif 2 <= hp < 3:
        g, b = c, x
    elif 3 <= hp < 4:
        g, b = x, c
    elif 4 <= hp < 5:
        r, b = x, c
    elif 5 <= hp < 6:
        r, b = c, x

    return Color(
        to_byte((r + m) * 255 + 0.5),
        to_byte((g + m) * 255 + 0.5),
        to_byte((b + m) * 255 + 0.5),
    )


def rainbow(gradient: float) -> Color:
    """Sweep the hue wheel from red (0°) to 359° at full saturation."""
    return hsv_to_rgb(359.0 * gradient, 1.0, 1.0)


def sky(gradient: float) -> Color:
    """White fading to pale blue."""
    v = to_byte(gradient * 255)
    return Color(to_byte(255 - v), to_byte(255 - v), 255)


def blue(gradient: float) -> Color:
    """Blue channel ramp."""
    return Color(0, 0, to_byte(gradient * 255))


def lerp(start: Color, end: Color) -> ColorGradient:
    """Build a palette blending two anchor colors.

    The input is eased by ``x ** 1.5``. Eased values below 0.01 return
    ``start`` exactly and values above 0.99 return ``end`` exactly, so the
    anchors stay flat near both ends of the range.

    Args:
        start: Color at gradient 0.0
        end: Color at gradient 1.0

    Returns:
        Palette function
    """
    dr = end.r - start.r
    dg = end.g - start.g
    db = end.b - start.b

    def gradient_fn(value: float) -> Color:
        # Negative (or NaN) input has no real 1.5 power; it falls under the low clamp.
        if not value > 0.0:
            return start
        eased = value ** 1.5
        if eased < 0.01:
            return start
        if eased > 0.99:
            return end
        return Color(
            to_byte(start.r + dr * eased),
            to_byte(start.g + dg * eased),
            to_byte(start.b + db * eased),
        )

    return gradient_fn


PALETTES: dict[str, Callable[[], ColorGradient]] = {
    "rainbow": lambda: rainbow,
    "sky": lambda: sky,
    "blue": lambda: blue,
    "deep_blue": lambda: lerp(BLACK, BLUE),
    "dim_blue": lambda: lerp(BLACK, Color(0, 0, 192)),
}


def get_palette(name: str) -> ColorGradient:
    """Get a palette function by name.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return PALETTES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown palette: {name!r} (expected one of {', '.join(PALETTES)})"
        ) from None
