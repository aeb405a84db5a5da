"""Field patterns for the LED table."""

import random

from ledtable.patterns.base import Pattern, PatternKind, NormalizeMode
from ledtable.patterns.perlin import PerlinPattern
from ledtable.patterns.lissajous import LissajousPattern
from ledtable.patterns.wavy import WavyPattern
from ledtable.patterns.rain import RainPattern

_PATTERNS: dict[PatternKind, type[Pattern]] = {
    PatternKind.PERLIN: PerlinPattern,
    PatternKind.LISSAJOUS: LissajousPattern,
    PatternKind.WAVY: WavyPattern,
    PatternKind.RAIN: RainPattern,
}


def create_pattern(
    kind: PatternKind | str,
    width: int = 15,
    height: int = 15,
    rng: random.Random | None = None,
) -> Pattern:
    """Instantiate the generator for a pattern kind.

    Args:
        kind: PatternKind or its string value ("perlin", "rain", ...)
        width: Grid width in cells
        height: Grid height in cells
        rng: Random source shared by the stream

    Raises:
        ValueError: If the kind is unknown
    """
    if isinstance(kind, str):
        kind = PatternKind(kind.lower())
    return _PATTERNS[kind](width, height, rng)


__all__ = [
    "Pattern",
    "PatternKind",
    "NormalizeMode",
    "PerlinPattern",
    "LissajousPattern",
    "WavyPattern",
    "RainPattern",
    "create_pattern",
]
