"""Traveling sine wave with a cosine-bent wavefront."""

import numpy as np
from numpy.typing import NDArray

from ledtable.patterns.base import Pattern, PatternKind, NormalizeMode

TICKS_PER_SECOND = 60.0
BANDS = 3  # integer divisor of the height for the cosine bend


class WavyPattern(Pattern):
    kind = PatternKind.WAVY
    normalize_mode = NormalizeMode.NONE
    default_palette = "rainbow"
    frame_period = 0.016

    def generate(self, tick: int) -> NDArray[np.float64]:
        t = tick / TICKS_PER_SECOND
        # Grids shorter than BANDS rows bend once over the whole height
        bend = max(1, self.height // BANDS)
        v = np.sin(t + self._xs / self.width + np.cos(self._ys / bend))
        return (1.0 + v) / 2.0
