"""Slowly rotating Lissajous figure, drawn as a hit-count histogram."""

import math
import random

import numpy as np
from numpy.typing import NDArray

from ledtable.patterns.base import Pattern, PatternKind, NormalizeMode

CYCLES = 2            # number of complete x oscillator revolutions
RESOLUTION = 0.01     # angular resolution
PHASE_STEP = 0.05     # phase advance per frame
MAX_FREQ = 3.0


def _trace_angles(cycles: int = CYCLES, res: float = RESOLUTION) -> NDArray[np.float64]:
    """Curve parameter values, accumulated step by step."""
    angles = []
    t = 0.0
    limit = cycles * 2 * math.pi
    while t < limit:
        angles.append(t)
        t += res
    return np.array(angles, dtype=np.float64)


class LissajousPattern(Pattern):
    """Traces x = sin(t), y = sin(t * freq + phase) over the grid.

    Every sample of the curve increments the cell it lands in, so cells the
    curve crosses densely come out brighter. ``freq`` is drawn once; the
    phase advances after every frame, turning the figure over time.
    """

    kind = PatternKind.LISSAJOUS
    normalize_mode = NormalizeMode.PER_FRAME
    default_palette = "rainbow"
    frame_period = 0.010
    max_ticks = 10_000

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        rng: random.Random | None = None,
        freq: float | None = None,
    ):
        super().__init__(width, height, rng)
        self.freq = freq if freq is not None else self.rng.random() * MAX_FREQ
        self.phase = 0.0
        self._angles = _trace_angles()

    def trace(self, phase: float) -> NDArray[np.intp]:
        """Flat cell index for every sample of the curve at a given phase."""
        x = np.sin(self._angles)
        y = np.sin(self._angles * self.freq + phase)
        ix = (self.width * (1.0 + x) / 2.0).astype(np.intp)
        iy = (self.height * (1.0 + y) / 2.0).astype(np.intp)
        # sin() of exactly 1.0 would land one past the last column/row
        np.minimum(ix, self.width - 1, out=ix)
        np.minimum(iy, self.height - 1, out=iy)
        return iy * self.width + ix

    def generate(self, tick: int) -> NDArray[np.float64]:
        field = self.empty_field()
        np.add.at(field, self.trace(self.phase), 1.0)
        self.phase += PHASE_STEP
        return field
