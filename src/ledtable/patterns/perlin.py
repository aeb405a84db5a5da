"""Drifting Perlin noise field."""

import random

import numpy as np
from numpy.typing import NDArray

from ledtable.graphics.noise import PerlinNoise
from ledtable.patterns.base import Pattern, PatternKind, NormalizeMode

# Octave configuration
NOISE_ALPHA = 2.0
NOISE_BETA = 2.0
NOISE_OCTAVES = 2

# Ticks per cell of drift, per axis
DRIFT_X_TICKS = 8
DRIFT_Y_TICKS = 5


class PerlinPattern(Pattern):
    """Noise sampled on a window that drifts diagonally across the noise plane.

    The raw samples are unbounded; the runner normalizes them against the
    range observed since the stream started, so contrast settles in over the
    first few seconds.
    """

    kind = PatternKind.PERLIN
    normalize_mode = NormalizeMode.RUNNING
    default_palette = "sky"
    frame_period = 0.016

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        rng: random.Random | None = None,
    ):
        super().__init__(width, height, rng)
        self.noise = PerlinNoise(NOISE_ALPHA, NOISE_BETA, NOISE_OCTAVES, rng=self.rng)

    def generate(self, tick: int) -> NDArray[np.float64]:
        field = self.empty_field()
        for y in range(self.height):
            for x in range(self.width):
                field[y * self.width + x] = self.noise.noise2d(
                    (x + tick / DRIFT_X_TICKS) / self.width,
                    (y + tick / DRIFT_Y_TICKS) / self.height,
                )
        return field
