"""Coherent 2D noise for the noise-field pattern."""

import math
import random
from typing import List


class PerlinNoise:
    """Perlin gradient noise with octave summation.

    Each octave divides the amplitude by ``alpha`` and multiplies the
    sampling frequency by ``beta``:

        sum(noise(x * beta**i, y * beta**i) / alpha**i for i in range(octaves))
    """

    def __init__(
        self,
        alpha: float = 2.0,
        beta: float = 2.0,
        octaves: int = 2,
        rng: random.Random | None = None,
    ):
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")
        self.alpha = alpha
        self.beta = beta
        self.octaves = octaves
        self._perm = self._generate_permutation(rng or random.Random())

    def _generate_permutation(self, rng: random.Random) -> List[int]:
        """Generate permutation table."""
        perm = list(range(256))
        rng.shuffle(perm)
        return perm + perm  # Double for overflow handling

    def _fade(self, t: float) -> float:
        """Fade function for smooth interpolation."""
        return t * t * t * (t * (t * 6 - 15) + 10)

    def _lerp(self, a: float, b: float, t: float) -> float:
        """Linear interpolation."""
        return a + t * (b - a)

    def _grad(self, hash_val: int, x: float, y: float) -> float:
        """Calculate gradient."""
        h = hash_val & 3
        if h == 0:
            return x + y
        elif h == 1:
            return -x + y
        elif h == 2:
            return x - y
        else:
            return -x - y

    def noise2d_single(self, x: float, y: float) -> float:
        """Single-octave noise, roughly in [-1, 1]."""
        xi = int(math.floor(x)) & 255
        yi = int(math.floor(y)) & 255

        xf = x - math.floor(x)
        yf = y - math.floor(y)

        u = self._fade(xf)
        v = self._fade(yf)

        aa = self._perm[self._perm[xi] + yi]
        ab = self._perm[self._perm[xi] + yi + 1]
        ba = self._perm[self._perm[xi + 1] + yi]
        bb = self._perm[self._perm[xi + 1] + yi + 1]

        x1 = self._lerp(self._grad(aa, xf, yf), self._grad(ba, xf - 1, yf), u)
        x2 = self._lerp(self._grad(ab, xf, yf - 1), self._grad(bb, xf - 1, yf - 1), u)

        return self._lerp(x1, x2, v)

    def noise2d(self, x: float, y: float) -> float:
        """Octave-summed noise at (x, y). Unbounded in principle; callers normalize."""
        total = 0.0
        scale = 1.0
        for _ in range(self.octaves):
            total += self.noise2d_single(x, y) / scale
            scale *= self.alpha
            x *= self.beta
            y *= self.beta
        return total
