"""Rain on a pond: ripples spreading from randomly placed drops."""

import math
import random

import numpy as np
from numpy.typing import NDArray

from ledtable.patterns.base import Pattern, PatternKind, NormalizeMode

# Ripple shape
ANGULAR_SPEED = 1.5     # w
WAVE_NUMBER = -2.0      # k, negative so crests travel outward
RADIAL_DAMPING = 0.5
AGE_DAMPING_EXP = 1.25
TICKS_PER_TIME_UNIT = 10.0

# Drop lifecycle
SPAWN_ODDS = 45         # one spawn attempt per SPAWN_ODDS ticks on average
INITIAL_AGE = 1
MAX_AGE = 300           # drops older than this are removed


def ripple(
    dx: NDArray[np.float64], dy: NDArray[np.float64], t: float
) -> NDArray[np.float64]:
    """Damped radial wave around a drop.

    Args:
        dx: Cell x minus drop x
        dy: Cell y minus drop y
        t: Drop age in time units

    Returns:
        Ripple intensity per cell, in [0, 1/(2 + t**1.25)]
    """
    r = np.sqrt(dx * dx + dy * dy)
    v = np.sin(WAVE_NUMBER * r + ANGULAR_SPEED * t) / (1.0 + RADIAL_DAMPING * r)
    return (1.0 + v) / (2.0 + math.pow(t, AGE_DAMPING_EXP))


class RainPattern(Pattern):
    """Superposition of ripples from transient drops.

    Each tick a new drop lands with probability 1/SPAWN_ODDS on a random
    free cell. Every cell sums the ripples of all live drops (capped at 1.0),
    then all drops age by one tick and those past MAX_AGE disappear.

    Drops are kept in insertion order so the per-cell sum is always taken
    in the same order.
    """

    kind = PatternKind.RAIN
    normalize_mode = NormalizeMode.NONE
    default_palette = "deep_blue"
    frame_period = 0.016

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        rng: random.Random | None = None,
    ):
        super().__init__(width, height, rng)
        self._drops: dict[tuple[int, int], int] = {}

    @property
    def drops(self) -> dict[tuple[int, int], int]:
        """Copy of the live drops, coordinate -> age."""
        return dict(self._drops)

    def add_drop(self, x: int, y: int) -> bool:
        """Place a drop unless the cell already has one.

        Returns:
            True if a new drop was created
        """
        if (x, y) in self._drops:
            return False
        self._drops[(x, y)] = INITIAL_AGE
        return True

    def _maybe_spawn(self) -> None:
        if self.rng.randrange(SPAWN_ODDS) == 0:
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height)
            self.add_drop(x, y)

    def _age_drops(self) -> None:
        for coord, age in list(self._drops.items()):
            if age > MAX_AGE:
                del self._drops[coord]
            else:
                self._drops[coord] = age + 1

    def generate(self, tick: int) -> NDArray[np.float64]:
        self._maybe_spawn()

        field = self.empty_field()
        for (x, y), age in self._drops.items():
            field += ripple(self._xs - x, self._ys - y, age / TICKS_PER_TIME_UNIT)
        np.minimum(field, 1.0, out=field)

        self._age_drops()
        return field
