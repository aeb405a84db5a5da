"""Base class for all field patterns."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
import logging
import random

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class PatternKind(Enum):
    """The fixed set of field generators."""

    PERLIN = "perlin"
    LISSAJOUS = "lissajous"
    WAVY = "wavy"
    RAIN = "rain"


class NormalizeMode(Enum):
    """How a pattern's raw field is brought into [0, 1] before coloring."""

    NONE = "none"            # Already bounded
    PER_FRAME = "per_frame"  # Against this frame's min/max
    RUNNING = "running"      # Against min/max seen over the whole stream


class Pattern(ABC):
    """Abstract base class for field generators.

    A pattern produces one scalar field per tick: a flat float64 array of
    ``width * height`` values in row-major order (index = y * width + x).
    ``generate`` must be called once per tick with increasing tick indices;
    stateful patterns (rain drops, lissajous phase) advance on every call.
    """

    # Pattern metadata (override in subclasses)
    kind: PatternKind
    normalize_mode: NormalizeMode = NormalizeMode.NONE
    default_palette: str = "rainbow"
    frame_period: float = 0.016  # seconds
    max_ticks: Optional[int] = None  # None runs forever

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        rng: random.Random | None = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid grid size: {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        yy, xx = np.mgrid[0:height, 0:width]
        self._xs = xx.ravel().astype(np.float64)
        self._ys = yy.ravel().astype(np.float64)

        logger.debug(f"Pattern created: {self.kind.value} ({width}x{height})")

    @property
    def size(self) -> int:
        """Number of cells in the field."""
        return self.width * self.height

    def empty_field(self) -> NDArray[np.float64]:
        return np.zeros(self.size, dtype=np.float64)

    @abstractmethod
    def generate(self, tick: int) -> NDArray[np.float64]:
        """Produce the raw field for a tick."""
        ...
