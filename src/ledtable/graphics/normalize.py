"""Rescaling of scalar fields to [0, 1]."""

import math

import numpy as np
from numpy.typing import NDArray


def _rescale(field: NDArray[np.float64], lo: float, hi: float) -> NDArray[np.float64]:
    span = hi - lo
    if span == 0 or not math.isfinite(span):
        # Flat range: 0/0 is defined as 0
        return np.zeros_like(field, dtype=np.float64)
    return (field - lo) / span


def normalize(field: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rescale a field against its own min/max.

    A perfectly flat field maps to all zeros instead of NaN.
    """
    field = np.asarray(field, dtype=np.float64)
    if field.size == 0:
        return field.copy()
    return _rescale(field, float(field.min()), float(field.max()))


class RunningExtrema:
    """Min/max accumulated over the lifetime of a stream.

    Never reset: early frames normalize against a narrow observed range and
    the range widens as the stream runs.
    """

    def __init__(self) -> None:
        self.minimum = math.inf
        self.maximum = -math.inf

    def update(self, field: NDArray[np.float64]) -> None:
        """Fold a field's samples into the accumulators."""
        if len(field) == 0:
            return
        self.minimum = min(self.minimum, float(np.min(field)))
        self.maximum = max(self.maximum, float(np.max(field)))

    def normalize(self, field: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rescale a field against the accumulated range."""
        field = np.asarray(field, dtype=np.float64)
        return _rescale(field, self.minimum, self.maximum)

    def __repr__(self) -> str:
        return f"RunningExtrema(minimum={self.minimum}, maximum={self.maximum})"
