"""
Stream runner for the LED table.

Drives the per-tick pipeline: generate a field, normalize it, color it,
push it to the display, sleep. The loop is paced by a fixed sleep with no
drift correction and no frame skipping.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..graphics.color import ColorGradient
from ..graphics.mapper import image_from_gradient
from ..graphics.normalize import RunningExtrema, normalize
from ..patterns.base import NormalizeMode, Pattern
from .base import Display

logger = logging.getLogger(__name__)


@dataclass
class StreamConfig:
    """Stream pacing."""
    frame_period: float = 0.016   # seconds slept after each frame
    max_ticks: Optional[int] = None  # None streams until stopped
    log_interval: int = 600       # ticks between debug stats lines

    @classmethod
    def for_pattern(cls, pattern: Pattern, **overrides) -> "StreamConfig":
        """Config using the pattern's own pacing, with explicit overrides."""
        values = {
            "frame_period": pattern.frame_period,
            "max_ticks": pattern.max_ticks,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class StreamRunner:
    """
    Runs one pattern on one display.

    Owns the running extrema used by patterns that normalize against the
    whole stream's range; they live as long as the runner and are never
    reset.
    """

    def __init__(
        self,
        pattern: Pattern,
        palette: ColorGradient,
        display: Display,
        config: StreamConfig | None = None,
    ) -> None:
        self.pattern = pattern
        self.palette = palette
        self.display = display
        self.config = config or StreamConfig.for_pattern(pattern)
        self.extrema = RunningExtrema()

        self._running = False
        self._tick = 0
        self._started_at = 0.0

        logger.info(
            f"StreamRunner created: pattern={pattern.kind.value}, "
            f"period={self.config.frame_period * 1000:.0f}ms, "
            f"max_ticks={self.config.max_ticks}"
        )

    @property
    def tick(self) -> int:
        """Index of the next tick to render."""
        return self._tick

    @property
    def is_running(self) -> bool:
        return self._running

    def prepare(self, field: NDArray[np.float64]) -> NDArray[np.float64]:
        """Apply the pattern's normalization to a raw field."""
        mode = self.pattern.normalize_mode
        if mode is NormalizeMode.PER_FRAME:
            return normalize(field)
        if mode is NormalizeMode.RUNNING:
            self.extrema.update(field)
            return self.extrema.normalize(field)
        return field

    def render(self, tick: int) -> NDArray[np.uint8]:
        """Compute the pixel buffer for a tick."""
        field = self.prepare(self.pattern.generate(tick))
        return image_from_gradient(field, self.palette)

    def step(self) -> None:
        """Render and show one tick without sleeping."""
        self.display.set_buffer(self.render(self._tick))
        self.display.show()
        self._tick += 1

        if self.config.log_interval and self._tick % self.config.log_interval == 0:
            self._log_stats()

    def _log_stats(self) -> None:
        elapsed = time.monotonic() - self._started_at
        fps = self._tick / elapsed if elapsed > 0 else 0.0
        logger.debug(
            f"Tick={self._tick}, "
            f"FPS={fps:.1f}, "
            f"Dropped={getattr(self.display, 'dropped_frames', 0)}"
        )

    def _done(self) -> bool:
        max_ticks = self.config.max_ticks
        return max_ticks is not None and self._tick >= max_ticks

    async def run(self) -> None:
        """Main stream loop."""
        self._running = True
        self._started_at = time.monotonic()
        logger.info("Stream started")

        while self._running and not self._done():
            self.step()
            await asyncio.sleep(self.config.frame_period)

        self._running = False
        logger.info(
            f"Stream stopped after {self._tick} ticks "
            f"({getattr(self.display, 'dropped_frames', 0)} frames dropped)"
        )

    def stop(self) -> None:
        """Stop after the current tick."""
        self._running = False
