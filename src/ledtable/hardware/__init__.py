"""Hardware abstraction layer for the LED table."""

from .base import Display
from .runner import StreamRunner, StreamConfig

__all__ = [
    # Base classes
    "Display",
    # Stream runner
    "StreamRunner",
    "StreamConfig",
]
