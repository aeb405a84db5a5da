"""
Abstract base class for the LED table display.

Both the network driver and the mock used by tests follow this contract.
"""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray


class Display(ABC):
    """Abstract base class for display devices."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Display width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Display height in pixels."""
        ...

    @abstractmethod
    def init(self) -> bool:
        """
        Open the connection to the device.

        Returns:
            True if the display is ready for show()
        """
        ...

    @abstractmethod
    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set a single pixel color."""
        ...

    @abstractmethod
    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        """
        Set entire display buffer.

        Args:
            buffer: numpy array of shape (height, width, 3) with RGB values,
                or the flat row-major (height * width, 3) equivalent
        """
        ...

    @abstractmethod
    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        """Clear display to specified color."""
        ...

    @abstractmethod
    def show(self) -> None:
        """Push the buffer contents to the device."""
        ...

    @abstractmethod
    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current display buffer."""
        ...

    def cleanup(self) -> None:
        """Release the device."""
