"""Display drivers for the LED table."""

from ..base import Display
from .udp import UDPMatrixDisplay, UDPMatrixDisplayMock, DEFAULT_HOST, DEFAULT_PORT

__all__ = [
    # Base class
    "Display",
    # UDP (15x15 table)
    "UDPMatrixDisplay",
    "UDPMatrixDisplayMock",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
]
