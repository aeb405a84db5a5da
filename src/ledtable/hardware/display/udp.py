"""
UDP driver for the 15x15 LED table.

The table listens for frames on a fixed host and port. Each show() sends
the whole buffer as one datagram (see ledtable.protocol.frame). Delivery is
best effort: a frame that fails to send is dropped and never retried, since
the next frame supersedes it a few milliseconds later.
"""

import logging
import socket

import numpy as np
from numpy.typing import NDArray

from ..base import Display
from ...protocol.frame import ByteOrder, make_frame

logger = logging.getLogger(__name__)

DEFAULT_HOST = "ledtable.dhcp"
DEFAULT_PORT = 1337


def _as_image(buffer: NDArray[np.uint8], height: int, width: int) -> NDArray[np.uint8]:
    """Accept flat (count, 3) or (height, width, 3) pixel buffers."""
    buffer = np.asarray(buffer, dtype=np.uint8)
    if buffer.shape == (height * width, 3):
        return buffer.reshape(height, width, 3)
    return buffer


class UDPMatrixDisplay(Display):
    """
    Network driver for the LED table.

    Usage:
        table = UDPMatrixDisplay()
        if not table.init():
            sys.exit(1)

        table.clear(255, 0, 0)  # Red
        table.show()
    """

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        byte_order: ByteOrder = ByteOrder.BIG,
    ):
        self._width = width
        self._height = height
        self._host = host
        self._port = port
        self._byte_order = byte_order
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self._sock: socket.socket | None = None
        self._initialized = False
        self.frames_sent = 0
        self.dropped_frames = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def address(self) -> tuple[str, int]:
        return (self._host, self._port)

    def init(self) -> bool:
        """
        Create the UDP socket and connect it to the table.

        Connecting a datagram socket only resolves the host and fixes the
        destination; nothing is sent.

        Returns:
            True if the socket is connected
        """
        if self._initialized:
            return True

        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.connect((self._host, self._port))
        except OSError as e:
            sock.close()
            logger.error(f"UDP connect to {self._host}:{self._port} failed: {e}")
            return False

        self._sock = sock
        self._initialized = True
        logger.info(
            f"LED table connected: {self.address[0]}:{self.address[1]} "
            f"({self._width}x{self._height}, {self._byte_order.name.lower()}-endian header)"
        )
        return True

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._buffer[y, x] = [r, g, b]

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        buffer = _as_image(buffer, self._height, self._width)
        if buffer.shape == self._buffer.shape:
            np.copyto(self._buffer, buffer)
        else:
            h = min(buffer.shape[0], self._height)
            w = min(buffer.shape[1], self._width)
            self._buffer[:h, :w] = buffer[:h, :w]

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer[:, :] = [r, g, b]

    def show(self) -> None:
        """Send the buffer as one frame. Send errors drop the frame silently."""
        if not self._initialized or self._sock is None:
            return

        try:
            self._sock.send(make_frame(self._buffer, self._byte_order))
        except OSError:
            self.dropped_frames += 1
        else:
            self.frames_sent += 1

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    def cleanup(self) -> None:
        """Close the socket."""
        if self._sock is not None:
            self._sock.close()
            logger.info(
                f"LED table disconnected ({self.frames_sent} frames sent, "
                f"{self.dropped_frames} dropped)"
            )
        self._sock = None
        self._initialized = False


class UDPMatrixDisplayMock(Display):
    """
    Mock LED table for testing without a network.

    Provides the same interface but keeps every encoded frame in ``frames``.
    """

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        byte_order: ByteOrder = ByteOrder.BIG,
    ):
        self._width = width
        self._height = height
        self._byte_order = byte_order
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.frames: list[bytes] = []
        self.frames_sent = 0
        self.dropped_frames = 0
        logger.info(f"LED table mock initialized: {width}x{height}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def init(self) -> bool:
        return True

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._buffer[y, x] = [r, g, b]

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        buffer = _as_image(buffer, self._height, self._width)
        if buffer.shape == self._buffer.shape:
            np.copyto(self._buffer, buffer)
        else:
            h = min(buffer.shape[0], self._height)
            w = min(buffer.shape[1], self._width)
            self._buffer[:h, :w] = buffer[:h, :w]

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer[:, :] = [r, g, b]

    def show(self) -> None:
        self.frames.append(make_frame(self._buffer, self._byte_order))
        self.frames_sent += 1

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()
