"""
Wire format for LED table frames.

One UDP datagram carries one frame:

    offset  size       field
    0       1          flags (FLAG_SYNC)
    1       2          pixel offset (always 0)
    3       2          pixel count (width * height)
    5       3 * count  r, g, b bytes, row-major

Both 16-bit header fields are big-endian (network order). Receivers built
against the little-endian variant of the protocol can be fed with
``ByteOrder.LITTLE``; the encoder never picks it on its own.

FLAG_RAW and non-zero offsets are reserved: they are defined for partial
updates but never emitted.
"""

import struct
from enum import Enum
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

FLAG_SYNC = 1
FLAG_RAW = 2

HEADER_SIZE = 5
MAX_PIXELS = 0xFFFF


class ByteOrder(Enum):
    """Byte order of the 16-bit header fields."""

    BIG = ">"
    LITTLE = "<"

    @property
    def header_format(self) -> str:
        return f"{self.value}BHH"


class FrameError(ValueError):
    """Raised when a datagram is not a well-formed frame."""


class Frame(NamedTuple):
    """Decoded frame contents."""

    flags: int
    offset: int
    count: int
    pixels: NDArray[np.uint8]  # shape (count, 3)


def make_frame(
    image: NDArray[np.uint8],
    byte_order: ByteOrder = ByteOrder.BIG,
) -> bytes:
    """Serialize a pixel buffer into a frame.

    Args:
        image: uint8 pixels, shape (count, 3) or (height, width, 3)
        byte_order: Byte order of the header fields

    Returns:
        Frame bytes, header followed by the pixel triples
    """
    pixels = np.ascontiguousarray(image, dtype=np.uint8).reshape(-1, 3)
    count = len(pixels)
    if count > MAX_PIXELS:
        raise FrameError(f"Too many pixels for one frame: {count}")

    header = struct.pack(byte_order.header_format, FLAG_SYNC, 0, count)
    return header + pixels.tobytes()


def decode_frame(data: bytes, byte_order: ByteOrder = ByteOrder.BIG) -> Frame:
    """Parse frame bytes back into header fields and pixels.

    Raises:
        FrameError: If the data is truncated or the length disagrees with
            the pixel count
    """
    if len(data) < HEADER_SIZE:
        raise FrameError(f"Frame too short: {len(data)} bytes")

    flags, offset, count = struct.unpack_from(byte_order.header_format, data)
    payload = data[HEADER_SIZE:]
    if len(payload) != count * 3:
        raise FrameError(
            f"Pixel count {count} needs {count * 3} bytes, got {len(payload)}"
        )

    pixels = np.frombuffer(payload, dtype=np.uint8).reshape(count, 3).copy()
    return Frame(flags, offset, count, pixels)
