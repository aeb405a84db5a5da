"""LED table wire protocol."""

from .frame import (
    FLAG_SYNC,
    FLAG_RAW,
    ByteOrder,
    Frame,
    FrameError,
    make_frame,
    decode_frame,
)

__all__ = [
    "FLAG_SYNC",
    "FLAG_RAW",
    "ByteOrder",
    "Frame",
    "FrameError",
    "make_frame",
    "decode_frame",
]
