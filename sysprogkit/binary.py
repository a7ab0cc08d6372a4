"""Reading fixed-size unsigned integers from byte streams."""

from __future__ import annotations

import enum
from typing import BinaryIO

_SUPPORTED_SIZES = (1, 2, 4, 8)


class Endian(enum.Enum):
    """Byte order of an encoded integer."""

    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"


def _check_size(size: int) -> None:
    if size not in _SUPPORTED_SIZES:
        raise ValueError(
            f"unsupported integer size {size}; expected one of {_SUPPORTED_SIZES}"
        )


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = reader.read(size - len(buf))
        if not chunk:
            raise EOFError(f"expected {size} bytes, got {len(buf)}")
        buf += chunk
    return bytes(buf)


def from_be_bytes(buf: bytes, size: int) -> int:
    """Build an unsigned integer of ``size`` bytes from big-endian ``buf``."""
    _check_size(size)
    if len(buf) != size:
        raise ValueError(f"buffer has length {len(buf)}, expected {size}")
    return int.from_bytes(buf, "big", signed=False)


def read(reader: BinaryIO, endian: Endian, size: int) -> int:
    """Read an unsigned integer of ``size`` bytes from ``reader`` in ``endian`` order.

    Raises EOFError when the reader ends before ``size`` bytes are read.
    """
    _check_size(size)
    buf = _read_exact(reader, size)
    if endian is Endian.LITTLE_ENDIAN:
        buf = buf[::-1]
    return from_be_bytes(buf, size)