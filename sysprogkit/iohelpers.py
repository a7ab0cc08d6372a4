"""Small stream helpers: bounded reads, copies, scanning and line reading."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator

_READ_SIZE = 1024
_DEFAULT_BUFFER_SIZE = 8 * 1024
_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class BytesRead:
    """A fixed 1024-byte buffer and how many of its bytes were filled."""

    data: bytes
    length: int

    def __str__(self) -> str:
        hex_bytes = ", ".join(f"{byte:02x}" for byte in self.data)
        return f"{self.length} bytes read:\n[{hex_bytes}]"


def read_1024bytes(reader: BinaryIO) -> BytesRead:
    """Do a single read of up to 1024 bytes from ``reader``."""
    chunk = reader.read(_READ_SIZE)
    return BytesRead(chunk.ljust(_READ_SIZE, b"\x00"), len(chunk))


def copy_n(reader: BinaryIO, writer: BinaryIO, n: int) -> int:
    """Copy at most ``n`` bytes from ``reader`` to ``writer``; return the count copied."""
    copied = 0
    while copied < n:
        chunk = reader.read(min(n - copied, _DEFAULT_BUFFER_SIZE))
        if not chunk:
            break
        writer.write(chunk)
        copied += len(chunk)
    return copied


def copy_exact(reader: BinaryIO, writer: BinaryIO, n: int) -> int:
    """Copy exactly ``n`` bytes; raise EOFError if ``reader`` has fewer."""
    buf = bytearray()
    while len(buf) < n:
        chunk = reader.read(n - len(buf))
        if not chunk:
            raise EOFError(f"expected {n} bytes, got {len(buf)}")
        buf += chunk
    writer.write(bytes(buf))
    return n


def copy_buffer(
    reader: BinaryIO, writer: BinaryIO, buffer_size: int = _DEFAULT_BUFFER_SIZE
) -> int:
    """Copy everything through a buffer of ``buffer_size`` bytes, then flush.

    Returns the number of bytes the writer reported as written.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    written = 0
    while chunk := reader.read(buffer_size):
        count = writer.write(chunk)
        written += len(chunk) if count is None else count
    writer.flush()
    return written


def scan(text: str, *args: Callable[[str], object]) -> tuple:
    """Split ``text`` at each whitespace character and convert the words in order.

    Each of ``args`` converts one word (``int``, ``float``, ``str``, ...).
    Raises ValueError when a word is missing or does not convert.
    """
    words = iter(_WHITESPACE.split(text))
    values = []
    for convert in args:
        word = next(words, None)
        if word is None:
            raise ValueError("not enough words to scan")
        try:
            values.append(convert(word))
        except (ValueError, TypeError) as exc:
            raise ValueError(f"couldn't parse {word}") from exc
    return tuple(values)


def read_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` without their ``\\n`` or ``\\r\\n`` endings."""
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def format_sample() -> str:
    """Return a line showing a string, an integer and a one-decimal float."""
    return f'{{}}("10"): {"10"}, {{}}(10): {10}, {{:.1}}(10.0): {10.0:.1f}\n'