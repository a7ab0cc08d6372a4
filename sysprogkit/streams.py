"""Readers restricted to a window of another stream, and a fan-out writer."""

from __future__ import annotations

from typing import BinaryIO, Iterable


class SectionReader:
    """Reads at most ``n_bytes`` bytes of ``reader`` starting at ``offset``."""

    def __init__(self, reader: BinaryIO, offset: int, n_bytes: int) -> None:
        if n_bytes < 0:
            raise ValueError("n_bytes must not be negative")
        reader.seek(offset)
        self._reader = reader
        self._remaining = n_bytes

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes of the section; all of it when ``size`` is negative."""
        if self._remaining == 0:
            return b""
        if size is None or size < 0:
            parts = []
            while self._remaining:
                chunk = self._reader.read(self._remaining)
                if not chunk:
                    break
                self._remaining -= len(chunk)
                parts.append(chunk)
            return b"".join(parts)
        chunk = self._reader.read(min(size, self._remaining))
        self._remaining -= len(chunk)
        return chunk


class LimitedReader:
    """Reads at most ``n_bytes`` bytes from the start of ``reader``."""

    def __init__(self, reader: BinaryIO, n_bytes: int) -> None:
        self._section = SectionReader(reader, 0, n_bytes)

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes; all that is left when ``size`` is negative."""
        return self._section.read(size)


class MultiWriter:
    """Writes the same data to every writer it holds."""

    def __init__(self, writers: Iterable) -> None:
        self._writers = list(writers)

    def write(self, data) -> int:
        """Write ``data`` to every writer in turn and return its length."""
        for writer in self._writers:
            writer.write(data)
        return len(data)

    def flush(self) -> None:
        """Flush every writer."""
        for writer in self._writers:
            writer.flush()