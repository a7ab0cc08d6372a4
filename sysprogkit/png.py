"""Reading and writing the chunk structure of PNG files."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO, Iterator

PNG_FILE_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_TEXT_TYPE = b"tEXt"
_LENGTH = struct.Struct(">I")


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = reader.read(size - len(buf))
        if not chunk:
            raise EOFError(f"expected {size} bytes, got {len(buf)}")
        buf += chunk
    return bytes(buf)


@dataclass(frozen=True)
class PngChunkType:
    """A four-byte PNG chunk type such as ``IHDR`` or ``tEXt``."""

    code: bytes

    def __post_init__(self) -> None:
        if len(self.code) != 4:
            raise ValueError(f"chunk type must be 4 bytes, got {len(self.code)}")

    def is_text(self) -> bool:
        """Whether this is a ``tEXt`` chunk."""
        return self.code == _TEXT_TYPE

    def __str__(self) -> str:
        return self.code.decode("utf-8")


@dataclass(frozen=True)
class PngChunk:
    """One chunk of a PNG file: length, type, data and CRC."""

    length: int
    chunk_type: PngChunkType
    crc: bytes
    data: bytes

    @classmethod
    def new_text_chunk(cls, text: str) -> PngChunk:
        """Create a ``tEXt`` chunk holding ``text``; the CRC covers the data bytes."""
        data = text.encode("utf-8")
        crc = (zlib.crc32(data) & 0xFFFFFFFF).to_bytes(4, "big")
        return cls(len(data), PngChunkType(_TEXT_TYPE), crc, data)

    @classmethod
    def from_reader(cls, reader: BinaryIO) -> PngChunk | None:
        """Read the next chunk; return None when ``reader`` is at its end.

        Raises EOFError when the stream ends inside a chunk.
        """
        try:
            (length,) = _LENGTH.unpack(_read_exact(reader, _LENGTH.size))
        except EOFError:
            return None
        chunk_type = PngChunkType(_read_exact(reader, 4))
        data = _read_exact(reader, length)
        crc = _read_exact(reader, 4)
        return cls(length, chunk_type, crc, data)

    def to_bytes(self) -> bytes:
        """Encode the chunk as it appears in a PNG file."""
        return _LENGTH.pack(self.length) + self.chunk_type.code + self.data + self.crc

    def __str__(self) -> str:
        crc = int.from_bytes(self.crc, "big")
        text = f"Chunk type: {self.chunk_type}, Data len: {self.length}, CRC: 0x{crc:X}"
        if self.chunk_type.is_text():
            text = f'{text} - "{self.data.decode("utf-8")}"'
        return text


class PngAnalyzer:
    """Checks the PNG signature of a stream and iterates over its chunks."""

    def __init__(self, reader: BinaryIO) -> None:
        self._reader = reader

    def chunks(self) -> Iterator[PngChunk]:
        """Read the signature now and return an iterator over the chunks.

        Raises ValueError when the leading bytes are not a PNG signature.
        """
        signature = _read_exact(self._reader, len(PNG_FILE_SIGNATURE))
        if signature != PNG_FILE_SIGNATURE:
            raise ValueError("wrong PNG file signature")
        return self._iter_chunks()

    def _iter_chunks(self) -> Iterator[PngChunk]:
        while (chunk := PngChunk.from_reader(self._reader)) is not None:
            yield chunk


class PngCreator:
    """Builds a PNG binary from a sequence of chunks."""

    def __init__(self) -> None:
        self._chunks: list[PngChunk] = []

    def add_chunk(self, chunk: PngChunk) -> None:
        """Append ``chunk`` to the image."""
        self._chunks.append(chunk)

    def finalize(self) -> bytes:
        """Return the signature followed by every chunk added."""
        return PNG_FILE_SIGNATURE + b"".join(chunk.to_bytes() for chunk in self._chunks)