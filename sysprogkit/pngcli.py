"""Command line tool to list PNG chunks and embed a tEXt chunk."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import BinaryIO

from sysprogkit.png import PngAnalyzer, PngChunk, PngCreator
from sysprogkit.tempfiles import temp_file

DEFAULT_TEXT = "ASCII PROGRAMMING++"


def describe_chunks(reader: BinaryIO) -> list[str]:
    """Return one descriptive line for each chunk of the PNG in ``reader``."""
    return [str(chunk) for chunk in PngAnalyzer(reader).chunks()]


def embed_text_chunk(reader: BinaryIO, text: str) -> bytes:
    """Return the PNG from ``reader`` with a tEXt chunk holding ``text`` after IHDR."""
    chunks = PngAnalyzer(reader).chunks()
    first = next(chunks, None)
    if first is None:
        raise ValueError("first chunk must be IHDR")
    creator = PngCreator()
    creator.add_chunk(first)
    creator.add_chunk(PngChunk.new_text_chunk(text))
    for chunk in chunks:
        creator.add_chunk(chunk)
    return creator.finalize()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysprogkit-png", description="Inspect or annotate PNG files."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    show = commands.add_parser("show", help="list the chunks of a PNG file")
    show.add_argument("png", type=Path)
    embed = commands.add_parser("embed", help="copy a PNG file with a tEXt chunk added")
    embed.add_argument("png", type=Path)
    embed.add_argument("--text", default=DEFAULT_TEXT)
    embed.add_argument("-o", "--output", type=Path, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    with args.png.open("rb") as png:
        if args.command == "show":
            for line in describe_chunks(png):
                print(line)
            return 0
        new_png = embed_text_chunk(png, args.text)
    output = args.output if args.output is not None else temp_file()
    output.write_bytes(new_png)
    print(f'PNG file copied (with tEXt embedded) to: "{output}"')
    return 0