"""Path inspection, executable lookup on a search path and image-file search."""

from __future__ import annotations

import argparse
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterator

IMAGE_SUFFIXES = frozenset({"jpg", "jpeg", "png", "webp", "gif", "tiff", "eps"})


@dataclass(frozen=True)
class PathParts:
    """The directory, final name, extension and components of a path."""

    directory: str
    name: str
    extension: str
    components: list[str]


def split_path(path: str | os.PathLike) -> PathParts:
    """Split ``path`` into its directory, name, extension and components."""
    pure = PurePath(path)
    if pure.name:
        parent = pure.parent
        directory = "" if parent == PurePath() else str(parent)
    else:
        directory = ""
    extension = pure.suffix[1:] if pure.suffix else ""
    return PathParts(directory, pure.name, extension, list(pure.parts))


def which(name: str, search_path: str | None = None) -> Path | None:
    """Return the first ``name`` that exists in the directories of ``search_path``.

    ``search_path`` defaults to the ``PATH`` environment variable; a KeyError
    is raised when that is not set.
    """
    if search_path is None:
        search_path = os.environ["PATH"]
    for directory in search_path.split(os.pathsep):
        candidate = Path(directory) / name
        if candidate.exists():
            return candidate
    return None


def _is_image(path: Path) -> bool:
    return path.suffix[1:].lower() in IMAGE_SUFFIXES


def _walk(directory: Path) -> Iterator[Path]:
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk(path)
        elif _is_image(path):
            yield path


def find_images(root: str | os.PathLike) -> Iterator[Path]:
    """Yield image files under ``root``, depth first; unreadable entries are skipped."""
    root = Path(root)
    if root.is_dir() and not root.is_symlink():
        yield from _walk(root)
    elif root.exists() or root.is_symlink():
        if _is_image(root):
            yield root


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sysprogkit-fs", description="File system tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("temp", help="print the path of temp.txt in the temporary directory")
    split = commands.add_parser("split", help="show the parts of a path")
    split.add_argument("path")
    which_cmd = commands.add_parser("which", help="locate a file on PATH")
    which_cmd.add_argument("name")
    images = commands.add_parser("images", help="find images below a directory")
    images.add_argument("root")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.command == "temp":
        print(f"Temp File Path: {Path(tempfile.gettempdir()) / 'temp.txt'}")
    elif args.command == "split":
        parts = split_path(args.path)
        print(f"Dir: {parts.directory}, Name: {parts.name}")
        print(parts.components)
        print(parts.name)
        print(parts.directory)
        print(parts.extension)
    elif args.command == "which":
        found = which(args.name)
        if found is None:
            return 1
        print(found)
    else:
        for path in find_images(args.root):
            print(path)
    return 0