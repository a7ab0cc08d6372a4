"""Path cleaning and environment-variable expansion."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePath

_RE_VAR = re.compile(r"\$\{(.+)\}")
_RE_VAR_WITHOUT_BRACES = re.compile(r"\$(.+)")
_TILDE = "~"


class PathError(Exception):
    """A path could not be cleaned, expanded or made relative."""


def _env(name: str) -> str:
    try:
        return os.environ[name]
    except KeyError as exc:
        raise PathError(f"environment variable not found: {name}") from exc


def clean(path: str | os.PathLike) -> Path:
    """Resolve ``path``, which must exist.

    Absolute paths come back absolute; relative paths come back relative to
    the current directory.
    """
    path = Path(path)
    try:
        resolved = path.resolve(strict=True)
        current = Path.cwd()
    except OSError as exc:
        raise PathError(str(exc)) from exc
    if path.is_absolute():
        return resolved
    try:
        return resolved.relative_to(current)
    except ValueError as exc:
        raise PathError(str(exc)) from exc


def expand_env(path: str | os.PathLike) -> Path:
    """Replace ``${VAR}``, ``$VAR`` and ``~`` components of ``path`` by their values."""
    result = Path()
    for part in PurePath(path).parts:
        match = _RE_VAR.search(part) or _RE_VAR_WITHOUT_BRACES.search(part)
        if match:
            result /= _env(match.group(1))
        elif part == _TILDE:
            result /= _env("HOME")
        else:
            result /= part
    return result


def expand_and_clean(path: str | os.PathLike) -> Path:
    """Expand environment variables in ``path`` and then clean it."""
    return clean(expand_env(path))


def relative_to(path: str | os.PathLike, prefix: str | os.PathLike) -> Path:
    """Return ``path`` with the leading ``prefix`` components removed."""
    try:
        return Path(PurePath(path).relative_to(prefix))
    except ValueError as exc:
        raise PathError(str(exc)) from exc