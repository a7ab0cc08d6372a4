"""Naming temporary files."""

from __future__ import annotations

import tempfile
import time
from pathlib import Path


def temp_file() -> Path:
    """Return the path of a fresh temporary file; the file is not created."""
    now_ns = time.time_ns()
    seconds, nanos = divmod(now_ns, 1_000_000_000)
    return Path(tempfile.gettempdir()) / f"{seconds}-{nanos:09d}"