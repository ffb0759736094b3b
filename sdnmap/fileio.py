"""Plain text file helpers that never fail loudly."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Union

__all__ = ["write_file", "read_file"]

PathLike = Union[str, Path]


def write_file(text: str, file_path: PathLike) -> None:
    """Write ``text`` as UTF-8; a file that cannot be opened is left alone."""
    with contextlib.suppress(OSError):
        with open(file_path, "w", encoding="utf-8") as handle:
            handle.write(text)


def read_file(file_path: PathLike) -> str:
    """Return the file's text, or an empty string if it cannot be opened."""
    try:
        with open(file_path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return ""