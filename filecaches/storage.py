"""Plain-text file helpers that never raise on I/O failure."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_text(path: PathLike) -> str:
    """Return the file's contents, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return ""


def write_text(data: str, path: PathLike) -> None:
    """Write ``data`` to ``path``, replacing any previous contents.

    Failures to open or write the file are silently ignored.
    """
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(data)
    except OSError:
        pass