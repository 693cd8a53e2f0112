"""Shared error type and file helpers."""

from __future__ import annotations

import os


class MkprojError(Exception):
    """Raised when a configuration cannot be read or executed."""


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of the file at *path*.

    The text is returned exactly as stored: line endings are not translated.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise MkprojError(f"Could not read file {os.fspath(path)}.") from exc