"""Small helpers shared by the parsers: digit checks, file reading and logging."""

from __future__ import annotations

import os
import sys

_DIGITS = frozenset("0123456789")


def is_numerical(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit.

    An empty string counts as numerical.
    """
    return all(ch in _DIGITS for ch in text)


def read_file(path: str | os.PathLike) -> bytes:
    """Return the raw contents of ``path``, or empty bytes if it cannot be opened."""
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError:
        print(f"File in path '{os.fspath(path)}' doesn't exist.")
        return b""


def location(path: str | os.PathLike, line: int, col: int) -> str:
    """Format a ``path:line:col: `` prefix for diagnostics."""
    return f"{os.fspath(path)}:{line}:{col}: "


def log_info(message: object) -> None:
    """Write an informational message to standard error."""
    print(f"[i] {message}", file=sys.stderr)


def log_error(message: object) -> None:
    """Write an error message to standard error."""
    print(f"[!] {message}", file=sys.stderr)


def log_success(message: object) -> None:
    """Write a success message to standard output."""
    print(f"[^] {message}")