"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; a ``None`` string writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the integer ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))