"""Building new strings from existing ones: slicing, joining, trimming,
splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start past the end gives an empty string; a ``None`` string gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return ``s1`` followed by ``s2``, or None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)}")
    if s is None:
        return None
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Return a new string of ``f(index, char)`` for every character of ``s``."""
    if s is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``f(index, char)`` on every character of ``chars``, in place.

    When ``f`` returns a string it replaces the character at that index.
    """
    if chars is None:
        return
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement