"""Length, search, copy, comparison and integer conversion on strings.

Search functions return an index into the string instead of a pointer, and
``None`` where nothing is found.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_TERMINATOR = "\0"
_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_INT_BITS = 32


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _target(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int code or a one-character str, not {type(c).__name__}")


def _until_terminator(s: str) -> str:
    return s.split(_TERMINATOR, 1)[0]


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``; a result length below it means the copy was cut short.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When ``size``
    leaves no room after ``dst``, ``dst`` is returned unchanged together with
    ``size + len(src)``.
    """
    _check_size(size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    target = _target(c)
    if target == _TERMINATOR:
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    target = _target(c)
    if target == _TERMINATOR:
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strnstr(big: Optional[str], little: str, length: int) -> Optional[int]:
    """Find ``little`` inside the first ``length`` characters of ``big``.

    Returns the index of the first match that lies wholly within that limit,
    0 for an empty ``little``, or None.
    """
    _check_size(length)
    if big is None:
        if length == 0:
            return None
        raise TypeError("big must be a str")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first pair of unequal character codes, with
    a string's end counting as code 0, or 0 when they agree.
    """
    _check_size(n)
    left = _until_terminator(s1)[:n]
    right = _until_terminator(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue=_TERMINATOR):
        if a != b:
            return ord(a) - ord(b)
    return 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed int.

    Leading whitespace and one sign are allowed; parsing stops at the first
    non-digit, and text with no digits gives 0. Values out of range wrap.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_int(value)


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)