"""Byte-buffer operations on ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    if offset + n > length:
        raise ValueError(
            f"{what} span of {n} bytes at offset {offset} exceeds its length {length}"
        )


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    _check_count(n)
    _check_span(len(buffer), 0, n, "buffer")
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the byte ``c`` and return it."""
    _check_count(n)
    _check_span(len(buffer), 0, n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` comes back.
    """
    if dest is None and src is None:
        return None
    _check_count(n)
    _check_span(len(dest), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly. The buffer is returned.
    """
    _check_count(n)
    _check_span(len(buffer), dest, n, "destination")
    _check_span(len(buffer), src, n, "source")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` in the first ``n`` bytes, or None."""
    _check_count(n)
    _check_span(len(data), 0, n, "data")
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    _check_count(n)
    _check_span(len(a), 0, n, "first")
    _check_span(len(b), 0, n, "second")
    for x, y in zip(memoryview(a)[:n], memoryview(b)[:n]):
        if x != y:
            return x - y
    return 0