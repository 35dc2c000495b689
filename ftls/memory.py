"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

import operator
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _byte(value: int | bytes | str) -> int:
    """The byte value of ``value``, keeping only its low eight bits."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {value!r}")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value) & 0xFF
    return operator.index(value) & 0xFF


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > length:
        raise IndexError(f"{what} is too short for {n} bytes at offset {start}")


def mem_set(buf: bytearray, value: int | bytes | str, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` and return ``buf``."""
    _check_span(len(buf), 0, n, "buffer")
    buf[:n] = bytes([_byte(value)]) * n
    return buf


def mem_zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero and return ``buf``."""
    return mem_set(buf, 0, n)


def mem_copy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(len(dest), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    copied aside first.
    """
    _check_span(len(buf), dest, n, "buffer")
    _check_span(len(buf), src, n, "buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def mem_ccopy(dest: bytearray, src: Buffer, c: int | bytes | str, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dest`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dest`` just past
    the copied ``c``, or ``None`` when ``c`` was not among the first ``n``
    bytes (all ``n`` of which are then copied).
    """
    target = _byte(c)
    found = mem_chr(src[:n], target, min(n, len(src)))
    count = n if found is None else found + 1
    _check_span(len(src), 0, count, "source")
    _check_span(len(dest), 0, count, "destination")
    dest[:count] = bytes(src[:count])
    return None if found is None else count


def mem_chr(data: Buffer, c: int | bytes | str, n: int) -> int | None:
    """Offset of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check_span(len(data), 0, n, "data")
    target = _byte(c)
    index = bytes(data[:n]).find(bytes([target]))
    return None if index == -1 else index


def mem_cmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, 0 if equal."""
    _check_span(len(a), 0, n, "first buffer")
    _check_span(len(b), 0, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0