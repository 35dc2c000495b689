"""String comparison, searching, trimming and character classification."""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Iterable

WHITESPACE = " \n\t\r\v\f"


def _bytes(s: str | bytes) -> bytes:
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    return s.encode("utf-8", "surrogateescape")


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def strcmp(a: str | bytes, b: str | bytes) -> int:
    """Difference of the first differing bytes of ``a`` and ``b``, 0 if equal."""
    for x, y in zip_longest(_bytes(a), _bytes(b), fillvalue=0):
        if x != y or not x:
            return x - y
    return 0


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` bytes."""
    if n <= 0:
        return 0
    pairs = zip_longest(_bytes(a), _bytes(b), fillvalue=0)
    for index, (x, y) in enumerate(pairs):
        if x != y or not y or index == n - 1:
            return x - y
    return 0


def split(s: str, c: str) -> list[str]:
    """Non-empty pieces of ``s`` separated by the character ``c``."""
    return [piece for piece in s.split(c) if piece]


def trim(s: str) -> str:
    """``s`` without leading and trailing whitespace."""
    return s.strip(WHITESPACE)


def trim_char(s: str, c: str) -> str:
    """``s`` without leading and trailing occurrences of ``c``."""
    return s.strip(c)


def find_substring(big: str, little: str, length: int | None = None) -> int | None:
    """Index of the first ``little`` in ``big`` lying within ``length`` characters.

    Without ``length`` the whole of ``big`` is searched. Returns ``None``
    when there is no match; an empty ``little`` matches at 0 as long as
    ``big`` is not empty, or when both are empty and no length is given.
    """
    if length is None:
        if not big and not little:
            return 0
        length = len(big)
    if length < 0:
        raise ValueError("length must not be negative")
    size = len(little)
    remaining = length
    for pos in range(len(big)):
        if remaining < size:
            break
        remaining -= 1
        if big[pos:pos + size] == little:
            return pos
    return None


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    if start < 0 or start > len(s):
        raise IndexError("start is outside the string")
    if length < 0:
        raise ValueError("length must not be negative")
    return s[start:start + length]


def lcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new text and the length the full result would have had.
    """
    n = len(dest)
    m = len(src)
    if not size:
        return dest, n
    room = max(size - 1 - n, 0)
    return dest + src[:room], m + (n if n < size else size)


def lcpy(src: str, size: int) -> tuple[str, int]:
    """Copy of ``src`` fitting in a buffer of ``size``, and the length of ``src``."""
    if size < 0:
        raise ValueError("size must not be negative")
    return src[:max(size - 1, 0)], len(src)


def length_cmp(a: str, b: str) -> int:
    """Difference of the lengths of ``a`` and ``b``."""
    return len(a) - len(b)


def is_space(c: str | int) -> bool:
    """Whether ``c`` is a space, tab, newline, return, vertical tab or form feed."""
    code = _code(c)
    return code != 0 and chr(code) in WHITESPACE if 0 <= code < 0x110000 else False


def is_blank(c: str | int) -> bool:
    """Same character set as :func:`is_space`."""
    return is_space(c)


def is_alpha(c: str | int) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_print(c: str | int) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_ascii(c: str | int) -> bool:
    """Whether ``c`` is in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def to_lower(c: str | int) -> str | int:
    """Lower-case form of an ASCII upper-case letter; anything else unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case form of an ASCII lower-case letter; anything else unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def bubble_sort(items: Iterable[str]) -> list[str]:
    """Strings sorted by byte value; equal strings keep their order."""
    return sorted(items, key=_bytes)