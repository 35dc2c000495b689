"""Integer and decimal conversions between numbers and text."""

from __future__ import annotations

import itertools
import math

_WHITESPACE = " \t\n\v\f\r"
_DECIMAL = "0123456789"
_HEX_VALUES = {
    **{char: value for value, char in enumerate(_DECIMAL)},
    **{char: value + 10 for value, char in enumerate("abcdef")},
    **{char: value + 10 for value, char in enumerate("ABCDEF")},
}


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _digits(magnitude: int, base: int, letter: str) -> str:
    if base < 2:
        raise ValueError(f"invalid base {base}")
    out = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        out.append(chr(ord("0") + digit) if digit < 10 else chr(ord(letter) + digit - 10))
        if not magnitude:
            break
    return "".join(reversed(out))


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0.
    """
    s = s.lstrip(_WHITESPACE)
    sign = -1 if s[:1] == "-" else 1
    if s[:1] in ("-", "+"):
        s = s[1:]
    digits = "".join(itertools.takewhile(lambda char: char in _DECIMAL, s))
    result = int(digits) if digits else 0
    return _wrap(sign * _wrap(result, 32), 32)


def htoi(s: str) -> int:
    """Parse a hexadecimal string; raises ``ValueError`` on any other character."""
    n = 0
    for char in s:
        value = _HEX_VALUES.get(char)
        if value is None:
            raise ValueError(f"invalid hexadecimal digit {char!r}")
        n = n * 16 + value
    return _wrap(n, 32)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(int(n))


def itoa_base(n: int, base: int) -> str:
    """Representation of ``n`` in ``base`` with upper-case letters and a sign."""
    sign = "-" if n < 0 else ""
    return sign + _digits(abs(n), base, "A")


def lltoa(n: int) -> str:
    """Decimal representation of a 64-bit signed integer."""
    return str(_wrap(int(n), 64))


def ulltoa_base(n: int, base: int, upper: bool) -> str:
    """Representation of ``n`` as an unsigned 64-bit value in ``base``."""
    return _digits(n % (1 << 64), base, "A" if upper else "a")


def round_scaled(n: float, precision: int) -> int:
    """``n`` scaled by ``10**precision`` and rounded half away from zero.

    Only the first digit beyond the precision is looked at.
    """
    if precision < -1:
        raise ValueError("precision must be at least -1")
    scaled = math.trunc(n * 10.0 ** (precision + 1))
    sign = -1 if scaled < 0 else 1
    quotient, remainder = divmod(abs(scaled), 10)
    quotient, remainder = sign * quotient, sign * remainder
    if remainder >= 5:
        return quotient + 1
    if remainder <= -5:
        return quotient - 1
    return quotient


def ldtoa(n: float, precision: int) -> str:
    """Fixed-point text of ``n`` with ``precision`` digits after the point."""
    if not precision:
        return itoa(math.trunc(n))
    scaled = round_scaled(n, precision)
    digits_left = abs(scaled)
    length = (3 if n < 0 else 2) + len(str(abs(scaled))) - 1
    if -1 < n < 1:
        length = 3 + precision
    if 0 <= n < 1:
        length = 2 + precision
    chars = []
    remaining = precision
    for _ in range(length):
        if remaining == 0:
            chars.append(".")
        else:
            digits_left, digit = divmod(digits_left, 10)
            chars.append(chr(ord("0") + digit))
        remaining -= 1
    chars.reverse()
    if n < 0 and chars:
        chars[0] = "-"
    return "".join(chars)


def format_nbr_base(n: int, base: int) -> str:
    """Representation of ``n`` in ``base`` with lower-case letters and a sign."""
    sign = "-" if n < 0 else ""
    return sign + _digits(abs(n), base, "a")