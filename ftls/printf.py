"""A printf-style formatter producing bytes and the count it reports."""

from __future__ import annotations

import operator
import os
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .fmtspec import ConversionSpec, parse_spec
from .wide import encode_wchar, wchar_len, wstr_len

COLORS = (
    ("{red}", "\033[31m"),
    ("{green}", "\033[32m\033[1m"),
    ("{yellow}", "\033[33m\033[1m"),
    ("{blue}", "\033[34m\033[1m"),
    ("{purple}", "\033[35m\033[1m"),
    ("{cyan}", "\033[36m\033[1m"),
    ("{eoc}", "\033[37m\033[0m"),
)
COLOR_LENGTH = 5
KNOWN_CONVERSIONS = "sSpdDibBoOuUxXcC%nmfF"
NULL_TEXT = b"(null)"

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


@dataclass(frozen=True)
class Formatted:
    """Bytes produced by a format call and the length it reports.

    The reported length counts every colour code as five characters, so it
    can differ from ``len(data)``.
    """

    data: bytes
    length: int

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", "replace")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _signed(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _argument_bits(spec: ConversionSpec) -> int:
    if spec.long_len:
        return 64
    if spec.short_len == 2:
        return 8
    if spec.short_len == 1:
        return 16
    return 64 if spec.intmax or spec.sizet else 32


def _digit_count(value: int, base: int) -> int:
    count = 0
    while value:
        value //= base
        count += 1
    return count


def _fill(value: int, base: int, width: int, upper: bool) -> list[str]:
    """``width`` digits of ``value`` in ``base``, zero-padded on the left."""
    alphabet = _UPPER_DIGITS if upper else _LOWER_DIGITS
    chars = []
    for _ in range(width):
        value, digit = divmod(value, base)
        chars.append(alphabet[digit])
    chars.reverse()
    return chars


def _set_char(chars: list[str], index: int, char: str) -> None:
    if index < len(chars):
        chars[index] = char
    else:
        chars.append(char)


def _int_arg(value: Any) -> int:
    return operator.index(value)


def _char_arg(value: Any) -> int:
    if isinstance(value, (str, bytes)) and len(value) == 1:
        return ord(value)
    return operator.index(value)


def _float_arg(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"a number is required, not {type(value).__name__}")
    return float(value)


def _bytes_arg(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    elif isinstance(value, str):
        data = _encode(value)
    else:
        raise TypeError(f"a string is required, not {type(value).__name__}")
    return data.split(b"\0", 1)[0]


def _wide_arg(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", "surrogateescape")
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"a string is required, not {type(value).__name__}")
    return text.split("\0", 1)[0]


def _error_message() -> str:
    """Message of the OS error being handled, or of error number 0."""
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return os.strerror(0)


def _ends_early(fmt: str, pos: int) -> bool:
    rest = fmt[pos + 1:pos + 4]
    if not rest:
        return True
    if rest[0] != " ":
        return False
    return len(rest) == 1 or (len(rest) == 2 and rest[1] == "h")


class _Printer:
    def __init__(self, args: Iterable[Any]) -> None:
        self.values: Iterator[Any] = iter(args)
        self.out = bytearray()
        self.length = 0

    def next_value(self) -> Any:
        try:
            return next(self.values)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    def write(self, data: bytes | str) -> None:
        self.out += _encode(data) if isinstance(data, str) else data

    def pad(self, count: int, char: str) -> None:
        if count > 0:
            self.out += _encode(char) * count

    def put_char(self, char: str) -> None:
        encoded = _encode(char)
        self.out += encoded
        self.length += len(encoded)

    def convert(self, conversion: str, spec: ConversionSpec) -> None:
        if conversion in "xX":
            self.put_number_base(16, spec, conversion == "X")
        elif conversion in "uU":
            self.put_number_base(10, spec, False)
        elif conversion in "oO":
            self.put_number_base(8, spec, False)
        elif conversion in "bB":
            self.put_number_base(2, spec, False)
        elif conversion in "dDi":
            self.put_number(spec)
        elif conversion in "cC":
            self.put_character(spec)
        elif conversion == "s" and not spec.long_len:
            self.length += self.put_string(spec)
        elif conversion in "sS":
            self.length += self.put_wide_string(spec)
        elif conversion == "p":
            self.length += self.put_pointer(spec)
        elif conversion == "n":
            target = self.next_value()
            if not hasattr(target, "append"):
                raise TypeError("%n requires a list to receive the count")
            target.append(self.length)
        elif conversion == "m":
            message = _encode(_error_message())
            self.write(message)
            self.length += len(message)
        elif conversion in "fF":
            self.put_double(spec)
        elif conversion not in KNOWN_CONVERSIONS:
            self.not_found(conversion, spec)

    def color(self, fmt: str, pos: int) -> int:
        """Emit a colour code at ``pos``; return where formatting resumes."""
        for name, code in COLORS:
            if fmt.startswith(name, pos):
                self.write(code)
                self.length += COLOR_LENGTH
                return pos + len(name)
        return pos

    def percent(self, spec: ConversionSpec) -> int:
        padding = max(spec.min_length - 1, 0)
        if not spec.flags.minus:
            self.pad(padding, "0" if spec.flags.zero else " ")
        self.write(b"%")
        if spec.flags.minus:
            self.pad(padding, " ")
        return max(spec.min_length, 1)

    def itoa(self, n: int, spec: ConversionSpec) -> tuple[str, int]:
        digits = _digit_count(abs(n), 10)
        signed = n < 0 or spec.flags.plus or spec.flags.space
        if signed and spec.flags.zero:
            spec.precision -= 1
        printed = max(digits, spec.precision)
        if signed:
            printed += 1
        chars = _fill(abs(n), 10, printed, False)
        if chars:
            if spec.apply_precision and spec.flags.zero:
                chars[0] = " "
            if spec.flags.space:
                chars[0] = " "
            if n < 0:
                chars[0] = "-"
            if spec.flags.plus and n >= 0:
                chars[0] = "+"
        return "".join(chars), printed

    def itoa_base(self, n: int, base: int, spec: ConversionSpec, upper: bool) -> tuple[str, int]:
        digits = _digit_count(n, base)
        if spec.flags.zero:
            spec.precision = spec.min_length
        extended = digits < spec.precision
        printed = max(spec.precision, digits)
        sharp = spec.flags.sharp
        if sharp and base == 8 and not extended:
            printed += 1
        if sharp and base == 16 and n and not spec.flags.zero:
            printed += 2
        chars = _fill(n, base, printed, upper)
        if chars and spec.apply_precision and spec.flags.zero:
            chars[0] = " "
        if sharp and ((base == 8 and not extended) or (base == 16 and n)):
            _set_char(chars, 0, "0")
        if sharp and base == 16 and n:
            _set_char(chars, 1, "X" if upper else "x")
        return "".join(chars), printed

    def put_number(self, spec: ConversionSpec) -> None:
        n = _signed(_int_arg(self.next_value()), _argument_bits(spec))
        if spec.flags.zero:
            spec.precision = spec.min_length
        text, printed = self.itoa(n, spec)
        padding = max(spec.min_length - printed, 0)
        if not spec.flags.zero and not spec.flags.minus:
            self.pad(padding, " ")
        self.write(text)
        if spec.flags.minus:
            self.pad(padding, " ")
        self.length += max(printed, spec.min_length)

    def put_number_base(self, base: int, spec: ConversionSpec, upper: bool) -> None:
        n = _unsigned(_int_arg(self.next_value()), _argument_bits(spec))
        text, printed = self.itoa_base(n, base, spec, upper)
        padding = max(spec.min_length - printed, 0)
        if not spec.flags.zero and not spec.flags.minus:
            self.pad(padding, " ")
        self.write(text)
        if spec.flags.minus:
            self.pad(padding, " ")
        self.length += max(printed, spec.min_length)

    def put_character(self, spec: ConversionSpec) -> None:
        code = _unsigned(_char_arg(self.next_value()), 32)
        size = wchar_len(code) if spec.long_len else 1
        padding = max(spec.min_length - size, 0)
        if not spec.flags.minus:
            self.pad(padding, "0" if spec.flags.zero else " ")
        if spec.long_len:
            self.write(encode_wchar(code, 4))
        else:
            self.write(bytes([code & 0xFF]))
        if spec.flags.minus:
            self.pad(padding, " ")
        self.length += max(spec.min_length, size)

    def put_string(self, spec: ConversionSpec) -> int:
        value = self.next_value()
        if value is None:
            if not spec.flags.zero:
                self.write(NULL_TEXT)
                return len(NULL_TEXT)
            self.pad(spec.min_length, "0")
            return spec.min_length
        data = _bytes_arg(value)
        size = len(data)
        if spec.apply_precision:
            size = min(spec.precision, size)
        padding = max(spec.min_length - size, 0)
        if not spec.flags.minus:
            self.pad(padding, "0" if spec.flags.zero else " ")
        self.write(data[:size])
        if spec.flags.minus:
            self.pad(padding, " ")
        return size + padding

    def put_wide_string(self, spec: ConversionSpec) -> int:
        value = self.next_value()
        if value is None:
            self.write(NULL_TEXT)
            return len(NULL_TEXT)
        text = _wide_arg(value)
        budget = wstr_len(text)
        if spec.apply_precision:
            budget = min(spec.precision, budget)
        padding = max(spec.min_length - budget + (1 if spec.precision > 1 else 0), 0)
        pad_char = "0" if spec.flags.zero else " "
        if not spec.flags.minus:
            self.pad(padding, pad_char)
        printed = 0
        last = 0
        for char in text:
            budget -= last
            if budget <= 0:
                break
            encoded = encode_wchar(ord(char), budget)
            self.write(encoded)
            last = len(encoded)
            printed += last
        if spec.flags.minus:
            self.pad(padding, pad_char)
        return printed + padding

    def put_pointer(self, spec: ConversionSpec) -> int:
        address = _unsigned(_int_arg(self.next_value()), 64)
        spec.flags.sharp = False
        if spec.flags.zero:
            spec.min_length -= 2
        text, printed = self.itoa_base(address, 16, spec, False)
        padding = max(spec.min_length - 2 - printed, 0)
        pad_char = "0" if spec.flags.zero else " "
        if not spec.flags.minus:
            self.pad(padding, pad_char)
        self.write(b"0x")
        self.write(text)
        if spec.flags.minus:
            self.pad(padding, pad_char)
        return max(printed + 2, spec.min_length)

    def put_double(self, spec: ConversionSpec) -> None:
        n = _float_arg(self.next_value())
        if spec.flags.zero:
            spec.precision = spec.min_length
        text, printed = self.ldtoa(n, spec)
        self.write(text)
        self.length += max(printed, spec.min_length)

    def ldtoa(self, n: float, spec: ConversionSpec) -> tuple[str, int]:
        if spec.apply_precision and not spec.precision:
            return self.itoa(int(n), spec)
        if not spec.apply_precision:
            spec.precision = 6
        whole = int(abs(n))
        width = (1 if spec.precision > 0 else 0) + _digit_count(whole, 10)
        if spec.flags.zero:
            spec.precision = spec.min_length
        printed = spec.precision + width + (1 if n < 0 else 0)
        chars = self._ldtoa_fill(n, printed, spec)
        if chars:
            if spec.flags.space:
                chars[0] = " "
            if n < 0:
                chars[0] = "-"
            if spec.flags.plus and n >= 0:
                chars[0] = "+"
        return "".join(chars), printed

    @staticmethod
    def _ldtoa_fill(n: float, printed: int, spec: ConversionSpec) -> list[str]:
        magnitude = abs(n)
        whole = int(magnitude)
        decimal = (magnitude - whole) * 10.0 ** (spec.precision + 1)
        decimal = decimal / 10 + 1 if int(decimal) % 10 > 4 else decimal / 10
        int_len = max(printed - 1 - spec.precision, 0)
        chars = [" "] * printed
        fraction = int(decimal)
        for offset in range(spec.precision - 1, -1, -1):
            index = int_len + offset + 1
            fraction, digit = divmod(fraction, 10)
            if index < printed:
                chars[index] = _LOWER_DIGITS[digit]
        if spec.precision > 0 and int_len < printed:
            chars[int_len] = "."
        for index in range(int_len - 1, -1, -1):
            whole, digit = divmod(whole, 10)
            chars[index] = _LOWER_DIGITS[digit]
        if chars and spec.apply_precision and spec.flags.zero:
            chars[0] = " "
        return chars

    def not_found(self, conversion: str, spec: ConversionSpec) -> None:
        pad_char = "0" if spec.flags.zero else " "
        if not spec.flags.minus and spec.min_length > 1:
            self.pad(spec.min_length - 1, pad_char)
        if spec.min_length > 1:
            self.length += spec.min_length - 1
        self.put_char(conversion)
        if spec.flags.minus and spec.min_length > 1:
            self.pad(spec.min_length - 1, pad_char)


def format_printf(fmt: str, *args: Any) -> Formatted:
    """Format ``args`` according to ``fmt`` and return the bytes and length.

    Besides the usual integer, string, character and ``f`` conversions this
    supports ``%b`` for binary, ``%m`` for the current OS error message,
    ``%n`` (which appends the count so far to a list argument) and colour
    codes such as ``%{red}`` and ``%{eoc}``.
    """
    printer = _Printer(args)
    pos = 0
    while pos < len(fmt):
        char = fmt[pos]
        if char != "%":
            printer.put_char(char)
            pos += 1
            continue
        if _ends_early(fmt, pos):
            break
        spec, pos = parse_spec(fmt, pos + 1, printer.values)
        conversion = spec.conversion
        if not conversion:
            break
        if conversion == "{":
            pos = printer.color(fmt, pos)
            continue
        if conversion == "%":
            printer.length += printer.percent(spec)
        else:
            printer.convert(conversion, spec)
        pos += 1
    return Formatted(bytes(printer.out), printer.length)


def printf(fmt: str, *args: Any) -> int:
    """Format to standard output and return the reported length."""
    result = format_printf(fmt, *args)
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(result.text)
    else:
        stream.flush()
        buffer.write(result.data)
        buffer.flush()
    return result.length