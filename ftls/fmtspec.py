"""Parsing of the optional part of a ``%`` conversion specification."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from .numconv import atoi

FLAG_CHARS = "#0+- "
LENGTH_CHARS = "hljzL"
DIGITS = "0123456789"

_FLAG_FIELDS = {
    "#": "sharp",
    "0": "zero",
    "+": "plus",
    "-": "minus",
    " ": "space",
}


@dataclass
class SpecFlags:
    """The ``#``, ``0``, ``-``, ``+`` and space flags of a conversion."""

    sharp: bool = False
    zero: bool = False
    minus: bool = False
    plus: bool = False
    space: bool = False


@dataclass
class ConversionSpec:
    """Everything parsed between ``%`` and the conversion character."""

    flags: SpecFlags = field(default_factory=SpecFlags)
    min_length: int = 0
    precision: int = 1
    apply_precision: bool = False
    short_len: int = 0
    long_len: int = 0
    intmax: bool = False
    sizet: bool = False
    conversion: str = ""


def _char(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _skip_digits(text: str, pos: int) -> int:
    while (char := _char(text, pos)) and char in DIGITS:
        pos += 1
    return pos


def _next_arg(args: Iterator[int]) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise ValueError("missing argument for '*'") from None


def parse_flags(text: str, pos: int, flags: SpecFlags) -> tuple[SpecFlags, int]:
    """Read flag characters at ``pos`` and return the updated flags and position.

    A ``-`` cancels ``0`` and a ``+`` cancels the space flag.
    """
    flags = replace(flags)
    while (char := _char(text, pos)) and char in FLAG_CHARS:
        setattr(flags, _FLAG_FIELDS[char], True)
        pos += 1
    if flags.minus:
        flags.zero = False
    if flags.plus:
        flags.space = False
    return flags, pos


def apply_wildcard(spec: ConversionSpec, value: int) -> ConversionSpec:
    """Apply a ``*`` argument as field width, or as precision once a ``.`` was seen."""
    spec.flags.minus = value < 0
    amount = abs(value)
    if not spec.apply_precision:
        spec.min_length = amount
    else:
        spec.precision = 0 if spec.flags.minus else amount
        spec.apply_precision = amount == 0
    return spec


def _field_width(text: str, pos: int, spec: ConversionSpec) -> int:
    char = _char(text, pos)
    if char and char in "123456789":
        spec.min_length = max(1, atoi(text[pos:]))
        pos = _skip_digits(text, pos)
    return pos


def _precision(text: str, pos: int, spec: ConversionSpec) -> int:
    if _char(text, pos) == ".":
        pos += 1
        spec.precision = max(atoi(text[pos:]), 0)
        pos = _skip_digits(text, pos)
        spec.apply_precision = True
    return pos


def _length_modifiers(text: str, pos: int, spec: ConversionSpec) -> int:
    while (char := _char(text, pos)) and char in LENGTH_CHARS:
        if char == "h":
            spec.short_len = 1
            if _char(text, pos + 1) == "h":
                spec.short_len = 2
                pos += 1
        elif char == "l":
            spec.long_len = 1
            if _char(text, pos + 1) == "l":
                spec.long_len = 2
                pos += 1
        elif char == "L":
            spec.long_len = 2
        elif char == "j":
            spec.intmax = True
        elif char == "z":
            spec.sizet = True
        pos += 1
    return pos


def parse_spec(text: str, pos: int, args: Iterator[int]) -> tuple[ConversionSpec, int]:
    """Parse flags, width, precision and length modifiers starting at ``pos``.

    ``args`` supplies the values of ``*`` wildcards and is advanced as they
    are used. Returns the specification and the position of the conversion
    character, which is also stored in ``spec.conversion``.
    """
    spec = ConversionSpec()
    if _char(text, pos) == "*":
        pos += 1
        apply_wildcard(spec, _next_arg(args))
    spec.flags, pos = parse_flags(text, pos, spec.flags)
    pos = _field_width(text, pos, spec)
    pos = _precision(text, pos, spec)
    pos = _length_modifiers(text, pos, spec)
    spec.flags, pos = parse_flags(text, pos, spec.flags)
    if _char(text, pos) == "*":
        pos += 1
        apply_wildcard(spec, _next_arg(args))
    spec.conversion = _char(text, pos)
    return spec, pos