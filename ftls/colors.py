"""Colour conversions between hex, RGB and HSB, plus clamping helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """Red, green and blue components, each from 0 to 255."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class HSB:
    """Hue in degrees, saturation and brightness from 0 to 1."""

    h: float
    s: float
    b: float


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def hex_to_rgb(value: int) -> RGB:
    """Split a ``0xRRGGBB`` value into its components."""
    return RGB(
        float((value >> 16) & 0xFF),
        float((value >> 8) & 0xFF),
        float(value & 0xFF),
    )


def rgb_to_hex(rgb: RGB) -> int:
    """Combine components into a ``0xRRGGBB`` value."""
    return int((int(rgb.r) << 16) + (int(rgb.g) << 8) + rgb.b)


def hsb_to_rgb(hsb: HSB) -> RGB:
    """Convert hue, saturation and brightness to RGB; hues from 360 on give black."""
    sector = int(hsb.h / 60)
    fraction = hsb.h / 60 - sector
    low = 0xFF * (hsb.b * (1 - hsb.s))
    falling = 0xFF * (hsb.b * (1 - fraction * hsb.s))
    rising = 0xFF * (hsb.b * (1 - (1 - fraction) * hsb.s))
    bright = hsb.b * 0xFF
    table = {
        0: (bright, rising, low),
        1: (falling, bright, low),
        2: (low, bright, rising),
        3: (low, falling, bright),
        4: (rising, low, bright),
        5: (bright, low, falling),
    }
    return RGB(*table.get(sector, (0.0, 0.0, 0.0)))


def hsb_to_hex(hsb: HSB) -> int:
    """Convert hue, saturation and brightness to a ``0xRRGGBB`` value."""
    return rgb_to_hex(hsb_to_rgb(hsb))


def fclamp(n: float, low: float, high: float) -> float:
    """``n`` limited to the range from ``low`` to ``high``."""
    if n < low:
        return low
    return high if n > high else n


def clamp(n: int, low: int, high: int) -> int:
    """``n`` limited to the range from ``low`` to ``high``."""
    if n < low:
        return low
    if n > high:
        return high
    return n


def shade_color(color: int, factor: float) -> int:
    """Darken a ``0xRRGGBB`` colour; factor 0 keeps it, 1 makes it black."""
    keep = 1 - fclamp(factor, 0, 1)
    red = int(keep * ((color >> 16) & 0xFF)) << 16
    green = int(keep * ((color >> 8) & 0xFF)) << 8
    blue = keep * (color & 0xFF)
    return int(red + green + blue)


def int_abs(n: int) -> int:
    """Absolute value of a 32-bit signed integer, wrapping like the machine type."""
    return _wrap32(abs(_wrap32(n)))