"""UTF-8 sizing and encoding of wide characters and strings."""

from __future__ import annotations

NULL_TEXT = b"(null)"


def wchar_len(code: int) -> int:
    """Number of bytes the UTF-8 form of ``code`` takes (1 to 4)."""
    code &= 0xFFFFFFFF
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def wstr_len(s: str) -> int:
    """Number of bytes the UTF-8 form of ``s`` takes."""
    return sum(wchar_len(ord(char)) for char in s)


def encode_wchar(code: int, limit: int = 4) -> bytes:
    """UTF-8 bytes of ``code``, or no bytes if they would exceed ``limit``."""
    size = wchar_len(code)
    if size > limit:
        return b""
    if size == 1:
        return bytes([code & 0x7F])
    if size == 2:
        lead = [((code >> 6) & 0x1F) + 0xC0]
    elif size == 3:
        lead = [((code >> 12) & 0xF) + 0xE0, ((code >> 6) & 0x3F) + 0x80]
    else:
        lead = [
            ((code >> 18) & 0x7) + 0xF0,
            ((code >> 12) & 0x3F) + 0x80,
            ((code >> 6) & 0x3F) + 0x80,
        ]
    return bytes([*lead, (code & 0x3F) + 0x80])


def encode_wstr(s: str | None) -> bytes:
    """UTF-8 bytes of ``s``; a missing or empty string gives ``(null)``."""
    if not s:
        return NULL_TEXT
    return b"".join(encode_wchar(ord(char)) for char in s)


def wstr_sub(s: str, start: int, length: int) -> str:
    """Longest prefix of ``s[start:]`` whose UTF-8 form fits in ``length`` bytes."""
    out = []
    budget = length
    for char in s[start:]:
        size = wchar_len(ord(char))
        if size > budget:
            break
        out.append(char)
        budget -= size
    return "".join(out)


def is_wascii(code: int) -> bool:
    """Whether ``code`` is a 7-bit ASCII code point."""
    return not code & ~0x7F