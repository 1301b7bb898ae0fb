"""Bit-field helpers and instruction bit-pattern matching."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def bitmask(bits: int) -> int:
    """Return an integer whose lowest ``bits`` bits are set."""
    if bits < 0:
        raise ValueError(f"negative bit count: {bits}")
    return (1 << bits) - 1


def bits(x: int, hi: int, lo: int) -> int:
    """Extract bits ``hi`` down to ``lo`` (inclusive) of ``x``."""
    if hi < lo:
        raise ValueError(f"hi ({hi}) is below lo ({lo})")
    return (x >> lo) & bitmask(hi - lo + 1)


def sext(x: int, length: int) -> int:
    """Sign-extend the low ``length`` bits of ``x`` to an unsigned 64-bit value."""
    if not 1 <= length <= 64:
        raise ValueError(f"field length must be between 1 and 64, got {length}")
    value = x & bitmask(length)
    if value >> (length - 1):
        value -= 1 << length
    return value & _MASK64


def roundup(a: int, size: int) -> int:
    """Round ``a`` up to a multiple of the power of two ``size``."""
    return ((a & _MASK64) + size - 1) & ~(size - 1) & _MASK64


def rounddown(a: int, size: int) -> int:
    """Round ``a`` down to a multiple of the power of two ``size``."""
    return (a & _MASK64) & ~(size - 1) & _MASK64


def _decode(pattern: str, limit: int, width: int, digit) -> tuple[int, int, int]:
    if len(pattern) > limit:
        raise ValueError("pattern too long")
    key = mask = shift = 0
    full = bitmask(width)
    for char in pattern:
        if char == " ":
            continue
        if char == "?":
            key <<= width
            mask <<= width
            shift += width
            continue
        value = digit(char)
        if value is None:
            raise ValueError(f"invalid character {char!r} in pattern string")
        key = (key << width) | value
        mask = (mask << width) | full
        shift = 0
    return key >> shift, mask >> shift, shift


def _binary_digit(char: str) -> int | None:
    return {"0": 0, "1": 1}.get(char)


def _hex_digit(char: str) -> int | None:
    if char in "0123456789abcdef":
        return int(char, 16)
    return None


def pattern_decode(pattern: str) -> tuple[int, int, int]:
    """Decode a binary pattern of ``0``, ``1``, ``?`` and spaces.

    Returns ``(key, mask, shift)``; trailing wildcards are folded into ``shift``.
    """
    return _decode(pattern, 64, 1, _binary_digit)


def pattern_decode_hex(pattern: str) -> tuple[int, int, int]:
    """Decode a hexadecimal pattern of ``0-9``, ``a-f``, ``?`` and spaces."""
    return _decode(pattern, 16, 4, _hex_digit)


def pattern_matches(pattern: str, value: int) -> bool:
    """Tell whether ``value`` matches the binary ``pattern``."""
    key, mask, shift = pattern_decode(pattern)
    return ((value & _MASK64) >> shift) & mask == key