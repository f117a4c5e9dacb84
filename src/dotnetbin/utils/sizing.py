"""Encoded size calculation utilities.

This module provides functions to calculate how many bytes the writer will
emit for a value without actually encoding it.
"""

from __future__ import annotations

from ..codec.varint import to_unsigned


def _size_7bit(unsigned_value: int) -> int:
    size = 1
    while unsigned_value >= 0x80:
        unsigned_value >>= 7
        size += 1
    return size


def size_7bit_i32(value: int) -> int:
    """Return the encoded size of a 7-bit encoded 32-bit integer (1 to 5).

    Raises:
        ValueError: If value is outside the signed 32-bit range

    Example:
        >>> size_7bit_i32(127)
        1
        >>> size_7bit_i32(128)
        2
        >>> size_7bit_i32(-1)
        5
    """
    return _size_7bit(to_unsigned(value, 32))


def size_7bit_i64(value: int) -> int:
    """Return the encoded size of a 7-bit encoded 64-bit integer (1 to 10).

    Raises:
        ValueError: If value is outside the signed 64-bit range
    """
    return _size_7bit(to_unsigned(value, 64))


def utf8_string_size(s: str) -> int:
    """Return the size of a length-prefixed UTF-8 string, prefix included.

    Example:
        >>> utf8_string_size("Hello!")
        7
    """
    length = len(s.encode("utf-8"))
    return size_7bit_i32(length) + length


def utf16_string_size(s: str) -> int:
    """Return the size of a length-prefixed UTF-16 string, prefix included."""
    length = len(s.encode("utf-16-le"))
    return size_7bit_i32(length) + length
