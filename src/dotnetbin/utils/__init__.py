"""Utility functions for dotnetbin.

This module provides encoded size calculation and hex dumps.
"""

from __future__ import annotations

from .hexdump import hex_dump
from .sizing import size_7bit_i32, size_7bit_i64, utf8_string_size, utf16_string_size

__all__ = [
    # Sizing functions
    "size_7bit_i32",
    "size_7bit_i64",
    "utf8_string_size",
    "utf16_string_size",
    # Diagnostics
    "hex_dump",
]
