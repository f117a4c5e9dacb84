"""Binary codec for dotnetbin.

This module provides the reader and writer for the .NET BinaryWriter wire
format, plus the 7-bit variable-length integer primitives they share.
"""

from __future__ import annotations

from .reader import BinaryReader
from .varint import encode_7bit_i32, encode_7bit_i64
from .writer import BinaryWriter, ByteSink

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "ByteSink",
    "encode_7bit_i32",
    "encode_7bit_i64",
]
