"""dotnetbin: .NET BinaryWriter-compatible binary codec

A Python library that reads and writes byte buffers using exactly the
encoding rules of .NET's System.IO.BinaryWriter and BinaryReader, so data can
be exchanged with .NET programs byte for byte.

Reference: https://learn.microsoft.com/en-us/dotnet/api/system.io.binarywriter.write

Key Features:
- Little-endian fixed-size integers, booleans and IEEE-754 floats
- 7-bit variable-length integers (32-bit and 64-bit range)
- Length-prefixed UTF-8 and UTF-16 strings
- Zero-copy reads over memoryview
- Writes to any bytearray or file-like sink

Quick Start:
    >>> from dotnetbin import BinaryReader, BinaryWriter
    >>>
    >>> writer = BinaryWriter()
    >>> writer.write_u8(42)
    >>> writer.write_utf8_str("Hello, world!")
    >>> writer.write_i32(-33)
    >>>
    >>> reader = BinaryReader(writer.getvalue())
    >>> reader.read_u8()
    42
    >>> reader.read_utf8_str()
    'Hello, world!'
    >>> reader.read_i32()
    -33
"""

from __future__ import annotations

from .codec import BinaryReader, BinaryWriter, ByteSink, encode_7bit_i32, encode_7bit_i64
from .config import DEFAULT_LIMITS, CodecLimits
from .exceptions import (
    CannotEncode,
    DecodeError,
    DotnetBinError,
    EncodeError,
    InvalidData,
    NeedsMoreData,
)
from .utils import hex_dump, size_7bit_i32, size_7bit_i64, utf8_string_size, utf16_string_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BinaryReader",
    "BinaryWriter",
    "ByteSink",
    "encode_7bit_i32",
    "encode_7bit_i64",
    # Configuration
    "CodecLimits",
    "DEFAULT_LIMITS",
    # Exceptions
    "DotnetBinError",
    "DecodeError",
    "NeedsMoreData",
    "InvalidData",
    "EncodeError",
    "CannotEncode",
    # Sizing
    "size_7bit_i32",
    "size_7bit_i64",
    "utf8_string_size",
    "utf16_string_size",
    # Diagnostics
    "hex_dump",
    # Version
    "__version__",
]
