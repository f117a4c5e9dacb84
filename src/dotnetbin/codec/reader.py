"""Binary reader for .NET BinaryWriter-encoded buffers.

This module provides BinaryReader, which decodes values from an in-memory
byte buffer without copying variable-length data.
"""

from __future__ import annotations

import logging
import struct
import sys
from array import array
from typing import Union

from ..config import DEFAULT_LIMITS, CodecLimits
from ..exceptions import InvalidData, NeedsMoreData
from .varint import MASK, MORE, to_signed

log = logging.getLogger(__name__)

ReadableBuffer = Union[bytes, bytearray, memoryview]

_I8 = struct.Struct("<b")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


class BinaryReader:
    """Reads values from a byte buffer using .NET BinaryWriter encoding rules.

    Fixed-size values are little-endian. Variable-length integers and
    length-prefixed strings use the 7-bit encoding described on each method.

    The reader holds a memoryview of the caller's buffer in ``data``; every
    successful read replaces it with the remaining bytes. Methods that return
    a memoryview do not copy: the view is only meaningful while the original
    buffer is, and a bytearray cannot be resized while any view into it
    exists. Call ``bytes()`` on a result to keep an independent copy.

    Only in-memory buffers are supported. To decode from an incremental
    source, keep the buffer (or its length) from before a read. If the read
    raises NeedsMoreData, the cursor may already have moved, so append the
    new bytes to the saved buffer, build a fresh reader over it and repeat
    the reads. Reading the whole input into memory first is usually simpler.

    Example:
        >>> reader = BinaryReader(b"\\x2a\\x06Hello!")
        >>> reader.read_u8()
        42
        >>> reader.read_utf8_str()
        'Hello!'
        >>> reader.is_empty()
        True
    """

    __slots__ = ("data", "limits")

    def __init__(self, data: ReadableBuffer, limits: CodecLimits | None = None) -> None:
        """Initialize a reader over the given buffer.

        Args:
            data: Buffer to decode; any object supporting the buffer protocol
            limits: Limits for length-prefixed strings (DEFAULT_LIMITS if None)
        """
        view = memoryview(data)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self.data = view
        self.limits = limits if limits is not None else DEFAULT_LIMITS

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        """Return True if every byte has been consumed."""
        return not self.data

    # ------------------------------------------------------------------ #
    # Raw bytes
    # ------------------------------------------------------------------ #
    def read_bytes(self, length: int) -> memoryview:
        """Read exactly ``length`` bytes and return a view of them (no copy).

        Raises:
            ValueError: If length is negative
            NeedsMoreData: If fewer than length bytes remain
        """
        if length < 0:
            raise ValueError(f"read_bytes requires non-negative length, got {length}")
        data = self.data
        if len(data) < length:
            raise NeedsMoreData(length, len(data))
        self.data = data[length:]
        return data[:length]

    def read_cbytes(self, length: int) -> bytes:
        """Read a small fixed-size array of bytes and return a copy."""
        return bytes(self.read_bytes(length))

    def _unpack(self, fmt: struct.Struct):
        data = self.data
        if len(data) < fmt.size:
            raise NeedsMoreData(fmt.size, len(data))
        (value,) = fmt.unpack_from(data)
        self.data = data[fmt.size :]
        return value

    # ------------------------------------------------------------------ #
    # Fixed-size values
    # ------------------------------------------------------------------ #
    def read_u8(self) -> int:
        """Read a single unsigned byte."""
        data = self.data
        if not data:
            raise NeedsMoreData(1, 0)
        value = data[0]
        self.data = data[1:]
        return value

    def read_i8(self) -> int:
        """Read a signed byte."""
        return self._unpack(_I8)

    def read_u16(self) -> int:
        """Read an unsigned 16-bit integer, little-endian."""
        return self._unpack(_U16)

    def read_i16(self) -> int:
        """Read a signed 16-bit integer, little-endian."""
        return self._unpack(_I16)

    def read_u32(self) -> int:
        """Read an unsigned 32-bit integer, little-endian."""
        return self._unpack(_U32)

    def read_i32(self) -> int:
        """Read a signed 32-bit integer, little-endian."""
        return self._unpack(_I32)

    def read_u64(self) -> int:
        """Read an unsigned 64-bit integer, little-endian."""
        return self._unpack(_U64)

    def read_i64(self) -> int:
        """Read a signed 64-bit integer, little-endian."""
        return self._unpack(_I64)

    def read_bool(self) -> bool:
        """Read a boolean byte. Any nonzero value is True, as in .NET."""
        return self.read_u8() != 0

    def read_f32(self) -> float:
        """Read a 4-byte little-endian IEEE-754 float."""
        return self._unpack(_F32)

    def read_f64(self) -> float:
        """Read an 8-byte little-endian IEEE-754 float."""
        return self._unpack(_F64)

    # ------------------------------------------------------------------ #
    # Variable-length integers
    # ------------------------------------------------------------------ #
    def _read_7bit(self, num_bits: int) -> int:
        # 32 is not a multiple of 7, so the last byte of a 5-byte i32 has
        # meaningless high bits. They are ignored rather than rejected, which
        # is exactly as lenient as .NET.
        shift = 0
        n = 0
        while True:
            b = self.read_u8()
            n |= (b & MASK) << shift
            if not b & MORE:
                break
            shift += 7
            if shift >= num_bits:
                log.debug("7-bit encoded int exceeds %d bits", num_bits)
                raise InvalidData(f"7-bit encoded integer does not terminate within {num_bits} bits")
        return to_signed(n, num_bits)

    def read_7bit_encoded_i32(self) -> int:
        """Read a variable-length integer in the signed 32-bit range (1 to 5 bytes).

        Raises:
            NeedsMoreData: If the input ends before the terminating byte
            InvalidData: If more than 5 bytes carry the continuation bit
        """
        return self._read_7bit(32)

    def read_7bit_encoded_i64(self) -> int:
        """Read a variable-length integer in the signed 64-bit range (1 to 10 bytes).

        Raises:
            NeedsMoreData: If the input ends before the terminating byte
            InvalidData: If more than 10 bytes carry the continuation bit
        """
        return self._read_7bit(64)

    def _read_length(self) -> int:
        length = self.read_7bit_encoded_i32()
        if length < 0:
            log.debug("negative length prefix %d", length)
            raise InvalidData(f"Negative length prefix: {length}")
        if length > self.limits.max_string_bytes:
            log.debug("length prefix %d over limit %d", length, self.limits.max_string_bytes)
            raise InvalidData(
                f"Length prefix {length} exceeds max_string_bytes ({self.limits.max_string_bytes})"
            )
        return length

    # ------------------------------------------------------------------ #
    # UTF-8 strings
    # ------------------------------------------------------------------ #
    def read_utf8_bytes(self) -> memoryview:
        """Read a length-prefixed UTF-8 string as a view of its raw bytes.

        Nothing is copied and the bytes are not validated. The encoding does
        not distinguish UTF-8 from UTF-16 strings; the caller must know which
        one was written.
        """
        return self.read_bytes(self._read_length())

    def read_utf8_str(self) -> str:
        """Read a length-prefixed UTF-8 string.

        Raises:
            NeedsMoreData: If the input ends inside the prefix or the contents
            InvalidData: If the prefix is negative or the contents are not
                well-formed UTF-8 (the cursor is already past the string)
        """
        raw = self.read_utf8_bytes()
        try:
            return str(raw, "utf-8")
        except UnicodeDecodeError as e:
            log.debug("rejected ill-formed UTF-8 string: %s", e)
            raise InvalidData(f"Invalid UTF-8 string: {e}") from e

    def read_utf8_string_lossy(self) -> str:
        """Read a length-prefixed UTF-8 string, replacing ill-formed sequences with U+FFFD."""
        return str(self.read_utf8_bytes(), "utf-8", "replace")

    # ------------------------------------------------------------------ #
    # UTF-16 strings
    # ------------------------------------------------------------------ #
    def read_utf16_wchars(self) -> memoryview | array:
        """Read a length-prefixed UTF-16 string as its 16-bit code units.

        The prefix is a byte count, not a code-unit count, and must be even.
        The code units are not checked for valid surrogate pairing. On
        little-endian hosts the result is a memoryview (format ``H``) into
        the input; on big-endian hosts it is a byte-swapped ``array('H')``.

        Raises:
            InvalidData: If the prefix is negative or odd
        """
        raw = self._read_utf16_raw()
        if sys.byteorder == "little":
            return raw.cast("H")
        units = array("H", bytes(raw))
        units.byteswap()
        return units

    def _read_utf16_raw(self) -> memoryview:
        length = self._read_length()
        raw = self.read_bytes(length)
        if length % 2:
            log.debug("odd UTF-16 byte count %d", length)
            raise InvalidData(f"UTF-16 byte count must be a multiple of 2, got {length}")
        return raw

    def read_utf16_string(self) -> str:
        """Read a length-prefixed UTF-16 string.

        Raises:
            InvalidData: If the byte count is negative or odd, or the code
                units contain unpaired surrogates
        """
        raw = self._read_utf16_raw()
        try:
            return str(raw, "utf-16-le")
        except UnicodeDecodeError as e:
            log.debug("rejected ill-formed UTF-16 string: %s", e)
            raise InvalidData(f"Invalid UTF-16 string: {e}") from e

    def read_utf16_string_lossy(self) -> str:
        """Read a length-prefixed UTF-16 string, replacing unpaired surrogates with U+FFFD.

        Raises:
            InvalidData: If the byte count is negative or odd
        """
        return str(self._read_utf16_raw(), "utf-16-le", "replace")
