"""Binary writer producing .NET BinaryWriter-compatible output.

This module provides BinaryWriter, which appends encoded values to any sink
that can accept bytes.
"""

from __future__ import annotations

import logging
import struct
import sys
from array import array
from typing import Any, Iterable, Protocol, Union, runtime_checkable

from ..config import DEFAULT_LIMITS, CodecLimits
from ..exceptions import CannotEncode, EncodeError
from .varint import encode_7bit_i32, encode_7bit_i64

log = logging.getLogger(__name__)

_U8 = struct.Struct("<B")
_I8 = struct.Struct("<b")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


@runtime_checkable
class ByteSink(Protocol):
    """Anything that accepts appended bytes: files, io.BytesIO, socket.makefile("wb").

    ``write`` returns the number of bytes accepted, which may be fewer than
    given (raw, unbuffered streams). The writer retries with the rest.
    """

    def write(self, data: bytes, /) -> Any: ...


Sink = Union[bytearray, ByteSink]


class BinaryWriter:
    """Encodes values using the same rules as .NET's System.IO.BinaryWriter.

    The output goes to ``out``, which is either a bytearray (appended with
    ``extend``) or any object with a ``write`` method. With no argument a new
    bytearray is used.

    Fixed-size writes never fail for values in range. Arguments outside the
    range of the written type raise ValueError and write nothing. String
    writes raise CannotEncode when the byte length does not fit the length
    prefix.

    Sinks whose ``write`` accepts only part of the data are called again
    with the remainder. A sink that accepts nothing (returns 0 or None)
    raises EncodeError.

    Example:
        >>> writer = BinaryWriter()
        >>> writer.write_u8(42)
        >>> writer.write_utf8_str("Hello!")
        >>> writer.getvalue()
        b'*\\x06Hello!'
    """

    __slots__ = ("out", "limits", "_append", "_sink_write")

    def __init__(self, out: Sink | None = None, limits: CodecLimits | None = None) -> None:
        """Initialize a writer.

        Args:
            out: Output sink (a new bytearray if None)
            limits: Limits for length-prefixed strings (DEFAULT_LIMITS if None)

        Raises:
            TypeError: If out is neither a bytearray nor has a write() method
        """
        if out is None:
            out = bytearray()
        if isinstance(out, bytearray):
            self._append = out.extend
        elif isinstance(out, ByteSink):
            self._sink_write = out.write
            self._append = self._write_all
        else:
            raise TypeError(
                f"Output sink must be a bytearray or have a write() method, got {type(out).__name__}"
            )
        self.out = out
        self.limits = limits if limits is not None else DEFAULT_LIMITS

    def into_inner(self) -> Sink:
        """Return the output sink."""
        return self.out

    def getvalue(self) -> bytes:
        """Return everything written so far, for in-memory sinks.

        Raises:
            TypeError: If the sink is not a bytearray or io.BytesIO-like object
        """
        if isinstance(self.out, bytearray):
            return bytes(self.out)
        getvalue = getattr(self.out, "getvalue", None)
        if getvalue is None:
            raise TypeError(f"{type(self.out).__name__} sink does not expose its contents")
        return bytes(getvalue())

    def _write_all(self, data: bytes | bytearray | memoryview) -> None:
        view = memoryview(data).cast("B")
        while view:
            written = self._sink_write(view)
            if not written:
                raise EncodeError(
                    f"Sink accepted no bytes with {view.nbytes} bytes still to write"
                )
            view = view[written:]

    # ------------------------------------------------------------------ #
    # Raw bytes
    # ------------------------------------------------------------------ #
    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes with no prefix."""
        self._append(data)

    def _pack(self, fmt: struct.Struct, value: Any) -> None:
        try:
            packed = fmt.pack(value)
        except (struct.error, OverflowError) as e:
            raise ValueError(f"Value {value!r} cannot be packed as '{fmt.format}': {e}") from e
        self._append(packed)

    # ------------------------------------------------------------------ #
    # Fixed-size values
    # ------------------------------------------------------------------ #
    def write_u8(self, value: int) -> None:
        """Write an unsigned byte."""
        self._pack(_U8, value)

    def write_i8(self, value: int) -> None:
        """Write a signed byte (two's complement)."""
        self._pack(_I8, value)

    def write_u16(self, value: int) -> None:
        """Write an unsigned 16-bit integer, little-endian."""
        self._pack(_U16, value)

    def write_i16(self, value: int) -> None:
        """Write a signed 16-bit integer, little-endian."""
        self._pack(_I16, value)

    def write_u32(self, value: int) -> None:
        """Write an unsigned 32-bit integer, little-endian."""
        self._pack(_U32, value)

    def write_i32(self, value: int) -> None:
        """Write a signed 32-bit integer, little-endian."""
        self._pack(_I32, value)

    def write_u64(self, value: int) -> None:
        """Write an unsigned 64-bit integer, little-endian."""
        self._pack(_U64, value)

    def write_i64(self, value: int) -> None:
        """Write a signed 64-bit integer, little-endian."""
        self._pack(_I64, value)

    def write_bool(self, value: bool) -> None:
        """Write a boolean. True is encoded as 1, False as 0."""
        self._append(b"\x01" if value else b"\x00")

    def write_f32(self, value: float) -> None:
        """Write a float as its 4-byte little-endian IEEE-754 representation."""
        self._pack(_F32, value)

    def write_f64(self, value: float) -> None:
        """Write a float as its 8-byte little-endian IEEE-754 representation."""
        self._pack(_F64, value)

    # ------------------------------------------------------------------ #
    # Variable-length integers
    # ------------------------------------------------------------------ #
    def write_7bit_encoded_i32(self, value: int) -> None:
        """Write a signed 32-bit integer using the 7-bit variable-length encoding.

        Negative values are valid but always take 5 bytes, so avoid this
        encoding for values that are often small and negative.

        Raises:
            ValueError: If value is outside the signed 32-bit range
        """
        self._append(encode_7bit_i32(value))

    def write_7bit_encoded_i64(self, value: int) -> None:
        """Write a signed 64-bit integer using the 7-bit variable-length encoding.

        Negative values always take 10 bytes.

        Raises:
            ValueError: If value is outside the signed 64-bit range
        """
        self._append(encode_7bit_i64(value))

    # ------------------------------------------------------------------ #
    # Length-prefixed strings
    # ------------------------------------------------------------------ #
    def _write_prefixed(self, payload: bytes | bytearray | memoryview, byte_length: int) -> None:
        if byte_length > self.limits.max_string_bytes:
            log.debug("refusing %d-byte string, limit %d", byte_length, self.limits.max_string_bytes)
            raise CannotEncode(
                f"String of {byte_length} bytes exceeds max_string_bytes "
                f"({self.limits.max_string_bytes})"
            )
        # Prefix and payload go to the sink in a single append.
        self._append(encode_7bit_i32(byte_length) + bytes(payload))

    def write_utf8_str(self, s: str) -> None:
        """Write a string as length-prefixed UTF-8.

        Raises:
            CannotEncode: If the encoded string is too long, or contains
                unpaired surrogates
        """
        try:
            encoded = s.encode("utf-8")
        except UnicodeEncodeError as e:
            raise CannotEncode(f"String has no UTF-8 encoding: {e}") from e
        self._write_prefixed(encoded, len(encoded))

    def write_utf8_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write already-encoded UTF-8 bytes in length-prefixed form.

        The bytes are not checked for well-formed UTF-8.

        Raises:
            CannotEncode: If data is too long for the length prefix
        """
        view = memoryview(data).cast("B")
        self._write_prefixed(view, view.nbytes)

    def write_utf16_wchars(self, units: Iterable[int]) -> None:
        """Write UTF-16 code units in length-prefixed form.

        The prefix is the byte count (twice the number of units). The units
        are not checked for valid surrogate pairing.

        Raises:
            ValueError: If a unit is outside 0..0xFFFF
            CannotEncode: If the byte count is too large for the prefix
        """
        try:
            encoded = array("H", units)
        except OverflowError as e:
            raise ValueError(f"UTF-16 code unit out of range: {e}") from e
        if sys.byteorder != "little":
            encoded.byteswap()
        payload = encoded.tobytes()
        self._write_prefixed(payload, len(payload))

    def write_utf16_encode(self, s: str) -> None:
        """Encode a string as UTF-16LE and write it in length-prefixed form.

        Raises:
            CannotEncode: If the encoded string is too long, or contains
                unpaired surrogates
        """
        try:
            encoded = s.encode("utf-16-le")
        except UnicodeEncodeError as e:
            raise CannotEncode(f"String has no UTF-16 encoding: {e}") from e
        self._write_prefixed(encoded, len(encoded))
