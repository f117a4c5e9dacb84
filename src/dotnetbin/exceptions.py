"""Exception hierarchy for dotnetbin.

All exceptions inherit from DotnetBinError for easy catching of any
dotnetbin-specific error. Decoding and encoding have independent taxonomies.
"""

from __future__ import annotations


class DotnetBinError(Exception):
    """Base exception for all dotnetbin errors."""

    pass


class DecodeError(DotnetBinError):
    """Raised when a value cannot be read from the input.

    Never raised directly; catch it to handle both NeedsMoreData and
    InvalidData.
    """

    pass


class NeedsMoreData(DecodeError):
    """Raised when the input ends before the current read is complete.

    The encoded value may still be well-formed once more bytes arrive. The
    reader's cursor is not guaranteed to be unchanged after this error, so
    callers decoding incrementally must restart from a saved buffer.

    Attributes:
        needed: Number of bytes the failing read required
        available: Number of bytes that were left in the input
    """

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Need {needed} bytes, only {available} available")
        self.needed = needed
        self.available = available


class InvalidData(DecodeError):
    """Raised when the input is long enough but malformed.

    Examples:
        - Variable-length integer with too many continuation bytes
        - Negative string length prefix
        - UTF-16 byte count that is not a multiple of 2
        - Ill-formed UTF-8 or UTF-16 in a strict string read
    """

    pass


class EncodeError(DotnetBinError):
    """Raised when a value cannot be written."""

    pass


class CannotEncode(EncodeError):
    """Raised when a string or byte sequence is too long for its length prefix.

    Also raised for Python strings that have no UTF-8/UTF-16 encoding
    (unpaired surrogates).
    """

    pass
