"""7-bit variable-length integer encoding.

Each byte carries 7 value bits, least significant group first, and uses its
high bit to signal that more bytes follow. Signed values are encoded through
their two's-complement bit pattern, so small negative numbers always take the
maximum number of bytes.

Example:
    >>> encode_7bit_i32(300).hex()
    'ac02'
    >>> encode_7bit_i32(-1).hex()
    'ffffffff0f'
"""

from __future__ import annotations

MORE = 0x80  # continuation bit
MASK = 0x7F

MAX_BYTES_I32 = 5
MAX_BYTES_I64 = 10


def to_unsigned(value: int, num_bits: int) -> int:
    """Return the two's-complement bit pattern of a signed integer.

    Args:
        value: Signed integer value
        num_bits: Width of the pattern

    Raises:
        ValueError: If value doesn't fit in num_bits as a signed integer
    """
    min_value = -(1 << (num_bits - 1))
    max_value = (1 << (num_bits - 1)) - 1
    if value < min_value or value > max_value:
        raise ValueError(
            f"Value {value} doesn't fit in {num_bits} bits (range: {min_value} to {max_value})"
        )
    return value & ((1 << num_bits) - 1)


def to_signed(unsigned_value: int, num_bits: int) -> int:
    """Reinterpret a num_bits-wide bit pattern as a signed integer."""
    unsigned_value &= (1 << num_bits) - 1
    if unsigned_value & (1 << (num_bits - 1)):
        return unsigned_value - (1 << num_bits)
    return unsigned_value


def encode_7bit_i32(value: int) -> bytes:
    """Encode a signed 32-bit integer in 1 to 5 bytes.

    The bit pattern is split into five groups of 7, 7, 7, 7 and 4 bits. Only
    trailing zero groups are dropped, so the output is the shortest prefix
    that ends at the highest nonzero group.

    Raises:
        ValueError: If value is outside the signed 32-bit range
    """
    n = to_unsigned(value, 32)
    groups = [
        n & MASK,
        (n >> 7) & MASK,
        (n >> 14) & MASK,
        (n >> 21) & MASK,
        (n >> 28) & 0x0F,  # only 4 significant bits
    ]

    count = MAX_BYTES_I32
    while count > 1 and groups[count - 1] == 0:
        count -= 1

    out = bytearray(g | MORE for g in groups[: count - 1])
    out.append(groups[count - 1])
    return bytes(out)


def encode_7bit_i64(value: int) -> bytes:
    """Encode a signed 64-bit integer in 1 to 10 bytes.

    Raises:
        ValueError: If value is outside the signed 64-bit range
    """
    n = to_unsigned(value, 64)
    out = bytearray()
    while n >= MORE:
        out.append((n & MASK) | MORE)
        n >>= 7
    out.append(n)
    return bytes(out)
