"""Hex dump formatting for encoded buffers."""

from __future__ import annotations

from typing import Union


def hex_dump(data: Union[bytes, bytearray, memoryview], width: int = 16) -> str:
    """Format a buffer as offset, hex bytes and printable ASCII, one row per line.

    Args:
        data: Bytes to dump
        width: Bytes per row

    Returns:
        The dump, without a trailing newline (empty string for empty data)

    Raises:
        ValueError: If width is not positive

    Example:
        >>> print(hex_dump(b"*\\x06Hello!"))
        00000000  2a 06 48 65 6c 6c 6f 21                          *.Hello!
    """
    if width <= 0:
        raise ValueError(f"width must be > 0, got {width}")

    data = bytes(data)
    lines = []
    for offset in range(0, len(data), width):
        row = data[offset : offset + width]
        hex_part = " ".join(f"{b:02x}" for b in row)
        text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in row)
        lines.append(f"{offset:08x}  {hex_part:<{width * 3 - 1}}  {text}")
    return "\n".join(lines)
