#!/usr/bin/env python3
"""Basic usage example for dotnetbin.

This example demonstrates:
1. Writing a record with BinaryWriter
2. Inspecting the bytes
3. Reading the record back with BinaryReader
4. Handling malformed input
"""

from __future__ import annotations

from dotnetbin import BinaryReader, BinaryWriter, InvalidData, hex_dump, utf8_string_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("dotnetbin Basic Usage Example")
    print("=" * 60)
    print()

    # Write a record the way a .NET BinaryWriter would
    print("1. Writing a record...")
    writer = BinaryWriter()
    writer.write_u8(42)
    writer.write_u16(0x0102)
    writer.write_utf8_str("Hello, world!")
    writer.write_i32(-33)
    writer.write_utf16_encode("Grüße")
    writer.write_7bit_encoded_i32(300)
    data = writer.getvalue()
    print(f"   {len(data)} bytes written")
    print(f"   (the UTF-8 string alone takes {utf8_string_size('Hello, world!')} bytes)")
    print()

    # Dump
    print("2. Encoded bytes:")
    for line in hex_dump(data).splitlines():
        print(f"   {line}")
    print()

    # Read it back in the same order
    print("3. Reading the record back...")
    reader = BinaryReader(data)
    print(f"   u8:     {reader.read_u8()}")
    print(f"   u16:    {reader.read_u16():#06x}")
    print(f"   utf8:   {reader.read_utf8_str()!r}")
    print(f"   i32:    {reader.read_i32()}")
    print(f"   utf16:  {reader.read_utf16_string()!r}")
    print(f"   7-bit:  {reader.read_7bit_encoded_i32()}")
    print(f"   remaining: {len(reader)} bytes")
    print()

    # Malformed input
    print("4. Reading malformed input...")
    try:
        BinaryReader(bytes([0x80] * 5)).read_7bit_encoded_i32()
    except InvalidData as e:
        print(f"   InvalidData: {e}")

    print()
    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
