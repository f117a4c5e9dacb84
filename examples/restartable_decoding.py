#!/usr/bin/env python3
"""Restartable decoding example for dotnetbin.

BinaryReader only reads in-memory buffers. When bytes arrive in pieces (a
socket, a pipe), keep the unconsumed bytes in a buffer you own. Decode each
value with a fresh reader; if it raises NeedsMoreData, wait for more bytes
and try the same read again from the saved buffer. Never continue with a
reader after NeedsMoreData: it may have consumed part of the value.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from dotnetbin import BinaryReader, BinaryWriter, NeedsMoreData


def make_stream() -> bytes:
    """Build a stream of (id, name) records."""
    writer = BinaryWriter()
    for record_id, name in [(1, "alpha"), (300, "bravo"), (70000, "charlie")]:
        writer.write_7bit_encoded_i32(record_id)
        writer.write_utf8_str(name)
    return writer.getvalue()


def decode_records(chunks: Iterable[bytes]) -> Iterator[tuple[int, str]]:
    """Yield records as soon as enough bytes have arrived."""
    pending = bytearray()
    for chunk in chunks:
        pending.extend(chunk)
        while True:
            reader = BinaryReader(bytes(pending))
            try:
                record = (reader.read_7bit_encoded_i32(), reader.read_utf8_str())
            except NeedsMoreData:
                break
            del pending[: len(pending) - len(reader)]
            yield record


def main() -> None:
    """Run the restartable decoding example."""
    stream = make_stream()
    chunks = [stream[i : i + 4] for i in range(0, len(stream), 4)]
    print(f"{len(stream)} bytes arriving in {len(chunks)} chunks")

    for record_id, name in decode_records(chunks):
        print(f"  record {record_id}: {name}")


if __name__ == "__main__":
    main()
