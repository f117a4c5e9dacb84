"""Main CLI entry point for dotnetbin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec import BinaryReader, encode_7bit_i32, encode_7bit_i64
from ..exceptions import DotnetBinError
from ..utils import hex_dump, size_7bit_i32, size_7bit_i64

log = logging.getLogger("dotnetbin")


def _encode_int(text: str, wide: bool) -> None:
    value = int(text, 0)
    if wide:
        encoded, size = encode_7bit_i64(value), size_7bit_i64(value)
    else:
        encoded, size = encode_7bit_i32(value), size_7bit_i32(value)
    log.debug("encoded %d in %d bytes", value, size)
    print(encoded.hex(" "))


def _decode_int(text: str, wide: bool) -> None:
    reader = BinaryReader(bytes.fromhex(text))
    value = reader.read_7bit_encoded_i64() if wide else reader.read_7bit_encoded_i32()
    if not reader.is_empty():
        log.warning("%d trailing bytes ignored", len(reader))
    print(value)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dotnetbin CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="dotnetbin",
        description="dotnetbin: .NET BinaryWriter-compatible binary codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dotnetbin --encode-int 300           Show the 7-bit encoding of 300
  dotnetbin --encode-int -1 --wide     Same, using the 64-bit range
  dotnetbin --decode-int "ac 02"       Decode a 7-bit encoded integer
  dotnetbin --dump message.bin         Hex dump a file
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--encode-int",
        metavar="VALUE",
        type=str,
        help="Encode an integer with the 7-bit variable-length encoding",
    )
    group.add_argument(
        "--decode-int",
        metavar="HEX",
        type=str,
        help="Decode a 7-bit variable-length integer from hex bytes",
    )
    group.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Print a hex dump of a file",
    )

    parser.add_argument(
        "--wide",
        action="store_true",
        help="Use the 64-bit range for --encode-int/--decode-int (default: 32-bit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"dotnetbin {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.encode_int is not None:
            _encode_int(args.encode_int, args.wide)
            return 0

        if args.decode_int is not None:
            _decode_int(args.decode_int, args.wide)
            return 0

        if args.dump:
            file_path = Path(args.dump)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            print(hex_dump(file_path.read_bytes()))
            return 0
    except (DotnetBinError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
