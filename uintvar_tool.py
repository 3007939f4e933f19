#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for encoding and decoding uintvars.

Usage:
    python uintvar_tool.py encode 0x4000
    python uintvar_tool.py encode 4294967295 --u32
    python uintvar_tool.py decode "81 80 00 2a"
    python uintvar_tool.py decode "81 00 7f" --all
"""

import argparse
import sys

from uintvar import (
    UINTVAR32_MAX_SIZE,
    BadArgument,
    decode,
    decode_all,
    encode,
)


def to_hex(data: bytes) -> str:
    """Format bytes as space-separated hex."""
    return " ".join(f"{byte:02x}" for byte in data)


def parse_hex(text: str) -> bytes:
    """Parse hex bytes, with or without spaces."""
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex bytes: {text!r}")


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def cmd_encode(value: int, max_size):
    """Encode a value and print its bytes."""
    data = encode(value, max_size)
    print(to_hex(data))


def cmd_decode(data: bytes, max_size, decode_many: bool):
    """Decode bytes and print the value(s)."""
    if decode_many:
        for value in decode_all(data, max_size):
            print(f"{value} (0x{value:x})")
        return

    value, rest = decode(data, max_size)
    print(f"Value: {value} (0x{value:x})")
    print(f"Rest:  {to_hex(rest) or '(empty)'}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode variable-length unsigned integers"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Shared bound options
    bound_parser = argparse.ArgumentParser(add_help=False)
    bound_group = bound_parser.add_mutually_exclusive_group()
    bound_group.add_argument("--max", "-m", type=parse_int, default=None,
                             help="Maximum number of bytes per value")
    bound_group.add_argument("--u32", action="store_true",
                             help=f"Limit to {UINTVAR32_MAX_SIZE} bytes (32-bit values)")

    # encode command
    encode_parser = subparsers.add_parser("encode", parents=[bound_parser],
                                          help="Encode an integer")
    encode_parser.add_argument("value", type=parse_int,
                               help="Non-negative integer (decimal or 0x hex)")

    # decode command
    decode_parser = subparsers.add_parser("decode", parents=[bound_parser],
                                          help="Decode hex bytes")
    decode_parser.add_argument("data", type=parse_hex,
                               help="Hex bytes, e.g. \"81 80 00\"")
    decode_parser.add_argument("--all", "-a", action="store_true",
                               help="Decode every value in the buffer")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    max_size = UINTVAR32_MAX_SIZE if args.u32 else args.max

    try:
        if args.command == "encode":
            cmd_encode(args.value, max_size)
        elif args.command == "decode":
            cmd_decode(args.data, max_size, args.all)
    except BadArgument as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
