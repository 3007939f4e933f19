# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Uintvar - variable-length unsigned integer codec.

Each encoded byte holds 7 bits of the value plus a continuation bit,
most-significant group first. The size of one encoded value can be capped
with a byte bound.

Example usage:
    from uintvar import encode, decode, encode32, BadArgument

    data = encode(0x4000)           # b"\\x81\\x80\\x00"
    value, rest = decode(data + b"tail")
    print(value, rest)              # 16384 b"tail"

    try:
        encode32(0xFFFFFFFFFF)
    except BadArgument as e:
        print(f"Too large: {e}")
"""

from .bound import (
    Bound,
    Limit,
    Unbounded,
    UNBOUNDED,
    UINTVAR32_MAX_SIZE,
    coerce_bound,
)
from .codec import (
    encode,
    encode32,
    decode,
    decode32,
    decode_all,
    encoded_size,
)
from .errors import UintvarError, BadArgument

__version__ = "0.1.0"

__all__ = [
    # Bounds
    "Bound",
    "Limit",
    "Unbounded",
    "UNBOUNDED",
    "UINTVAR32_MAX_SIZE",
    "coerce_bound",
    # Codec
    "encode",
    "encode32",
    "decode",
    "decode32",
    "decode_all",
    "encoded_size",
    # Errors
    "UintvarError",
    "BadArgument",
]
