# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Uintvar encoding/decoding.

Each byte carries 7 data bits and a continuation bit (0x80). Groups are
written most-significant first; the last byte has the continuation bit
clear. The number of bytes per value can be capped with a bound.
"""

from typing import List, Tuple, Union

from .bound import (
    Bound,
    BoundLike,
    UNBOUNDED,
    UINTVAR32_MAX_SIZE,
    coerce_bound,
)
from .errors import BadArgument

CONTINUATION_BIT = 0x80
GROUP_MASK = 0x7F
GROUP_BITS = 7

Octets = Union[bytes, bytearray, memoryview]


def encode(value: int, max_size: BoundLike = UNBOUNDED) -> bytes:
    """
    Encode a non-negative integer as a uintvar.

    Args:
        value: Non-negative integer to encode
        max_size: Maximum number of bytes (positive int, Limit,
            UNBOUNDED or None)

    Returns:
        Uintvar-encoded bytes, most-significant group first

    Raises:
        BadArgument: If value is negative, the bound is not positive,
            or the encoding needs more than max_size bytes
    """
    _check_value(value)
    limit = coerce_bound(max_size)
    bound = limit

    # Groups are collected least-significant first and reversed at the end
    groups = bytearray()
    remaining = value
    continuation = 0
    while remaining or not groups:
        if bound.is_spent():
            raise BadArgument(
                f"Uintvar encode: {value} needs more than {limit.remaining} bytes"
            )
        groups.append((remaining & GROUP_MASK) | continuation)
        continuation = CONTINUATION_BIT
        remaining >>= GROUP_BITS
        bound = bound.decrement()

    groups.reverse()
    return bytes(groups)


def encode32(value: int) -> bytes:
    """Encode a 32-bit unsigned value (at most 5 bytes)."""
    return encode(value, UINTVAR32_MAX_SIZE)


def decode(data: Octets, max_size: BoundLike = UNBOUNDED) -> Tuple[int, bytes]:
    """
    Decode one uintvar from the start of data.

    Args:
        data: Bytes starting with a uintvar
        max_size: Maximum number of bytes the uintvar may occupy

    Returns:
        Tuple of (decoded value, bytes following the uintvar)

    Raises:
        BadArgument: If data ends before the terminating byte, or the
            terminating byte is not within max_size bytes
    """
    data = _check_octets(data)
    value, offset = _decode_at(data, 0, coerce_bound(max_size))
    return value, bytes(data[offset:])


def decode32(data: Octets) -> Tuple[int, bytes]:
    """Decode a uintvar of at most 5 bytes."""
    return decode(data, UINTVAR32_MAX_SIZE)


def decode_all(data: Octets, max_size: BoundLike = UNBOUNDED) -> List[int]:
    """
    Decode a buffer made only of back-to-back uintvars.

    Args:
        data: Concatenated uintvars
        max_size: Maximum number of bytes for each uintvar

    Returns:
        Decoded values in order (empty for empty data)

    Raises:
        BadArgument: If any uintvar is truncated or exceeds max_size
    """
    data = _check_octets(data)
    bound = coerce_bound(max_size)

    values = []
    offset = 0
    while offset < len(data):
        value, offset = _decode_at(data, offset, bound)
        values.append(value)
    return values


def encoded_size(value: int) -> int:
    """Return the number of bytes encode() produces for value."""
    _check_value(value)
    return max(1, -(-value.bit_length() // GROUP_BITS))


def _decode_at(data: Octets, offset: int, bound: Bound) -> Tuple[int, int]:
    """Decode a uintvar at offset, returning (value, offset after it)."""
    value = 0
    budget = bound

    for index in range(offset, len(data)):
        if budget.is_spent():
            raise BadArgument(
                f"Uintvar decode: value exceeds {bound.remaining} bytes"
            )
        byte = data[index]
        value = (value << GROUP_BITS) | (byte & GROUP_MASK)
        if not (byte & CONTINUATION_BIT):
            return value, index + 1
        budget = budget.decrement()

    raise BadArgument("Uintvar decode: truncated, unexpected end of data")


def _check_value(value: int):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise BadArgument("Cannot encode negative value as uintvar")


def _check_octets(data: Octets) -> Octets:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    if isinstance(data, memoryview) and (data.format != "B" or data.ndim != 1):
        if data.itemsize != 1:
            raise TypeError(f"Expected a byte view, got format {data.format!r}")
        data = data.cast("B")
    return data
