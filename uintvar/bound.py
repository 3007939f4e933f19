# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte-count bounds for uintvar encoding and decoding.

A bound is either a Limit (a positive number of bytes) or UNBOUNDED.
Encoder and decoder spend it through the same decrement rule, so a value
encodable within N bytes is exactly a value decodable within N bytes.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .errors import BadArgument

# ceil(32 / 7): enough groups for any 32-bit unsigned value
UINTVAR32_MAX_SIZE = 5


class Unbounded:
    """No limit on the number of bytes."""

    def __eq__(self, other) -> bool:
        return isinstance(other, Unbounded)

    def __hash__(self) -> int:
        return hash(Unbounded)

    def is_spent(self) -> bool:
        return False

    def decrement(self) -> "Unbounded":
        return self

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded()


@dataclass(frozen=True)
class Limit:
    """At most `remaining` more bytes may be produced or consumed."""
    remaining: int

    def is_spent(self) -> bool:
        return self.remaining <= 0

    def decrement(self) -> "Limit":
        if self.is_spent():
            raise BadArgument("Bound already spent")
        return Limit(self.remaining - 1)


# Type alias for any bound
Bound = Union[Limit, Unbounded]

BoundLike = Optional[Union[Bound, int]]


def coerce_bound(max_size: BoundLike) -> Bound:
    """
    Normalize a caller-supplied bound.

    Args:
        max_size: Positive byte count, Limit, UNBOUNDED or None (unbounded)

    Returns:
        Limit or UNBOUNDED

    Raises:
        BadArgument: If the byte count is zero or negative
        TypeError: If max_size is not a supported type
    """
    if max_size is None or isinstance(max_size, Unbounded):
        return UNBOUNDED

    limit = max_size.remaining if isinstance(max_size, Limit) else max_size
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise TypeError(f"Unsupported bound: {max_size!r}")

    if limit <= 0:
        raise BadArgument(f"Bound must be positive, got {limit}")
    return Limit(limit)
