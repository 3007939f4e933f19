# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the uintvar codec."""


class UintvarError(Exception):
    """Base exception for uintvar errors."""
    pass


class BadArgument(UintvarError, ValueError):
    """Value or octets cannot be encoded/decoded within the given bound."""
    pass
