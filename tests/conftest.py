# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import pytest

# (value, encoded bytes) pairs in the uintvar wire format
KNOWN_VECTORS = [
    (0x00, b"\x00"),
    (0x7F, b"\x7F"),
    (0x80, b"\x81\x00"),
    (0x2000, b"\xC0\x00"),
    (0x3FFF, b"\xFF\x7F"),
    (0x4000, b"\x81\x80\x00"),
    (0x1FFFFF, b"\xFF\xFF\x7F"),
    (0x200000, b"\x81\x80\x80\x00"),
    (0x08000000, b"\xC0\x80\x80\x00"),
    (0x0FFFFFFF, b"\xFF\xFF\xFF\x7F"),
    (0xFFFFFFFF, b"\x8F\xFF\xFF\xFF\x7F"),
]


def pytest_generate_tests(metafunc):
    """Parametrize tests that take a `vector` argument with KNOWN_VECTORS."""
    if "vector" in metafunc.fixturenames:
        metafunc.parametrize(
            "vector",
            KNOWN_VECTORS,
            ids=[f"0x{value:x}" for value, _ in KNOWN_VECTORS],
        )


@pytest.fixture
def concatenated():
    """All known encodings back to back, with their values."""
    values = [value for value, _ in KNOWN_VECTORS]
    data = b"".join(encoded for _, encoded in KNOWN_VECTORS)
    return values, data
