"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ts48 import Timestamp


@pytest.fixture
def sample_timestamp() -> Timestamp:
    """Canonical fixture value: 2019-06-16T19:11:22.333Z."""
    return Timestamp(year=2019, month=6, day=16, hour=19, minute=11, second=22, millisecond=333)


@pytest.fixture
def sample_bytes() -> bytes:
    """Encoded form of the canonical fixture value."""
    return bytes([0x7E, 0x36, 0x84, 0xCB, 0x59, 0x4D])


@pytest.fixture
def sample_token() -> str:
    """Text token for the canonical fixture value."""
    return "fjaEy1lN"


@pytest.fixture
def max_timestamp() -> Timestamp:
    """Largest timestamp the encoder accepts."""
    return Timestamp(year=4095, month=12, day=31, hour=23, minute=59, second=59, millisecond=999)
