"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def mixed_payload() -> bytes:
    """u8(42), u16(0x0102), "Hello, world!" and i32(-33), as .NET writes them."""
    return (
        b"\x2a"
        + b"\x02\x01"
        + b"\x0dHello, world!"
        + b"\xdf\xff\xff\xff"
    )


@pytest.fixture
def sample_text() -> str:
    """Text mixing ASCII, BMP and astral characters."""
    return "Grüße, 世界 \U0001f30a"
