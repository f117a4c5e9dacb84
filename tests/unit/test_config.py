"""Tests for codec limits."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dotnetbin import DEFAULT_LIMITS, CodecLimits
from dotnetbin.config import ENV_MAX_STRING_BYTES, I32_MAX


def test_defaults() -> None:
    """Test the default limit is the full length-prefix range."""
    assert DEFAULT_LIMITS.max_string_bytes == I32_MAX
    assert CodecLimits().max_string_bytes == 2**31 - 1


@pytest.mark.parametrize("value", [-1, 2**31])
def test_out_of_range(value: int) -> None:
    """Test limits outside the prefix range are rejected."""
    with pytest.raises(ValidationError):
        CodecLimits(max_string_bytes=value)


def test_frozen() -> None:
    """Test limits cannot be modified after construction."""
    limits = CodecLimits(max_string_bytes=10)
    with pytest.raises(ValidationError):
        limits.max_string_bytes = 20  # type: ignore[misc]


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test limits read from the environment."""
    monkeypatch.setenv(ENV_MAX_STRING_BYTES, "4096")
    assert CodecLimits.from_env().max_string_bytes == 4096


def test_from_env_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test defaults when the variable is unset."""
    monkeypatch.delenv(ENV_MAX_STRING_BYTES, raising=False)
    assert CodecLimits.from_env() == CodecLimits()


def test_from_env_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test a non-numeric value is rejected."""
    monkeypatch.setenv(ENV_MAX_STRING_BYTES, "lots")
    with pytest.raises(ValidationError):
        CodecLimits.from_env()
