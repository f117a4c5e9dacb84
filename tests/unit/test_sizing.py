"""Tests for encoded size utilities."""

from __future__ import annotations

import pytest

from dotnetbin import (
    BinaryWriter,
    size_7bit_i32,
    size_7bit_i64,
    utf8_string_size,
    utf16_string_size,
)


class TestVarintSizes:
    """Test variable-length integer sizes."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 1), (127, 1), (128, 2), (16383, 2), (16384, 3), (2**31 - 1, 5), (-1, 5)],
    )
    def test_i32(self, value: int, expected: int) -> None:
        """Test 32-bit sizes."""
        assert size_7bit_i32(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 1), (127, 1), (128, 2), (2**63 - 1, 9), (-1, 10), (-(2**63), 10)],
    )
    def test_i64(self, value: int, expected: int) -> None:
        """Test 64-bit sizes."""
        assert size_7bit_i64(value) == expected

    def test_out_of_range(self) -> None:
        """Test the range is checked like the encoder does."""
        with pytest.raises(ValueError):
            size_7bit_i32(2**31)


class TestStringSizes:
    """Test string sizes match what the writer produces."""

    @pytest.mark.parametrize("text", ["", "Hello!", "Grüße", "x" * 300, "\U0001f30a"])
    def test_utf8(self, text: str) -> None:
        """Test UTF-8 string sizes."""
        writer = BinaryWriter()
        writer.write_utf8_str(text)
        assert utf8_string_size(text) == len(writer.getvalue())

    @pytest.mark.parametrize("text", ["", "Hello!", "Grüße", "x" * 300, "\U0001f30a"])
    def test_utf16(self, text: str) -> None:
        """Test UTF-16 string sizes."""
        writer = BinaryWriter()
        writer.write_utf16_encode(text)
        assert utf16_string_size(text) == len(writer.getvalue())
