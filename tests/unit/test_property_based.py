"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from dotnetbin import (
    BinaryReader,
    BinaryWriter,
    DecodeError,
    NeedsMoreData,
    encode_7bit_i32,
    encode_7bit_i64,
    size_7bit_i32,
    size_7bit_i64,
)

i32s = st.integers(min_value=-(2**31), max_value=2**31 - 1)
i64s = st.integers(min_value=-(2**63), max_value=2**63 - 1)


def _minimal_size(unsigned_value: int) -> int:
    return max(1, -(-unsigned_value.bit_length() // 7))


class TestVarintProperties:
    """Property-based tests for the variable-length integer."""

    @given(value=i32s)
    def test_i32_roundtrip(self, value: int) -> None:
        """Test decode(encode(x)) == x for the 32-bit range."""
        reader = BinaryReader(encode_7bit_i32(value))
        assert reader.read_7bit_encoded_i32() == value
        assert reader.is_empty()

    @given(value=i64s)
    def test_i64_roundtrip(self, value: int) -> None:
        """Test decode(encode(x)) == x for the 64-bit range."""
        reader = BinaryReader(encode_7bit_i64(value))
        assert reader.read_7bit_encoded_i64() == value
        assert reader.is_empty()

    @given(value=i32s)
    def test_i32_minimal(self, value: int) -> None:
        """Test the encoding uses the fewest bytes for the bit pattern."""
        encoded = encode_7bit_i32(value)
        assert len(encoded) == _minimal_size(value & 0xFFFFFFFF)
        assert len(encoded) == size_7bit_i32(value)

    @given(value=i64s)
    def test_i64_minimal(self, value: int) -> None:
        """Test the encoding uses the fewest bytes for the bit pattern."""
        encoded = encode_7bit_i64(value)
        assert len(encoded) == _minimal_size(value & 0xFFFFFFFFFFFFFFFF)
        assert len(encoded) == size_7bit_i64(value)

    @given(value=i64s)
    def test_only_last_byte_terminates(self, value: int) -> None:
        """Test the continuation bit is set on every byte but the last."""
        encoded = encode_7bit_i64(value)
        assert all(b & 0x80 for b in encoded[:-1])
        assert not encoded[-1] & 0x80

    @given(value=i64s)
    def test_prefix_needs_more_data(self, value: int) -> None:
        """Test every truncation of an encoding raises NeedsMoreData."""
        encoded = encode_7bit_i64(value)
        for cut in range(len(encoded)):
            try:
                BinaryReader(encoded[:cut]).read_7bit_encoded_i64()
            except NeedsMoreData:
                continue
            raise AssertionError(f"prefix of length {cut} decoded")

    @given(data=st.binary(max_size=16))
    def test_arbitrary_bytes_never_crash(self, data: bytes) -> None:
        """Test arbitrary input either decodes or raises DecodeError."""
        for read in ("read_7bit_encoded_i32", "read_7bit_encoded_i64"):
            try:
                value = getattr(BinaryReader(data), read)()
            except DecodeError:
                continue
            assert isinstance(value, int)


class TestStringProperties:
    """Property-based tests for length-prefixed strings."""

    @given(text=st.text())
    def test_utf8_roundtrip(self, text: str) -> None:
        """Test UTF-8 writer/reader round-trip."""
        writer = BinaryWriter()
        writer.write_utf8_str(text)
        reader = BinaryReader(writer.getvalue())
        assert reader.read_utf8_str() == text
        assert reader.is_empty()

    @given(text=st.text())
    def test_utf16_roundtrip(self, text: str) -> None:
        """Test UTF-16 writer/reader round-trip."""
        writer = BinaryWriter()
        writer.write_utf16_encode(text)
        reader = BinaryReader(writer.getvalue())
        assert reader.read_utf16_string() == text
        assert reader.is_empty()

    @given(payload=st.binary(max_size=300))
    def test_utf8_bytes_roundtrip(self, payload: bytes) -> None:
        """Test raw bytes survive unvalidated."""
        writer = BinaryWriter()
        writer.write_utf8_bytes(payload)
        assert bytes(BinaryReader(writer.getvalue()).read_utf8_bytes()) == payload

    @given(data=st.binary(max_size=64))
    def test_lossy_reads_never_crash(self, data: bytes) -> None:
        """Test lossy reads either succeed or raise DecodeError."""
        for read in ("read_utf8_string_lossy", "read_utf16_string_lossy"):
            try:
                value = getattr(BinaryReader(data), read)()
            except DecodeError:
                continue
            assert isinstance(value, str)
