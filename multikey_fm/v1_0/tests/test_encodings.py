"""Tests for the base58 and base64url codecs."""

import pytest

from ..encodings import base58, base64url
from ..errors import FormatError


class TestBase58:
    """Test the base58 (Bitcoin alphabet) codec."""

    def test_known_value(self):
        """Test encoding against a well-known vector."""
        assert base58.encode(b"hello world") == "StV1DL6CwTryKyV"
        assert base58.decode("StV1DL6CwTryKyV") == b"hello world"

    def test_leading_zero_bytes_preserved(self):
        """Test that leading zero bytes become leading '1' characters."""
        assert base58.encode(b"\x00") == "1"
        assert base58.encode(b"\x00\x00\x01") == "112"
        assert base58.decode("112") == b"\x00\x00\x01"
        assert base58.decode(base58.encode(b"\x00" * 5)) == b"\x00" * 5

    def test_empty_input(self):
        """Test the empty byte string."""
        assert base58.encode(b"") == ""
        assert base58.decode("") == b""

    def test_alphabet_excludes_ambiguous_characters(self):
        """Test that 0, O, I and l are not part of the alphabet."""
        assert len(base58.ALPHABET) == 58
        for char in "0OIl":
            assert char not in base58.ALPHABET

    @pytest.mark.parametrize("text", ["0", "O", "I", "l", "abc+", "StV1 ", " StV1", "é"])
    def test_invalid_characters_rejected(self, text):
        """Test that characters outside the alphabet raise FormatError."""
        with pytest.raises(FormatError):
            base58.decode(text)

    def test_non_text_rejected(self):
        """Test that bytes input is rejected."""
        with pytest.raises(FormatError):
            base58.decode(b"StV1DL6CwTryKyV")


class TestBase64url:
    """Test the unpadded base64url codec."""

    def test_url_safe_alphabet_without_padding(self):
        """Test that '+' and '/' are replaced and '=' is dropped."""
        assert base64url.encode(b"\xfb\xff") == "-_8"
        assert base64url.decode("-_8") == b"\xfb\xff"

    def test_round_trip_all_lengths(self):
        """Test exact round trips for lengths covering every padding case."""
        for length in range(0, 40):
            data = bytes((i * 37 + 11) % 256 for i in range(length))
            encoded = base64url.encode(data)
            assert "=" not in encoded
            assert base64url.decode(encoded) == data

    @pytest.mark.parametrize("text", ["+/8", "AA==", "ab c", "abc!", "é"])
    def test_invalid_characters_rejected(self, text):
        """Test that characters outside the URL-safe alphabet raise FormatError."""
        with pytest.raises(FormatError):
            base64url.decode(text)

    def test_impossible_length_rejected(self):
        """Test that a dangling single character is rejected."""
        with pytest.raises(FormatError):
            base64url.decode("abcde")

    def test_non_text_rejected(self):
        """Test that non-string input is rejected."""
        with pytest.raises(FormatError):
            base64url.decode(None)
