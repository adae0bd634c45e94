"""Tests for EC point compression."""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from .. import ecdsa
from ..errors import CurveError
from ..key_types import Scheme

# Base points of the NIST curves
P256_GX = bytes.fromhex("6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296")
P256_GY = bytes.fromhex("4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5")
P384_GX = bytes.fromhex(
    "aa87ca22be8b05378eb1c71ef320ad746e1d3b628ba79b98"
    "59f741e082542a385502f25dbf55296c3a545e3872760ab7"
)
P384_GY = bytes.fromhex(
    "3617de4a96262c6f5d9e98bf9292dc29f8f41dbd289a147c"
    "e9da3113b5f0b8c00a60b1ce1d7e819d7a431d7c90ea0e5f"
)


def _random_point(scheme):
    curve = ecdsa.CURVES[scheme]
    size = ecdsa.coordinate_size(scheme)
    numbers = ec.generate_private_key(curve).public_key().public_numbers()
    return numbers.x.to_bytes(size, "big"), numbers.y.to_bytes(size, "big")


class TestCompress:
    """Test point compression."""

    def test_p256_base_point(self):
        """Test that the P-256 base point compresses to 33 bytes."""
        compressed = ecdsa.compress(Scheme.ECDSA_P256, P256_GX, P256_GY)
        assert len(compressed) == 33
        # Gy is odd
        assert compressed[0] == 0x03
        assert compressed[1:] == P256_GX

    def test_p384_base_point(self):
        """Test that the P-384 base point compresses to 49 bytes."""
        compressed = ecdsa.compress(Scheme.ECDSA_P384, P384_GX, P384_GY)
        assert len(compressed) == 49
        assert compressed[0] == 0x03
        assert compressed[1:] == P384_GX

    def test_parity_byte_follows_y(self):
        """Test that the prefix byte is 0x02 for even y and 0x03 for odd y."""
        for _ in range(8):
            x, y = _random_point(Scheme.ECDSA_P256)
            compressed = ecdsa.compress(Scheme.ECDSA_P256, x, y)
            expected = 0x03 if y[-1] & 1 else 0x02
            assert compressed[0] == expected

    def test_off_curve_point_rejected(self):
        """Test that a point not on the curve raises CurveError."""
        bad_y = (int.from_bytes(P256_GY, "big") + 1).to_bytes(32, "big")
        with pytest.raises(CurveError):
            ecdsa.compress(Scheme.ECDSA_P256, P256_GX, bad_y)

    def test_wrong_coordinate_size_rejected(self):
        """Test that P-256 coordinates used for P-384 raise CurveError."""
        with pytest.raises(CurveError):
            ecdsa.compress(Scheme.ECDSA_P384, P256_GX, P256_GY)

    def test_eddsa_not_supported(self):
        """Test that EdDSA has no EC compression."""
        with pytest.raises(CurveError):
            ecdsa.compress(Scheme.EDDSA, b"\x00" * 32, b"\x00" * 32)


class TestDecompress:
    """Test point decompression."""

    def test_base_points(self):
        """Test that decompression recovers the base points."""
        assert ecdsa.decompress(Scheme.ECDSA_P256, b"\x03" + P256_GX) == (P256_GX, P256_GY)
        assert ecdsa.decompress(Scheme.ECDSA_P384, b"\x03" + P384_GX) == (P384_GX, P384_GY)

    def test_other_root(self):
        """Test that the opposite parity byte selects p - y."""
        x, y = ecdsa.decompress(Scheme.ECDSA_P256, b"\x02" + P256_GX)
        p = 2**256 - 2**224 + 2**192 + 2**96 - 1
        assert x == P256_GX
        assert int.from_bytes(y, "big") == p - int.from_bytes(P256_GY, "big")

    @pytest.mark.parametrize("scheme", [Scheme.ECDSA_P256, Scheme.ECDSA_P384])
    def test_compression_round_trip(self, scheme):
        """Test decompress(compress(x, y)) == (x, y) for random points."""
        for _ in range(10):
            x, y = _random_point(scheme)
            assert ecdsa.decompress(scheme, ecdsa.compress(scheme, x, y)) == (x, y)

    def test_x_outside_field_rejected(self):
        """Test that an x coordinate larger than the field prime is rejected."""
        with pytest.raises(CurveError):
            ecdsa.decompress(Scheme.ECDSA_P256, b"\x02" + b"\xff" * 32)

    def test_invalid_prefix_rejected(self):
        """Test that prefixes other than 0x02/0x03 are rejected."""
        with pytest.raises(CurveError):
            ecdsa.decompress(Scheme.ECDSA_P256, b"\x04" + P256_GX)

    def test_wrong_length_rejected(self):
        """Test that uncompressed or truncated points are rejected."""
        with pytest.raises(CurveError):
            ecdsa.decompress(Scheme.ECDSA_P256, b"\x04" + P256_GX + P256_GY)
        with pytest.raises(CurveError):
            ecdsa.decompress(Scheme.ECDSA_P384, b"\x03" + P256_GX)
        with pytest.raises(CurveError):
            ecdsa.decompress(Scheme.ECDSA_P256, b"")
