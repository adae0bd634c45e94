"""EC point (de)compression for the NIST curves P-256 and P-384.

Multikey stores an ECDSA public key as a SEC1 compressed point: one prefix
byte (0x02 for an even y, 0x03 for an odd y) followed by the big-endian x
coordinate. JWK carries both coordinates, so going from Multikey to JWK means
solving y^2 = x^3 - 3x + b (mod p) for y. The modular square root and the
on-curve checks are left to the ``cryptography`` package.
"""

from typing import Dict, Tuple

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .errors import CurveError
from .key_types import Scheme

COMPRESSED_EVEN = 0x02
COMPRESSED_ODD = 0x03

CURVES: Dict[Scheme, ec.EllipticCurve] = {
    Scheme.ECDSA_P256: ec.SECP256R1(),
    Scheme.ECDSA_P384: ec.SECP384R1(),
}


def _curve_for(scheme: Scheme) -> Tuple[ec.EllipticCurve, int]:
    try:
        curve = CURVES[scheme]
    except KeyError:
        raise CurveError(f"{scheme} does not use EC point compression") from None
    return curve, (curve.key_size + 7) // 8


def coordinate_size(scheme: Scheme) -> int:
    """Number of bytes in one coordinate of the scheme's curve."""
    return _curve_for(scheme)[1]


def compress(scheme: Scheme, x: bytes, y: bytes) -> bytes:
    """Compress an (x, y) point into prefix byte plus x.

    Args:
        scheme: ECDSA_P256 or ECDSA_P384
        x: Big-endian x coordinate
        y: Big-endian y coordinate

    Returns:
        1 + N bytes, N being the coordinate size of the curve

    Raises:
        CurveError: If a coordinate has the wrong size or the point is not
            on the curve
    """
    curve, size = _curve_for(scheme)
    if len(x) != size or len(y) != size:
        raise CurveError(
            f"{curve.name} coordinates must be {size} bytes "
            f"(got x={len(x)}, y={len(y)})"
        )

    numbers = ec.EllipticCurvePublicNumbers(
        int.from_bytes(x, "big"), int.from_bytes(y, "big"), curve
    )
    try:
        public_key = numbers.public_key()
    except ValueError as e:
        raise CurveError(f"Point is not on {curve.name}: {e}") from e

    return public_key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


def decompress(scheme: Scheme, compressed: bytes) -> Tuple[bytes, bytes]:
    """Recover (x, y) from a compressed point.

    Raises:
        CurveError: If the value is not a compressed point on the curve
    """
    curve, size = _curve_for(scheme)
    if len(compressed) != size + 1:
        raise CurveError(
            f"Compressed {curve.name} point must be {size + 1} bytes, "
            f"got {len(compressed)}"
        )
    if compressed[0] not in (COMPRESSED_EVEN, COMPRESSED_ODD):
        raise CurveError(
            f"Invalid compressed point prefix 0x{compressed[0]:02x} "
            f"(expected 0x02 or 0x03)"
        )

    try:
        public_key = ec.EllipticCurvePublicKey.from_encoded_point(
            curve, bytes(compressed)
        )
    except ValueError as e:
        raise CurveError(f"Not a valid {curve.name} point: {e}") from e

    numbers = public_key.public_numbers()
    return numbers.x.to_bytes(size, "big"), numbers.y.to_bytes(size, "big")
