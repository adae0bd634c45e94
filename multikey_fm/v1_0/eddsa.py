"""Ed25519 key material needs no compression.

The functions mirror the signatures of the ECDSA codec so that both can sit
in the same dispatch table. Only the length of the key is checked.
"""

from typing import Optional, Tuple

from .errors import CurveError
from .key_types import Scheme

# Raw Ed25519 public keys (RFC 8032) are always 32 bytes
KEY_SIZE = 32


def _check_size(raw: bytes):
    if len(raw) != KEY_SIZE:
        raise CurveError(
            f"Ed25519 public key must be {KEY_SIZE} bytes, got {len(raw)}"
        )


def compress(scheme: Scheme, x: bytes, y: Optional[bytes] = None) -> bytes:
    """Return the raw public key unchanged; ``y`` is ignored.

    Raises:
        CurveError: If the key is not 32 bytes long
    """
    _check_size(x)
    return bytes(x)


def decompress(scheme: Scheme, raw: bytes) -> Tuple[bytes, Optional[bytes]]:
    """Return the raw public key as ``x``; Ed25519 has no ``y``."""
    _check_size(raw)
    return bytes(raw), None
