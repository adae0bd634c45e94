"""Conversion between Multikey and JWK representations.

Works for ECDSA (P-256 and P-384) and EdDSA (Ed25519). The scheme of a
Multikey is read from its preamble, the scheme of a JWK from ``kty``/``crv``;
both are dispatched through the scheme registry.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from multiformats import multibase

from .encodings import base58, base64url
from .errors import (
    FormatError,
    MissingFieldError,
    RoleError,
    SchemeMismatchError,
)
from .key_types import JWKKeyPair, KeyRole, MultikeyPair
from .registry import PREAMBLE_SIZE, classify, entry_for, scheme_for_jwk

# Multibase prefix of base58btc, i.e. "z"
MULTIBASE_HEADER = multibase.get("base58btc").code

PUBLIC_KEY_OPS = ["verify"]
PRIVATE_KEY_OPS = ["sign"]


def decode_multikey_string(text: str) -> Tuple[bytes, bytes]:
    """Split a Multikey string into preamble and raw key bytes.

    Args:
        text: Multikey string (e.g., "z6Mk...")

    Returns:
        Tuple of (preamble, raw_key_bytes)

    Raises:
        FormatError: If the header is missing, the base58 text is invalid or
            the decoded value is too short to hold a preamble
    """
    if not isinstance(text, str) or not text.startswith(MULTIBASE_HEADER):
        raise FormatError(
            f"{text!r} is not a base58btc Multikey "
            f"(first character should be {MULTIBASE_HEADER!r})"
        )

    decoded = base58.decode(text[len(MULTIBASE_HEADER):])
    if len(decoded) < PREAMBLE_SIZE:
        raise FormatError(f"{text!r} is too short to contain a Multikey preamble")

    return decoded[:PREAMBLE_SIZE], decoded[PREAMBLE_SIZE:]


def encode_multikey_string(preamble: bytes, raw: bytes) -> str:
    """Prefix raw key bytes with a preamble and encode as a Multikey string."""
    return MULTIBASE_HEADER + base58.encode(bytes(preamble) + bytes(raw))


def multikey_to_jwk(keys: MultikeyPair) -> JWKKeyPair:
    """Convert a Multikey pair to a JWK pair.

    The public key's preamble selects the scheme; the secret key, if present,
    must carry the private preamble of the same scheme. Its raw bytes become
    ``d`` unchanged. An empty secret string is malformed, not absent.

    Raises:
        FormatError: If a Multikey string is malformed
        UnknownPreambleError: If a preamble is not registered
        RoleError: If a key has the preamble of the wrong role
        SchemeMismatchError: If public and secret keys use different schemes
        CurveError: If an ECDSA public key is not a point on its curve or an
            Ed25519 public key is not 32 bytes
    """
    preamble, public_raw = decode_multikey_string(keys.public_key_multibase)
    scheme, role = classify(preamble)
    if role is not KeyRole.PUBLIC:
        raise RoleError(
            f"{keys.public_key_multibase!r} has the wrong preamble "
            f"(should refer to a public key)"
        )

    secret_raw: Optional[bytes] = None
    if keys.secret_key_multibase is not None:
        preamble, secret_raw = decode_multikey_string(keys.secret_key_multibase)
        secret_scheme, secret_role = classify(preamble)
        if secret_scheme is not scheme:
            raise SchemeMismatchError(
                f"Public key is {scheme.value} but secret key is "
                f"{secret_scheme.value}"
            )
        if secret_role is not KeyRole.PRIVATE:
            raise RoleError(
                f"{keys.secret_key_multibase!r} has the wrong preamble "
                f"(should refer to a secret key)"
            )

    entry = entry_for(scheme)
    x, y = entry.decompress(scheme, public_raw)

    public_jwk: Dict[str, Any] = {"kty": entry.kty, "crv": entry.crv}
    public_jwk["x"] = base64url.encode(x)
    if y is not None:
        public_jwk["y"] = base64url.encode(y)

    private_jwk: Optional[Dict[str, Any]] = None
    if secret_raw is not None:
        private_jwk = dict(public_jwk)
        private_jwk["d"] = base64url.encode(secret_raw)
        private_jwk["key_ops"] = list(PRIVATE_KEY_OPS)
        private_jwk["ext"] = True

    public_jwk["key_ops"] = list(PUBLIC_KEY_OPS)
    public_jwk["ext"] = True

    return JWKKeyPair(public=public_jwk, private=private_jwk)


def _decode_field(jwk: Mapping[str, Any], field: str, label: str) -> bytes:
    value = jwk.get(field)
    if value is None:
        raise MissingFieldError(f"{field} value is missing from the {label}")
    return base64url.decode(value)


def jwk_to_multikey(keys: JWKKeyPair) -> MultikeyPair:
    """Convert a JWK pair to a Multikey pair.

    Only the checks needed for a correct encoding are made: the private JWK
    must name the same curve, but it is not verified that its ``d`` matches
    the public point.

    Raises:
        UnknownCurveError: If a kty/crv combination is not supported
        SchemeMismatchError: If public and private keys name different curves
        MissingFieldError: If ``x``, ``y`` (ECDSA) or ``d`` is absent
        FormatError: If a field is not valid base64url
        CurveError: If an ECDSA public point is not on its curve or an
            Ed25519 ``x`` is not 32 bytes
    """
    scheme = scheme_for_jwk(keys.public)
    if keys.private is not None:
        private_scheme = scheme_for_jwk(keys.private)
        if private_scheme is not scheme:
            raise SchemeMismatchError(
                f"Public key is {scheme.value} but private key is "
                f"{private_scheme.value}"
            )

    x = _decode_field(keys.public, "x", "public key")
    y = _decode_field(keys.public, "y", "ECDSA public key") if scheme.is_ecdsa else None
    d = (
        _decode_field(keys.private, "d", "private key")
        if keys.private is not None
        else None
    )

    entry = entry_for(scheme)
    compressed = entry.compress(scheme, x, y)

    return MultikeyPair(
        public_key_multibase=encode_multikey_string(entry.public_preamble, compressed),
        secret_key_multibase=(
            encode_multikey_string(entry.private_preamble, d) if d is not None else None
        ),
    )


def public_multikey_to_jwk(key: str) -> Dict[str, Any]:
    """Convert a single public Multikey string to a public JWK."""
    return multikey_to_jwk(MultikeyPair(public_key_multibase=key)).public


def public_jwk_to_multikey(key: Mapping[str, Any]) -> str:
    """Convert a single public JWK to a public Multikey string."""
    return jwk_to_multikey(JWKKeyPair(public=dict(key))).public_key_multibase
