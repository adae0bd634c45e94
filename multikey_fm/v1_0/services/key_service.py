"""Multikey conversion for ``cryptography`` key objects.

The key objects play the part of platform key handles: they are exported to
JWK and handed to the Multikey converters, or rebuilt from the JWK the
converters produce.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from .. import ecdsa
from ..config import MultikeyConfig
from ..encodings import base64url
from ..errors import (
    CurveError,
    MissingFieldError,
    SchemeNotEnabledError,
    UnknownCurveError,
)
from ..key_types import JWKKeyPair, MultikeyPair, Scheme
from ..multikey import jwk_to_multikey, multikey_to_jwk
from ..registry import entry_for, scheme_for_jwk

LOGGER = logging.getLogger(__name__)

PublicKey = Union[ec.EllipticCurvePublicKey, ed25519.Ed25519PublicKey]
PrivateKey = Union[ec.EllipticCurvePrivateKey, ed25519.Ed25519PrivateKey]


def scheme_for_key(key: Union[PublicKey, PrivateKey]) -> Scheme:
    """Determine the scheme of a ``cryptography`` key object.

    Raises:
        UnknownCurveError: For any other key class or EC curve
    """
    if isinstance(key, (ed25519.Ed25519PublicKey, ed25519.Ed25519PrivateKey)):
        return Scheme.EDDSA

    if isinstance(key, (ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey)):
        for scheme, curve in ecdsa.CURVES.items():
            if key.curve.name == curve.name:
                return scheme
        raise UnknownCurveError(f"Unsupported EC curve: {key.curve.name}")

    raise UnknownCurveError(f"Unsupported key class: {type(key).__name__}")


def _base_jwk(scheme: Scheme) -> Dict[str, Any]:
    entry = entry_for(scheme)
    return {"kty": entry.kty, "crv": entry.crv}


def public_key_to_jwk(key: PublicKey) -> Dict[str, Any]:
    """Export a public key object as a JWK."""
    scheme = scheme_for_key(key)
    jwk = _base_jwk(scheme)

    if scheme is Scheme.EDDSA:
        jwk["x"] = base64url.encode(key.public_bytes_raw())
    else:
        size = entry_for(scheme).coordinate_size
        numbers = key.public_numbers()
        jwk["x"] = base64url.encode(numbers.x.to_bytes(size, "big"))
        jwk["y"] = base64url.encode(numbers.y.to_bytes(size, "big"))

    jwk["key_ops"] = ["verify"]
    jwk["ext"] = True
    return jwk


def private_key_to_jwk(key: PrivateKey) -> Dict[str, Any]:
    """Export a private key object as a JWK, public coordinates included."""
    scheme = scheme_for_key(key)
    jwk = public_key_to_jwk(key.public_key())

    if scheme is Scheme.EDDSA:
        d = key.private_bytes_raw()
    else:
        size = entry_for(scheme).coordinate_size
        d = key.private_numbers().private_value.to_bytes(size, "big")

    jwk["d"] = base64url.encode(d)
    jwk["key_ops"] = ["sign"]
    return jwk


def _field(jwk: Dict[str, Any], name: str) -> bytes:
    value = jwk.get(name)
    if value is None:
        raise MissingFieldError(f"{name} value is missing from the JWK")
    return base64url.decode(value)


def jwk_to_public_key(jwk: Dict[str, Any]) -> PublicKey:
    """Import a public JWK as a key object.

    Raises:
        UnknownCurveError: If kty/crv is not supported
        MissingFieldError: If a coordinate is absent
        CurveError: If the key material is rejected
    """
    scheme = scheme_for_jwk(jwk)
    x = _field(jwk, "x")

    try:
        if scheme is Scheme.EDDSA:
            return ed25519.Ed25519PublicKey.from_public_bytes(x)

        curve = ecdsa.CURVES[scheme]
        y = _field(jwk, "y")
        return ec.EllipticCurvePublicNumbers(
            int.from_bytes(x, "big"), int.from_bytes(y, "big"), curve
        ).public_key()
    except ValueError as e:
        raise CurveError(f"Invalid {scheme.value} public key: {e}") from e


def jwk_to_private_key(jwk: Dict[str, Any]) -> PrivateKey:
    """Import a private JWK as a key object.

    Only ``d`` is used; the public coordinates are derived from it.
    """
    scheme = scheme_for_jwk(jwk)
    d = _field(jwk, "d")

    try:
        if scheme is Scheme.EDDSA:
            return ed25519.Ed25519PrivateKey.from_private_bytes(d)

        curve = ecdsa.CURVES[scheme]
        return ec.derive_private_key(int.from_bytes(d, "big"), curve)
    except ValueError as e:
        raise CurveError(f"Invalid {scheme.value} private key: {e}") from e


class MultikeyKeyService:
    """Converts key objects to Multikey and back."""

    def __init__(self, config: MultikeyConfig):
        """Initialize the key service.

        Args:
            config: Multikey configuration
        """
        self.config = config
        LOGGER.info(f"🔑 Multikey key service initialized ({config.get_summary()})")

    def _check_enabled(self, scheme: Scheme):
        if not self.config.is_scheme_enabled(scheme):
            raise SchemeNotEnabledError(
                f"Scheme {scheme.value} is not enabled. "
                f"Enabled: {sorted(s.value for s in self.config.enabled_schemes)}"
            )

    def _log(self, message: str):
        if self.config.verbose:
            LOGGER.debug(message)

    async def key_to_multikey(self, public_key: PublicKey) -> str:
        """Convert a public key object to a Multikey string."""
        scheme = scheme_for_key(public_key)
        self._check_enabled(scheme)

        pair = jwk_to_multikey(JWKKeyPair(public=public_key_to_jwk(public_key)))
        self._log(
            f"Converted {scheme.value} public key to Multikey "
            f"{pair.public_key_multibase[:8]}..."
        )
        return pair.public_key_multibase

    async def key_pair_to_multikey(self, private_key: PrivateKey) -> MultikeyPair:
        """Convert a private key object (and its public key) to a Multikey pair.

        The secret Multikey is left out when ``multikey.include_private`` is off.
        """
        scheme = scheme_for_key(private_key)
        self._check_enabled(scheme)

        jwk_pair = JWKKeyPair(
            public=public_key_to_jwk(private_key.public_key()),
            private=(
                private_key_to_jwk(private_key) if self.config.include_private else None
            ),
        )
        pair = jwk_to_multikey(jwk_pair)
        self._log(
            f"Converted {scheme.value} key pair to Multikey "
            f"{pair.public_key_multibase[:8]}... "
            f"(secret {'included' if pair.secret_key_multibase else 'omitted'})"
        )
        return pair

    async def multikey_to_public_key(self, key: str) -> PublicKey:
        """Convert a public Multikey string to a public key object."""
        _private_key, public_key = await self.multikey_to_key_pair(
            MultikeyPair(public_key_multibase=key)
        )
        return public_key

    async def multikey_to_key_pair(
        self, keys: MultikeyPair
    ) -> Tuple[Optional[PrivateKey], PublicKey]:
        """Convert a Multikey pair to key objects.

        Returns:
            Tuple of (private_key or None, public_key)
        """
        jwk_pair = multikey_to_jwk(keys)
        scheme = scheme_for_jwk(jwk_pair.public)
        self._check_enabled(scheme)

        public_key = jwk_to_public_key(jwk_pair.public)
        private_key = (
            jwk_to_private_key(jwk_pair.private) if jwk_pair.private is not None else None
        )
        self._log(
            f"Converted Multikey {keys.public_key_multibase[:8]}... to {scheme.value} "
            f"key {'pair' if private_key is not None else 'object'}"
        )
        return private_key, public_key
