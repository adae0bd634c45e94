"""Scheme registry: preambles, JWK curve names and codec dispatch.

A Multikey preamble is the unsigned varint of the key's multicodec code,
which for the three supported schemes is always two bytes:

    Scheme        public             private
    Ed25519       ed25519-pub  ED01  ed25519-priv  8026
    ECDSA P-256   p256-pub     8024  p256-priv     8626
    ECDSA P-384   p384-pub     8124  p384-priv     8726

Classification is a lookup on the two decoded bytes, never inferred from JWK
metadata.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from multiformats import varint

from . import ecdsa, eddsa
from .errors import UnknownCurveError, UnknownPreambleError
from .key_types import KeyRole, Scheme

PREAMBLE_SIZE = 2

Compressor = Callable[[Scheme, bytes, Optional[bytes]], bytes]
Decompressor = Callable[[Scheme, bytes], Tuple[bytes, Optional[bytes]]]


@dataclass(frozen=True)
class SchemeEntry:
    """One row of the scheme table."""

    scheme: Scheme
    kty: str
    crv: str
    public_codec: str
    public_code: int
    private_codec: str
    private_code: int
    # Bytes per coordinate (ECDSA) or of the raw public key (EdDSA)
    coordinate_size: int
    compress: Compressor
    decompress: Decompressor

    @property
    def public_preamble(self) -> bytes:
        return varint.encode(self.public_code)

    @property
    def private_preamble(self) -> bytes:
        return varint.encode(self.private_code)

    def preamble(self, role: KeyRole) -> bytes:
        if role is KeyRole.PUBLIC:
            return self.public_preamble
        return self.private_preamble

    def codec(self, role: KeyRole) -> str:
        """Multicodec name of the key for the given role."""
        if role is KeyRole.PUBLIC:
            return self.public_codec
        return self.private_codec


SCHEME_TABLE: Dict[Scheme, SchemeEntry] = {
    Scheme.EDDSA: SchemeEntry(
        scheme=Scheme.EDDSA,
        kty="OKP",
        crv="Ed25519",
        public_codec="ed25519-pub",
        public_code=0xED,
        private_codec="ed25519-priv",
        private_code=0x1300,
        coordinate_size=eddsa.KEY_SIZE,
        compress=eddsa.compress,
        decompress=eddsa.decompress,
    ),
    Scheme.ECDSA_P256: SchemeEntry(
        scheme=Scheme.ECDSA_P256,
        kty="EC",
        crv="P-256",
        public_codec="p256-pub",
        public_code=0x1200,
        private_codec="p256-priv",
        private_code=0x1306,
        coordinate_size=ecdsa.coordinate_size(Scheme.ECDSA_P256),
        compress=ecdsa.compress,
        decompress=ecdsa.decompress,
    ),
    Scheme.ECDSA_P384: SchemeEntry(
        scheme=Scheme.ECDSA_P384,
        kty="EC",
        crv="P-384",
        public_codec="p384-pub",
        public_code=0x1201,
        private_codec="p384-priv",
        private_code=0x1307,
        coordinate_size=ecdsa.coordinate_size(Scheme.ECDSA_P384),
        compress=ecdsa.compress,
        decompress=ecdsa.decompress,
    ),
}

# Preamble -> (scheme, role)
PREAMBLE_TABLE: Dict[bytes, Tuple[Scheme, KeyRole]] = {
    entry.preamble(role): (entry.scheme, role)
    for entry in SCHEME_TABLE.values()
    for role in KeyRole
}

# (kty, crv) -> scheme
JWK_CURVE_TABLE: Dict[Tuple[str, str], Scheme] = {
    (entry.kty, entry.crv): entry.scheme for entry in SCHEME_TABLE.values()
}

if len(PREAMBLE_TABLE) != len(SCHEME_TABLE) * len(KeyRole) or any(
    len(preamble) != PREAMBLE_SIZE for preamble in PREAMBLE_TABLE
):
    raise RuntimeError("Multikey preambles must be distinct two-byte values")


def entry_for(scheme: Scheme) -> SchemeEntry:
    """Return the table row of a scheme."""
    return SCHEME_TABLE[scheme]


def preamble_for(scheme: Scheme, role: KeyRole) -> bytes:
    """Return the two preamble bytes of a (scheme, role) combination."""
    return SCHEME_TABLE[scheme].preamble(role)


def classify(preamble: bytes) -> Tuple[Scheme, KeyRole]:
    """Classify a preamble.

    Args:
        preamble: The first two bytes of a decoded Multikey

    Returns:
        Tuple of (scheme, role)

    Raises:
        UnknownPreambleError: If the bytes match no registered preamble
    """
    result = PREAMBLE_TABLE.get(bytes(preamble))
    if result is None:
        supported = [
            f"{entry.codec(role)} ({entry.preamble(role).hex()})"
            for entry in SCHEME_TABLE.values()
            for role in KeyRole
        ]
        raise UnknownPreambleError(
            f"Unknown Multikey preamble: {bytes(preamble).hex() or 'empty'}. "
            f"Supported: {', '.join(supported)}"
        )
    return result


def scheme_for_jwk(jwk: Mapping[str, Any]) -> Scheme:
    """Determine the scheme of a JWK from its ``kty`` and ``crv`` fields.

    Raises:
        UnknownCurveError: If the combination is not one of the supported ones
    """
    kty = jwk.get("kty")
    crv = jwk.get("crv")
    if not kty:
        raise UnknownCurveError(f"No kty value for the key (crv={crv!r})")

    scheme = JWK_CURVE_TABLE.get((kty, crv))
    if scheme is None:
        raise UnknownCurveError(
            f"Unsupported key type kty={kty!r}, crv={crv!r}. "
            f"Supported: {sorted(JWK_CURVE_TABLE)}"
        )
    return scheme
