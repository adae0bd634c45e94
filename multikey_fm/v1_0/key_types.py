"""Key schemes, roles and the pair containers exchanged by the converters."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Scheme(Enum):
    """Signature schemes that have a Multikey encoding."""

    ECDSA_P256 = "ecdsa-p256"
    ECDSA_P384 = "ecdsa-p384"
    EDDSA = "eddsa"

    @property
    def is_ecdsa(self) -> bool:
        """Whether the scheme stores a compressed EC point."""
        return self in ECDSA_SCHEMES


class KeyRole(Enum):
    """Public or private half of a key pair."""

    PUBLIC = "public"
    PRIVATE = "private"


# Kept declaratively so a new NIST curve only needs another entry here
ECDSA_SCHEMES = frozenset({Scheme.ECDSA_P256, Scheme.ECDSA_P384})


def scheme_from_name(name: str) -> Scheme:
    """Look up a scheme by its value, e.g. ``"ecdsa-p256"``.

    Raises:
        ValueError: If the name is not a known scheme
    """
    try:
        return Scheme(name.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown scheme: {name}. Supported: {[s.value for s in Scheme]}"
        ) from None


@dataclass(frozen=True)
class MultikeyPair:
    """Public Multikey plus an optional secret Multikey.

    Field names follow the controller document vocabulary when serialized.
    """

    public_key_multibase: str
    secret_key_multibase: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Serialize using the ``publicKeyMultibase``/``secretKeyMultibase`` keys."""
        output = {"publicKeyMultibase": self.public_key_multibase}
        if self.secret_key_multibase is not None:
            output["secretKeyMultibase"] = self.secret_key_multibase
        return output

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MultikeyPair":
        """Build a pair from a controller document style mapping."""
        return cls(
            public_key_multibase=data["publicKeyMultibase"],
            secret_key_multibase=data.get("secretKeyMultibase"),
        )


@dataclass(frozen=True)
class JWKKeyPair:
    """Public JWK plus an optional private JWK."""

    public: Dict[str, Any]
    private: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Serialize to a ``publicKey``/``privateKey`` mapping."""
        output = {"publicKey": dict(self.public)}
        if self.private is not None:
            output["privateKey"] = dict(self.private)
        return output

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JWKKeyPair":
        """Build a pair from a ``publicKey``/``privateKey`` mapping."""
        return cls(public=data["publicKey"], private=data.get("privateKey"))
