"""Multikey <-> JWK conversion, version 1.0."""

from .errors import (
    CurveError,
    FormatError,
    MissingFieldError,
    MultikeyError,
    RoleError,
    SchemeMismatchError,
    SchemeNotEnabledError,
    UnknownCurveError,
    UnknownPreambleError,
)
from .key_types import JWKKeyPair, KeyRole, MultikeyPair, Scheme
from .multikey import (
    decode_multikey_string,
    encode_multikey_string,
    jwk_to_multikey,
    multikey_to_jwk,
    public_jwk_to_multikey,
    public_multikey_to_jwk,
)
from .registry import classify

__all__ = [
    "CurveError",
    "FormatError",
    "MissingFieldError",
    "MultikeyError",
    "RoleError",
    "SchemeMismatchError",
    "SchemeNotEnabledError",
    "UnknownCurveError",
    "UnknownPreambleError",
    "JWKKeyPair",
    "KeyRole",
    "MultikeyPair",
    "Scheme",
    "classify",
    "decode_multikey_string",
    "encode_multikey_string",
    "jwk_to_multikey",
    "multikey_to_jwk",
    "public_jwk_to_multikey",
    "public_multikey_to_jwk",
]
