"""multikey_fm - Multikey <-> JWK conversion for ECDSA P-256/P-384 and Ed25519.

Implements the Multikey encoding of the W3C controller document
(https://www.w3.org/TR/controller-document/#multikey).
"""

from .v1_0 import (
    CurveError,
    FormatError,
    JWKKeyPair,
    KeyRole,
    MissingFieldError,
    MultikeyError,
    MultikeyPair,
    RoleError,
    Scheme,
    SchemeMismatchError,
    SchemeNotEnabledError,
    UnknownCurveError,
    UnknownPreambleError,
    classify,
    decode_multikey_string,
    encode_multikey_string,
    jwk_to_multikey,
    multikey_to_jwk,
    public_jwk_to_multikey,
    public_multikey_to_jwk,
)
from .v1_0 import __all__

__version__ = "0.1.0"
