"""Errors raised by the Multikey conversion functions.

Every error is terminal: a failed conversion never yields a partial result.
"""


class MultikeyError(Exception):
    """Base class for all Multikey conversion errors."""


class FormatError(MultikeyError):
    """Malformed Multikey, base58 or base64url text."""


class UnknownPreambleError(MultikeyError):
    """Decoded preamble matches none of the registered schemes."""


class RoleError(MultikeyError):
    """Public preamble used where a private one is required, or vice versa."""


class SchemeMismatchError(MultikeyError):
    """Public and private halves of a pair use different schemes."""


class UnknownCurveError(MultikeyError):
    """JWK kty/crv combination (or key class) is not supported."""


class MissingFieldError(MultikeyError):
    """A required JWK field is absent."""


class CurveError(MultikeyError):
    """Key material does not describe a valid point on the curve."""


class SchemeNotEnabledError(MultikeyError):
    """Scheme is supported but disabled in the configuration."""
