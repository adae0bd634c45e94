"""Base64url codec without padding, as used for JWK coordinates."""

import base64
import binascii
import re

from ..errors import FormatError

_BASE64URL_PATTERN = re.compile(r"^[A-Za-z0-9_-]*$")


def encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url text."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def decode(text: str) -> bytes:
    """Decode unpadded base64url text.

    Raises:
        FormatError: On characters outside the URL-safe alphabet or on a
            length no base64 encoding can produce
    """
    if not isinstance(text, str) or not _BASE64URL_PATTERN.match(text):
        raise FormatError(f"Invalid base64url value: {text!r}")

    # A single leftover character cannot carry a full byte
    if len(text) % 4 == 1:
        raise FormatError(f"Invalid base64url length ({len(text)}): {text!r}")

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Invalid base64url value: {e}") from e
