"""Base58 (Bitcoin alphabet) codec.

The ``base58`` package does the big-integer conversion and keeps leading zero
bytes as leading ``'1'`` characters. Input is checked against the alphabet
first because the library silently strips trailing whitespace.
"""

from base58 import BITCOIN_ALPHABET, b58decode, b58encode

from ..errors import FormatError

ALPHABET = BITCOIN_ALPHABET.decode("ascii")
_ALPHABET_SET = frozenset(ALPHABET)


def encode(data: bytes) -> str:
    """Encode bytes as base58 text."""
    return b58encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode base58 text.

    Raises:
        FormatError: If the text holds a character outside the alphabet
    """
    if not isinstance(text, str):
        raise FormatError(f"base58 input must be text, got {type(text).__name__}")

    for position, char in enumerate(text):
        if char not in _ALPHABET_SET:
            raise FormatError(
                f"Invalid base58 character {char!r} at position {position}"
            )

    try:
        return b58decode(text)
    except ValueError as e:
        raise FormatError(f"Invalid base58 text: {e}") from e
