"""Text encodings used by Multikey (base58btc) and JWK (base64url)."""
