"""Bootstrap token value type: validation, parsing, and JSON encoding."""

from bootstrap_token.codec import (
    BootstrapTokenString,
    InvalidTokenIDError,
    InvalidTokenSecretError,
    MalformedTokenError,
    TokenDecodeError,
    TokenError,
    decode_json,
    encode_json,
    new_token,
    parse_token,
    stringify,
)

__all__ = [
    "BootstrapTokenString",
    "InvalidTokenIDError",
    "InvalidTokenSecretError",
    "MalformedTokenError",
    "TokenDecodeError",
    "TokenError",
    "decode_json",
    "encode_json",
    "new_token",
    "parse_token",
    "stringify",
]
