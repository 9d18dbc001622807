"""Bootstrap token value type: parsing, construction, and JSON encoding.

A BootstrapTokenString is persisted and transmitted as one string,
`<id>.<secret>`, never as an object with separate fields. The factories
`parse_token` and `new_token` are the only validating constructors; code that
receives a value from them may rely on both parts matching the grammar.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bootstrap_token.grammar import (
    TOKEN_ID_BYTES,
    TOKEN_PATTERN,
    TOKEN_SEPARATOR,
    VALID_SECRET_SIZES,
    is_valid_token_id,
    is_valid_token_secret,
)
from bootstrap_token.utils.json import JSONStringError, dump_json_string, load_json_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapTokenString:
    """A bootstrap token split into its public ID and private secret.

    The plain constructor does not validate; use `parse` or
    `from_id_and_secret` for untrusted input.
    """

    id: str = ""
    secret: str = field(default="", repr=False)

    @classmethod
    def parse(cls, raw: str) -> "BootstrapTokenString":
        return parse_token(raw)

    @classmethod
    def from_id_and_secret(cls, token_id: str, secret: str) -> "BootstrapTokenString":
        return new_token(token_id, secret)

    def __str__(self) -> str:
        return stringify(self)

    def redacted(self) -> str:
        """Combined form with the secret masked, safe for display."""
        return f"{self.id}{TOKEN_SEPARATOR}{'*' * len(self.secret)}"

    def to_json(self) -> bytes:
        return encode_json(self)

    @classmethod
    def from_json(cls, data: bytes | str) -> "BootstrapTokenString":
        return decode_json(data)

    # -- pydantic integration --
    #
    # pydantic echoes the raw input (secret included) in ValidationError text
    # unless the model sets ConfigDict(hide_input_in_errors=True).

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(stringify),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": f"^{TOKEN_PATTERN}$",
            "description": "Bootstrap token in the form <id>.<secret>",
        }


def parse_token(raw: str) -> BootstrapTokenString:
    """Parse a combined `<id>.<secret>` string.

    Raises MalformedTokenError when the input is empty or does not contain
    exactly one separator, InvalidTokenIDError or InvalidTokenSecretError when
    a part breaks the grammar.
    """
    if not isinstance(raw, str):
        raise MalformedTokenError(f"expected a string, got {type(raw).__name__}")
    if not raw:
        raise MalformedTokenError("token is empty")
    separators = raw.count(TOKEN_SEPARATOR)
    if separators != 1:
        raise MalformedTokenError(
            f"expected exactly one {TOKEN_SEPARATOR!r} separator, found {separators}"
        )
    token_id, secret = raw.split(TOKEN_SEPARATOR, 1)
    token = new_token(token_id, secret)
    logger.debug("Parsed bootstrap token with ID %s", token.id)
    return token


def new_token(token_id: str, secret: str) -> BootstrapTokenString:
    """Build a token from an already separated ID and secret."""
    if not is_valid_token_id(token_id):
        raise InvalidTokenIDError(token_id)
    if not is_valid_token_secret(secret):
        raise InvalidTokenSecretError(len(secret) if isinstance(secret, str) else 0)
    return BootstrapTokenString(id=token_id, secret=secret)


def _validate_field(value: Any) -> BootstrapTokenString:
    """Model field validator: instances pass through, anything else is parsed."""
    if isinstance(value, BootstrapTokenString):
        return value
    return parse_token(value)


def stringify(token: BootstrapTokenString) -> str:
    return f"{token.id}{TOKEN_SEPARATOR}{token.secret}"


def encode_json(token: BootstrapTokenString) -> bytes:
    """JSON string literal of the combined form. Does not re-validate."""
    return dump_json_string(stringify(token))


def decode_json(data: bytes | str) -> BootstrapTokenString:
    """Decode a JSON string literal and parse it as a token.

    Raises TokenDecodeError if data is not a JSON string; grammar errors from
    parse_token propagate unchanged.
    """
    try:
        raw = load_json_string(data)
    except JSONStringError as e:
        raise TokenDecodeError(str(e)) from e
    return parse_token(raw)


class TokenError(ValueError):
    """Base class for bootstrap token errors."""


class MalformedTokenError(TokenError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed bootstrap token: {reason}")


class InvalidTokenIDError(TokenError):
    def __init__(self, token_id: object) -> None:
        self.token_id = token_id
        super().__init__(
            f"Invalid token ID {token_id!r}: must be {TOKEN_ID_BYTES} characters of [a-z0-9]"
        )


class InvalidTokenSecretError(TokenError):
    # The secret itself is never part of the message.
    def __init__(self, length: int) -> None:
        self.length = length
        sizes = " or ".join(str(n) for n in VALID_SECRET_SIZES)
        super().__init__(
            f"Invalid token secret: must be {sizes} characters of [a-z0-9], "
            f"got {length} characters"
        )


class TokenDecodeError(TokenError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot decode bootstrap token: {reason}")
