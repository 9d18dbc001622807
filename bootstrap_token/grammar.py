"""Lexical grammar for bootstrap tokens.

A bootstrap token is `<id>.<secret>`: a 6-character public ID and a 16- or
24-character secret, both lowercase ASCII alphanumerics. These constants are
shared with every other implementation that reads or writes bootstrap tokens,
so they must not drift.
"""

import re

TOKEN_ID_BYTES = 6
TOKEN_SECRET_BYTES = 16
VALID_SECRET_SIZES = (16, 24)
TOKEN_SEPARATOR = "."

TOKEN_ID_PATTERN = r"[a-z0-9]{6}"
TOKEN_SECRET_PATTERN = r"(?:[a-z0-9]{16}|[a-z0-9]{24})"
TOKEN_PATTERN = rf"({TOKEN_ID_PATTERN})\.({TOKEN_SECRET_PATTERN})"

_TOKEN_ID_RE = re.compile(TOKEN_ID_PATTERN)
_TOKEN_SECRET_RE = re.compile(TOKEN_SECRET_PATTERN)
_TOKEN_RE = re.compile(TOKEN_PATTERN)


def is_valid_token_id(value: object) -> bool:
    """True if value is a well-formed token ID."""
    return isinstance(value, str) and _TOKEN_ID_RE.fullmatch(value) is not None


def is_valid_token_secret(value: object) -> bool:
    """True if value is a well-formed token secret of an accepted size."""
    return isinstance(value, str) and _TOKEN_SECRET_RE.fullmatch(value) is not None


def is_valid_token(value: object) -> bool:
    """True if value is a well-formed combined `<id>.<secret>` token."""
    return isinstance(value, str) and _TOKEN_RE.fullmatch(value) is not None
