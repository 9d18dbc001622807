"""Strict JSON helpers for string-typed document fields."""

import json


class JSONStringError(ValueError):
    """Raised when a JSON document is not a single string literal."""


def load_json_string(raw: bytes | str) -> str:
    """Decode a JSON document that must hold exactly one string value.

    Accepts UTF-8 bytes or text. Raises JSONStringError for malformed JSON,
    invalid UTF-8, or any JSON value that is not a string (objects, numbers,
    null, ...).
    """
    if isinstance(raw, (bytes, bytearray)):
        # json.loads would sniff UTF-16/32 and skip a BOM; only plain UTF-8 is valid
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise JSONStringError(f"Invalid JSON: not UTF-8 ({e})") from e
    if not isinstance(raw, str):
        raise JSONStringError(f"Expected JSON text, got {type(raw).__name__}")
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise JSONStringError(f"Invalid JSON: {e}") from e
    if not isinstance(parsed, str):
        raise JSONStringError(f"Expected a JSON string, got {_json_type_name(parsed)}")
    return parsed


def dump_json_string(value: str) -> bytes:
    """Encode a str as a compact JSON string literal in UTF-8."""
    return json.dumps(value).encode("utf-8")


def _json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
