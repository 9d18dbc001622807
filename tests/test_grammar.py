"""Tests for the bootstrap token grammar constants and predicates."""

import re

import pytest

from bootstrap_token.grammar import (
    TOKEN_ID_BYTES,
    TOKEN_PATTERN,
    TOKEN_SECRET_BYTES,
    TOKEN_SEPARATOR,
    VALID_SECRET_SIZES,
    is_valid_token,
    is_valid_token_id,
    is_valid_token_secret,
)


class TestConstants:
    def test_sizes(self):
        assert TOKEN_ID_BYTES == 6
        assert TOKEN_SECRET_BYTES == 16
        assert VALID_SECRET_SIZES == (16, 24)
        assert TOKEN_SEPARATOR == "."

    def test_token_pattern_captures_both_parts(self):
        m = re.fullmatch(TOKEN_PATTERN, "abcdef.0123456789abcdef")
        assert m is not None
        assert m.groups() == ("abcdef", "0123456789abcdef")


class TestIsValidTokenID:
    @pytest.mark.parametrize("value", ["abcdef", "123456", "a1b2c3"])
    def test_valid(self, value):
        assert is_valid_token_id(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", "abcde", "abcdefg", "Abcdef", "abc*ef", "abc.ef", "abcdef\n", "abcdéf", None, 123456],
    )
    def test_invalid(self, value):
        assert is_valid_token_id(value) is False


class TestIsValidTokenSecret:
    @pytest.mark.parametrize("value", ["a" * 16, "0" * 24, "aabbccddeeffgghh"])
    def test_valid(self, value):
        assert is_valid_token_secret(value) is True

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 20, 23, 25, 32])
    def test_other_lengths_rejected(self, length):
        """Only the two fixed sizes are accepted, not a range."""
        assert is_valid_token_secret("a" * length) is False

    @pytest.mark.parametrize(
        "value",
        ["AABBCCDDEEFFGGHH", "aabbccd-eeffgghh", "aabbccddeeffggh\n", "１" * 16],
    )
    def test_bad_characters_rejected(self, value):
        assert is_valid_token_secret(value) is False


class TestIsValidToken:
    def test_valid_16(self):
        assert is_valid_token("abcdef.abcdef0123456789") is True

    def test_valid_24(self):
        assert is_valid_token("abcdef." + "a" * 24) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            ".",
            "abcdef:abcdef0123456789",
            "abcdef.ABCDEF0123456789",
            "abcdef.abcdef0123456789.",
            "abcdef.abcdef0123456789\n",
            "12345.1234567890123456",
        ],
    )
    def test_invalid(self, value):
        assert is_valid_token(value) is False
