"""Field rules: username/email/password checks and path id parsing.

Tests:
    - Length bounds for username and password (inclusive)
    - Email shape accepts local@domain.tld and rejects near misses
    - validate_user_fields reports the first failing field, partial mode skips absent keys
    - parse_user_id keeps integral values within the safe-integer range only
"""

import pytest

from users_api.core.errors import ValidationError
from users_api.core.validation import (
    MAX_SAFE_INTEGER,
    parse_user_id,
    valid_email,
    valid_password,
    valid_username,
    validate_user_fields,
)


@pytest.mark.parametrize("length", [4, 5, 16, 31, 32])
def test_username_within_bounds_is_valid(length):
    assert valid_username("x" * length)


@pytest.mark.parametrize("length", [0, 1, 3, 33, 64])
def test_username_outside_bounds_is_invalid(length):
    assert not valid_username("x" * length)


def test_username_accepts_arbitrary_characters():
    assert valid_username("ü ñ@!")


@pytest.mark.parametrize("value", [None, 1234, ["abcd"], b"abcdef"])
def test_non_string_values_are_invalid(value):
    assert not valid_username(value)
    assert not valid_email(value)
    assert not valid_password(value)


@pytest.mark.parametrize("email", ["a@b.co", "alice@example.com", "first.last@mail.example.org"])
def test_email_accepts_simple_shape(email):
    assert valid_email(email)


@pytest.mark.parametrize("email", ["a@b", "a b@c.co", "@b.co", "a@.co", "a@b.", "a@@b.co", "", "a@b.co\n"])
def test_email_rejects_malformed(email):
    assert not valid_email(email)


def test_password_bounds():
    assert not valid_password("x" * 7)
    assert valid_password("x" * 8)
    assert valid_password("x" * 256)
    assert not valid_password("x" * 257)


def test_full_validation_passes_valid_user():
    validate_user_fields({"username": "alice", "email": "a@b.com", "password": "password123"})


def test_full_validation_treats_missing_field_as_invalid():
    with pytest.raises(ValidationError) as info:
        validate_user_fields({"username": "alice", "password": "password123"})
    assert info.value.field == "email"
    assert info.value.code == "INVALID_USER_EMAIL"


def test_full_validation_reports_username_first():
    with pytest.raises(ValidationError) as info:
        validate_user_fields({"username": "al", "email": "bad", "password": "short"})
    assert info.value.field == "username"
    assert info.value.code == "INVALID_USER_NAME"
    assert "username" in info.value.message


def test_partial_validation_skips_absent_fields():
    validate_user_fields({}, partial=True)
    validate_user_fields({"password": "password123"}, partial=True)


def test_partial_validation_rejects_empty_string():
    with pytest.raises(ValidationError) as info:
        validate_user_fields({"username": ""}, partial=True)
    assert info.value.code == "INVALID_USER_NAME"


def test_partial_validation_rejects_explicit_null():
    with pytest.raises(ValidationError) as info:
        validate_user_fields({"password": None}, partial=True)
    assert info.value.code == "INVALID_PASSWORD"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        (" 7 ", 7),
        ("-3", -3),
        ("+5", 5),
        ("", 0),
        ("  ", 0),
        ("10.0", 10),
        ("1e3", 1000),
        ("0x1A", 26),
        (str(MAX_SAFE_INTEGER), MAX_SAFE_INTEGER),
    ],
)
def test_parse_user_id_accepts_safe_integers(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "1.5", "NaN", "Infinity", "1e400", "12abc", "1_000", str(MAX_SAFE_INTEGER + 2)],
)
def test_parse_user_id_rejects_non_safe_integers(raw):
    assert parse_user_id(raw) is None
