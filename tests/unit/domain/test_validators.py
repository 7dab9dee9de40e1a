"""
Unit tests for the credential validators
"""
import pytest

from src.domain.validators import (
    normalize_email,
    normalize_username,
    validate_credentials,
    validate_email,
    validate_password,
    validate_username,
)


def _rule(result):
    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    return result.error.details["field"], result.error.details["rule"]


@pytest.mark.parametrize("username", ["abc", "john.doe", "A_b-c.9", "x" * 50])
def test_valid_usernames(username):
    assert validate_username(username).is_ok()


def test_username_too_short():
    assert _rule(validate_username("ab")) == ("username", "TOO_SHORT")
    assert _rule(validate_username("")) == ("username", "TOO_SHORT")


def test_username_too_long():
    assert _rule(validate_username("x" * 51)) == ("username", "TOO_LONG")


@pytest.mark.parametrize(
    "username", ["john doe", "john@doe", "jöhn", "name!", "tab\tname", "abc\n", "\nabc"]
)
def test_username_invalid_charset(username):
    assert _rule(validate_username(username)) == ("username", "INVALID_CHARSET")


def test_username_length_checked_before_charset():
    assert _rule(validate_username("a!")) == ("username", "TOO_SHORT")


@pytest.mark.parametrize("email", ["a@b.com", "first.last@example.com", "x+tag@sub.example.org"])
def test_valid_emails(email):
    assert validate_email(email).is_ok()


@pytest.mark.parametrize("email", ["", "plainaddress", "@example.com", "user@", "user@@example.com"])
def test_invalid_email_format(email):
    assert _rule(validate_email(email)) == ("email", "INVALID_FORMAT")


def test_email_too_long():
    email = ("a" * 60) + "@" + ".".join(["b" * 60, "c" * 60]) + ".com"
    assert len(email) > 180
    assert _rule(validate_email(email)) == ("email", "TOO_LONG")


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  A@B.Com ") == "a@b.com"


def test_normalize_username_trims_only():
    assert normalize_username("  John.Doe ") == "John.Doe"


def test_reference_password_is_valid():
    assert validate_password("abc12345").is_ok()


def test_password_without_upper_bound():
    assert validate_password("a1" * 200).is_ok()


def test_password_too_short():
    assert _rule(validate_password("abc1234")) == ("password", "TOO_SHORT")


def test_password_missing_letter():
    assert _rule(validate_password("12345678")) == ("password", "MISSING_LETTER")


def test_password_missing_digit():
    assert _rule(validate_password("abcdefgh")) == ("password", "MISSING_DIGIT")


def test_password_special_characters_not_required():
    assert validate_password("password1").is_ok()


def test_validate_credentials_reports_username_first():
    result = validate_credentials("ab", "not-an-email", "short")
    assert _rule(result) == ("username", "TOO_SHORT")


def test_validate_credentials_reports_email_before_password():
    result = validate_credentials("valid_name", "not-an-email", "short")
    assert _rule(result) == ("email", "INVALID_FORMAT")


def test_validate_credentials_ok():
    assert validate_credentials("valid_name", "valid@example.com", "abc12345").is_ok()
