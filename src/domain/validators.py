"""
Credential Validators

Pure checks applied to every credential-bearing field. Each check returns
Return.ok(None) or a VALIDATION_ERROR naming the field and the broken rule.
Register, admin create/update and password reset all share these rules.
"""

import re

import email_validator

from libs.result import Error, Result, Return

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 180
PASSWORD_MIN_LENGTH = 8

_USERNAME_CHARSET = re.compile(r"[A-Za-z0-9_.-]+")
_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")


def _invalid(field: str, rule: str, message: str) -> Result[None]:
    return Return.err(
        Error("VALIDATION_ERROR", message, details={"field": field, "rule": rule})
    )


def normalize_username(value: str) -> str:
    return value.strip()


def normalize_email(value: str) -> str:
    return value.strip().lower()


def validate_username(value: str) -> Result[None]:
    if len(value) < USERNAME_MIN_LENGTH:
        return _invalid(
            "username", "TOO_SHORT", "Username must be between 3 and 50 characters"
        )
    if len(value) > USERNAME_MAX_LENGTH:
        return _invalid(
            "username", "TOO_LONG", "Username must be between 3 and 50 characters"
        )
    if not _USERNAME_CHARSET.fullmatch(value):
        return _invalid(
            "username",
            "INVALID_CHARSET",
            "Username can only contain letters, numbers, dots, hyphens and underscores",
        )
    return Return.ok(None)


def validate_email(value: str) -> Result[None]:
    """Expects an already normalized address (see normalize_email)."""
    try:
        email_validator.validate_email(value, check_deliverability=False)
    except email_validator.EmailNotValidError:
        return _invalid("email", "INVALID_FORMAT", "Please enter a valid email address")
    if len(value) > EMAIL_MAX_LENGTH:
        return _invalid(
            "email", "TOO_LONG", "Email cannot be longer than 180 characters"
        )
    return Return.ok(None)


def validate_password(value: str) -> Result[None]:
    # No upper bound and no special-character rule
    if len(value) < PASSWORD_MIN_LENGTH:
        return _invalid(
            "password", "TOO_SHORT", "Password must be at least 8 characters long"
        )
    if not _LETTER.search(value):
        return _invalid(
            "password", "MISSING_LETTER", "Password must contain at least one letter"
        )
    if not _DIGIT.search(value):
        return _invalid(
            "password", "MISSING_DIGIT", "Password must contain at least one number"
        )
    return Return.ok(None)


def validate_credentials(username: str, email: str, password: str) -> Result[None]:
    """Run the three checks in order: username, email, password."""
    for check in (
        validate_username(username),
        validate_email(email),
        validate_password(password),
    ):
        if check.is_err():
            return check
    return Return.ok(None)
