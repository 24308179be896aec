"""
Form-level validators.

Combine the field rules into one result per form so a caller can show every
problem at once.
"""

from typing import Any

from .models import (
    LoginValidationResult,
    ProfileValidationResult,
    SignupValidationResult,
)
from .rules import (
    PASSWORD_REQUIRED,
    get_email_error,
    get_name_error,
    get_password_error,
    is_non_empty_string,
)

PROFILE_FIELD_REQUIRED = "At least one field (name or email) is required"


def validate_login(email: Any, password: Any) -> LoginValidationResult:
    """Validate the login form. The password is only checked for presence."""
    email_error = get_email_error(email)
    password_error = "" if password else PASSWORD_REQUIRED

    return LoginValidationResult(
        is_valid=not email_error and not password_error,
        email_error=email_error,
        password_error=password_error,
    )


def validate_signup(name: Any, email: Any, password: Any) -> SignupValidationResult:
    """Validate the signup form, reporting every field independently."""
    name_error = get_name_error(name)
    email_error = get_email_error(email)
    password_error = get_password_error(password)

    return SignupValidationResult(
        is_valid=not name_error and not email_error and not password_error,
        name_error=name_error,
        email_error=email_error,
        password_error=password_error,
    )


def validate_profile(name: Any, email: Any) -> ProfileValidationResult:
    """
    Validate a partial profile update.

    At least one of name or email must have content. When neither does, the
    "at least one field" message goes on each field that was left completely
    empty; a whitespace-only field gets no message of its own. Otherwise only
    the fields that were supplied are validated.
    """
    has_name = bool(name)
    has_email = bool(email)

    if not is_non_empty_string(name) and not is_non_empty_string(email):
        return ProfileValidationResult(
            is_valid=False,
            name_error="" if has_name else PROFILE_FIELD_REQUIRED,
            email_error="" if has_email else PROFILE_FIELD_REQUIRED,
        )

    name_error = get_name_error(name) if has_name else ""
    email_error = get_email_error(email) if has_email else ""

    return ProfileValidationResult(
        is_valid=not name_error and not email_error,
        name_error=name_error,
        email_error=email_error,
    )
