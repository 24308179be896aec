"""
Validation module.

Pure input checks shared by the server and the client tier.

Public API:
- Predicates: is_valid_email, is_valid_password, is_valid_name
- Sanitizers: sanitize_email, sanitize_name
- Error messages: get_email_error, get_password_error, get_name_error
- Form validators: validate_login, validate_signup, validate_profile
"""

from .rules import (
    is_non_empty_string,
    is_valid_email,
    is_valid_password,
    is_valid_name,
    sanitize_email,
    sanitize_name,
    get_email_error,
    get_password_error,
    get_name_error,
)
from .forms import (
    PROFILE_FIELD_REQUIRED,
    validate_login,
    validate_signup,
    validate_profile,
)
from .models import (
    LoginValidationResult,
    SignupValidationResult,
    ProfileValidationResult,
)

__all__ = [
    # Predicates
    "is_non_empty_string",
    "is_valid_email",
    "is_valid_password",
    "is_valid_name",
    # Sanitizers
    "sanitize_email",
    "sanitize_name",
    # Error messages
    "get_email_error",
    "get_password_error",
    "get_name_error",
    # Forms
    "PROFILE_FIELD_REQUIRED",
    "validate_login",
    "validate_signup",
    "validate_profile",
    # Models
    "LoginValidationResult",
    "SignupValidationResult",
    "ProfileValidationResult",
]
