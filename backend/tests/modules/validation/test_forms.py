"""Tests for modules/validation/forms.py."""

import pytest

from modules.validation import (
    PROFILE_FIELD_REQUIRED,
    validate_login,
    validate_profile,
    validate_signup,
)
from modules.validation.rules import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_HAS_NUMBERS,
    NAME_REQUIRED,
    PASSWORD_REQUIRED,
    PASSWORD_TOO_SHORT,
)


class TestValidateLogin:
    def test_valid(self):
        result = validate_login("ada@example.com", "anything")
        assert result.is_valid is True
        assert result.errors() == {}

    def test_password_only_checked_for_presence(self):
        assert validate_login("ada@example.com", "x").is_valid is True

    def test_reports_both_fields(self):
        result = validate_login("", "")
        assert result.is_valid is False
        assert result.email_error == EMAIL_REQUIRED
        assert result.password_error == PASSWORD_REQUIRED

    def test_invalid_email(self):
        result = validate_login("not-an-email", "secret123")
        assert result.is_valid is False
        assert result.errors() == {"email": EMAIL_INVALID}


class TestValidateSignup:
    def test_valid(self):
        result = validate_signup("Ada Lovelace", "ada@example.com", "password123")
        assert result.is_valid is True
        assert result.errors() == {}

    def test_reports_every_field_independently(self):
        result = validate_signup("Ada 2", "bad", "short1")
        assert result.is_valid is False
        assert result.errors() == {
            "name": NAME_HAS_NUMBERS,
            "email": EMAIL_INVALID,
            "password": PASSWORD_TOO_SHORT,
        }

    def test_missing_everything(self):
        result = validate_signup(None, None, None)
        assert result.name_error == NAME_REQUIRED
        assert result.email_error == EMAIL_REQUIRED
        assert result.password_error == PASSWORD_REQUIRED


class TestValidateProfile:
    def test_name_only(self):
        result = validate_profile("Ada", None)
        assert result.is_valid is True

    def test_email_only(self):
        result = validate_profile(None, "ada@example.com")
        assert result.is_valid is True

    def test_neither_field(self):
        result = validate_profile("", None)
        assert result.is_valid is False
        assert result.name_error == PROFILE_FIELD_REQUIRED
        assert result.email_error == PROFILE_FIELD_REQUIRED

    def test_whitespace_only_field_gets_no_message_of_its_own(self):
        result = validate_profile("   ", "")
        assert result.is_valid is False
        assert result.name_error == ""
        assert result.email_error == PROFILE_FIELD_REQUIRED

    def test_supplied_fields_are_validated(self):
        result = validate_profile("Ada", "bad-email")
        assert result.is_valid is False
        assert result.errors() == {"email": EMAIL_INVALID}

    def test_whitespace_name_with_valid_email_is_rejected(self):
        result = validate_profile("   ", "ada@example.com")
        assert result.is_valid is False
        assert result.name_error == NAME_REQUIRED

    def test_result_is_frozen(self):
        result = validate_profile("Ada", None)
        with pytest.raises(ValueError):
            result.is_valid = False
