"""
Validation module data models.

Results of the form-level validators. An empty error string means the
field is valid.
"""

from pydantic import BaseModel


class _FormValidationResult(BaseModel):
    model_config = {"frozen": True}

    is_valid: bool

    def errors(self) -> dict[str, str]:
        """Return only the non-empty field errors, keyed by field name."""
        return {
            field.removesuffix("_error"): message
            for field, message in self.model_dump().items()
            if field.endswith("_error") and message
        }


class LoginValidationResult(_FormValidationResult):
    email_error: str = ""
    password_error: str = ""


class SignupValidationResult(_FormValidationResult):
    name_error: str = ""
    email_error: str = ""
    password_error: str = ""


class ProfileValidationResult(_FormValidationResult):
    name_error: str = ""
    email_error: str = ""
