"""
Field-level validation rules.

Pure, synchronous predicates and sanitizers for email, password and name.
The client tier runs the same functions before submitting a form; the
server runs them again and is the authority.

Every predicate is total: any non-string input is simply invalid.
"""

import re
from typing import Any


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")

PASSWORD_MIN_LENGTH = 8
NAME_MAX_LENGTH = 100

_ASCII_LETTER = re.compile(r"[a-zA-Z]")
_ASCII_DIGIT = re.compile(r"[0-9]")

# Letter ranges a name must draw at least one character from: Latin and
# Latin-extended, Cyrillic, hiragana, katakana and CJK unified ideographs.
_NAME_LETTER = re.compile(
    r"[a-zA-Z\u00C0-\u024F\u1E00-\u1EFF\u0400-\u04FF"
    r"\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]"
)
_NAME_PUNCTUATION = frozenset("'-")

EMAIL_REQUIRED = "Email is required"
EMAIL_HAS_SPACES = "Email cannot contain spaces"
EMAIL_CONSECUTIVE_DOTS = "Email cannot contain consecutive dots"
EMAIL_INVALID = "Invalid email format"

PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
PASSWORD_NEEDS_LETTER = "Password must contain at least one letter"
PASSWORD_NEEDS_NUMBER = "Password must contain at least one number"

NAME_REQUIRED = "Name is required"
NAME_TOO_LONG = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
NAME_HAS_NUMBERS = "Name cannot contain numbers"
NAME_NEEDS_LETTER = "Name must contain at least one letter"
NAME_INVALID_CHARACTERS = "Name can only contain letters, spaces, hyphens, and apostrophes"


def is_non_empty_string(value: Any) -> bool:
    """Return True for a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


def is_valid_email(email: Any) -> bool:
    """
    Check that an email is shaped like ``local@domain.tld``.

    Surrounding whitespace is ignored. Spaces anywhere else and consecutive
    dots are rejected; the domain needs a dot and a TLD of at least two
    characters.
    """
    if not isinstance(email, str) or not email:
        return False

    trimmed = email.strip()
    if not trimmed:
        return False
    if " " in trimmed:
        return False
    if ".." in trimmed:
        return False

    return EMAIL_PATTERN.fullmatch(trimmed) is not None


def is_valid_password(password: Any) -> bool:
    """
    Check password strength.

    At least 8 characters with one ASCII letter and one digit. No upper
    bound and no special-character requirement.
    """
    if not isinstance(password, str) or not password:
        return False
    if len(password) < PASSWORD_MIN_LENGTH:
        return False
    if not _ASCII_LETTER.search(password):
        return False
    if not _ASCII_DIGIT.search(password):
        return False
    return True


def _has_only_name_characters(value: str) -> bool:
    # str.isalpha() covers exactly the Unicode letter categories.
    return all(ch.isalpha() or ch.isspace() or ch in _NAME_PUNCTUATION for ch in value)


def is_valid_name(name: Any) -> bool:
    """
    Check a display name.

    Letters from any script, whitespace, hyphens and apostrophes are
    allowed. Digits are rejected, and the name must contain at least one
    letter so that values like ``"---"`` fail.
    """
    if not is_non_empty_string(name):
        return False

    trimmed = name.strip()
    if len(trimmed) > NAME_MAX_LENGTH:
        return False
    if _ASCII_DIGIT.search(trimmed):
        return False
    if not _NAME_LETTER.search(trimmed):
        return False
    return _has_only_name_characters(trimmed)


def sanitize_email(email: Any) -> str:
    """Trim and lowercase an email; non-strings become ``""``."""
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


def sanitize_name(name: Any) -> str:
    """Trim a name; non-strings become ``""``."""
    if not isinstance(name, str):
        return ""
    return name.strip()


def get_email_error(email: Any) -> str:
    """Return the reason an email is invalid, or ``""`` if it is valid."""
    if not is_non_empty_string(email):
        return EMAIL_REQUIRED
    if not is_valid_email(email):
        if " " in email:
            return EMAIL_HAS_SPACES
        if ".." in email:
            return EMAIL_CONSECUTIVE_DOTS
        return EMAIL_INVALID
    return ""


def get_password_error(password: Any) -> str:
    """Return the reason a password is too weak, or ``""`` if it is fine."""
    if not isinstance(password, str) or not password:
        return PASSWORD_REQUIRED
    if len(password) < PASSWORD_MIN_LENGTH:
        return PASSWORD_TOO_SHORT
    if not _ASCII_LETTER.search(password):
        return PASSWORD_NEEDS_LETTER
    if not _ASCII_DIGIT.search(password):
        return PASSWORD_NEEDS_NUMBER
    return ""


def get_name_error(name: Any) -> str:
    """
    Return the reason a name is invalid, or ``""`` if it is valid.

    Checks run in a fixed order (required, length, digits, letter present,
    allowed characters) and the first failure wins.
    """
    if not is_non_empty_string(name):
        return NAME_REQUIRED

    trimmed = name.strip()
    if len(trimmed) > NAME_MAX_LENGTH:
        return NAME_TOO_LONG
    if _ASCII_DIGIT.search(trimmed):
        return NAME_HAS_NUMBERS
    if not _NAME_LETTER.search(trimmed):
        return NAME_NEEDS_LETTER
    if not _has_only_name_characters(trimmed):
        return NAME_INVALID_CHARACTERS
    return ""
