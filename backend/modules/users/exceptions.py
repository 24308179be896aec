"""
Users module exceptions.
"""

from shared.exceptions import ConflictError


class DuplicateEmailError(ConflictError):
    """Raised by a store when a write would give two users the same email."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )
