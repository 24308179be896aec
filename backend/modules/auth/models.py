"""
Authentication module data models.

Request bodies accept any JSON value per field: type and format problems are
reported by the validation rules with their specific messages rather than by
pydantic.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from shared.models import UserProfile


class TokenClaims(BaseModel):
    """Verified contents of a bearer token."""

    model_config = {"frozen": True}

    user_id: str = Field(..., description="Subject (user ID)")
    issued_at: datetime = Field(..., description="Issue time (UTC)")
    expires_at: datetime = Field(..., description="Expiry time (UTC)")


class RegisterRequest(BaseModel):
    email: Any = None
    password: Any = None
    name: Any = None


class LoginRequest(BaseModel):
    email: Any = None
    password: Any = None


class UpdateProfileRequest(BaseModel):
    """Partial update: omitted (or null) fields are left unchanged."""

    name: Any = None
    email: Any = None


class AuthResult(BaseModel):
    """Successful register/login response."""

    token: str = Field(..., description="Bearer token")
    user: UserProfile


class MessageResponse(BaseModel):
    message: str


class LogoutResponse(MessageResponse):
    message: str = "Logged out successfully"

