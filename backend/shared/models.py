"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """
    Public view of a user.

    This is the only user shape that ever leaves the server: no password
    hash, no timestamps.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address (lowercase)")
    name: str = Field(..., description="Display name")


class AuthenticatedUser(UserProfile):
    """
    Represents an authenticated user in the system.

    Populated by the session guard after the bearer token is verified and
    the user record is loaded, then made available to route handlers via
    dependency injection.
    """

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
