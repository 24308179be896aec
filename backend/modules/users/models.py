"""
Users module data models.

The persisted record uses camelCase keys on disk
(``id, email, passwordHash, name, createdAt, updatedAt``) and snake_case
attributes in Python.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shared.models import UserProfile


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_user_id() -> str:
    return str(uuid4())


class User(BaseModel):
    """
    Authoritative user record.

    ``id`` and ``created_at`` never change after creation. ``password_hash``
    never leaves the server; use ``to_profile()`` for anything sent to a
    client.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Opaque unique identifier")
    email: str = Field(..., description="Trimmed, lowercase email (unique)")
    password_hash: str = Field(..., min_length=1, description="Credential engine output")
    name: str = Field(..., description="Trimmed display name")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    updated_at: datetime = Field(..., description="Last mutation time (UTC)")

    def to_profile(self) -> UserProfile:
        return UserProfile(id=self.id, email=self.email, name=self.name)


class NewUser(BaseModel):
    """Data needed to create a user. Already sanitized and hashed."""

    email: str
    password_hash: str = Field(..., min_length=1)
    name: str


class UserUpdate(BaseModel):
    """Partial update; ``None`` fields are left untouched."""

    name: Optional[str] = None
    email: Optional[str] = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)
