"""
Users store interface.

The auth service and the session guard depend on IUserStore, not on a
concrete backing. The contract is async so a file backing, the in-memory
backing and a real database are interchangeable at every call site.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import NewUser, User, UserUpdate


@runtime_checkable
class IUserStore(Protocol):
    """
    Interface for user persistence.

    Every method is a single atomic unit: concurrent callers never observe
    or produce a partially written collection.
    """

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Look up a user by email.

        Args:
            email: Email address; matched case-insensitively

        Returns:
            The User if found, None otherwise
        """
        ...

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Look up a user by id.

        Returns:
            The User if found, None otherwise
        """
        ...

    async def create(self, data: NewUser) -> User:
        """
        Create a user, assigning id, created_at and updated_at.

        The caller has already validated, sanitized and hashed.

        Raises:
            DuplicateEmailError: If another user already has the email
        """
        ...

    async def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        """
        Merge the provided fields into a user and refresh updated_at.

        Returns:
            The updated User, or None if the id is unknown

        Raises:
            DuplicateEmailError: If the new email belongs to another user
        """
        ...

    async def list_users(self) -> list[User]:
        """Return a snapshot of every user record."""
        ...

    async def clear(self) -> None:
        """Remove every record. Test isolation only; never exposed over HTTP."""
        ...
