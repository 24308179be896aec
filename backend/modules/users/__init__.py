"""
Users module.

Persistence for user records, keyed by id with a secondary lookup by email.

Public API:
- IUserStore: Interface for store operations
- InMemoryUserStore, FileUserStore: Interchangeable backings
- create_user_store: Picks a backing from settings
- User, NewUser, UserUpdate: Record models
- DuplicateEmailError: Raised when a write would duplicate an email
"""

from .interfaces import IUserStore
from .models import User, NewUser, UserUpdate
from .store import (
    BaseUserStore,
    InMemoryUserStore,
    FileUserStore,
    create_user_store,
)
from .exceptions import DuplicateEmailError

__all__ = [
    # Interface
    "IUserStore",
    # Models
    "User",
    "NewUser",
    "UserUpdate",
    # Backings
    "BaseUserStore",
    "InMemoryUserStore",
    "FileUserStore",
    "create_user_store",
    # Exceptions
    "DuplicateEmailError",
]
