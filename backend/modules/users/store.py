"""
User store backings.

Both backings treat the user collection as a single list that is read,
modified and written back as one unit under a per-store asyncio.Lock:

- InMemoryUserStore keeps the list in process memory (tests, demos)
- FileUserStore keeps it as a JSON array on disk

Email uniqueness is enforced inside the lock, so two concurrent
registrations with the same email cannot both succeed.
"""

import asyncio
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from shared.config import Settings

from .exceptions import DuplicateEmailError
from .models import NewUser, User, UserUpdate, new_user_id, utcnow

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(list[User])


def _same_email(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


class BaseUserStore(ABC):
    """
    Shared implementation of IUserStore over a load/save pair.

    Subclasses only decide where the collection lives.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @abstractmethod
    async def _load(self) -> list[User]:
        """Read the whole collection."""

    @abstractmethod
    async def _save(self, users: list[User]) -> None:
        """Replace the whole collection."""

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._lock:
            users = await self._load()
        return next((u for u in users if _same_email(u.email, email)), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        async with self._lock:
            users = await self._load()
        return next((u for u in users if u.id == user_id), None)

    async def create(self, data: NewUser) -> User:
        async with self._lock:
            users = await self._load()
            if any(_same_email(u.email, data.email) for u in users):
                raise DuplicateEmailError(data.email)

            now = utcnow()
            user = User(
                id=new_user_id(),
                email=data.email,
                password_hash=data.password_hash,
                name=data.name,
                created_at=now,
                updated_at=now,
            )
            users.append(user)
            await self._save(users)
        return user.model_copy()

    async def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        async with self._lock:
            users = await self._load()
            index = next((i for i, u in enumerate(users) if u.id == user_id), None)
            if index is None:
                return None

            fields = changes.changes()
            new_email = fields.get("email")
            if new_email is not None and any(
                u.id != user_id and _same_email(u.email, new_email) for u in users
            ):
                raise DuplicateEmailError(new_email)

            updated = users[index].model_copy(update={**fields, "updated_at": utcnow()})
            users[index] = updated
            await self._save(users)
        return updated.model_copy()

    async def list_users(self) -> list[User]:
        async with self._lock:
            users = await self._load()
        return [u.model_copy() for u in users]

    async def clear(self) -> None:
        async with self._lock:
            await self._save([])


class InMemoryUserStore(BaseUserStore):
    """Ephemeral store; contents vanish with the process."""

    def __init__(self) -> None:
        super().__init__()
        self._users: list[User] = []

    async def _load(self) -> list[User]:
        return [u.model_copy() for u in self._users]

    async def _save(self, users: list[User]) -> None:
        self._users = list(users)


class FileUserStore(BaseUserStore):
    """
    Store backed by a JSON file.

    Reads never raise: a missing, empty, truncated or unreadable file is
    treated as an empty collection. Writes raise on failure and replace the
    file atomically, so a failed write leaves the previous contents intact.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        self._initialize()

    def _initialize(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_users([])

    def _read_users(self) -> list[User]:
        try:
            raw = self.path.read_text(encoding="utf-8")
            return _users_adapter.validate_python(json.loads(raw))
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and pydantic's ValidationError are ValueErrors;
            # pathologically nested JSON raises RecursionError
            logger.warning("Could not read users from %s, treating as empty: %s", self.path, e)
            return []

    def _write_users(self, users: list[User]) -> None:
        payload = json.dumps(
            _users_adapter.dump_python(users, mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False,
        )
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    async def _load(self) -> list[User]:
        return await asyncio.to_thread(self._read_users)

    async def _save(self, users: list[User]) -> None:
        await asyncio.to_thread(self._write_users, users)


def create_user_store(settings: Settings) -> BaseUserStore:
    """
    Build the store selected by configuration.

    Args:
        settings: Application settings (users_store, users_file)

    Returns:
        A FileUserStore for "file", an InMemoryUserStore for "memory"
    """
    backing = settings.users_store.strip().lower()
    if backing == "memory":
        logger.info("Using in-memory users store")
        return InMemoryUserStore()
    if backing == "file":
        logger.info("Using file users store at %s", settings.users_file)
        return FileUserStore(settings.users_file)
    raise ValueError(f"Unknown users store backing: {settings.users_store!r}")
