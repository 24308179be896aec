"""Tests for modules/users/store.py."""

import asyncio
import json
from unittest.mock import patch

import pytest

from modules.users import (
    DuplicateEmailError,
    FileUserStore,
    InMemoryUserStore,
    IUserStore,
    NewUser,
    UserUpdate,
    create_user_store,
)
from shared.config import Settings


def new_user(email: str = "ada@example.com", name: str = "Ada") -> NewUser:
    return NewUser(email=email, password_hash="$2b$04$hash", name=name)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    """Run every contract test against both backings."""
    if request.param == "memory":
        return InMemoryUserStore()
    return FileUserStore(tmp_path / "users.json")


class TestUserStoreContract:
    def test_implements_interface(self, store):
        assert isinstance(store, IUserStore)

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, store):
        user = await store.create(new_user())
        assert user.id
        assert user.email == "ada@example.com"
        assert user.created_at == user.updated_at

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, store):
        a = await store.create(new_user("a@example.com"))
        b = await store.create(new_user("b@example.com"))
        assert a.id != b.id

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, store):
        created = await store.create(new_user())
        found = await store.find_by_email("  ADA@Example.com ")
        assert found is not None
        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_find_missing(self, store):
        assert await store.find_by_email("nobody@example.com") is None
        assert await store.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_by_id(self, store):
        created = await store.create(new_user())
        found = await store.find_by_id(created.id)
        assert found.model_dump() == created.model_dump()

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_email(self, store):
        await store.create(new_user())
        with pytest.raises(DuplicateEmailError):
            await store.create(new_user("ADA@example.com", name="Other"))
        assert len(await store.list_users()) == 1

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, store):
        created = await store.create(new_user())
        updated = await store.update(created.id, UserUpdate(name="Ada L"))

        assert updated.name == "Ada L"
        assert updated.email == created.email
        assert updated.password_hash == created.password_hash
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_user_returns_none(self, store):
        assert await store.update("missing", UserUpdate(name="X")) is None

    @pytest.mark.asyncio
    async def test_update_rejects_other_users_email(self, store):
        await store.create(new_user("a@example.com"))
        b = await store.create(new_user("b@example.com"))
        with pytest.raises(DuplicateEmailError):
            await store.update(b.id, UserUpdate(email="a@example.com"))

    @pytest.mark.asyncio
    async def test_update_to_own_email_is_allowed(self, store):
        a = await store.create(new_user("a@example.com"))
        updated = await store.update(a.id, UserUpdate(email="a@example.com"))
        assert updated.email == "a@example.com"

    @pytest.mark.asyncio
    async def test_returned_users_are_copies(self, store):
        created = await store.create(new_user())
        created.name = "Mutated"
        found = await store.find_by_id(created.id)
        assert found.name == "Ada"

    @pytest.mark.asyncio
    async def test_clear(self, store):
        await store.create(new_user())
        await store.clear()
        assert await store.list_users() == []

    @pytest.mark.asyncio
    async def test_concurrent_registrations_with_same_email(self, store):
        results = await asyncio.gather(
            *(store.create(new_user()) for _ in range(5)),
            return_exceptions=True,
        )
        created = [r for r in results if not isinstance(r, Exception)]
        rejected = [r for r in results if isinstance(r, DuplicateEmailError)]
        assert len(created) == 1
        assert len(rejected) == 4


class TestFileUserStore:
    def test_creates_file_and_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "users.json"
        FileUserStore(path)
        assert json.loads(path.read_text()) == []

    def test_keeps_existing_file(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("[]")
        FileUserStore(path)
        assert path.read_text() == "[]"

    @pytest.mark.asyncio
    async def test_persists_camel_case_records(self, tmp_path):
        path = tmp_path / "users.json"
        store = FileUserStore(path)
        user = await store.create(new_user())

        records = json.loads(path.read_text())
        assert len(records) == 1
        assert set(records[0]) == {
            "id", "email", "passwordHash", "name", "createdAt", "updatedAt",
        }
        assert records[0]["id"] == user.id
        assert records[0]["passwordHash"] == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_survives_reopen(self, tmp_path):
        path = tmp_path / "users.json"
        created = await FileUserStore(path).create(new_user())

        reopened = FileUserStore(path)
        found = await reopened.find_by_email("ada@example.com")
        assert found.model_dump() == created.model_dump()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        ["", "{not json", "{}", '[{"id": 1}]', "[" * 100_000 + "]" * 100_000],
        ids=["empty", "truncated", "not-a-list", "bad-record", "deeply-nested"],
    )
    async def test_unreadable_file_reads_as_empty(self, tmp_path, content):
        path = tmp_path / "users.json"
        path.write_text(content)
        store = FileUserStore(path)

        assert await store.list_users() == []
        assert await store.find_by_email("ada@example.com") is None

    @pytest.mark.asyncio
    async def test_write_failure_raises_and_keeps_previous_contents(self, tmp_path):
        path = tmp_path / "users.json"
        store = FileUserStore(path)
        await store.create(new_user("a@example.com"))
        before = path.read_text()

        with patch("modules.users.store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                await store.create(new_user("b@example.com"))

        assert path.read_text() == before
        assert [p.name for p in tmp_path.iterdir()] == ["users.json"]


class TestCreateUserStore:
    def test_memory(self):
        settings = Settings(_env_file=None, users_store="memory")
        assert isinstance(create_user_store(settings), InMemoryUserStore)

    def test_file(self, tmp_path):
        settings = Settings(
            _env_file=None,
            users_store="file",
            users_file=str(tmp_path / "users.json"),
        )
        store = create_user_store(settings)
        assert isinstance(store, FileUserStore)
        assert store.path == tmp_path / "users.json"

    def test_unknown_backing(self):
        settings = Settings(_env_file=None, users_store="postgres")
        with pytest.raises(ValueError):
            create_user_store(settings)
