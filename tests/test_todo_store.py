"""Tests for the owner-scoped todo store."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User
from app.errors import InvalidToken, NotFound, ValidationError
from app.todo.store import TodoStore
from app.users.store import UserStore

from tests.conftest import PASSWORD


@pytest.fixture
async def alice(db: AsyncSession) -> User:
    return await UserStore(db).register(email="alice@example.com", password=PASSWORD, name="Alice")


@pytest.fixture
async def bob(db: AsyncSession) -> User:
    return await UserStore(db).register(email="bob@example.com", password=PASSWORD, name="Bob")


class TestCreate:
    async def test_defaults(self, db: AsyncSession, alice: User) -> None:
        todo = await TodoStore(db).create(alice.id, "Buy milk")

        assert todo.title == "Buy milk"
        assert todo.description is None
        assert todo.completed is False
        assert todo.owner_id == alice.id
        assert todo.created_at is not None

    @pytest.mark.parametrize("title", ["", "   ", None])
    async def test_empty_title_rejected(self, db: AsyncSession, alice: User, title: str | None) -> None:
        with pytest.raises(ValidationError):
            await TodoStore(db).create(alice.id, title)

    async def test_unknown_owner_is_invalid_token(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        alice_id = alice.id

        with pytest.raises(InvalidToken):
            await store.create(uuid.uuid4(), "orphan")

        # the session is usable again after the failed insert
        await store.create(alice_id, "kept")
        assert [t.title for t in await store.list_by_owner(alice_id)] == ["kept"]


class TestListByOwner:
    async def test_newest_first(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        first = await store.create(alice.id, "first")
        second = await store.create(alice.id, "second")
        third = await store.create(alice.id, "third")

        todos = await store.list_by_owner(alice.id)
        assert [t.id for t in todos] == [third.id, second.id, first.id]

    async def test_scoped_to_owner(self, db: AsyncSession, alice: User, bob: User) -> None:
        store = TodoStore(db)
        await store.create(alice.id, "alice's")
        await store.create(bob.id, "bob's")

        assert [t.title for t in await store.list_by_owner(alice.id)] == ["alice's"]
        assert [t.title for t in await store.list_by_owner(bob.id)] == ["bob's"]


class TestUpdate:
    async def test_partial_update(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "title", "desc")

        updated = await store.update(todo.id, alice.id, {"completed": True})
        assert updated.completed is True
        assert updated.title == "title"
        assert updated.description == "desc"

    async def test_unknown_fields_ignored(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "title")

        updated = await store.update(todo.id, alice.id, {"owner_id": uuid.uuid4(), "title": "new"})
        assert updated.owner_id == alice.id
        assert updated.title == "new"

    async def test_blank_title_rejected(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "title")

        with pytest.raises(ValidationError):
            await store.update(todo.id, alice.id, {"title": "  "})

    async def test_other_owner_is_not_found(self, db: AsyncSession, alice: User, bob: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "alice's")

        with pytest.raises(NotFound):
            await store.update(todo.id, bob.id, {"completed": True})

        (unchanged,) = await store.list_by_owner(alice.id)
        assert unchanged.completed is False

    @pytest.mark.parametrize("todo_id", [str(uuid.uuid4()), "not-a-uuid"])
    async def test_missing_is_not_found(self, db: AsyncSession, alice: User, todo_id: str) -> None:
        with pytest.raises(NotFound):
            await TodoStore(db).update(todo_id, alice.id, {"completed": True})


class TestDelete:
    async def test_delete(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "gone soon")

        await store.delete(todo.id, alice.id)
        assert await store.list_by_owner(alice.id) == []

    async def test_other_owner_is_not_found(self, db: AsyncSession, alice: User, bob: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "alice's")

        with pytest.raises(NotFound):
            await store.delete(todo.id, bob.id)
        # loaded instances stay readable after the miss
        assert todo.title == "alice's"
        assert len(await store.list_by_owner(alice.id)) == 1

    async def test_delete_twice_is_not_found(self, db: AsyncSession, alice: User) -> None:
        store = TodoStore(db)
        todo = await store.create(alice.id, "once")
        await store.delete(todo.id, alice.id)

        with pytest.raises(NotFound):
            await store.delete(todo.id, alice.id)
