"""Shared fixtures: a throwaway SQLite database and an ASGI client over the app.

Environment is configured before any `app.*` import so that the cached
Settings (and the module-level engine) point at the test database.
"""

from __future__ import annotations

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="todo-service-tests-")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["DB_SCHEMA"] = ""
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["API_PREFIX"] = ""
os.environ["ENV"] = "test"

from collections.abc import AsyncIterator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from app.db.engine import async_session, engine  # noqa: E402
from app.db.models import Base  # noqa: E402

PASSWORD = "correct horse battery staple"


@pytest.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """Fresh schema per test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with async_session() as session:
        yield session


@pytest.fixture
async def client(db_engine: AsyncEngine) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client wired straight into the FastAPI app (no lifespan, no network)."""
    from app.main import app

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def register(
    client: httpx.AsyncClient,
    email: str = "alice@example.com",
    name: str = "Alice",
    password: str = PASSWORD,
) -> dict:
    """Helper: register a user and return the response body."""
    resp = await client.post("/register", json={"email": email, "password": password, "name": name})
    assert resp.status_code == 201, resp.text
    return resp.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
