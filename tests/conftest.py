from __future__ import annotations

import os
import uuid
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from leave_tracker.db import get_session
from leave_tracker.main import app
from leave_tracker.models import SQLModel
from leave_tracker.services.notification import InMemoryNotificationService, set_notification_service

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from sqlalchemy.ext.asyncio import AsyncEngine

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

_FIXTURE_ADMIN_HEADERS = {"X-User-Id": str(uuid.uuid4()), "X-Role": "ADMIN"}


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Create an engine with fresh tables for each test.

    SQLite runs in memory on a single shared connection so every session in
    the test sees the same data.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        _engine = create_async_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        _engine = create_async_engine(TEST_DATABASE_URL)

    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield _engine
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await _engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Yield a database session bound to the test engine."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture(autouse=True)
def notifier() -> Iterator[InMemoryNotificationService]:
    """Record submission notices instead of sending them."""
    service = InMemoryNotificationService()
    set_notification_service(service)
    yield service
    set_notification_service(None)


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the database session dependency overridden."""

    async def _override_get_session() -> AsyncIterator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_session] = _override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def employee(async_client: AsyncClient) -> dict[str, Any]:
    """A regular user registered through the admin API."""
    user_id = uuid.uuid4()
    resp = await async_client.put(
        f"/users/{user_id}",
        json={"name": "Alice Johnson", "email": "alice@example.com"},
        headers=_FIXTURE_ADMIN_HEADERS,
    )
    assert resp.status_code == 200
    return resp.json()
