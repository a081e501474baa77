"""Service-level tests for request persistence, run against the test database."""

from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

import pytest

from leave_tracker.exceptions import NotFoundError, ValidationError
from leave_tracker.models.enums import RequestStatus, RequestType
from leave_tracker.schemas.request import CreateRequestPayload
from leave_tracker.schemas.user import UpsertUserRequest
from leave_tracker.services import request as request_service
from leave_tracker.services.notification import InMemoryNotificationService
from leave_tracker.services.user import upsert_user

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


def _payload(**overrides: object) -> CreateRequestPayload:
    values: dict[str, object] = {
        "name": "  Alice Johnson ",
        "email": "alice@example.com",
        "type": RequestType.HALFDAY,
        "reason": "Dentist",
        "start_date": date(2024, 6, 10),
        "end_date": date(2024, 6, 10),
    }
    values.update(overrides)
    return CreateRequestPayload.model_validate(values)


@pytest.fixture
async def user_id(db_session: AsyncSession) -> uuid.UUID:
    new_id = uuid.uuid4()
    await upsert_user(db_session, new_id, UpsertUserRequest(name="Alice Johnson", email="alice@example.com"))
    return new_id


async def test_create_persists_pending_request(db_session: AsyncSession, user_id: uuid.UUID) -> None:
    notifier = InMemoryNotificationService()
    created = await request_service.create_request(db_session, notifier, user_id, _payload())

    assert created.status == RequestStatus.PENDING
    assert created.name == "Alice Johnson"
    assert created.user_id == user_id
    assert notifier.sent == [created]

    fetched = await request_service.get_request(db_session, created.id)
    assert fetched == created


@pytest.mark.parametrize(
    "overrides",
    [{"name": None}, {"email": ""}, {"reason": " "}, {"type": None}, {"start_date": None}, {"end_date": None}],
)
async def test_create_requires_every_field(
    db_session: AsyncSession, user_id: uuid.UUID, overrides: dict[str, object]
) -> None:
    with pytest.raises(ValidationError, match="All fields are required"):
        await request_service.create_request(db_session, InMemoryNotificationService(), user_id, _payload(**overrides))


async def test_create_validates_before_user_lookup(db_session: AsyncSession) -> None:
    with pytest.raises(ValidationError):
        await request_service.create_request(
            db_session, InMemoryNotificationService(), uuid.uuid4(), _payload(end_date=date(2024, 6, 1))
        )


async def test_create_for_unknown_user(db_session: AsyncSession) -> None:
    with pytest.raises(NotFoundError):
        await request_service.create_request(db_session, InMemoryNotificationService(), uuid.uuid4(), _payload())


async def test_list_for_user_without_requests(db_session: AsyncSession, user_id: uuid.UUID) -> None:
    assert await request_service.list_requests_for_user(db_session, user_id) == []


async def test_update_status_validates_before_lookup(db_session: AsyncSession) -> None:
    with pytest.raises(ValidationError, match="Invalid status"):
        await request_service.update_status(db_session, uuid.uuid4(), "archived")


async def test_update_status_unknown_request(db_session: AsyncSession) -> None:
    with pytest.raises(NotFoundError, match="Request not found"):
        await request_service.update_status(db_session, uuid.uuid4(), "accepted")


async def test_update_status_round_trip(db_session: AsyncSession, user_id: uuid.UUID) -> None:
    created = await request_service.create_request(db_session, InMemoryNotificationService(), user_id, _payload())

    for new_status in ("accepted", "denied", "pending"):
        updated = await request_service.update_status(db_session, created.id, new_status)
        assert updated.status == new_status


async def test_delete_missing_request(db_session: AsyncSession) -> None:
    with pytest.raises(NotFoundError):
        await request_service.delete_request(db_session, uuid.uuid4())


async def test_delete_removes_request(db_session: AsyncSession, user_id: uuid.UUID) -> None:
    created = await request_service.create_request(db_session, InMemoryNotificationService(), user_id, _payload())
    await request_service.delete_request(db_session, created.id)

    with pytest.raises(NotFoundError):
        await request_service.get_request(db_session, created.id)
    assert await request_service.list_all_requests(db_session) == []
