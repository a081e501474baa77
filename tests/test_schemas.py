"""Unit tests for request and user API schemas."""

from __future__ import annotations

import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from leave_tracker.models.enums import RequestType, UserRole
from leave_tracker.schemas.auth import AuthContext
from leave_tracker.schemas.request import CreateRequestPayload, RequestFilter, StatusUpdatePayload
from leave_tracker.schemas.user import UpsertUserRequest

# ---------------------------------------------------------------------------
# CreateRequestPayload
# ---------------------------------------------------------------------------


def test_create_payload_parses_full_body() -> None:
    payload = CreateRequestPayload.model_validate(
        {
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "type": "work_from_home",
            "reason": "Plumber",
            "start_date": "2024-06-10",
            "end_date": "2024-06-10",
        }
    )
    assert payload.type == RequestType.WORK_FROM_HOME
    assert payload.start_date == date(2024, 6, 10)


def test_create_payload_drops_status() -> None:
    payload = CreateRequestPayload.model_validate({"reason": "x", "status": "accepted"})
    assert "status" not in payload.model_dump()


def test_create_payload_allows_missing_fields() -> None:
    payload = CreateRequestPayload()
    assert payload.name is None
    assert payload.type is None


def test_create_payload_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        CreateRequestPayload.model_validate({"type": "sabbatical"})


def test_create_payload_rejects_malformed_date() -> None:
    with pytest.raises(ValidationError):
        CreateRequestPayload.model_validate({"start_date": "10/06/2024"})


def test_status_payload_keeps_raw_string() -> None:
    assert StatusUpdatePayload(status="cancelled").status == "cancelled"


# ---------------------------------------------------------------------------
# RequestFilter
# ---------------------------------------------------------------------------


def test_filter_defaults() -> None:
    criteria = RequestFilter()
    assert criteria.status == "all"
    assert criteria.type == "all"
    assert criteria.search == ""
    assert criteria.date_from is None
    assert criteria.date_to is None
    assert criteria.date_match is None


def test_filter_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        RequestFilter(status="cancelled")  # type: ignore[arg-type]


def test_filter_active_with_date_bound() -> None:
    assert RequestFilter(date_to=date(2024, 1, 1)).is_active is True


# ---------------------------------------------------------------------------
# Users and auth
# ---------------------------------------------------------------------------


def test_upsert_user_defaults_to_user_role() -> None:
    assert UpsertUserRequest(name="Bob", email="bob@example.com").role == UserRole.USER


@pytest.mark.parametrize("email", ["bob", "bob@", "@example.com", "bob smith@example.com"])
def test_upsert_user_rejects_bad_email(email: str) -> None:
    with pytest.raises(ValidationError):
        UpsertUserRequest(name="Bob", email=email)


def test_upsert_user_rejects_empty_name() -> None:
    with pytest.raises(ValidationError):
        UpsertUserRequest(name="", email="bob@example.com")


def test_auth_context_scope() -> None:
    owner = uuid.uuid4()
    user = AuthContext(user_id=owner)
    admin = AuthContext(user_id=uuid.uuid4(), role=UserRole.ADMIN)

    assert user.can_act_for(owner) is True
    assert user.can_act_for(uuid.uuid4()) is False
    assert user.can_act_for(None) is False
    assert admin.is_admin is True
    assert admin.can_act_for(owner) is True
