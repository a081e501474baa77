# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_tracker.exceptions import NotFoundError, ValidationError
from leave_tracker.models.enums import RequestStatus, RequestType
from leave_tracker.models.request import EmployeeRequest
from leave_tracker.schemas.request import RequestResponse
from leave_tracker.services.user import get_user_or_404

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_tracker.schemas.request import CreateRequestPayload
    from leave_tracker.services.notification import NotificationService

logger = logging.getLogger(__name__)

_VALID_STATUSES = frozenset(s.value for s in RequestStatus)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_request_response(request: EmployeeRequest) -> RequestResponse:
    """Map a request model to its response schema."""
    return RequestResponse(
        id=request.id,
        user_id=request.user_id,
        name=request.name,
        email=request.email,
        type=RequestType(request.type),
        reason=request.reason,
        start_date=request.start_date,
        end_date=request.end_date,
        status=RequestStatus(request.status),
        created_at=request.created_at,
    )


async def _get_request_or_404(session: AsyncSession, request_id: uuid.UUID) -> EmployeeRequest:
    """Fetch a request by ID. Raises NotFoundError if absent."""
    request = await session.get(EmployeeRequest, request_id)
    if request is None:
        raise NotFoundError("Request not found")
    return request


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _validate_submission(payload: CreateRequestPayload) -> tuple[RequestType, date, date]:
    """Return type and dates, raising ValidationError unless every field is present and ordered."""
    if (
        _blank(payload.name)
        or _blank(payload.email)
        or _blank(payload.reason)
        or payload.type is None
        or payload.start_date is None
        or payload.end_date is None
    ):
        raise ValidationError("All fields are required")

    if payload.end_date < payload.start_date:
        raise ValidationError("End date must be after start date")

    return payload.type, payload.start_date, payload.end_date


async def _notify_submitted(notifier: NotificationService, request: RequestResponse) -> None:
    """Deliver the submission notice; failures are logged and never propagate."""
    try:
        await notifier.request_submitted(request)
    except Exception:
        logger.exception("Submission notice failed for request %s", request.id)


_LATEST_FIRST = (col(EmployeeRequest.start_date).desc(), col(EmployeeRequest.created_at).desc())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_request(
    session: AsyncSession,
    notifier: NotificationService,
    user_id: uuid.UUID,
    payload: CreateRequestPayload,
) -> RequestResponse:
    """Submit a leave request on behalf of ``user_id``.

    Flow:
    1. Validate required fields and date order
    2. Verify the owning user exists
    3. Insert the request as pending, whatever the client sent
    4. Commit
    5. Notify reviewers (best effort)
    """
    request_type, start_date, end_date = _validate_submission(payload)
    await get_user_or_404(session, user_id)

    employee_request = EmployeeRequest(
        user_id=user_id,
        name=(payload.name or "").strip(),
        email=(payload.email or "").strip(),
        type=request_type.value,
        reason=(payload.reason or "").strip(),
        start_date=start_date,
        end_date=end_date,
        status=RequestStatus.PENDING.value,
    )
    session.add(employee_request)
    await session.commit()
    await session.refresh(employee_request)

    logger.info("Request %s created for user %s", employee_request.id, user_id)
    response = _build_request_response(employee_request)
    await _notify_submitted(notifier, response)
    return response


async def list_requests_for_user(session: AsyncSession, user_id: uuid.UUID) -> list[RequestResponse]:
    """Requests owned by ``user_id``, latest leave period first. Empty if none."""
    result = await session.execute(
        select(EmployeeRequest).where(col(EmployeeRequest.user_id) == user_id).order_by(*_LATEST_FIRST)
    )
    return [_build_request_response(r) for r in result.scalars().all()]


async def list_all_requests(session: AsyncSession) -> list[RequestResponse]:
    """Every request in the store, latest leave period first."""
    result = await session.execute(select(EmployeeRequest).order_by(*_LATEST_FIRST))
    return [_build_request_response(r) for r in result.scalars().all()]


async def get_request(session: AsyncSession, request_id: uuid.UUID) -> RequestResponse:
    """Get a single request by ID."""
    return _build_request_response(await _get_request_or_404(session, request_id))


async def update_status(
    session: AsyncSession,
    request_id: uuid.UUID,
    new_status: str | None,
) -> RequestResponse:
    """Set a request's status. Every transition between valid statuses is allowed."""
    if new_status not in _VALID_STATUSES:
        raise ValidationError("Invalid status. Must be 'accepted', 'denied', or 'pending'")

    employee_request = await _get_request_or_404(session, request_id)
    previous = employee_request.status
    employee_request.status = new_status

    await session.commit()
    await session.refresh(employee_request)
    logger.info("Request %s status %s -> %s", request_id, previous, new_status)
    return _build_request_response(employee_request)


async def delete_request(session: AsyncSession, request_id: uuid.UUID) -> None:
    """Permanently remove a request."""
    employee_request = await _get_request_or_404(session, request_id)
    await session.delete(employee_request)
    await session.commit()
    logger.info("Request %s deleted", request_id)
