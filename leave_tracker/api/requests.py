# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from leave_tracker.api.deps import AdminDep, AuthDep, FilterDep, NotifierDep, validate_user_scope
from leave_tracker.db import SessionDep
from leave_tracker.exceptions import AppError
from leave_tracker.schemas.auth import AuthContext
from leave_tracker.schemas.request import (
    CreateRequestPayload,
    DeleteRequestResponse,
    RequestListResponse,
    RequestResponse,
    RequestStats,
    StatusUpdatePayload,
)
from leave_tracker.services import filtering
from leave_tracker.services import request as request_service

user_requests_router = APIRouter(
    prefix="/users/{user_id}/requests",
    tags=["requests"],
    dependencies=[Depends(validate_user_scope)],
)

requests_router = APIRouter(
    prefix="/requests",
    tags=["requests"],
)


def _ensure_owner_or_admin(auth: AuthContext, request: RequestResponse) -> None:
    if not auth.can_act_for(request.user_id):
        raise AppError("Not authorized to access this request", status_code=status.HTTP_403_FORBIDDEN)


# ---------------------------------------------------------------------------
# Employee view: requests owned by one user
# ---------------------------------------------------------------------------


@user_requests_router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(
    user_id: uuid.UUID,
    payload: CreateRequestPayload,
    session: SessionDep,
    notifier: NotifierDep,
) -> RequestResponse:
    """Submit a new leave request. It always starts as pending."""
    return await request_service.create_request(session, notifier, user_id, payload)


@user_requests_router.get("", response_model=RequestListResponse)
async def list_user_requests(
    user_id: uuid.UUID,
    session: SessionDep,
    filters: FilterDep,
) -> RequestListResponse:
    """List a user's requests, latest leave period first, with optional filters."""
    requests = await request_service.list_requests_for_user(session, user_id)
    items = filtering.filter_requests(requests, filters)
    return RequestListResponse(items=items, total=len(items))


@user_requests_router.get("/summary", response_model=RequestStats)
async def user_request_summary(
    user_id: uuid.UUID,
    session: SessionDep,
    filters: FilterDep,
) -> RequestStats:
    """Dashboard statistics for a user's requests."""
    requests = await request_service.list_requests_for_user(session, user_id)
    return filtering.compute_stats(requests, filtering.filter_requests(requests, filters))


# ---------------------------------------------------------------------------
# Administrative view and single-request actions
# ---------------------------------------------------------------------------


@requests_router.get("", response_model=RequestListResponse)
async def list_all_requests(
    session: SessionDep,
    auth: AdminDep,
    filters: FilterDep,
) -> RequestListResponse:
    """List every request for review, with optional filters (admin only)."""
    requests = await request_service.list_all_requests(session)
    items = filtering.filter_requests(requests, filters, admin_view=True)
    return RequestListResponse(items=items, total=len(items))


@requests_router.get("/summary", response_model=RequestStats)
async def admin_request_summary(
    session: SessionDep,
    auth: AdminDep,
    filters: FilterDep,
) -> RequestStats:
    """Dashboard statistics across all requests (admin only)."""
    requests = await request_service.list_all_requests(session)
    return filtering.compute_stats(requests, filtering.filter_requests(requests, filters, admin_view=True))


@requests_router.get("/{request_id}", response_model=RequestResponse)
async def get_request(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> RequestResponse:
    """Get a single request. Owners and admins only."""
    request = await request_service.get_request(session, request_id)
    _ensure_owner_or_admin(auth, request)
    return request


@requests_router.patch("/{request_id}", response_model=RequestResponse)
async def update_request_status(
    request_id: uuid.UUID,
    payload: StatusUpdatePayload,
    session: SessionDep,
    auth: AdminDep,
) -> RequestResponse:
    """Set the status of a request (admin only)."""
    return await request_service.update_status(session, request_id, payload.status)


@requests_router.delete("/{request_id}", response_model=DeleteRequestResponse)
async def delete_request(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> DeleteRequestResponse:
    """Permanently delete a request. Owners and admins only."""
    request = await request_service.get_request(session, request_id)
    _ensure_owner_or_admin(auth, request)
    await request_service.delete_request(session, request_id)
    return DeleteRequestResponse(message="Request deleted successfully", id=request_id)
