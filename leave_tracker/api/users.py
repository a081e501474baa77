# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from leave_tracker.api.deps import AdminDep, validate_user_scope
from leave_tracker.db import SessionDep
from leave_tracker.schemas.user import UpsertUserRequest, UserListResponse, UserResponse
from leave_tracker.services import user as user_service

users_router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
)
async def upsert_user(
    user_id: uuid.UUID,
    payload: UpsertUserRequest,
    session: SessionDep,
    auth: AdminDep,
) -> UserResponse:
    """Create or update a user (admin only)."""
    return await user_service.upsert_user(session, user_id, payload)


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(validate_user_scope)],
)
async def get_user(
    user_id: uuid.UUID,
    session: SessionDep,
) -> UserResponse:
    """Get a user. Users may read their own record; admins may read any."""
    return await user_service.get_user(session, user_id)


@users_router.get(
    "",
    response_model=UserListResponse,
)
async def list_users(
    session: SessionDep,
    auth: AdminDep,
) -> UserListResponse:
    """List every user (admin only)."""
    return await user_service.list_users(session)
