# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from leave_tracker.models.enums import UserRole


class UpsertUserRequest(BaseModel):
    """Request body for creating or updating a directory user."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    role: UserRole = UserRole.USER


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: uuid.UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime


class UserListResponse(BaseModel):
    """List of users."""

    items: list[UserResponse]
    total: int
