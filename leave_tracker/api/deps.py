# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import Depends, Header, Path, Query, status

from leave_tracker.exceptions import AppError
from leave_tracker.models.enums import DateMatch, UserRole
from leave_tracker.schemas.auth import AuthContext
from leave_tracker.schemas.request import RequestFilter, StatusFilter, TypeFilter
from leave_tracker.services.notification import NotificationService, get_notification_service


async def get_auth_context(
    x_user_id: uuid.UUID = Header(),
    x_role: UserRole = Header(default=UserRole.USER),
) -> AuthContext:
    """Extract the caller identity from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_admin(
    auth: AuthDep,
) -> AuthContext:
    """Require admin role for the request."""
    if not auth.is_admin:
        raise AppError("Admin access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]


async def validate_user_scope(
    user_id: uuid.UUID = Path(),
    auth: AuthContext = Depends(get_auth_context),
) -> AuthContext:
    """Ensure the path user_id is the caller, unless the caller is an admin."""
    if not auth.can_act_for(user_id):
        raise AppError("Not authorized to act for this user", status_code=status.HTTP_403_FORBIDDEN)
    return auth


async def get_request_filter(
    status_filter: StatusFilter = Query(default="all", alias="status"),
    type_filter: TypeFilter = Query(default="all", alias="type"),
    search: str = Query(default="", max_length=200),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
    date_match: DateMatch | None = Query(default=None),
) -> RequestFilter:
    """Collect dashboard filter options from the query string."""
    return RequestFilter(
        status=status_filter,
        type=type_filter,
        search=search,
        date_from=date_from,
        date_to=date_to,
        date_match=date_match,
    )


FilterDep = Annotated[RequestFilter, Depends(get_request_filter)]
NotifierDep = Annotated[NotificationService, Depends(get_notification_service)]
