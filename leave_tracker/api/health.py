from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leave_tracker.config import get_settings
from leave_tracker.db import SessionDep, ping
from leave_tracker.services.notification import (
    LoggingNotificationService,
    SmtpNotificationService,
    get_notification_service,
)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded"]
    version: str
    environment: str
    database: Literal["ok", "unreachable"]
    notifications: Literal["smtp", "log", "custom"]


def _notification_mode() -> Literal["smtp", "log", "custom"]:
    service = get_notification_service()
    if isinstance(service, SmtpNotificationService):
        return "smtp"
    if isinstance(service, LoggingNotificationService):
        return "log"
    return "custom"


@router.get("/health", response_model=HealthResponse)
async def health(session: SessionDep) -> HealthResponse:
    """Report whether the request store is reachable and how notices are delivered."""
    settings = get_settings()
    database: Literal["ok", "unreachable"] = "ok" if await ping(session) else "unreachable"

    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        database=database,
        notifications=_notification_mode(),
    )
