"""Best-effort notifications sent when a leave request is submitted."""

from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import aiosmtplib

from leave_tracker.config import get_settings
from leave_tracker.exceptions import DependencyError
from leave_tracker.services.filtering import duration_days

if TYPE_CHECKING:
    from leave_tracker.config import Settings
    from leave_tracker.schemas.request import RequestResponse

logger = logging.getLogger(__name__)


def build_submission_message(request: RequestResponse, sender: str, recipients: list[str]) -> EmailMessage:
    """Compose the plain-text email announcing a new request."""
    days = duration_days(request.start_date, request.end_date)
    message = EmailMessage()
    message["Subject"] = f"New {request.type.label} request from {request.name}"
    message["From"] = sender
    message["To"] = ", ".join(recipients)
    message["Reply-To"] = request.email
    message.set_content(
        f"{request.name} <{request.email}> submitted a {request.type.label} request.\n\n"
        f"From: {request.start_date.isoformat()}\n"
        f"To: {request.end_date.isoformat()} ({days} day{'s' if days != 1 else ''})\n"
        f"Reason: {request.reason}\n\n"
        f"Request ID: {request.id}\n"
    )
    return message


@runtime_checkable
class NotificationService(Protocol):
    """Interface for submission notifications."""

    async def request_submitted(self, request: RequestResponse) -> None:
        """Announce a newly created request to the configured recipients."""
        ...


class SmtpNotificationService:
    """Sends submission emails through an SMTP relay."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def request_submitted(self, request: RequestResponse) -> None:
        recipients = self._settings.notification_recipients
        if not recipients:
            return

        message = build_submission_message(request, self._settings.notification_sender, recipients)
        try:
            await aiosmtplib.send(
                message,
                hostname=self._settings.smtp_host,
                port=self._settings.smtp_port,
                username=self._settings.smtp_username,
                password=self._settings.smtp_password,
                start_tls=self._settings.smtp_start_tls,
                timeout=self._settings.smtp_timeout_seconds,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise DependencyError(f"Notification delivery failed: {exc}") from exc
        logger.info("Sent submission notice for request %s to %d recipient(s)", request.id, len(recipients))


class LoggingNotificationService:
    """Writes notifications to the log. Used when no SMTP host is configured."""

    async def request_submitted(self, request: RequestResponse) -> None:
        logger.info(
            "Request %s submitted by %s (%s): %s %s..%s",
            request.id,
            request.name,
            request.email,
            request.type.value,
            request.start_date,
            request.end_date,
        )


class InMemoryNotificationService:
    """Records notifications instead of delivering them (testing)."""

    def __init__(self) -> None:
        self.sent: list[RequestResponse] = []

    async def request_submitted(self, request: RequestResponse) -> None:
        self.sent.append(request)


_notification_service: NotificationService | None = None


def get_notification_service() -> NotificationService:
    """FastAPI dependency for the notification service.

    Built from settings on first use: SMTP when ``smtp_host`` is set,
    log-only otherwise.
    """
    global _notification_service
    if _notification_service is None:
        settings = get_settings()
        if settings.smtp_host:
            _notification_service = SmtpNotificationService(settings)
        else:
            _notification_service = LoggingNotificationService()
    return _notification_service


def set_notification_service(service: NotificationService | None) -> None:
    """Override the service (for testing or production wiring)."""
    global _notification_service
    _notification_service = service
