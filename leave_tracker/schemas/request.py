# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from leave_tracker.models.enums import DateMatch, RequestStatus, RequestType

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateRequestPayload(BaseModel):
    """Request body for submitting a new leave request.

    Every field is optional at the schema level so that missing or blank
    values are reported by the service as a single ``ValidationError``.
    Unknown keys such as ``status`` are ignored.
    """

    name: str | None = None
    email: str | None = None
    type: RequestType | None = None
    reason: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class StatusUpdatePayload(BaseModel):
    """Request body for the admin status update.

    ``status`` is a plain string; membership is checked by the service.
    """

    status: str | None = None


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

StatusFilter = Literal["all", "pending", "accepted", "denied"]
TypeFilter = Literal["all", "work_from_home", "holiday", "halfday", "other"]


class RequestFilter(BaseModel):
    """Filter configuration applied to a snapshot of requests."""

    status: StatusFilter = "all"
    type: TypeFilter = "all"
    search: str = ""
    date_from: date | None = None
    date_to: date | None = None
    date_match: DateMatch | None = None

    @property
    def is_active(self) -> bool:
        return (
            self.status != "all"
            or self.type != "all"
            or self.search != ""
            or self.date_from is not None
            or self.date_to is not None
        )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RequestResponse(BaseModel):
    """Response schema for a single leave request."""

    id: uuid.UUID
    user_id: uuid.UUID | None
    name: str
    email: str
    type: RequestType
    reason: str
    start_date: date
    end_date: date
    status: RequestStatus
    created_at: datetime


class RequestListResponse(BaseModel):
    """Filtered list of leave requests."""

    items: list[RequestResponse]
    total: int


class RequestStats(BaseModel):
    """Dashboard statistics.

    Counts and ``total_days_requested`` cover the unfiltered set;
    ``approved_days`` covers the filtered set only.
    """

    total_count: int = Field(ge=0)
    pending_count: int = Field(ge=0)
    accepted_count: int = Field(ge=0)
    denied_count: int = Field(ge=0)
    approved_days: int = Field(ge=0)
    total_days_requested: int = Field(ge=0)


class DeleteRequestResponse(BaseModel):
    """Confirmation returned after a permanent delete."""

    message: str
    id: uuid.UUID
