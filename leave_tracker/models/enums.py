from __future__ import annotations

import enum


class RequestStatus(enum.StrEnum):
    """Lifecycle stage of a request. Any state may move to any other."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DENIED = "denied"


class RequestType(enum.StrEnum):
    """Category of leave or work arrangement."""

    WORK_FROM_HOME = "work_from_home"
    HOLIDAY = "holiday"
    HALFDAY = "halfday"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable name shown on dashboards and matched by search."""
        return _TYPE_LABELS[self]


_TYPE_LABELS: dict[RequestType, str] = {
    RequestType.WORK_FROM_HOME: "Work from Home",
    RequestType.HOLIDAY: "Holiday",
    RequestType.HALFDAY: "Half Day",
    RequestType.OTHER: "Other",
}


class UserRole(enum.StrEnum):
    """Role of a user in the directory."""

    ADMIN = "ADMIN"
    USER = "USER"


class DateMatch(enum.StrEnum):
    """How a request's date span is compared against a date window."""

    OVERLAP = "overlap"
    CONTAINMENT = "containment"
