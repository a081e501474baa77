# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

import sqlalchemy as sa
from sqlmodel import Field

from leave_tracker.models.base import TimestampMixin, UUIDBase, enum_check_constraint
from leave_tracker.models.enums import RequestStatus, RequestType


class EmployeeRequest(UUIDBase, TimestampMixin, table=True):
    """A leave or work-arrangement request with its review status.

    ``name`` and ``email`` are a snapshot of the requester at submission time
    and are not re-synced when the user's profile changes.
    """

    __tablename__ = "employee_request"
    __table_args__ = (
        enum_check_constraint("status", RequestStatus, name="ck_employee_request_status"),
        enum_check_constraint("type", RequestType, name="ck_employee_request_type"),
        sa.CheckConstraint("end_date >= start_date", name="ck_employee_request_date_order"),
        sa.Index("ix_employee_request_user_start", "user_id", "start_date"),
    )

    user_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True),
    )
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    type: str = Field(max_length=50)
    reason: str
    start_date: date = Field(index=True)
    end_date: date
    status: str = Field(
        default=RequestStatus.PENDING, max_length=50, index=True, sa_column_kwargs={"server_default": "pending"}
    )
