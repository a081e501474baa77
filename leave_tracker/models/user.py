from __future__ import annotations

from sqlmodel import Field

from leave_tracker.models.base import TimestampMixin, UUIDBase, enum_check_constraint
from leave_tracker.models.enums import UserRole


class User(UUIDBase, TimestampMixin, table=True):
    """A directory entry for someone who can submit or review requests."""

    __tablename__ = "users"
    __table_args__ = (enum_check_constraint("role", UserRole, name="ck_users_role"),)

    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True)
    role: str = Field(default=UserRole.USER, max_length=20, sa_column_kwargs={"server_default": "USER"})
