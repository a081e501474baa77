# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel

from leave_tracker.models.enums import UserRole


class AuthContext(BaseModel):
    """Caller identity extracted from request headers."""

    user_id: uuid.UUID
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_act_for(self, user_id: uuid.UUID | None) -> bool:
        """Whether the caller may read or change data owned by ``user_id``."""
        return self.is_admin or self.user_id == user_id
