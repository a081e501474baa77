from sqlmodel import SQLModel

from leave_tracker.models.base import TimestampMixin, UUIDBase
from leave_tracker.models.enums import DateMatch, RequestStatus, RequestType, UserRole
from leave_tracker.models.request import EmployeeRequest
from leave_tracker.models.user import User

__all__ = [
    "DateMatch",
    "EmployeeRequest",
    "RequestStatus",
    "RequestType",
    "SQLModel",
    "TimestampMixin",
    "User",
    "UUIDBase",
]
