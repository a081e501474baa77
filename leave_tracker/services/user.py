from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_tracker.exceptions import ConflictError, NotFoundError
from leave_tracker.models.enums import UserRole
from leave_tracker.models.user import User
from leave_tracker.schemas.user import UserListResponse, UserResponse

if TYPE_CHECKING:
    import uuid

    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_tracker.schemas.user import UpsertUserRequest


def _build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=UserRole(user.role),
        created_at=user.created_at,
    )


async def get_user_or_404(session: AsyncSession, user_id: uuid.UUID) -> User:
    """Fetch a user by ID. Raises NotFoundError if absent."""
    user = await session.get(User, user_id)
    if user is None:
        raise NotFoundError("User does not exist")
    return user


async def upsert_user(
    session: AsyncSession,
    user_id: uuid.UUID,
    payload: UpsertUserRequest,
) -> UserResponse:
    """Create or update a user under a caller-chosen ID."""
    result = await session.execute(
        select(User).where(col(User.email) == payload.email, col(User.id) != user_id)
    )
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Email already belongs to another user")

    user = await session.get(User, user_id)
    if user is None:
        user = User(id=user_id, name=payload.name, email=payload.email, role=payload.role.value)
        session.add(user)
    else:
        user.name = payload.name
        user.email = payload.email
        user.role = payload.role.value

    await session.commit()
    await session.refresh(user)
    return _build_user_response(user)


async def get_user(session: AsyncSession, user_id: uuid.UUID) -> UserResponse:
    """Get a single user by ID."""
    return _build_user_response(await get_user_or_404(session, user_id))


async def list_users(session: AsyncSession) -> UserListResponse:
    """List every user, ordered by name."""
    result = await session.execute(select(User).order_by(col(User.name), col(User.email)))
    users = list(result.scalars().all())
    return UserListResponse(items=[_build_user_response(u) for u in users], total=len(users))
