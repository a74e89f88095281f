"""User repository.

CRUD operations on the users table. Methods flush but never commit; the
caller (the request's get_db dependency or a script) owns the transaction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.models.user import User

if TYPE_CHECKING:
    from projecthub.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

# Columns that may not be cleared through an update
_REQUIRED_FIELDS = frozenset({"first_name", "last_name", "email"})


class UserNotFoundError(ValueError):
    """Raised when a user is not found."""

    pass


class DuplicateEmailError(ValueError):
    """Raised when another user already has the requested email."""

    pass


class UserRepository:
    """Repository for User operations."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        Args:
            db: Async SQLAlchemy session.
        """
        self.db = db

    async def _ensure_email_available(self, email: str) -> None:
        if await self.get_by_email(email) is not None:
            raise DuplicateEmailError(f"A user with email {email} already exists")

    async def create(self, user_data: UserCreate) -> User:
        """Create a new user.

        Raises:
            DuplicateEmailError: If the email is already taken.
        """
        await self._ensure_email_available(user_data.email)

        user = User(**user_data.model_dump())
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        logger.info("Created user %s", user.id)
        return user

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID."""
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by exact email."""
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_users(self, skip: int = 0, limit: int = 50) -> tuple[list[User], int]:
        """List users, newest first, with the total row count."""
        total_result = await self.db.execute(select(func.count()).select_from(User))
        total = total_result.scalar() or 0

        result = await self.db.execute(
            select(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def update(self, user_id: int, user_data: UserUpdate) -> User:
        """Update a user.

        Raises:
            UserNotFoundError: If user not found.
            DuplicateEmailError: If the new email belongs to another user.
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")

        updates = user_data.model_dump(exclude_unset=True)

        new_email = updates.get("email")
        if new_email is not None and new_email != user.email:
            await self._ensure_email_available(new_email)

        for field, value in updates.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            setattr(user, field, value)

        await self.db.flush()
        await self.db.refresh(user)

        logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(updates)) or "no changes")
        return user

    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns False if no such user exists."""
        user = await self.get_by_id(user_id)
        if user is None:
            return False

        await self.db.delete(user)
        await self.db.flush()

        logger.info("Deleted user %s", user_id)
        return True
