"""Seed the users table with demo members.

Usage:
    python -m projecthub.scripts.seed_users

Idempotent - users whose email already exists are skipped.
"""

import asyncio
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from projecthub.database import async_session_maker, verify_connection
from projecthub.repositories.user import UserRepository
from projecthub.schemas.user import UserCreate

DEMO_USERS: tuple[UserCreate, ...] = (
    UserCreate(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        program="CS",
        description="pioneer",
    ),
    UserCreate(
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.com",
        program="CS",
        description="Compiler author and COBOL co-designer",
    ),
    UserCreate(
        first_name="Katherine",
        last_name="Johnson",
        email="katherine@example.com",
        program="Mathematics",
    ),
)


async def seed_users(
    session_maker: async_sessionmaker[AsyncSession] = async_session_maker,
    users: Sequence[UserCreate] = DEMO_USERS,
) -> dict[str, int]:
    """
    Insert users that do not exist yet.

    Args:
        session_maker: Session factory to write through.
        users: Users to insert.

    Returns:
        Dictionary with counts: created, skipped.
    """
    stats = {"created": 0, "skipped": 0}

    async with session_maker() as session:
        repo = UserRepository(session)
        for user_data in users:
            if await repo.get_by_email(user_data.email) is not None:
                print(f"  Skipping existing user: {user_data.email}")
                stats["skipped"] += 1
                continue
            user = await repo.create(user_data)
            print(f"  Created user: {user.email} (id={user.id})")
            stats["created"] += 1
        await session.commit()

    return stats


async def main() -> None:
    print("Checking database connection...")
    if not await verify_connection():
        print("  Database: FAILED - check DATABASE_URL")
        return
    print("  Database: connected")

    stats = await seed_users()
    print(f"Done: {stats['created']} created, {stats['skipped']} skipped")


if __name__ == "__main__":
    asyncio.run(main())
