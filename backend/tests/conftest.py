"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- HTTP client for API testing
- Test database engine and sessions
- Common user test data
"""

import os
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import projecthub.models  # noqa: F401
from projecthub.database import Base, get_db
from projecthub.main import app
from projecthub.models.user import User


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with automatic schema management.

    Creates all tables before tests, drops them after.
    Uses DATABASE_TEST_URL env var if set, otherwise an in-memory SQLite
    database shared across connections.
    """
    db_url = os.environ.get("DATABASE_TEST_URL")
    if db_url:
        engine = create_async_engine(db_url, echo=False)
    else:
        engine = create_async_engine(
            "sqlite+aiosqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncSession:
    """Create test database session with automatic rollback.

    Each test gets a fresh session that rolls back on completion,
    ensuring test isolation.
    """
    async with session_maker() as session:
        yield session
        await session.rollback()


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(session_maker):
    """Async test client for FastAPI app with test database.

    Overrides the app's get_db dependency to use the test database,
    ensuring API tests use the same database as other test fixtures.
    """

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.pop(get_db, None)


# =============================================================================
# User Test Data Fixtures
# =============================================================================


@pytest.fixture
def ada() -> User:
    """Transient (unsaved) user with every field populated."""
    return User(
        id=1,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        program="CS",
        description="pioneer",
        created_at=datetime(2024, 1, 1, 0, 0, 0),
    )


@pytest.fixture
def user_payload() -> dict:
    """Camel-cased request body for POST /api/users."""
    return {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace@example.com",
        "program": "CS",
        "description": "Compiler author",
    }


@pytest_asyncio.fixture
async def user_in_db(session_maker) -> int:
    """Create a user in the test database and return its ID."""
    async with session_maker() as session:
        user = User(
            first_name="Katherine",
            last_name="Johnson",
            email="katherine@example.com",
            program="Mathematics",
            description=None,
            created_at=datetime(2024, 6, 1, 9, 30, 0),
        )
        session.add(user)
        await session.commit()
        return user.id
