"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from latchkey.core.config import Settings
from latchkey.infrastructure.auth import CredentialHasher, JWTService
from latchkey.infrastructure.persistence import models  # noqa: F401
from latchkey.infrastructure.persistence.database import Base

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: cheap Argon2 parameters, in-memory database."""
    return Settings(
        environment="testing",
        secret_key=TEST_SECRET,
        database_url="sqlite+aiosqlite:///:memory:",
        hash_time_cost=1,
        hash_memory_cost=1024,
        hash_parallelism=1,
        log_format="console",
    )


@pytest.fixture
def hasher(settings: Settings) -> CredentialHasher:
    return CredentialHasher.from_settings(settings)


@pytest.fixture
def jwt_service(settings: Settings) -> JWTService:
    return JWTService.from_settings(settings)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def app(settings: Settings, db_session: AsyncSession) -> FastAPI:
    """Application wired to the test database session."""
    from latchkey.infrastructure.api.app import create_app
    from latchkey.infrastructure.api.dependencies import get_db_session

    application = create_app(settings)
    application.dependency_overrides[get_db_session] = lambda: db_session
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
