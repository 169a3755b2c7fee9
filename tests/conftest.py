"""Shared test fixtures for pytest"""
import os
from datetime import datetime, timezone

# Settings are read once at import time; configure before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["SEED_DATA"] = "false"
os.environ["DATABASE_AUTO_CREATE"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from main import app  # noqa: E402
from src.domain.entities import Author  # noqa: E402
from src.infrastructure.persistence import models  # noqa: E402, F401
from src.infrastructure.persistence.database import Base, get_db  # noqa: E402
from src.infrastructure.persistence.repositories import AuthorRepository  # noqa: E402
from src.presentation.api.dependencies import get_clock  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FIXED_NOW = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


class FixedClock:
    """Deterministic IDateTime for tests"""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    @property
    def utc_now(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
async def test_engine():
    """Create test database engine (one in-memory SQLite database per test)"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    """Create test database session"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
async def client(test_db, clock):
    """HTTP client for API testing"""

    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def test_author(test_db) -> Author:
    """Create test author"""
    author = Author.create("Albert", "Blanco", FIXED_NOW).value
    author.clear_domain_events()
    await AuthorRepository(test_db).add(author)
    await test_db.commit()
    return author
