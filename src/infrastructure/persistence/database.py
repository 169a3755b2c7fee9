from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.orm import DeclarativeBase

from src.infrastructure.config.settings import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """Pool tuning only applies to server databases (not SQLite)"""
    if not database_url.startswith("postgresql"):
        return {}
    return {
        "pool_size": 20,
        "max_overflow": 30,
        "pool_recycle": 3600,
        "connect_args": {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
        },
    }


# Create engine once at module level (not with lru_cache)
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    **_engine_options(settings.database_url),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


# Modern SQLAlchemy 2.0 pattern
class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


async def get_db():
    """
    Database session dependency.

    Does not commit: write paths commit explicitly through the unit of
    work so domain events are only dispatched after a successful commit.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables() -> None:
    """Create all tables known to Base.metadata (idempotent)"""
    # Register models on the metadata
    from src.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
