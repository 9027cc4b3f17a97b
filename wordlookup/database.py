"""Database engine and session management for the word seed table."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from wordlookup.config import settings


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# NullPool: the CLI and the service open short-lived connections only
engine = create_async_engine(
    f"sqlite+aiosqlite:///{settings.db_path}",
    echo=False,
    poolclass=NullPool,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the data directory and database tables."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    # Register models on Base.metadata before create_all
    import wordlookup.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for dependency injection."""
    async with async_session() as session:
        yield session
