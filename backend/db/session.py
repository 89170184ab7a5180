"""
AgriModel Database Session Management

Async SQLAlchemy engine and session factory. SQLite (aiosqlite) is the
default backend; pool sizing only applies to server databases.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from core.config import get_settings

settings = get_settings()


def _pool_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {"pool_size": 20, "max_overflow": 10, "pool_pre_ping": True}


engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    **_pool_options(settings.database_url),
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models."""
    pass


async def create_schema(bind=engine) -> None:
    """Create every mapped table that does not exist yet."""
    import db.models  # noqa: F401  registers the mappers on Base.metadata

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
