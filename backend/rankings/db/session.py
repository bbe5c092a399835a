"""
Database Session Management

Provides the async engine and the request-scoped session dependency.
Migrations run through Alembic with their own sync engine (alembic/env.py).
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from typing import AsyncGenerator

from rankings.config import settings


def _get_async_url(url: str) -> str:
    """Map a configured sync URL to its async driver."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///")
    elif url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    return url


_async_url = _get_async_url(settings.database_url)

if _async_url.startswith("postgresql"):
    async_engine = create_async_engine(
        _async_url,
        pool_size=5,
        max_overflow=10,
        pool_recycle=1800,  # 30 minutes
    )
else:
    async_engine = create_async_engine(_async_url)

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database session."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create any missing tables (development databases only)."""
    from rankings.models import load_all_models

    async with async_engine.begin() as conn:
        await conn.run_sync(load_all_models().create_all)
