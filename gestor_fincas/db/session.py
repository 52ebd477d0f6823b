"""
Async SQLAlchemy engine & session factory for the aiosqlite store.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gestor_fincas.core.config import settings

# Seconds a writer waits on a locked SQLite file before failing.
SQLITE_BUSY_TIMEOUT = 5.0


def build_engine(url: str) -> AsyncEngine:
    """Create an async engine; in-memory databases share one connection."""
    if ":memory:" in url or url.endswith("://"):
        return create_async_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        url,
        echo=False,
        connect_args={"timeout": SQLITE_BUSY_TIMEOUT},
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL)

async_session_factory = build_session_factory(engine)
