"""
Table creation and first-run seed data.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from gestor_fincas.auth.repository import seed_default_users
from gestor_fincas.core.config import Settings, settings
from gestor_fincas.db.base import Base

# Ensure all models are imported so metadata.create_all can see them
from gestor_fincas.models.probe_record import ProbeRecord
from gestor_fincas.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)

INITIAL_PROBE_MESSAGE = "Database initialized successfully"


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")


async def seed_database(session: AsyncSession, cfg: Settings = settings) -> None:
    """Idempotent: only seeds tables that are still empty."""
    await seed_default_users(session, cfg)

    count = await session.execute(select(func.count(ProbeRecord.id)))
    if count.scalar_one() == 0:
        session.add(ProbeRecord(message=INITIAL_PROBE_MESSAGE))
        await session.commit()
