"""
Health and database smoke-test endpoints (public).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gestor_fincas.api.deps import get_db
from gestor_fincas.models.probe_record import ProbeRecord
from gestor_fincas.schemas.health import DatabaseCheckResponse, HealthResponse, ProbeRecordRead

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(timestamp=datetime.now(timezone.utc))


@router.get(
    "/test-db",
    response_model=DatabaseCheckResponse,
    response_model_exclude_none=True,
)
async def check_database(db: AsyncSession = Depends(get_db)) -> DatabaseCheckResponse:
    """Read the five newest probe rows, then append a new one."""
    now = datetime.now(timezone.utc)
    try:
        result = await db.execute(
            select(ProbeRecord)
            .order_by(ProbeRecord.created_at.desc(), ProbeRecord.id.desc())
            .limit(5)
        )
        existing = [ProbeRecordRead.model_validate(r) for r in result.scalars().all()]

        db.add(ProbeRecord(message=f"Test connection at {now.isoformat()}"))
        await db.commit()
    except SQLAlchemyError as exc:
        logger.error("Database check failed: %s", exc)
        await db.rollback()
        return DatabaseCheckResponse(
            status="error",
            message="Database connection failed",
            error=str(exc),
            timestamp=now,
        )

    return DatabaseCheckResponse(
        status="success",
        message="Database connection working correctly",
        existingRecords=existing,
        timestamp=now,
    )
