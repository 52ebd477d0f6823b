"""
Scratch table written by the database smoke-test endpoint.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from gestor_fincas.db.base import Base


class ProbeRecord(Base):
    __tablename__ = "test_table"

    id: int = Column(Integer, primary_key=True, autoincrement=True)  # type: ignore[assignment]
    message: str = Column(Text, nullable=False)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
