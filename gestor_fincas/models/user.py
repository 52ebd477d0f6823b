"""
User model with login credentials and role.

Passwords are stored exactly as submitted (no hashing).
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from gestor_fincas.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, autoincrement=True)  # type: ignore[assignment]
    username: str = Column(String(255), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    password: str = Column(String(255), nullable=False)  # type: ignore[assignment]
    role: str = Column(  # type: ignore[assignment]
        String(20),
        nullable=False,
        default="Resident",
        server_default="Resident",
    )  # Resident | Administrator
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=_utcnow,
    )
    updated_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
    )
