"""Pydantic schemas for user records."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

UserRole = Literal["Resident", "Administrator"]

VALID_ROLES: tuple[str, ...] = ("Resident", "Administrator")


class UserRecord(BaseModel):
    """A stored user. ``id`` is ``None`` until the record has been saved."""

    id: int | None = None
    username: str
    password: str
    role: UserRole = "Resident"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class UserRead(BaseModel):
    id: int
    username: str
