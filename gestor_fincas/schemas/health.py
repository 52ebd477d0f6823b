"""Pydantic schemas for health and database check responses."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: datetime


class ProbeRecordRead(BaseModel):
    id: int
    message: str
    created_at: datetime | None

    model_config = {"from_attributes": True}


class DatabaseCheckResponse(BaseModel):
    status: Literal["success", "error"]
    message: str
    existingRecords: list[ProbeRecordRead] | None = None
    error: str | None = None
    timestamp: datetime
