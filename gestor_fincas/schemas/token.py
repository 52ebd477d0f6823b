"""Pydantic schemas for JWT payloads and the per-request auth context."""

from __future__ import annotations

from pydantic import BaseModel


class TokenPayload(BaseModel):
    userId: int
    username: str
    iat: int
    exp: int
    iss: str


class AuthenticatedUser(BaseModel):
    userId: int
    username: str

    model_config = {"frozen": True}


class AuthenticatedContext(BaseModel):
    user: AuthenticatedUser

    model_config = {"frozen": True}
