"""Pydantic schemas for the login and profile endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from gestor_fincas.schemas.token import AuthenticatedUser
from gestor_fincas.schemas.user import UserRead


class LoginRequest(BaseModel):
    # Optional so that missing fields produce the 400 below instead of a 422.
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: UserRead


class ProfileResponse(BaseModel):
    success: bool = True
    message: str = "Profile retrieved successfully"
    user: AuthenticatedUser
    timestamp: datetime


class MessageResponse(BaseModel):
    success: bool = False
    message: str
