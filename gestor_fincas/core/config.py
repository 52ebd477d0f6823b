"""
Centralised application settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "your-super-secret-jwt-key"


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "Gestor Fincas IA"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # ── Database (async SQLite via aiosqlite) ───────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./data.db"

    # ── JWT ──────────────────────────────────────────────────────────
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "gestor-fincas-api"
    JWT_EXPIRE_HOURS: int = 24

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v: object) -> list[str]:
        if isinstance(v, str) and not v.lstrip().startswith("["):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    @field_validator("JWT_EXPIRE_HOURS")
    @classmethod
    def _validate_expire_hours(cls, v: int) -> int:
        if v < 1:
            raise ValueError("JWT_EXPIRE_HOURS must be at least 1")
        return v

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Default admin (seeded when the users table is empty) ────────
    FIRST_ADMIN_USERNAME: str = "admin"
    FIRST_ADMIN_PASSWORD: str = "admin123"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()

if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
    import logging

    logging.getLogger("gestor_fincas.core.config").warning(
        "You are running with the default JWT secret. "
        "Set JWT_SECRET in your environment or .env file."
    )
