"""
FastAPI dependencies — database session, login wiring and the auth guard.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gestor_fincas.auth.login import LoginUseCase
from gestor_fincas.auth.repository import SqlAlchemyUserRepository
from gestor_fincas.core.security import JwtAuthenticationService, get_auth_service
from gestor_fincas.db.session import async_session_factory
from gestor_fincas.schemas.token import AuthenticatedContext

UNAUTHORIZED_MESSAGE = "Unauthorized - Valid JWT token required"


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Login wiring ────────────────────────────────────────────────────
def get_user_repository(db: AsyncSession = Depends(get_db)) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


def get_login_use_case(
    users: SqlAlchemyUserRepository = Depends(get_user_repository),
    auth_service: JwtAuthenticationService = Depends(get_auth_service),
) -> LoginUseCase:
    return LoginUseCase(users, auth_service)


# ── Auth dependencies ───────────────────────────────────────────────
def get_auth_context(request: Request) -> AuthenticatedContext | None:
    """Identity derived by the auth middleware for this request, if any."""
    return getattr(request.state, "auth", None)


def require_auth(
    auth: AuthenticatedContext | None = Depends(get_auth_context),
) -> AuthenticatedContext:
    """Reject the request with 401 unless a valid bearer token was sent."""
    if auth is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth
