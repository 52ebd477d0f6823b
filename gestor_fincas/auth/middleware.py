"""
Bearer-token authentication attached to every request.

``JwtAuthMiddleware.authenticate`` derives the caller's identity from the
``Authorization`` header; ``create_auth_middleware`` runs it for each request
and stores the result (or ``None``) on ``request.state.auth``. Rejecting
anonymous callers is left to the ``require_auth`` dependency.
"""

from __future__ import annotations

import re
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from gestor_fincas.auth.ports import AuthenticationService
from gestor_fincas.schemas.token import AuthenticatedContext, AuthenticatedUser

_BEARER_RE = re.compile(r"Bearer\s+(.+)")


class JwtAuthMiddleware:
    def __init__(self, auth_service: AuthenticationService) -> None:
        self._auth = auth_service

    def authenticate(self, authorization: str | None) -> AuthenticatedContext | None:
        if not authorization:
            return None

        match = _BEARER_RE.fullmatch(authorization)
        if match is None:
            return None

        payload = self._auth.decode_access_token(match.group(1))
        if payload is None:
            return None

        return AuthenticatedContext(
            user=AuthenticatedUser(userId=payload.userId, username=payload.username)
        )


def create_auth_middleware(
    middleware: JwtAuthMiddleware,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Create an HTTP middleware that derives ``request.state.auth``."""

    async def auth_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.auth = middleware.authenticate(request.headers.get("authorization"))
        return await call_next(request)

    return auth_middleware
