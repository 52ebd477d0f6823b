"""
Capabilities the login use case depends on.

Concrete implementations live in ``auth.repository`` and ``core.security``;
tests substitute in-memory doubles.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol

from gestor_fincas.schemas.token import TokenPayload
from gestor_fincas.schemas.user import UserRecord


class UserRepository(Protocol):
    async def find_by_username(self, username: str) -> UserRecord | None: ...

    async def find_by_id(self, user_id: int) -> UserRecord | None: ...

    async def save(self, user: UserRecord) -> UserRecord: ...


class AuthenticationService(Protocol):
    def validate_password(self, plain: str, stored: str) -> bool: ...

    def hash_password(self, plain: str) -> str: ...

    def create_access_token(
        self, payload: dict[str, Any], expires_delta: timedelta | None = None
    ) -> str: ...

    def decode_access_token(self, token: str) -> TokenPayload | None: ...
