"""
Login use case: username lookup, password check, token issuance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gestor_fincas.auth.credentials import Credentials, InvalidCredentialsError
from gestor_fincas.auth.ports import AuthenticationService, UserRepository
from gestor_fincas.schemas.user import UserRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    success: bool
    user: UserRecord | None = None
    token: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, user: UserRecord, token: str) -> LoginResult:
        return cls(success=True, user=user, token=token)

    @classmethod
    def failed(cls, error: str) -> LoginResult:
        return cls(success=False, error=error)


class LoginUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        auth_service: AuthenticationService,
    ) -> None:
        self._users = user_repository
        self._auth = auth_service

    async def execute(self, credentials: Credentials) -> LoginResult:
        """Never raises: every failure comes back as ``LoginResult.failed``."""
        try:
            user = await self._users.find_by_username(credentials.username)
            if user is None:
                raise InvalidCredentialsError()

            if not self._auth.validate_password(credentials.password, user.password):
                raise InvalidCredentialsError()

            token = self._auth.create_access_token(
                {"userId": user.id, "username": user.username}
            )
        except InvalidCredentialsError as exc:
            logger.warning("Login rejected for username %r", credentials.username)
            return LoginResult.failed(str(exc))
        except Exception as exc:
            logger.error("Login failed unexpectedly: %s", exc, exc_info=True)
            return LoginResult.failed(str(exc) or "Authentication failed")

        logger.info("User %s logged in", user.id)
        return LoginResult.ok(user, token)
