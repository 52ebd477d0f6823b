"""Tests for LoginUseCase against in-memory doubles."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from gestor_fincas.auth.credentials import Credentials
from gestor_fincas.auth.login import LoginUseCase
from gestor_fincas.core.exceptions import UserAlreadyExistsError
from gestor_fincas.core.security import JwtAuthenticationService
from gestor_fincas.schemas.user import UserRecord


class InMemoryUserRepository:
    def __init__(self, users: list[UserRecord] | None = None) -> None:
        self._rows: dict[int, UserRecord] = {}
        for user in users or []:
            self._rows[user.id] = user

    async def find_by_username(self, username: str) -> UserRecord | None:
        return next((u for u in self._rows.values() if u.username == username), None)

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        return self._rows.get(user_id)

    async def save(self, user: UserRecord) -> UserRecord:
        existing = await self.find_by_username(user.username)
        if existing is not None and existing.id != user.id:
            raise UserAlreadyExistsError(user.username)
        now = datetime.now(timezone.utc)
        user_id = user.id or max(self._rows, default=0) + 1
        saved = user.model_copy(update={"id": user_id, "updated_at": now})
        self._rows[user_id] = saved
        return saved


class UnavailableUserRepository(InMemoryUserRepository):
    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    async def find_by_username(self, username: str) -> UserRecord | None:
        raise self._error


class BrokenTokenService(JwtAuthenticationService):
    def create_access_token(self, payload, expires_delta=None):
        raise RuntimeError("signing key unavailable")


ADMIN = UserRecord(id=1, username="admin", password="admin123", role="Administrator")


@pytest.fixture
def use_case(auth_service) -> LoginUseCase:
    return LoginUseCase(InMemoryUserRepository([ADMIN]), auth_service)


@pytest.mark.asyncio
async def test_login_success_returns_user_and_token(use_case, auth_service):
    result = await use_case.execute(Credentials("admin", "admin123"))

    assert result.success is True
    assert result.error is None
    assert result.user is not None
    assert result.user.username == "admin"
    assert result.user.role == "Administrator"
    assert isinstance(result.token, str)

    payload = auth_service.decode_access_token(result.token)
    assert payload is not None
    assert payload.userId == 1
    assert payload.username == "admin"


@pytest.mark.asyncio
async def test_unknown_user_fails_without_token(use_case):
    result = await use_case.execute(Credentials("nobody", "admin123"))

    assert result.success is False
    assert result.error
    assert result.user is None
    assert result.token is None


@pytest.mark.asyncio
async def test_wrong_password_fails_without_token(use_case):
    result = await use_case.execute(Credentials("admin", "wrong"))

    assert result.success is False
    assert result.user is None
    assert result.token is None


@pytest.mark.asyncio
async def test_failure_messages_do_not_reveal_which_part_was_wrong(use_case):
    unknown = await use_case.execute(Credentials("nobody", "admin123"))
    wrong_pw = await use_case.execute(Credentials("admin", "wrong"))
    assert unknown.error == wrong_pw.error


@pytest.mark.asyncio
async def test_username_lookup_is_case_sensitive(use_case):
    result = await use_case.execute(Credentials("ADMIN", "admin123"))
    assert result.success is False


@pytest.mark.asyncio
async def test_empty_credentials_fail(use_case):
    result = await use_case.execute(Credentials("", ""))
    assert result.success is False


@pytest.mark.asyncio
async def test_store_failure_is_converted_to_result(auth_service):
    use_case = LoginUseCase(
        UnavailableUserRepository(ConnectionError("database unreachable")), auth_service
    )
    result = await use_case.execute(Credentials("admin", "admin123"))

    assert result.success is False
    assert result.error == "database unreachable"
    assert result.token is None


@pytest.mark.asyncio
async def test_store_failure_without_message_uses_generic_error(auth_service):
    use_case = LoginUseCase(UnavailableUserRepository(RuntimeError()), auth_service)
    result = await use_case.execute(Credentials("admin", "admin123"))

    assert result.success is False
    assert result.error == "Authentication failed"


@pytest.mark.asyncio
async def test_signing_failure_is_converted_to_result():
    use_case = LoginUseCase(
        InMemoryUserRepository([ADMIN]), BrokenTokenService(secret="test-secret")
    )
    result = await use_case.execute(Credentials("admin", "admin123"))

    assert result.success is False
    assert result.error == "signing key unavailable"
    assert result.user is None


@pytest.mark.asyncio
async def test_newly_saved_user_can_log_in(auth_service):
    repo = InMemoryUserRepository([ADMIN])
    await repo.save(UserRecord(username="vecino", password=auth_service.hash_password("pw")))
    result = await LoginUseCase(repo, auth_service).execute(Credentials("vecino", "pw"))

    assert result.success is True
    assert result.user.id == 2
    assert result.user.role == "Resident"
