"""
SQLAlchemy-backed user store.

One repository instance wraps one ``AsyncSession``; each ``save`` commits
its own transaction.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gestor_fincas.core.config import Settings, settings
from gestor_fincas.core.exceptions import UserAlreadyExistsError, UserNotFoundError
from gestor_fincas.core.security import get_password_hash
from gestor_fincas.models.user import User
from gestor_fincas.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_username(self, username: str) -> UserRecord | None:
        result = await self._session.execute(select(User).where(User.username == username))
        row = result.scalar_one_or_none()
        return UserRecord.model_validate(row) if row is not None else None

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        row = await self._session.get(User, user_id)
        return UserRecord.model_validate(row) if row is not None else None

    async def save(self, user: UserRecord) -> UserRecord:
        """Insert when ``user.id`` is None, otherwise replace the stored fields.

        Raises ``UserAlreadyExistsError`` on a duplicate username and
        ``UserNotFoundError`` when updating an id that does not exist.
        """
        if user.id is None:
            row = User(username=user.username, password=user.password, role=user.role)
            self._session.add(row)
        else:
            row = await self._session.get(User, user.id)
            if row is None:
                raise UserNotFoundError(user.id)
            row.username = user.username
            row.password = user.password
            row.role = user.role
            row.updated_at = datetime.now(timezone.utc)

        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            raise UserAlreadyExistsError(user.username) from exc

        await self._session.refresh(row)
        return UserRecord.model_validate(row)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(User.id)))
        return result.scalar_one()


async def seed_default_users(session: AsyncSession, cfg: Settings = settings) -> UserRecord | None:
    """Create the default administrator if the users table is empty."""
    repo = SqlAlchemyUserRepository(session)
    if await repo.count() > 0:
        return None

    admin = await repo.save(
        UserRecord(
            username=cfg.FIRST_ADMIN_USERNAME,
            password=get_password_hash(cfg.FIRST_ADMIN_PASSWORD),
            role="Administrator",
        )
    )
    logger.info("Default admin created: %s (password: <redacted>)", admin.username)
    return admin
