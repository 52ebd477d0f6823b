"""
Create a user (there is no registration UI). Run from project root:
  python -m gestor_fincas.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m gestor_fincas.scripts.create_user vecino1 secret Resident
"""
import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncSession

from gestor_fincas.auth.repository import SqlAlchemyUserRepository
from gestor_fincas.core.exceptions import UserAlreadyExistsError
from gestor_fincas.core.security import get_password_hash
from gestor_fincas.db.init_db import create_tables
from gestor_fincas.db.session import async_session_factory, engine
from gestor_fincas.schemas.user import VALID_ROLES, UserRecord


async def create_user(session: AsyncSession, username: str, password: str, role: str) -> int:
    """Insert one user; returns a process exit code."""
    username = username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    repo = SqlAlchemyUserRepository(session)
    try:
        user = await repo.save(
            UserRecord(username=username, password=get_password_hash(password), role=role)
        )
    except UserAlreadyExistsError:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1

    print(f"Created user '{user.username}' (id {user.id}) with role '{user.role}'.")
    return 0


async def _run(args: argparse.Namespace) -> int:
    await create_tables(engine)
    try:
        async with async_session_factory() as session:
            return await create_user(session, args.username, args.password, args.role)
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Gestor Fincas user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (stored as entered)")
    parser.add_argument("role", nargs="?", default="Resident", choices=VALID_ROLES)
    args = parser.parse_args()
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
