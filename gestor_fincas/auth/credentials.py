"""Credentials submitted with a login attempt."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


class InvalidCredentialsError(Exception):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)
