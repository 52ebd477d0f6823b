"""
JWT token creation / verification and password checking.

Passwords are stored and compared as plaintext: the passlib context is
configured with the ``plaintext`` scheme, so ``get_password_hash`` is the
identity function and ``verify_password`` is an exact, case-sensitive
comparison.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from pydantic import ValidationError

from gestor_fincas.core.config import settings
from gestor_fincas.schemas.token import TokenPayload

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["plaintext"])

# Claims a token must carry to be accepted.
_REQUIRED_CLAIMS = {"require_exp": True, "require_iat": True, "require_iss": True}


# ── Passwords ───────────────────────────────────────────────────────
def verify_password(plain: str, stored: str) -> bool:
    try:
        return pwd_context.verify(plain, stored)
    except PasswordSizeError:
        # passlib caps secrets at 4096 chars; plaintext equality has no limit.
        return plain == stored
    except (TypeError, ValueError):
        return False


def get_password_hash(plain: str) -> str:
    """No cryptographic transformation: returns ``plain`` unchanged."""
    try:
        return pwd_context.hash(plain)
    except PasswordSizeError:
        return plain


# ── JWT tokens ──────────────────────────────────────────────────────
class JwtAuthenticationService:
    """Password verifier plus HS256 token issuer/verifier."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "gestor-fincas-api",
        expires_delta: timedelta = timedelta(hours=24),
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires_delta = expires_delta

    @property
    def issuer(self) -> str:
        return self._issuer

    def validate_password(self, plain: str, stored: str) -> bool:
        return verify_password(plain, stored)

    def hash_password(self, plain: str) -> str:
        return get_password_hash(plain)

    def create_access_token(
        self,
        payload: dict[str, Any],
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign ``payload`` with ``iat``, ``exp`` and ``iss`` claims added."""
        now = datetime.now(timezone.utc)
        expire = now + (self._expires_delta if expires_delta is None else expires_delta)
        claims = {
            **payload,
            "iat": now,
            "exp": expire,
            "iss": self._issuer,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> TokenPayload | None:
        """Return the verified payload, or ``None`` for any invalid token."""
        try:
            raw = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options=_REQUIRED_CLAIMS,
            )
            return TokenPayload.model_validate(raw)
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None
        except ValidationError:
            logger.debug("Rejected token: payload is missing identity claims")
            return None
        except (TypeError, ValueError) as exc:
            # jose coerces exp/iat with int() and lets TypeError escape.
            logger.debug("Rejected token: malformed time claim (%s)", exc)
            return None


@lru_cache
def get_auth_service() -> JwtAuthenticationService:
    """Service built from application settings (shared, stateless)."""
    return JwtAuthenticationService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        issuer=settings.JWT_ISSUER,
        expires_delta=timedelta(hours=settings.JWT_EXPIRE_HOURS),
    )
