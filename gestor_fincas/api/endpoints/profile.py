"""Profile endpoint returning the identity of the authenticated caller."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from gestor_fincas.api.deps import require_auth
from gestor_fincas.schemas.auth import MessageResponse, ProfileResponse
from gestor_fincas.schemas.token import AuthenticatedContext

router = APIRouter(tags=["profile"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"model": MessageResponse}},
)
async def read_profile(
    auth: AuthenticatedContext = Depends(require_auth),
) -> ProfileResponse:
    return ProfileResponse(user=auth.user, timestamp=datetime.now(timezone.utc))
