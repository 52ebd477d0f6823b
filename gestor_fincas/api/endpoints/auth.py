"""
Auth endpoints — username/password login returning a bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from gestor_fincas.api.deps import get_login_use_case
from gestor_fincas.auth.credentials import Credentials
from gestor_fincas.auth.login import LoginUseCase
from gestor_fincas.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from gestor_fincas.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": MessageResponse}, 401: {"model": MessageResponse}},
)
async def login(
    body: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    """Authenticate with username/password. Returns a 24h JWT on success."""
    if not body.username or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )

    result = await use_case.execute(
        Credentials(username=body.username, password=body.password)
    )
    if not result.success or result.user is None or result.token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return LoginResponse(
        token=result.token,
        user=UserRead(id=result.user.id, username=result.user.username),
    )
