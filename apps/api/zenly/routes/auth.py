"""Registration, login and current-principal routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from zenly.routes.dependencies import get_account_service, get_authenticated_principal
from zenly.schemas.auth import AuthPrincipal, AuthResponse, LoginRequest, RegisterRequest, UserProfile
from zenly.schemas.error import ErrorResponse, UnauthorizedError
from zenly.services.accounts import AccountService

router = APIRouter(prefix="/auth", tags=["Auth"])

# Handlers that hash or verify passwords are plain `def` so they run in the threadpool.


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def register(
    payload: RegisterRequest,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> AuthResponse:
    return service.register(name=payload.name, email=payload.email, password=payload.password)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}},
)
def login(
    payload: LoginRequest,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> AuthResponse:
    return service.login(email=payload.email, password=payload.password)


@router.get(
    "/me",
    response_model=UserProfile,
    responses={401: {"model": UnauthorizedError}},
)
async def me(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> UserProfile:
    return service.get_profile(user_id=principal.user_id)
