"""Self-service profile routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from zenly.routes.dependencies import get_account_service, get_authenticated_principal
from zenly.schemas.auth import AuthPrincipal, ChangePasswordRequest, UpdateProfileRequest, UserProfile
from zenly.schemas.error import ErrorResponse, MessageResponse, UnauthorizedError
from zenly.services.accounts import AccountService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/profile",
    response_model=UserProfile,
    responses={401: {"model": UnauthorizedError}},
)
async def get_profile(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> UserProfile:
    return service.get_profile(user_id=principal.user_id)


@router.put(
    "/profile",
    response_model=UserProfile,
    responses={401: {"model": UnauthorizedError}},
)
async def update_profile(
    payload: UpdateProfileRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> UserProfile:
    return service.update_profile(user_id=principal.user_id, name=payload.name)


@router.put(
    "/change-password",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": UnauthorizedError}},
)
def change_password(
    payload: ChangePasswordRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> MessageResponse:
    service.change_password(
        user_id=principal.user_id,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Password updated successfully")
