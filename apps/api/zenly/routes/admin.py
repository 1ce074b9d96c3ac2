"""Account-role administration routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from zenly.routes.dependencies import get_account_service, require_admin
from zenly.schemas.auth import AuthPrincipal, UpdateRoleRequest, UserProfile
from zenly.schemas.error import ErrorResponse, ForbiddenError, NotFoundError, UnauthorizedError
from zenly.services.accounts import AccountService

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={401: {"model": UnauthorizedError}, 403: {"model": ForbiddenError}},
)


@router.get("/users", response_model=list[UserProfile])
async def list_users(
    _: Annotated[AuthPrincipal, Depends(require_admin)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> list[UserProfile]:
    return service.list_users()


@router.put(
    "/users/{userId}/role",
    response_model=UserProfile,
    responses={404: {"model": NotFoundError}, 409: {"model": ErrorResponse}},
)
async def update_user_role(
    user_id: Annotated[str, Path(alias="userId")],
    payload: UpdateRoleRequest,
    principal: Annotated[AuthPrincipal, Depends(require_admin)],
    service: Annotated[AccountService, Depends(get_account_service)],
) -> UserProfile:
    return service.set_role(actor_id=principal.user_id, user_id=user_id, role=payload.role)
