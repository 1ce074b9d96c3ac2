"""Meditation content routes.

Reads are public; writes go through the admin role gate.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from zenly.routes.dependencies import get_authenticated_principal, get_meditation_service, require_admin
from zenly.schemas.auth import AuthPrincipal
from zenly.schemas.error import ForbiddenError, MessageResponse, NotFoundError, UnauthorizedError
from zenly.schemas.meditation import CreateMeditationRequest, Meditation, UpdateMeditationRequest
from zenly.services.meditations import MeditationService

router = APIRouter(prefix="/meditations", tags=["Meditations"])

_ADMIN_RESPONSES = {401: {"model": UnauthorizedError}, 403: {"model": ForbiddenError}}


@router.get("", response_model=list[Meditation])
async def list_meditations(
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> list[Meditation]:
    return service.list_meditations()


@router.get("/{meditationId}", response_model=Meditation, responses={404: {"model": NotFoundError}})
async def get_meditation(
    meditation_id: Annotated[str, Path(alias="meditationId")],
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> Meditation:
    return service.get_meditation(meditation_id=meditation_id)


@router.post(
    "",
    response_model=Meditation,
    status_code=status.HTTP_201_CREATED,
    responses=_ADMIN_RESPONSES,
)
async def create_meditation(
    payload: CreateMeditationRequest,
    _: Annotated[AuthPrincipal, Depends(require_admin)],
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> Meditation:
    return service.create_meditation(payload=payload)


@router.put(
    "/{meditationId}",
    response_model=Meditation,
    responses={**_ADMIN_RESPONSES, 404: {"model": NotFoundError}},
)
async def update_meditation(
    meditation_id: Annotated[str, Path(alias="meditationId")],
    payload: UpdateMeditationRequest,
    _: Annotated[AuthPrincipal, Depends(require_admin)],
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> Meditation:
    return service.update_meditation(meditation_id=meditation_id, payload=payload)


@router.delete(
    "/{meditationId}",
    response_model=MessageResponse,
    responses={**_ADMIN_RESPONSES, 404: {"model": NotFoundError}},
)
async def delete_meditation(
    meditation_id: Annotated[str, Path(alias="meditationId")],
    _: Annotated[AuthPrincipal, Depends(require_admin)],
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> MessageResponse:
    service.delete_meditation(meditation_id=meditation_id)
    return MessageResponse(message="Meditation removed")


@router.post(
    "/{meditationId}/start",
    response_model=MessageResponse,
    responses={401: {"model": UnauthorizedError}, 404: {"model": NotFoundError}},
)
async def start_meditation(
    meditation_id: Annotated[str, Path(alias="meditationId")],
    _: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MeditationService, Depends(get_meditation_service)],
) -> MessageResponse:
    service.start_session(meditation_id=meditation_id)
    return MessageResponse(message="Meditation session started")
