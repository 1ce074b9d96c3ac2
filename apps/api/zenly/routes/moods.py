"""Mood entry routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from zenly.routes.dependencies import get_authenticated_principal, get_mood_service
from zenly.schemas.auth import AuthPrincipal
from zenly.schemas.error import ForbiddenError, MessageResponse, NotFoundError, UnauthorizedError
from zenly.schemas.mood import CreateMoodRequest, MoodEntry, UpdateMoodRequest
from zenly.services.moods import MoodService

router = APIRouter(prefix="/mood", tags=["Mood"], responses={401: {"model": UnauthorizedError}})

_OWNED_RESPONSES = {403: {"model": ForbiddenError}, 404: {"model": NotFoundError}}


@router.get("", response_model=list[MoodEntry])
async def list_moods(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MoodService, Depends(get_mood_service)],
) -> list[MoodEntry]:
    return service.list_moods(owner_id=principal.user_id)


@router.post("", response_model=MoodEntry, status_code=status.HTTP_201_CREATED)
async def create_mood(
    payload: CreateMoodRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MoodService, Depends(get_mood_service)],
) -> MoodEntry:
    return service.create_mood(owner_id=principal.user_id, payload=payload)


@router.get("/{moodId}", response_model=MoodEntry, responses=_OWNED_RESPONSES)
async def get_mood(
    mood_id: Annotated[str, Path(alias="moodId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MoodService, Depends(get_mood_service)],
) -> MoodEntry:
    return service.get_mood(owner_id=principal.user_id, mood_id=mood_id)


@router.put("/{moodId}", response_model=MoodEntry, responses=_OWNED_RESPONSES)
async def update_mood(
    mood_id: Annotated[str, Path(alias="moodId")],
    payload: UpdateMoodRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MoodService, Depends(get_mood_service)],
) -> MoodEntry:
    return service.update_mood(owner_id=principal.user_id, mood_id=mood_id, payload=payload)


@router.delete("/{moodId}", response_model=MessageResponse, responses=_OWNED_RESPONSES)
async def delete_mood(
    mood_id: Annotated[str, Path(alias="moodId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[MoodService, Depends(get_mood_service)],
) -> MessageResponse:
    service.delete_mood(owner_id=principal.user_id, mood_id=mood_id)
    return MessageResponse(message="Mood entry removed")
