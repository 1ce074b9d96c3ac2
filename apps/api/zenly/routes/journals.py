"""Journal entry routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from zenly.routes.dependencies import get_authenticated_principal, get_journal_service
from zenly.schemas.auth import AuthPrincipal
from zenly.schemas.error import ForbiddenError, MessageResponse, NotFoundError, UnauthorizedError
from zenly.schemas.journal import CreateJournalRequest, JournalEntry, JournalPage, UpdateJournalRequest
from zenly.schemas.mood import MoodKind
from zenly.services.journals import JournalService

router = APIRouter(prefix="/journal", tags=["Journal"], responses={401: {"model": UnauthorizedError}})

_OWNED_RESPONSES = {403: {"model": ForbiddenError}, 404: {"model": NotFoundError}}


@router.get("", response_model=JournalPage)
async def list_journals(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[JournalService, Depends(get_journal_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    tag: Annotated[str | None, Query(min_length=1)] = None,
    mood: MoodKind | None = None,
) -> JournalPage:
    return service.list_journals(owner_id=principal.user_id, page=page, limit=limit, tag=tag, mood=mood)


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def create_journal(
    payload: CreateJournalRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[JournalService, Depends(get_journal_service)],
) -> JournalEntry:
    return service.create_journal(owner_id=principal.user_id, payload=payload)


@router.get("/{journalId}", response_model=JournalEntry, responses=_OWNED_RESPONSES)
async def get_journal(
    journal_id: Annotated[str, Path(alias="journalId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[JournalService, Depends(get_journal_service)],
) -> JournalEntry:
    return service.get_journal(owner_id=principal.user_id, journal_id=journal_id)


@router.put("/{journalId}", response_model=JournalEntry, responses=_OWNED_RESPONSES)
async def update_journal(
    journal_id: Annotated[str, Path(alias="journalId")],
    payload: UpdateJournalRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[JournalService, Depends(get_journal_service)],
) -> JournalEntry:
    return service.update_journal(owner_id=principal.user_id, journal_id=journal_id, payload=payload)


@router.delete("/{journalId}", response_model=MessageResponse, responses=_OWNED_RESPONSES)
async def delete_journal(
    journal_id: Annotated[str, Path(alias="journalId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[JournalService, Depends(get_journal_service)],
) -> MessageResponse:
    service.delete_journal(owner_id=principal.user_id, journal_id=journal_id)
    return MessageResponse(message="Journal entry removed successfully")
