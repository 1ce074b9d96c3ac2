"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from zenly.adapters.auth import JwtTokenProvider, TokenProvider
from zenly.core.config import Settings, get_settings
from zenly.core.logging_safety import safe_log_identifier
from zenly.domain import access
from zenly.errors import ApiError
from zenly.repositories.memory import InMemoryStore
from zenly.schemas.auth import AuthPrincipal, Role
from zenly.services.accounts import AccountService
from zenly.services.journals import JournalService
from zenly.services.meditations import MeditationService
from zenly.services.moods import MoodService

bearer_scheme = HTTPBearer(auto_error=False, scheme_name="bearerAuth")
logger = logging.getLogger(__name__)


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id")
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def get_token_provider(settings: Annotated[Settings, Depends(get_settings)]) -> TokenProvider:
    return JwtTokenProvider(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(days=settings.token_ttl_days),
    )


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


async def get_authenticated_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
    tokens: Annotated[TokenProvider, Depends(get_token_provider)],
    store: Annotated[InMemoryStore, Depends(get_store)],
) -> AuthPrincipal:
    """Run the auth gate and attach the resolved principal to request context."""
    correlation_id = _request_correlation_id(request)
    safe_correlation_id = safe_log_identifier(correlation_id, prefix="cid")
    token = credentials.credentials if credentials is not None else None

    try:
        principal = access.authenticate(token, tokens=tokens, store=store)
    except ApiError as exc:
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=%s",
            safe_correlation_id,
            request.method,
            request.url.path,
            exc.payload.code.lower(),
        )
        raise

    logger.info(
        "auth.accepted correlation_id=%s method=%s path=%s principal_id=%s role=%s",
        safe_correlation_id,
        request.method,
        request.url.path,
        safe_log_identifier(principal.user_id, prefix="pid"),
        principal.role.value,
    )
    request.state.auth_principal = principal
    return principal


def require_role(required: Role) -> Callable[..., Awaitable[AuthPrincipal]]:
    """Build a dependency that runs the auth gate, then the role gate."""

    async def _role_gate(
        principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    ) -> AuthPrincipal:
        access.require_role(principal, required)
        return principal

    return _role_gate


require_admin = require_role(Role.ADMIN)


def get_account_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    tokens: Annotated[TokenProvider, Depends(get_token_provider)],
) -> AccountService:
    return AccountService(store, tokens)


def get_mood_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> MoodService:
    return MoodService(store)


def get_journal_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> JournalService:
    return JournalService(store)


def get_meditation_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> MeditationService:
    return MeditationService(store)
