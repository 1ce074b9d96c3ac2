"""Authorization gates evaluated before business logic runs.

Three stateless checks, composed per route:

- ``authenticate`` (auth gate): bearer credential -> principal
- ``require_role`` (role gate): principal + required role -> permit/deny
- ``authorize_owned_record`` (ownership check): principal id + record -> permit/deny

Each raises ``ApiError`` with the failure kind; none has side effects.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from zenly.adapters.auth.base import AuthVerificationError, TokenProvider
from zenly.core.logging_safety import safe_log_identifier
from zenly.errors import forbidden, invalid_credential, not_found, principal_not_found, unauthenticated
from zenly.repositories.memory import InMemoryStore, JournalRecord, MoodRecord
from zenly.schemas.auth import AuthPrincipal, Role

logger = logging.getLogger(__name__)

OwnedRecordT = TypeVar("OwnedRecordT", MoodRecord, JournalRecord)


def normalize_identifier(value: Any) -> str:
    return str(value if value is not None else "").strip()


def authenticate(token: str | None, *, tokens: TokenProvider, store: InMemoryStore) -> AuthPrincipal:
    """Resolve a bearer credential to the principal it names."""
    if not token:
        raise unauthenticated()

    try:
        claims = tokens.verify_token(token)
    except AuthVerificationError as exc:
        raise invalid_credential(str(exc) or "Invalid bearer token") from exc

    user = store.get_user(claims.subject)
    if user is None:
        raise principal_not_found()

    return AuthPrincipal(user_id=user.id, role=user.role)


def require_role(principal: AuthPrincipal, required: Role) -> None:
    if principal.role != required:
        logger.warning(
            "authz.role_denied principal_id=%s role=%s required=%s",
            safe_log_identifier(principal.user_id, prefix="pid"),
            principal.role.value,
            required.value,
        )
        raise forbidden(f"{required.value.capitalize()} privileges required")


def ensure_owner(principal_id: str, owner_id: str) -> None:
    if normalize_identifier(principal_id) != normalize_identifier(owner_id):
        logger.warning(
            "authz.ownership_denied principal_id=%s",
            safe_log_identifier(principal_id, prefix="pid"),
        )
        raise forbidden()


def authorize_owned_record(principal_id: str, record: OwnedRecordT | None) -> OwnedRecordT:
    """Resolve-then-compare: a missing record is 404, someone else's is 403."""
    if record is None:
        raise not_found()
    ensure_owner(principal_id, record.owner_id)
    return record


__all__ = [
    "authenticate",
    "authorize_owned_record",
    "ensure_owner",
    "normalize_identifier",
    "require_role",
]
