"""Account service layer."""

from __future__ import annotations

import logging

from zenly.adapters.auth.base import TokenProvider
from zenly.core.logging_safety import safe_log_email, safe_log_identifier
from zenly.core.security import hash_password, verify_password
from zenly.errors import ApiError, not_found
from zenly.repositories.memory import InMemoryStore, UserRecord
from zenly.schemas.auth import AuthResponse, Role, UserProfile

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: InMemoryStore, tokens: TokenProvider) -> None:
        self._store = store
        self._tokens = tokens

    def register(self, *, name: str, email: str, password: str) -> AuthResponse:
        if self._store.find_user_by_email(email) is not None:
            raise ApiError(
                status_code=409,
                code="EMAIL_ALREADY_REGISTERED",
                message="An account with this email already exists",
            )

        record = self._store.create_user(name=name, email=email, password_hash=hash_password(password))
        logger.info("account.registered principal_id=%s", safe_log_identifier(record.id, prefix="pid"))
        return self._issue(record)

    def login(self, *, email: str, password: str) -> AuthResponse:
        record = self._store.find_user_by_email(email)
        if record is None or not verify_password(password, record.password_hash):
            logger.warning("account.login_failed email=%s", safe_log_email(email))
            raise ApiError(status_code=400, code="INVALID_LOGIN", message="Invalid credentials")

        return self._issue(record)

    def get_profile(self, *, user_id: str) -> UserProfile:
        return self.to_profile(self._require_user(user_id))

    def update_profile(self, *, user_id: str, name: str) -> UserProfile:
        record = self._require_user(user_id)
        self._store.update_user_name(record, name)
        return self.to_profile(record)

    def change_password(self, *, user_id: str, current_password: str, new_password: str) -> None:
        record = self._require_user(user_id)
        if not verify_password(current_password, record.password_hash):
            raise ApiError(status_code=400, code="PASSWORD_MISMATCH", message="Current password is incorrect")
        self._store.update_user_password(record, hash_password(new_password))

    def list_users(self) -> list[UserProfile]:
        return [self.to_profile(record) for record in self._store.list_users()]

    def set_role(self, *, actor_id: str, user_id: str, role: Role) -> UserProfile:
        record = self._require_user(user_id)
        if record.role == Role.ADMIN and role != Role.ADMIN and not self._has_other_admin(record.id):
            logger.warning(
                "account.role_change_refused actor_id=%s principal_id=%s reason=last_admin",
                safe_log_identifier(actor_id, prefix="pid"),
                safe_log_identifier(record.id, prefix="pid"),
            )
            raise ApiError(
                status_code=409,
                code="LAST_ADMIN",
                message="At least one admin account must remain",
            )
        if record.role != role:
            self._store.update_user_role(record, role)
            logger.info(
                "account.role_changed actor_id=%s principal_id=%s role=%s",
                safe_log_identifier(actor_id, prefix="pid"),
                safe_log_identifier(record.id, prefix="pid"),
                role.value,
            )
        return self.to_profile(record)

    def _has_other_admin(self, user_id: str) -> bool:
        return any(user.role == Role.ADMIN and user.id != user_id for user in self._store.list_users())

    def _require_user(self, user_id: str) -> UserRecord:
        record = self._store.get_user(user_id)
        if record is None:
            raise not_found()
        return record

    def _issue(self, record: UserRecord) -> AuthResponse:
        return AuthResponse(token=self._tokens.issue_token(record.id), user=self.to_profile(record))

    @staticmethod
    def to_profile(record: UserRecord) -> UserProfile:
        return UserProfile(
            id=record.id,
            name=record.name,
            email=record.email,
            role=record.role,
            created_at=record.created_at,
        )


def ensure_admin_account(store: InMemoryStore, *, email: str, password: str, name: str) -> UserRecord:
    """Make sure at least one admin exists.

    - an existing admin wins and nothing changes
    - otherwise an account holding ``email`` is promoted
    - otherwise a new admin account is created
    """
    existing = store.find_first_admin()
    if existing is not None:
        return existing

    record = store.find_user_by_email(email)
    if record is not None:
        store.update_user_role(record, Role.ADMIN)
        logger.info("account.admin_seeded mode=promoted email=%s", safe_log_email(email))
        return record

    record = store.create_user(name=name, email=email, password_hash=hash_password(password), role=Role.ADMIN)
    logger.info("account.admin_seeded mode=created email=%s", safe_log_email(email))
    return record
