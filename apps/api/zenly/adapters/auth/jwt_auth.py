"""JWT bearer credential adapter."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from zenly.adapters.auth.base import AuthVerificationError, TokenProvider
from zenly.schemas.auth import TokenClaims

_REQUIRED_CLAIMS = ["exp", "iat", "sub"]


class JwtTokenProvider(TokenProvider):
    """Signs and verifies HMAC JWTs carrying the principal id as ``sub``."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue_token(self, subject: str, *, now: datetime | None = None) -> str:
        subject = str(subject or "").strip()
        if not subject:
            raise ValueError("token_subject_blank")

        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenClaims:
        if not token:
            raise AuthVerificationError("Bearer token is empty")

        try:
            decoded = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthVerificationError("Bearer token has expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise AuthVerificationError("Bearer token signature is invalid") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthVerificationError("Invalid bearer token") from exc

        subject = str(decoded.get("sub") or "").strip()
        if not subject:
            raise AuthVerificationError("Bearer token missing user identity")

        return TokenClaims(
            subject=subject,
            issued_at=datetime.fromtimestamp(decoded["iat"], UTC),
            expires_at=datetime.fromtimestamp(decoded["exp"], UTC),
        )


__all__ = ["JwtTokenProvider"]
