"""Credential provider interfaces."""

from abc import ABC, abstractmethod

from zenly.schemas.auth import TokenClaims


class AuthVerificationError(Exception):
    """Raised when a token cannot be verified or normalized."""


class TokenProvider(ABC):
    """Provider-neutral bearer credential interface."""

    @abstractmethod
    def issue_token(self, subject: str) -> str:
        """Mint a signed credential for the given principal id."""

    @abstractmethod
    def verify_token(self, token: str) -> TokenClaims:
        """Verify token and return its normalized claims."""


__all__ = ["AuthVerificationError", "TokenProvider"]
