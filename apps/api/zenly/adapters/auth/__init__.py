"""Auth credential adapters."""

from .base import AuthVerificationError, TokenProvider
from .jwt_auth import JwtTokenProvider

__all__ = [
    "AuthVerificationError",
    "TokenProvider",
    "JwtTokenProvider",
]
