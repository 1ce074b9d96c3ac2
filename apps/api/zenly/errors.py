"""Application exception types."""

from zenly.schemas.error import ErrorResponse

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(code=code, message=message, details=details)
        self.headers = headers
        super().__init__(message)


def unauthenticated(message: str = "Missing bearer token") -> ApiError:
    return ApiError(status_code=401, code="UNAUTHENTICATED", message=message, headers=_BEARER_CHALLENGE)


def invalid_credential(message: str = "Invalid bearer token") -> ApiError:
    return ApiError(status_code=401, code="INVALID_CREDENTIAL", message=message, headers=_BEARER_CHALLENGE)


def principal_not_found() -> ApiError:
    return ApiError(
        status_code=401,
        code="PRINCIPAL_NOT_FOUND",
        message="Account for bearer token no longer exists",
        headers=_BEARER_CHALLENGE,
    )


def forbidden(message: str = "Not authorized") -> ApiError:
    return ApiError(status_code=403, code="FORBIDDEN", message=message)


def not_found() -> ApiError:
    return ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Resource not found")


__all__ = [
    "ApiError",
    "forbidden",
    "invalid_credential",
    "not_found",
    "principal_not_found",
    "unauthenticated",
]
