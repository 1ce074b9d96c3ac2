"""FastAPI application entrypoint.

Serve with ``uvicorn --factory zenly.main:create_app``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from zenly.core.config import Settings, get_settings
from zenly.errors import ApiError
from zenly.repositories.memory import InMemoryStore
from zenly.routes import (
    admin_router,
    auth_router,
    journals_router,
    meditations_router,
    moods_router,
    users_router,
)
from zenly.schemas.error import ErrorResponse, MessageResponse
from zenly.services.accounts import ensure_admin_account


def _field_error(error: dict) -> dict:
    return {
        "loc": [str(part) for part in error.get("loc", ())],
        "msg": error.get("msg", ""),
        "type": error.get("type", ""),
    }


def _seed_store(store: InMemoryStore, settings: Settings) -> None:
    if not settings.seed_admin:
        return
    ensure_admin_account(
        store,
        email=settings.seed_admin_email,
        password=settings.seed_admin_password,
        name=settings.seed_admin_name,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Zenly API", version="1.0.0")
    if settings is None:
        # Missing or weak ZENLY_JWT_SECRET fails here, before any request is served.
        settings = get_settings()
    else:
        app.dependency_overrides[get_settings] = lambda: settings

    app.state.store = InMemoryStore()
    _seed_store(app.state.store, settings)

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        payload = ErrorResponse(
            code="VALIDATION_ERROR",
            message="Invalid request payload",
            details={"errors": [_field_error(error) for error in exc.errors()]},
        )
        return JSONResponse(status_code=400, content=payload.model_dump(mode="json"))

    api_prefix = "/api"

    @app.get(api_prefix, response_model=MessageResponse, tags=["Meta"])
    async def welcome() -> MessageResponse:
        return MessageResponse(message="Welcome to Zenly API")

    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(moods_router, prefix=api_prefix)
    app.include_router(journals_router, prefix=api_prefix)
    app.include_router(meditations_router, prefix=api_prefix)
    app.include_router(admin_router, prefix=api_prefix)

    return app
