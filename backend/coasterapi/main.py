from __future__ import annotations

import random

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coasterapi.api.admin import router as admin_router
from coasterapi.api.coasters import router as coasters_router
from coasterapi.api.health import router as health_router
from coasterapi.core.config import settings
from coasterapi.core.logging import configure_logging
from coasterapi.services.access_gate import AccessGate
from coasterapi.services.coaster_store import CoasterStore

configure_logging()

_FIXED_ERROR_BODIES = {
    405: "method not allowed",
    401: "Unauthorized",
}


async def _plain_text_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    del request
    message = _FIXED_ERROR_BODIES.get(exc.status_code)
    if message is None:
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


def create_application(
    *,
    admin_password: str | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Build the service. Raises ``ConfigurationError`` when no admin password is configured."""
    access_gate = AccessGate.from_secret(admin_password or settings.admin_password)
    coaster_store = CoasterStore(rng=rng)

    app = FastAPI(title=settings.app_name, redirect_slashes=False)
    app.state.coaster_store = coaster_store
    app.state.access_gate = access_gate

    app.add_exception_handler(StarletteHTTPException, _plain_text_http_error)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(coasters_router, prefix=settings.api_prefix)
    app.include_router(admin_router, prefix=settings.api_prefix)
    return app
