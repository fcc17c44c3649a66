from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from coasterapi.core.logging import logger
from coasterapi.services.access_gate import AccessGate

router = APIRouter(tags=["admin"])

_basic_auth = HTTPBasic(auto_error=False)

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def _access_gate(request: Request) -> AccessGate:
    return request.app.state.access_gate


@router.api_route("/admin", methods=_ALL_METHODS, response_class=PlainTextResponse)
async def admin_portal(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(_basic_auth),
) -> PlainTextResponse:
    username = credentials.username if credentials else None
    password = credentials.password if credentials else None
    if not _access_gate(request).authorize(username, password):
        logger.warning("admin_authorization_failed", username=username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return PlainTextResponse("Welcome admin.")
