from __future__ import annotations

from typing import Any, NoReturn

import orjson
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from coasterapi.core.errors import CoasterNotFoundError
from coasterapi.core.logging import logger
from coasterapi.models.coaster import CreateCoasterRequest
from coasterapi.services.coaster_store import CoasterStore

JSON_CONTENT_TYPE = "application/json"

router = APIRouter(prefix="/coasters", tags=["coasters"])


def _store(request: Request) -> CoasterStore:
    return request.app.state.coaster_store


def _raise_not_found(error: CoasterNotFoundError) -> NoReturn:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error)) from error


def _json_response(payload: Any) -> Response:
    try:
        body = orjson.dumps(payload)
    except orjson.JSONEncodeError as exc:
        logger.error("coaster_encode_failed", error_message=str(exc))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return Response(content=body, media_type=JSON_CONTENT_TYPE)


@router.get("")
async def list_coasters(request: Request) -> Response:
    records = _store(request).list()
    return _json_response([record.to_wire() for record in records])


@router.post("")
async def create_coaster(request: Request) -> Response:
    try:
        body = await request.body()
    except ClientDisconnect as exc:
        logger.error("coaster_body_read_failed", error_type=type(exc).__name__)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "client disconnected before the body was read",
        ) from exc

    content_type = request.headers.get("content-type", "")
    if content_type != JSON_CONTENT_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"expected content-type '{JSON_CONTENT_TYPE}', got '{content_type}'",
        )

    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    # A literal JSON null decodes fine and leaves every field empty.
    try:
        candidate = CreateCoasterRequest.model_validate({} if payload is None else payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    coaster_id = _store(request).insert(candidate)
    logger.info("coaster_created", coaster_id=coaster_id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/random")
async def random_coaster(request: Request) -> RedirectResponse:
    try:
        coaster_id = _store(request).pick_random()
    except CoasterNotFoundError as error:
        _raise_not_found(error)
    location = request.app.url_path_for("get_coaster", coaster_id=coaster_id)
    return RedirectResponse(url=str(location), status_code=status.HTTP_302_FOUND)


@router.get("/{coaster_id}", name="get_coaster")
async def get_coaster(coaster_id: str, request: Request) -> Response:
    try:
        record = _store(request).get(coaster_id)
    except CoasterNotFoundError as error:
        logger.info("coaster_not_found", coaster_id=coaster_id)
        _raise_not_found(error)
    return _json_response(record.to_wire())
