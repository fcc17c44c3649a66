from __future__ import annotations

from fastapi import APIRouter, Request

from coasterapi.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "coasters": request.app.state.coaster_store.count(),
    }
