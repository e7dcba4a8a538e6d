from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
async def banner(request: Request) -> dict[str, Any]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "message": f"{settings.app_name} is running",
        "version": settings.app_version,
        "timestamp": _now(),
        "endpoints": {
            "health": "/api/health",
            "movies": "/api/movies",
            "auth": "/api/register, /api/login",
        },
    }


@router.get("/api/health")
async def health(request: Request) -> dict[str, Any]:
    return {
        "status": "ok",
        "success": True,
        "message": "Server is running",
        "environment": request.app.state.settings.environment,
        "timestamp": _now(),
    }
