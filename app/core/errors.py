import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = 400
    code = "api_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}


class ValidationError(APIError):
    status_code = 400
    code = "validation_error"


class AuthError(APIError):
    status_code = 401
    code = "auth_error"


class NotFoundError(APIError):
    status_code = 404
    code = "not_found"


class ConflictError(APIError):
    status_code = 409
    code = "conflict"


class ConfigError(APIError):
    status_code = 500
    code = "config_error"


class UpstreamError(APIError):
    status_code = 500
    code = "upstream_error"


def error_payload(message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": False, "message": message}
    if details:
        payload.update(details)
    return payload


def _expose_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.expose_error_details)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    details = dict(exc.details)
    if exc.status_code >= 500 and _expose_details(request) and exc.__cause__ is not None:
        details["error"] = str(exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc.message, details))


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ()) if part != "body") for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content=error_payload("Invalid request", {"fields": [field for field in fields if field]}),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content=error_payload("Route not found", {"path": request.url.path}),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled server error", extra={"path": request.url.path})
    details = {"error": str(exc)} if _expose_details(request) else None
    return JSONResponse(status_code=500, content=error_payload("Internal server error", details))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
