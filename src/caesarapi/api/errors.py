from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from caesarapi.api.schemas import FIELD_ERROR_MESSAGES

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiError(Exception):
    """An error that maps directly onto a {code, message} response."""

    status_code = 500
    code = INTERNAL_ERROR

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class AuthError(ApiError):
    status_code = 401
    code = UNAUTHORIZED


def error_body(code: str, message: str) -> dict[str, str]:
    return {"code": code, "message": message}


def _first_issue(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    kind = first.get("type", "")
    if kind == "json_invalid":
        return "Invalid JSON body"
    # loc mixes field names with list indexes and JSON character offsets; keep the names.
    field = ".".join(p for p in first.get("loc", ()) if isinstance(p, str) and p != "body")
    if (field, kind) in FIELD_ERROR_MESSAGES:
        return FIELD_ERROR_MESSAGES[(field, kind)]
    msg = first.get("msg", "Invalid request data")
    return f"{field}: {msg}" if field else msg


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(error_body(exc.code, exc.message), status_code=exc.status_code, headers=headers)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(error_body(VALIDATION_ERROR, _first_issue(exc)), status_code=400)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "route": request.url.path},
    )
    return JSONResponse(error_body(INTERNAL_ERROR, "An unexpected error occurred"), status_code=500)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
