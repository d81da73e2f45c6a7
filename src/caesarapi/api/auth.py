from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute
from fastapi.security import HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from caesarapi.api.errors import ApiError, AuthError
from caesarapi.db import Database
from caesarapi.repositories import api_keys

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Only declares the scheme in the OpenAPI document; authenticate() does the checking.
bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="API Key", scheme_name="bearerAuth")


@dataclass(frozen=True)
class Caller:
    id: int
    name: str


def get_database(request: Request) -> Database:
    return request.app.state.database


def authenticate(request: Request) -> Caller:
    """Resolve the bearer token to an active API key or reject the request with 401."""
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        raise AuthError("Missing or invalid Authorization header")

    # The token is hashed exactly as sent: no case folding, no trimming.
    token = header[len(BEARER_PREFIX):]
    if not token:
        raise AuthError("Bearer token is required")

    try:
        with get_database(request).session() as session:
            api_key = api_keys.find_by_key_hash(session, api_keys.hash_token(token))
            caller = Caller(id=api_key.id, name=api_key.name) if api_key is not None else None
    except SQLAlchemyError as e:
        logger.error("API key lookup failed", extra={"error": repr(e), "route": request.url.path})
        raise ApiError("Authentication failed") from e

    if caller is None:
        raise AuthError("Invalid API key")

    request.state.api_key = caller
    return caller


class AuthenticatedRoute(APIRoute):
    """Route that authenticates the caller before the request body is read or validated."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[None, None, Response]]:
        handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            await run_in_threadpool(authenticate, request)
            return await handler(request)

        return route_handler
