from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

import caesarapi
from caesarapi.api.errors import install_error_handlers
from caesarapi.api.routes import protected, public
from caesarapi.config import Settings, load_settings
from caesarapi.db import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the HTTP application. Settings come from the environment when not given."""
    if settings is None:
        settings = load_settings()
    if database is None:
        database = Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        database.dispose()

    app = FastAPI(
        title=caesarapi.__title__,
        version=caesarapi.__version__,
        description=caesarapi.__description__,
        servers=[{"url": settings.public_url, "description": "Local development server"}],
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            logger.info(
                "Request completed",
                extra={
                    "method": request.method,
                    "route": request.url.path,
                    "status": status,
                    "duration": round((time.perf_counter() - start) * 1000, 3),
                },
            )

    install_error_handlers(app)
    app.include_router(public)
    app.include_router(protected)
    return app
