# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Playlist Server - Main FastAPI application."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from playlist_server.config import Settings, settings as default_settings
from playlist_server.database import Database
from playlist_server.errors import register_exception_handlers
from playlist_server.routers import albums, artists, playlists, songs, users

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _get_cors_origins(settings: Settings) -> list[str]:
    raw = (settings.cors_origins or "*").strip()
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around its own Database instance."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        database = Database(settings.database_url, echo=settings.sql_echo)
        await database.init_db()
        app.state.database = database
        logger.info("Playlist API ready at %s", API_PREFIX)
        yield
        await database.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="Playlist Server",
        description="Music catalog API: users, artists, albums, songs and playlists",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_get_cors_origins(settings),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status, and duration for each request (no body)."""
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
        return response

    register_exception_handlers(app, development=settings.is_development)

    for module in (users, artists, albums, songs, playlists):
        app.include_router(module.router, prefix=API_PREFIX)

    @app.get("/health")
    @app.get("/api/health")
    async def health():
        """Health check for load balancers."""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()
