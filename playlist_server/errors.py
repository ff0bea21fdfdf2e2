# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Domain errors and their translation to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors the API reports to clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(CatalogError):
    """Malformed or out-of-range input."""

    status_code = 400


class NotFoundError(CatalogError):
    """Referenced entity does not exist."""

    status_code = 404


class ConflictError(CatalogError):
    """Uniqueness or duplicate-association violation."""

    status_code = 409


def error_body(message: str, status: int, **extra) -> dict:
    return {"error": message, "status": status, **extra}


def _format_location(loc) -> str:
    # Drop the "body"/"path" prefix FastAPI puts in front of field names
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "path", "query"):
        parts = parts[1:]
    return ".".join(parts) or "body"


def format_validation_errors(errors) -> str:
    """One message listing every failing field."""
    messages = [f"{_format_location(e.get('loc', ()))}: {e.get('msg', 'Invalid value')}" for e in errors]
    return "Validation failed: " + ", ".join(messages)


def register_exception_handlers(app: FastAPI, development: bool = False) -> None:
    """Map domain errors, validation errors and everything else to the uniform error body."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.status_code))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(exc.errors())
        logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content=error_body(message, 400))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404 and exc.detail == "Not Found":
            content = error_body("Route not found", 404, path=request.url.path)
        else:
            content = error_body(str(exc.detail), exc.status_code)
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        content = error_body("Internal server error", 500)
        if development:
            content["details"] = str(exc)
        return JSONResponse(status_code=500, content=content)
