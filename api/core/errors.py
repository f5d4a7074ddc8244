"""
Exception handlers that turn every per-request failure into a JSON error body.

Shape: {"error": "<message>"} (+ "details" for validation failures).
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request payload.",
            "details": jsonable_encoder(exc.errors(), exclude={"input", "ctx", "url"}),
        },
    )


async def database_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("database_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # command_timeout surfaces as asyncio.TimeoutError (an alias of TimeoutError
    # from 3.11); pool/connection loss as InterfaceError.
    for exc_type in (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, TimeoutError):
        app.add_exception_handler(exc_type, database_exception_handler)
