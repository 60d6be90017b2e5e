"""
FastAPI exception handlers. This is the only place a failure becomes an HTTP
response; routers and services let exceptions propagate.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import ApiError, classify_error

logger = logging.getLogger(__name__)

ROUTING_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(RequestValidationError, _client_error_handler)
    app.add_exception_handler(asyncpg.PostgresError, _client_error_handler)
    app.add_exception_handler(ApiError, _client_error_handler)
    app.add_exception_handler(StarletteHTTPException, _routing_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)


async def _client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    classified = classify_error(exc)
    if classified.status_code < 500:
        logger.info(
            "client_error status=%s path=%s type=%s",
            classified.status_code,
            request.url.path,
            type(exc).__name__,
        )
    return JSONResponse(status_code=classified.status_code, content=classified.body())


async def _routing_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = ROUTING_MESSAGES.get(exc.status_code) or str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    classified = classify_error(exc)
    return JSONResponse(status_code=classified.status_code, content=classified.body())
