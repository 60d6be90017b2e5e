"""
Error taxonomy and the classifier that maps any failure to a client response.

Classification order (first match wins):
1. storage constraint/type violations and request validation -> 400 "Bad request"
2. ApiError raised by our own code -> its status and message
3. anything else -> 500, logged, generic message
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import asyncpg
from fastapi.exceptions import RequestValidationError

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "Bad request"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# SQLSTATE classes: 22 = data exception, 23 = integrity constraint violation.
CLIENT_SQLSTATE_CLASSES = frozenset({"22", "23"})


class ApiError(Exception):
    """
    Domain error carrying the HTTP status and the client-facing message.
    """

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ApiError):
    status_code = 400


class InvalidQueryError(BadRequestError):
    """A list option (sort_by, order, limit, page) has an unusable value."""


class NotFoundError(ApiError):
    status_code = 404


@dataclass(frozen=True)
class ErrorResponse:
    status_code: int
    message: str

    def body(self) -> dict[str, str]:
        return {"message": self.message}


def is_storage_client_error(exc: BaseException) -> bool:
    if not isinstance(exc, asyncpg.PostgresError):
        return False
    sqlstate = str(getattr(exc, "sqlstate", "") or "")
    return sqlstate[:2] in CLIENT_SQLSTATE_CLASSES


def classify_error(exc: BaseException) -> ErrorResponse:
    if is_storage_client_error(exc) or isinstance(exc, RequestValidationError):
        return ErrorResponse(400, BAD_REQUEST_MESSAGE)

    if isinstance(exc, ApiError):
        return ErrorResponse(exc.status_code, exc.message)

    logger.error("unhandled_error type=%s", type(exc).__name__, exc_info=exc)
    return ErrorResponse(500, INTERNAL_ERROR_MESSAGE)
