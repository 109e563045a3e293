"""
Domain error taxonomy and its HTTP rendering.

Every data-access operation either returns a value or raises exactly one
`CatalogError` subclass. `register_error_handlers` is the only place that
turns those into responses.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from contextlib import contextmanager
from typing import Iterator

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Please provide valid JSON input"
STORE_FAILURE_MESSAGE = "Database error"
INTERNAL_ERROR_MESSAGE = "The server encountered an unexpected error"


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    STORE_FAILURE = "store_failure"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_unmapped = set(ErrorKind) - set(_STATUS_BY_KIND)
if _unmapped:
    raise RuntimeError(f"ErrorKind values without a status code: {sorted(k.value for k in _unmapped)}")


def status_code_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND[kind]


class CatalogError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return status_code_for(self.kind)


class NotFoundError(CatalogError):
    kind = ErrorKind.NOT_FOUND


class InvalidInputError(CatalogError):
    kind = ErrorKind.INVALID_INPUT


class StoreFailureError(CatalogError):
    kind = ErrorKind.STORE_FAILURE


# Driver, protocol and transport failures. Anything else is a programming error.
_STORE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """
    Classify store failures raised inside the block as `StoreFailureError`.

    `CatalogError`s raised inside pass through unchanged.
    """
    try:
        yield
    except CatalogError:
        raise
    except _STORE_EXCEPTIONS as exc:
        logger.exception("store_failure action=%s error=%s", action, type(exc).__name__)
        raise StoreFailureError(f"{STORE_FAILURE_MESSAGE} while trying to {action}") from exc


def _error_body(message: str) -> dict[str, str]:
    return {"message": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register the handlers that render every failure as `{"message": ...}`."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(_: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        locations = {str((err.get("loc") or ("",))[0]) for err in exc.errors()}
        if "body" in locations:
            message = INVALID_JSON_MESSAGE
        else:
            message = "Please provide valid path parameters"
        error = InvalidInputError(message)
        return JSONResponse(status_code=error.status_code, content=_error_body(error.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error path=%s error=%s", request.url.path, type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(INTERNAL_ERROR_MESSAGE),
        )
