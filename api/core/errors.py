"""
API error taxonomy and the handlers that render it.

Every failure leaves the API as `{"error": "<message>"}` with the matching
status code; FastAPI's default `{"detail": ...}` shape is never returned.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "invalid input"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(status_code=type(self).status_code, detail=message or type(self).message)


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class InvalidInput(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = INVALID_INPUT_MESSAGE


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class Internal(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = INTERNAL_ERROR_MESSAGE


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("request_validation_failed errors=%s", exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT_MESSAGE)


async def _unhandled_exception_handler(_: Request, _exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after this response, so the server logs the traceback.
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def install_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
