"""
bearer_bank.api.errors

HTTP boundary for core errors.

Responsibilities:
- Map each `ErrorKind` to an HTTP status code.
- Render `CoreError` values as JSON bodies.
- Register handlers for request-shape errors, unmatched routes and unexpected faults.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from bearer_bank.api.schemas import to_number
from bearer_bank.errors import CoreError, ErrorCategory, ErrorKind, missing_fields
from bearer_bank.observability.logging import get_logger
from bearer_bank.settings import Settings

log = get_logger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.missing_fields: HTTP_400_BAD_REQUEST,
    ErrorKind.invalid_amount: HTTP_400_BAD_REQUEST,
    ErrorKind.non_positive_amount: HTTP_400_BAD_REQUEST,
    ErrorKind.insufficient_funds: HTTP_400_BAD_REQUEST,
    ErrorKind.invalid_credentials: HTTP_401_UNAUTHORIZED,
    ErrorKind.no_token: HTTP_401_UNAUTHORIZED,
    ErrorKind.malformed_header: HTTP_401_UNAUTHORIZED,
    ErrorKind.invalid_token: HTTP_401_UNAUTHORIZED,
    ErrorKind.token_expired: HTTP_401_UNAUTHORIZED,
    ErrorKind.not_found: HTTP_404_NOT_FOUND,
}


class ApiError(Exception):
    """
    Carries a `CoreError` out of a route or dependency to the registered handler.
    """

    def __init__(self, error: CoreError) -> None:
        super().__init__(error.message)
        self.error = error


def status_for(error: CoreError) -> int:
    return STATUS_BY_KIND.get(error.kind, HTTP_500_INTERNAL_SERVER_ERROR)


def error_body(error: CoreError) -> dict[str, Any]:
    body: dict[str, Any] = {"error": error.kind.value, "message": error.message}
    for key, value in error.context.items():
        body[key] = to_number(value) if isinstance(value, Decimal) else value
    return body


def error_response(error: CoreError) -> JSONResponse:
    headers = None
    if (
        error.category is ErrorCategory.authentication
        and error.kind is not ErrorKind.invalid_credentials
    ):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_for(error), content=error_body(error), headers=headers)


def install_error_handlers(app: FastAPI, *, settings: Settings) -> None:
    @app.exception_handler(ApiError)
    async def _api_error(_: Request, exc: ApiError) -> JSONResponse:
        return error_response(exc.error)

    @app.exception_handler(RequestValidationError)
    async def _request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        # Non-JSON or wrongly shaped bodies are reported like missing fields.
        return error_response(missing_fields("Request body is missing or malformed"))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=HTTP_404_NOT_FOUND,
                content={
                    "error": "Endpoint not found",
                    "path": request.url.path,
                    "method": request.method,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled_error", path=request.url.path, method=request.method)
        content: dict[str, Any] = {"error": "Internal server error"}
        if settings.env == "dev":
            content["message"] = str(exc)
        return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=content)


# --- Module Notes -----------------------------------------------------------
# Only this module knows about status codes; the issuer, gate and ledger stay
# HTTP-agnostic.
