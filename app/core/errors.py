"""Error taxonomy and the handlers that render every failure as {message, errors?}."""

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ValidationError(HTTPException):
    """Malformed or missing input."""

    def __init__(self, detail: str = "Invalid data", errors: Optional[list[dict]] = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.errors = errors


class AuthError(HTTPException):
    """Bad credentials or an inactive account. Never says which."""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundError(HTTPException):

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """Duplicate username, email or slug. Reported as 400 to match the API contract."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def conflict_from_violation(exc) -> ConflictError:
    """Map a store UniqueViolationError onto the matching 400 message."""
    return ConflictError(f"{exc.field.capitalize()} already exists")


def format_validation_errors(errors: list[dict]) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts into [{field, message, type}]."""
    formatted = []
    for error in errors:
        # drop the "body"/"path"/"query" prefix FastAPI puts on every location
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        formatted.append({
            "field": ".".join(loc),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })
    return formatted


def _error_body(message: str, errors: Optional[list] = None) -> dict:
    body: dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = jsonable_encoder(errors)
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(message, getattr(exc, "errors", None)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid data", errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
