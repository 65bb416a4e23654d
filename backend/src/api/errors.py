"""Translation of errors into HTTP responses.

``STATUS_CODES`` is the single mapping from domain error kind to HTTP
status. Anything that is not a classified domain error becomes a 500 with a
generic message; the details go to the log only.

Error body:
    {
        "timestamp": "2026-01-01T12:00:00+00:00",
        "status": 422,
        "error": "UNPROCESSABLE_ENTITY",
        "message": "Credit limit exceeded",
        "path": "/api/v1/orders",
        "trace_id": "<request id>",
        "validation_errors": {"field": "message"} | null
    }
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.errors import ErrorKind, OrderAppError
from observability.metrics import domain_errors_total
from observability.request_id import get_request_id


logger = logging.getLogger(__name__)

STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.BUSINESS_RULE: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_code_for(error: Exception) -> int:
    """HTTP status for any exception; unclassified errors map to 500."""
    if isinstance(error, OrderAppError):
        return STATUS_CODES.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(
    request: Request,
    status_code: int,
    message: str,
    validation_errors: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).name,
        "message": message,
        "path": request.url.path,
        "trace_id": get_request_id(),
        "validation_errors": validation_errors,
    }


async def domain_error_handler(request: Request, exc: OrderAppError) -> JSONResponse:
    status_code = status_code_for(exc)
    domain_errors_total.labels(kind=exc.kind.value).inc()
    logger.info(
        f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}"
        + (f" {exc.details}" if exc.details else ""),
        extra={"error_kind": exc.kind.value, "status_code": status_code}
    )
    validation_errors = {exc.field: exc.message} if exc.field and exc.kind == ErrorKind.VALIDATION else None
    return JSONResponse(
        status_code=status_code,
        content=error_body(request, status_code, exc.message, validation_errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations are reported as 400 with one message per field."""
    validation_errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        validation_errors.setdefault(field, error.get("msg", "Invalid value"))

    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"status_code": status.HTTP_400_BAD_REQUEST}
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, status.HTTP_400_BAD_REQUEST, "Validation failed", validation_errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Logs the full error but returns a generic message."""
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "A database error occurred. Please try again later.",
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred. Please try again later.",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderAppError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
