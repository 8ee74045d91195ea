"""
Error translation - Presentation Layer

Maps domain errors onto HTTP statuses and renders every failure, including
framework-level ones such as 405, into the ``{success, message}`` envelope.
"""

from typing import Any, Dict, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from artemis.application.dtos.base_dto import ErrorResponseDTO
from artemis.domain.entities.errors import (
    DomainError,
    InvalidInputError,
    InvalidSelectorError,
    NotFoundError,
    UnreachableError,
    UnsupportedCommandError,
    UpstreamError,
)
from artemis.shared import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, (InvalidInputError, InvalidSelectorError, UnsupportedCommandError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, UpstreamError):
        if error.is_client_fault:
            return status.HTTP_400_BAD_REQUEST
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(error, UnreachableError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: DomainError) -> HTTPException:
    """Wrap a domain error so the envelope handler can render it."""
    return HTTPException(
        status_code=status_for(error),
        detail={"message": error.message, "details": error.details},
    )


def _split_detail(detail: Any) -> Tuple[str, Dict[str, Any]]:
    if isinstance(detail, dict) and "message" in detail:
        return str(detail["message"]), dict(detail.get("details") or {})
    if detail is None:
        return "", {}
    return str(detail), {}


def error_response(
    status_code: int, message: str, details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    body = ErrorResponseDTO(message=message, details=details or {})
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message, details = _split_detail(exc.detail)
    response = error_response(exc.status_code, message, details)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if field:
        message = f"{field}: {message}"

    logger.warning(
        "request.validation_failed",
        path=request.url.path,
        error_count=len(errors),
        first_error=message,
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        {"errors": jsonable_encoder(errors)},
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_error",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
