"""Request logging middleware - Presentation Layer."""

import uuid
from time import perf_counter
from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response

from artemis.shared import get_logger
from artemis.shared.consts import REQUEST_ID_HEADER

logger = get_logger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """
    Bind a request id into the structlog context and log each request.

    An incoming ``X-Request-ID`` header is reused so ids can be followed
    across services; otherwise a new one is generated.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    start = perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.error(
            "request.failed",
            method=request.method,
            path=request.url.path,
            duration_ms=round((perf_counter() - start) * 1000, 2),
        )
        raise
    finally:
        structlog.contextvars.unbind_contextvars("request_id")

    duration_ms = round((perf_counter() - start) * 1000, 2)
    logger.info(
        "request.completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
        client=request.client.host if request.client else None,
        request_id=request_id,
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
