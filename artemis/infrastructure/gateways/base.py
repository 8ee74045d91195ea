"""
HTTP transport shared by the upstream gateways - Infrastructure layer.

Failures are classified exactly once, here:

- transport problems (DNS, refused connection, timeout) -> UnreachableError
- any non-2xx answer -> UpstreamError carrying the upstream's own message
- a 2xx answer whose body is not JSON -> UpstreamError

Nothing is retried.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from artemis.domain.entities.errors import UnreachableError, UpstreamError
from artemis.infrastructure.normalizers.extractors import (
    as_mapping,
    first_match,
    texts,
)
from artemis.shared import get_logger

logger = get_logger(__name__)

# Where upstreams put a human readable error, most preferred first.
ERROR_MESSAGE_FIELDS = texts("message", "detail", "error", "msg")

MALFORMED_RESPONSE = "Malformed response from upstream"


def extract_error_message(response: httpx.Response) -> str:
    """Structured error payload first, then the raw body, then the status."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    message = first_match(as_mapping(payload), ERROR_MESSAGE_FIELDS)
    if message:
        return message

    body = response.text.strip()
    if body:
        return body
    return f"HTTP {response.status_code}"


class HTTPGateway:
    """Base class for gateways speaking JSON over HTTP to one upstream."""

    upstream: str = "upstream"

    def __init__(self, base_url: str, timeout: float):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _request(
        self,
        method: str,
        path: str,
        *,
        event: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request and classify any failure.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            event: Log event prefix, e.g. ``govee.devices``

        Returns:
            httpx.Response: A 2xx response

        Raises:
            UnreachableError: If the upstream could not be reached
            UpstreamError: If the upstream answered with a non-2xx status
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{event}.request", method=method, url=url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, params=params, json=json, headers=headers
                )
        except httpx.RequestError as e:
            logger.error(
                f"{event}.unreachable",
                upstream=self.upstream,
                url=url,
                error=str(e) or type(e).__name__,
            )
            raise UnreachableError(e, self.upstream) from e

        if not response.is_success:
            message = extract_error_message(response)
            log = logger.warning if response.status_code < 500 else logger.error
            log(
                f"{event}.rejected",
                upstream=self.upstream,
                url=url,
                status_code=response.status_code,
                upstream_message=message,
            )
            raise UpstreamError(response.status_code, message, self.upstream)

        logger.debug(f"{event}.response", status_code=response.status_code)
        return response

    def _decode(self, response: httpx.Response, *, event: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"{event}.malformed_response",
                upstream=self.upstream,
                status_code=response.status_code,
                error=str(e),
            )
            raise UpstreamError(
                response.status_code, MALFORMED_RESPONSE, self.upstream
            ) from e
