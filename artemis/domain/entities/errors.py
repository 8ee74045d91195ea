"""
Domain Errors

Error taxonomy shared by adapters, use cases and controllers. Adapters raise
``GatewayError`` subclasses once at the upstream boundary; everything else is
raised before any network call is made.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(DomainError):
    """Malformed input, missing required field or out-of-range value."""


class OutOfRangeError(InvalidInputError):
    """Raised when a numeric value falls outside its allowed bounds."""

    def __init__(self, field: str, value: Any, minimum: int, maximum: int):
        message = f"{field} must be between {minimum} and {maximum}, got {value}"
        super().__init__(
            message,
            {"field": field, "value": value, "minimum": minimum, "maximum": maximum},
        )
        self.field = field
        self.value = value


class InvalidValueError(InvalidInputError):
    """Raised when a command value does not have the shape its command expects."""

    def __init__(self, command: str, expected: str):
        super().__init__(
            f"Invalid value for '{command}' command - expected {expected}",
            {"command": command, "expected": expected},
        )
        self.command = command


class InvalidSelectorError(DomainError):
    """Raised when a request targets an account index that is not configured."""

    def __init__(self, index: int, account_count: int):
        super().__init__(
            "Invalid API key index",
            {"apiKeyIndex": index, "accountCount": account_count},
        )
        self.index = index


class UnsupportedCommandError(DomainError):
    """Raised when a light command name is not one the router knows."""

    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command}", {"command": command})
        self.command = command


class NotFoundError(DomainError):
    """Raised when a camera or device does not exist upstream."""


class GatewayError(DomainError):
    """Base class for failures talking to an upstream service."""

    def __init__(
        self,
        message: str,
        upstream: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, {"upstream": upstream, **(details or {})})
        self.upstream = upstream


class UpstreamError(GatewayError):
    """The upstream was reached but rejected the call."""

    def __init__(self, status: int, message: str, upstream: str):
        super().__init__(message, upstream, {"status": status})
        self.status = status

    @property
    def is_client_fault(self) -> bool:
        return 400 <= self.status < 500


class UnreachableError(GatewayError):
    """The upstream could not be reached (DNS, refused connection, timeout)."""

    def __init__(self, cause: BaseException, upstream: str):
        super().__init__(
            f"{upstream} is unreachable: {cause}",
            upstream,
            {"cause": type(cause).__name__},
        )
        self.cause = cause
