"""Error hierarchy for the petstore Python client."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class RequestDetails:
    operation: str
    method: str
    url: str
    status_code: int | None = None
    response_body: Any | None = None
    raw_body: bytes | None = None


class PetstoreError(Exception):
    """Base class for all client errors."""


class ConfigurationError(PetstoreError, ValueError):
    """Raised when a Configuration is missing or has invalid settings."""


class RequestValidationError(PetstoreError, ValueError):
    """Raised when operation arguments are rejected before sending."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        parameter: str | None = None,
        errors: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.parameter = parameter
        self.errors = errors


class InvalidEnumValueError(RequestValidationError):
    """Raised when a value is outside an enum's declared set."""

    def __init__(
        self,
        *,
        enum_name: str,
        value: Any,
        allowed: Iterable[str],
        operation: str | None = None,
        parameter: str | None = None,
    ) -> None:
        self.enum_name = enum_name
        self.value = value
        self.allowed = tuple(allowed)
        target = f"{operation} parameter {parameter!r}" if parameter else enum_name
        super().__init__(
            f"{target}: {value!r} is not one of {', '.join(self.allowed)}",
            operation=operation or enum_name,
            parameter=parameter,
        )


class RequiredError(RequestValidationError):
    """Raised when a required parameter is None."""

    def __init__(self, *, operation: str, parameter: str) -> None:
        super().__init__(
            f"required parameter {parameter!r} was None when calling {operation}",
            operation=operation,
            parameter=parameter,
        )


class TransportError(PetstoreError):
    """Raised on network/transport failures."""


class ClientTimeoutError(TransportError):
    """Raised when request times out."""


class HttpStatusError(PetstoreError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details

    @property
    def status_code(self) -> int:
        return self.details.status_code or 0

    @property
    def body(self) -> Any:
        return self.details.response_body


class BadRequestError(HttpStatusError):
    """Raised for invalid request payloads."""


class AuthError(HttpStatusError):
    """Raised for authentication/authorization failures."""


class NotFoundError(HttpStatusError):
    """Raised when requested resource does not exist."""


class ConflictError(HttpStatusError):
    """Raised when request conflicts with current state."""


class ServerError(HttpStatusError):
    """Raised for server-side failures."""


class DecodeError(PetstoreError):
    """Raised when a response body does not match the declared shape."""

    def __init__(
        self,
        *,
        operation: str,
        expected: str,
        errors: Any,
        status_code: int | None = None,
        raw_sample: Any | None = None,
    ) -> None:
        super().__init__(f"{operation} response could not be decoded as {expected}")
        self.operation = operation
        self.expected = expected
        self.errors = errors
        self.status_code = status_code
        self.raw_sample = raw_sample


def classify_status_error(details: RequestDetails) -> HttpStatusError:
    status = details.status_code or 0
    message = f"{details.operation} failed with status {status}"

    if status == 400:
        return BadRequestError(message, details=details)
    if status in (401, 403):
        return AuthError(message, details=details)
    if status == 404:
        return NotFoundError(message, details=details)
    if status == 409:
        return ConflictError(message, details=details)
    if status >= 500:
        return ServerError(message, details=details)

    return HttpStatusError(message, details=details)
