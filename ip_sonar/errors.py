from enum import Enum
from typing import Any, ClassVar

from pydantic import ValidationError


class ErrorKind(str, Enum):
    """Discriminant carried by every IP-Sonar error."""

    invalid_input = "invalid_input"
    api_error = "api_error"
    network_error = "network_error"
    timeout = "timeout"
    unknown = "unknown"


class IpSonarError(Exception):
    """Base error for the IP-Sonar client."""

    kind: ClassVar[ErrorKind]
    status: int | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(IpSonarError, ValueError):
    """Raised when caller-supplied arguments violate a documented precondition."""

    kind = ErrorKind.invalid_input


class ApiError(IpSonarError):
    """Raised when the API answered with a non-success status or an unusable body.

    `body` is the decoded JSON error payload when it parses, otherwise the raw
    response text (or None). `api_message` is the `message` field of a JSON
    error body shaped as `{"message": "..."}`.
    """

    kind = ErrorKind.api_error

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: Any = None,
        api_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
        self.api_message = api_message

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status={self.status!r}, api_message={self.api_message!r})"


class NetworkError(IpSonarError):
    """Raised when no response could be obtained from the API."""

    kind = ErrorKind.network_error


class RequestTimeoutError(IpSonarError):
    """Raised when the request deadline is exceeded."""

    kind = ErrorKind.timeout


class UnknownError(IpSonarError):
    """Raised for any other failure; the original exception is chained as __cause__."""

    kind = ErrorKind.unknown


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into `loc: msg; loc: msg`."""
    return "; ".join(f"{'.'.join(map(str, error['loc']))}: {error['msg']}" for error in exc.errors())
