"""Summary: Exception taxonomy raised by operation dispatch.
Why: Let callers branch on failure kind through types and fields, not message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

DEFAULT_API_ERROR_MESSAGE: Final[str] = "API Error"


class ParameterIssue(Enum):
    """Reason codes carried by ``InvalidParameterError``."""

    UNKNOWN_NAME = "unknown_name"
    MISSING_REQUIRED = "missing_required"
    NULL_REQUIRED = "null_required"
    TOO_FEW_POSITIONAL = "too_few_positional"
    MIXED_ARGUMENTS = "mixed_arguments"
    INVALID_NAME = "invalid_name"
    UNRESOLVED_PLACEHOLDER = "unresolved_placeholder"
    TEMPLATE_TOO_LONG = "template_too_long"
    TOO_MANY_PLACEHOLDERS = "too_many_placeholders"
    UNENCODABLE_VALUE = "unencodable_value"


class DiscogsApiError(Exception):
    """Base exception for every failure surfaced by the client."""


# Caller mistakes ------------------------------------------------------------


class ClientUsageError(DiscogsApiError):
    """The operation was invoked incorrectly."""


class UnknownOperationError(ClientUsageError):
    """Raised when an operation name is not present in the registry."""

    def __init__(self, operation_name: str) -> None:
        self.operation_name: str = operation_name
        super().__init__(f"Unknown operation: {operation_name}")


class InvalidParameterError(ClientUsageError):
    """Raised when arguments cannot be mapped or serialized into a request."""

    def __init__(
        self,
        reason: str,
        *,
        issue: ParameterIssue,
        parameter: str | None = None,
        operation_name: str | None = None,
    ) -> None:
        self.reason: str = reason
        self.issue: ParameterIssue = issue
        self.parameter: str | None = parameter
        self.operation_name: str | None = operation_name
        super().__init__(reason)


# Server refusals -------------------------------------------------------------


class ApiReportedError(DiscogsApiError):
    """The API answered with an error document."""

    def __init__(self, code: Any, message: str, *, status: int | None = None) -> None:
        self.code: Any = code
        self.message: str = message
        self.status: int | None = status
        super().__init__(message)


# Broken wire -------------------------------------------------------------------


class ResponseError(DiscogsApiError):
    """The response could not be obtained or understood."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        self.status: int | None = status
        super().__init__(message)


class EmptyResponseError(ResponseError):
    """The response body had zero length."""

    def __init__(self, *, status: int | None = None) -> None:
        super().__init__("Empty response body received", status=status)


class MalformedJsonError(ResponseError):
    """The response body is not valid JSON."""

    def __init__(self, detail: str, preview: str, *, status: int | None = None) -> None:
        self.detail: str = detail
        self.preview: str = preview
        super().__init__(
            f"Invalid JSON response: {detail} (Content: {preview})",
            status=status,
        )


class UnexpectedShapeError(ResponseError):
    """The response JSON is valid but not an object at the top level."""

    def __init__(self, actual_type: str, *, status: int | None = None) -> None:
        self.actual_type: str = actual_type
        super().__init__(
            f"Expected object response from API, got {actual_type}",
            status=status,
        )


class TransportFailureError(ResponseError):
    """The transport could not complete the exchange."""

    def __init__(self, underlying: BaseException) -> None:
        self.underlying: BaseException = underlying
        super().__init__(f"HTTP request failed: {underlying}")


__all__ = [
    "ApiReportedError",
    "ClientUsageError",
    "DEFAULT_API_ERROR_MESSAGE",
    "DiscogsApiError",
    "EmptyResponseError",
    "InvalidParameterError",
    "MalformedJsonError",
    "ParameterIssue",
    "ResponseError",
    "TransportFailureError",
    "UnexpectedShapeError",
    "UnknownOperationError",
]
