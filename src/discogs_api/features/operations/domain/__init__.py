"""Domain records, naming rules and errors for operation dispatch."""

from .errors import (
    DEFAULT_API_ERROR_MESSAGE,
    ApiReportedError,
    ClientUsageError,
    DiscogsApiError,
    EmptyResponseError,
    InvalidParameterError,
    MalformedJsonError,
    ParameterIssue,
    ResponseError,
    TransportFailureError,
    UnexpectedShapeError,
    UnknownOperationError,
)
from .models import HttpMethod, OperationDefinition, ParameterSpec, RequestPlan
from .naming import camel_to_snake, snake_to_camel

__all__ = [
    "ApiReportedError",
    "ClientUsageError",
    "DEFAULT_API_ERROR_MESSAGE",
    "DiscogsApiError",
    "EmptyResponseError",
    "HttpMethod",
    "InvalidParameterError",
    "MalformedJsonError",
    "OperationDefinition",
    "ParameterIssue",
    "ParameterSpec",
    "RequestPlan",
    "ResponseError",
    "TransportFailureError",
    "UnexpectedShapeError",
    "UnknownOperationError",
    "camel_to_snake",
    "snake_to_camel",
]
