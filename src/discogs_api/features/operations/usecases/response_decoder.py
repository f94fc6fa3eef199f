"""Decode raw API responses into mappings or typed errors."""

from __future__ import annotations

import json
from typing import Any, Final, cast

from ..domain.errors import (
    DEFAULT_API_ERROR_MESSAGE,
    ApiReportedError,
    EmptyResponseError,
    MalformedJsonError,
    UnexpectedShapeError,
)
from .ports import RawResponse

PREVIEW_LENGTH: Final[int] = 100

_JSON_TYPE_NAMES: Final[dict[type, str]] = {
    list: "array",
    str: "string",
    int: "integer",
    float: "double",
    bool: "boolean",
    type(None): "null",
}


def decode_response(raw: RawResponse) -> dict[str, Any]:
    """Return the JSON object carried by ``raw``.

    Raises:
        EmptyResponseError: The body has zero length.
        MalformedJsonError: The body is not valid JSON.
        UnexpectedShapeError: The top-level JSON value is not an object.
        ApiReportedError: The object carries an ``error`` key, or the status
            is 400 or above.
    """
    if not raw.body:
        raise EmptyResponseError(status=raw.status)

    text = raw.body.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedJsonError(exc.msg, text[:PREVIEW_LENGTH], status=raw.status) from exc

    if not isinstance(data, dict):
        raise UnexpectedShapeError(_JSON_TYPE_NAMES.get(type(data), type(data).__name__), status=raw.status)

    document = cast(dict[str, Any], data)
    if "error" in document:
        raise ApiReportedError(
            document["error"],
            _message_of(document),
            status=raw.status,
        )
    if raw.status >= 400:
        raise ApiReportedError(raw.status, _message_of(document), status=raw.status)

    return document


def _message_of(document: dict[str, Any]) -> str:
    message = document.get("message", DEFAULT_API_ERROR_MESSAGE)
    return message if isinstance(message, str) else str(message)


__all__ = ["PREVIEW_LENGTH", "decode_response"]
