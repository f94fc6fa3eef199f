"""Summary: Convert raw parameter values into their wire string form.
Why: Query strings, path segments and JSON bodies all carry strings only.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import quote, urlencode

from ..domain.errors import InvalidParameterError, ParameterIssue


def stringify_value(value: Any, *, parameter: str | None = None) -> str:
    """Return the canonical string form of ``value``.

    Args:
        value: Raw parameter value.
        parameter: Declared name, reported on failure.

    Returns:
        str: ``"1"``/``"0"`` for booleans, two decimals for floats, compact
        JSON for lists and mappings, ISO-8601 for dates, ``""`` for None.

    Raises:
        InvalidParameterError: When the value has no string form.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidParameterError(
                f"Cannot encode non-finite float for parameter {parameter}",
                issue=ParameterIssue.UNENCODABLE_VALUE,
                parameter=parameter,
            )
        return f"{value:.2f}"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, Mapping)):
        return _encode_json(value, parameter)
    if isinstance(value, (bytes, bytearray)):
        raise InvalidParameterError(
            f"Unsupported parameter type bytes for parameter {parameter}",
            issue=ParameterIssue.UNENCODABLE_VALUE,
            parameter=parameter,
        )
    if type(value).__str__ is not object.__str__:
        return str(value)

    raise InvalidParameterError(
        f"Object parameters must define __str__ or be date/datetime instances "
        f"(parameter {parameter}, type {type(value).__name__})",
        issue=ParameterIssue.UNENCODABLE_VALUE,
        parameter=parameter,
    )


def _encode_json(value: Any, parameter: str | None) -> str:
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise InvalidParameterError(
            f"Failed to encode parameter {parameter} as JSON: {exc}",
            issue=ParameterIssue.UNENCODABLE_VALUE,
            parameter=parameter,
        ) from exc


def stringify_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Stringify every value of ``params`` keeping key order."""

    return {name: stringify_value(value, parameter=name) for name, value in params.items()}


def encode_query(query: Mapping[str, str]) -> str:
    """Percent-encode ``query`` in order, with ``%20`` for spaces."""

    return urlencode(list(query.items()), quote_via=quote)


__all__ = ["encode_query", "stringify_params", "stringify_value"]
