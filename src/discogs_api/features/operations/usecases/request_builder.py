"""Request plan construction.

Where: features/operations/usecases/request_builder.py
What: Substitute path placeholders and split remaining parameters into query or body.
Why: Keep request shaping a pure function that can be tested without a transport.

Notes:
- Template guards run before any substitution.
- Substituted values are percent-encoded with nothing but unreserved characters kept.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import quote

from ..domain.errors import InvalidParameterError, ParameterIssue
from ..domain.models import OperationDefinition, RequestPlan
from .value_encoding import stringify_params, stringify_value

MAX_URI_LENGTH: Final[int] = 2048
MAX_PLACEHOLDERS: Final[int] = 50

_PARAMETER_NAME: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_LEFTOVER_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\{[^{}]*\}")


def build_request(definition: OperationDefinition, params: Mapping[str, Any]) -> RequestPlan:
    """Resolve ``params`` against ``definition`` into a request plan.

    Args:
        definition: Operation being invoked.
        params: Canonical parameters keyed by declared snake_case names.

    Returns:
        RequestPlan: Substituted URI plus stringified query or body parameters.

    Raises:
        InvalidParameterError: When the template trips a guard, a placeholder
            name is malformed, a value cannot be stringified, or a placeholder
            remains unresolved.
    """
    template = definition.uri_template
    _check_template(definition)

    uri = template
    consumed: set[str] = set()
    for name, value in params.items():
        placeholder = "{" + name + "}"
        if value is None or placeholder not in template:
            continue
        if not _PARAMETER_NAME.match(name):
            raise InvalidParameterError(
                f"invalid parameter name {name!r}",
                issue=ParameterIssue.INVALID_NAME,
                parameter=name,
                operation_name=definition.name,
            )
        encoded = quote(stringify_value(value, parameter=name), safe="")
        uri = uri.replace(placeholder, encoded)
        consumed.add(name)

    leftover = _LEFTOVER_PLACEHOLDER.search(uri)
    if leftover is not None:
        raise InvalidParameterError(
            f"Unresolved placeholder {leftover.group(0)} in {definition.name} URI",
            issue=ParameterIssue.UNRESOLVED_PLACEHOLDER,
            parameter=leftover.group(0)[1:-1],
            operation_name=definition.name,
        )

    if definition.http_method.sends_body:
        return RequestPlan(
            method=definition.http_method,
            uri=uri,
            body_params=stringify_params(params),
        )

    remaining = {
        name: value for name, value in params.items() if name not in consumed and value is not None
    }
    return RequestPlan(
        method=definition.http_method,
        uri=uri,
        query_params=stringify_params(remaining),
    )


def _check_template(definition: OperationDefinition) -> None:
    template = definition.uri_template
    if len(template) > MAX_URI_LENGTH:
        raise InvalidParameterError(
            f"URI template too long ({len(template)} > {MAX_URI_LENGTH} characters)",
            issue=ParameterIssue.TEMPLATE_TOO_LONG,
            operation_name=definition.name,
        )
    if template.count("{") > MAX_PLACEHOLDERS:
        raise InvalidParameterError(
            f"Too many placeholders in URI template (limit {MAX_PLACEHOLDERS})",
            issue=ParameterIssue.TOO_MANY_PLACEHOLDERS,
            operation_name=definition.name,
        )


__all__ = ["MAX_PLACEHOLDERS", "MAX_URI_LENGTH", "build_request"]
