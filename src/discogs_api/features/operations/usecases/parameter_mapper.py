"""Map positional or named call arguments onto declared parameter names."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..domain.errors import InvalidParameterError, ParameterIssue
from ..domain.models import OperationDefinition
from ..domain.naming import camel_to_snake, snake_to_camel


def map_arguments(
    definition: OperationDefinition,
    arguments: Sequence[Any] | Mapping[str, Any],
) -> dict[str, Any]:
    """Build canonical parameters for one invocation.

    Args:
        definition: Operation being invoked.
        arguments: Positional values in declared order, or a mapping keyed by
            camelCase parameter names.

    Returns:
        dict[str, Any]: Values keyed by declared snake_case names.

    Raises:
        InvalidParameterError: On unknown names, missing or null required
            parameters, or too few positional values.
    """
    if isinstance(arguments, Mapping):
        return _map_named(definition, arguments)
    return _map_positional(definition, arguments)


def _map_positional(definition: OperationDefinition, values: Sequence[Any]) -> dict[str, Any]:
    names = definition.parameter_names
    required_count = sum(1 for spec in definition.parameters if spec.required)
    if len(values) < required_count:
        raise InvalidParameterError(
            f"{definition.name} expects at least {required_count} positional "
            f"arguments, {len(values)} given",
            issue=ParameterIssue.TOO_FEW_POSITIONAL,
            operation_name=definition.name,
        )

    # Extra positional values beyond the declared parameters are dropped.
    return {name: value for name, value in zip(names, values)}


def _map_named(definition: OperationDefinition, arguments: Mapping[str, Any]) -> dict[str, Any]:
    allowed = definition.external_names
    params: dict[str, Any] = {}

    for key, value in arguments.items():
        if key not in allowed:
            raise InvalidParameterError(
                f"unknown named parameter {key}",
                issue=ParameterIssue.UNKNOWN_NAME,
                parameter=key,
                operation_name=definition.name,
            )
        params[camel_to_snake(key)] = value

    _validate_required(definition, params)
    return params


def _validate_required(definition: OperationDefinition, params: Mapping[str, Any]) -> None:
    for spec in definition.parameters:
        if spec.required and spec.name not in params:
            raise InvalidParameterError(
                f"Required parameter {snake_to_camel(spec.name)} is missing",
                issue=ParameterIssue.MISSING_REQUIRED,
                parameter=spec.name,
                operation_name=definition.name,
            )

    for name, value in params.items():
        if value is None and definition.is_required(name):
            raise InvalidParameterError(
                f"Parameter {snake_to_camel(name)} is required but null was provided",
                issue=ParameterIssue.NULL_REQUIRED,
                parameter=name,
                operation_name=definition.name,
            )


__all__ = ["map_arguments"]
