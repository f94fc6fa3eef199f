"""Operation catalog records.

Where: features/operations/domain.
What: Immutable operation definitions and the per-call request plan.
Why: Give the mapper, builder and dispatcher one shared vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property

from .naming import snake_to_camel


class HttpMethod(StrEnum):
    """HTTP verbs used by the catalog."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        """Whether parameters travel in a JSON body instead of the query."""

        return self in (HttpMethod.POST, HttpMethod.PUT)


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """One declared parameter of an operation."""

    name: str
    required: bool = False

    @property
    def external_name(self) -> str:
        """Name accepted from callers (camelCase)."""

        return snake_to_camel(self.name)


@dataclass(frozen=True)
class OperationDefinition:
    """Request-shape contract for one named operation."""

    name: str
    http_method: HttpMethod
    uri_template: str
    parameters: tuple[ParameterSpec, ...] = ()
    requires_auth: bool = False

    @cached_property
    def parameter_names(self) -> tuple[str, ...]:
        """Declared snake_case names in positional order."""

        return tuple(spec.name for spec in self.parameters)

    @cached_property
    def required_names(self) -> frozenset[str]:
        return frozenset(spec.name for spec in self.parameters if spec.required)

    @cached_property
    def external_names(self) -> dict[str, str]:
        """Map camelCase caller names to declared snake_case names."""

        return {spec.external_name: spec.name for spec in self.parameters}

    def is_required(self, name: str) -> bool:
        return name in self.required_names


@dataclass(frozen=True)
class RequestPlan:
    """Fully resolved request for one invocation."""

    method: HttpMethod
    uri: str
    query_params: dict[str, str] = field(default_factory=dict)
    body_params: dict[str, str] = field(default_factory=dict)


__all__ = [
    "HttpMethod",
    "OperationDefinition",
    "ParameterSpec",
    "RequestPlan",
]
