"""Operation registry loaded from the packaged TOML catalog.

Where: features/operations/usecases/registry.py
What: Parse, validate and expose the read-only operation catalog.
Why: Every request shape comes from one static source of truth.
"""

from __future__ import annotations

import tomllib
from collections.abc import Iterator, Mapping
from functools import cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Final, cast

from discogs_api.platform.logging import logger

from ..domain.errors import UnknownOperationError
from ..domain.models import HttpMethod, OperationDefinition, ParameterSpec
from ..domain.naming import camel_to_snake, snake_to_camel

_CATALOG_PACKAGE: Final[str] = "discogs_api.features.operations"
_CATALOG_RESOURCE: Final[str] = "resources/operations.toml"
_SUPPORTED_METADATA_VERSION: Final[int] = 1


class RegistryLoadError(Exception):
    """Raised when the operation catalog is unreadable or inconsistent."""


class OperationRegistry:
    """Immutable mapping from operation name to its definition."""

    def __init__(self, operations: Mapping[str, OperationDefinition]) -> None:
        self._operations: Mapping[str, OperationDefinition] = MappingProxyType(dict(operations))

    def lookup(self, name: str) -> OperationDefinition:
        """Return the definition for ``name`` or raise ``UnknownOperationError``."""

        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def names(self) -> tuple[str, ...]:
        return tuple(self._operations)

    @classmethod
    def from_mapping(cls, document: Mapping[str, Any]) -> "OperationRegistry":
        """Build a registry from a parsed catalog ``{name: table}`` mapping."""

        operations: dict[str, OperationDefinition] = {}
        for name, table in document.items():
            if not isinstance(name, str) or not name:
                raise RegistryLoadError("Operation names must be non-empty strings")
            if not isinstance(table, Mapping):
                raise RegistryLoadError(f"Operation '{name}' must be a table")
            operations[name] = _parse_operation(name, cast(Mapping[str, Any], table))
        return cls(operations)


def _parse_operation(name: str, table: Mapping[str, Any]) -> OperationDefinition:
    raw_method = table.get("http_method", "GET")
    try:
        method = HttpMethod(str(raw_method).upper())
    except ValueError:
        raise RegistryLoadError(
            f"Operation '{name}' has unsupported http_method {raw_method!r}"
        ) from None

    uri = table.get("uri")
    if not isinstance(uri, str):
        raise RegistryLoadError(f"Operation '{name}' must declare a string uri")

    requires_auth = table.get("requires_auth", False)
    if not isinstance(requires_auth, bool):
        raise RegistryLoadError(f"Operation '{name}' requires_auth must be a boolean")

    return OperationDefinition(
        name=name,
        http_method=method,
        uri_template=uri,
        parameters=_parse_parameters(name, table.get("parameters", [])),
        requires_auth=requires_auth,
    )


def _parse_parameters(operation: str, raw: Any) -> tuple[ParameterSpec, ...]:
    if not isinstance(raw, list):
        raise RegistryLoadError(f"Operation '{operation}' parameters must be a list")

    specs: list[ParameterSpec] = []
    seen: set[str] = set()
    for entry in cast(list[object], raw):
        if not isinstance(entry, Mapping):
            raise RegistryLoadError(f"Operation '{operation}' parameters must be tables")
        entry_map = cast(Mapping[str, Any], entry)
        param_name = entry_map.get("name")
        if not isinstance(param_name, str) or not param_name:
            raise RegistryLoadError(f"Operation '{operation}' has a parameter without a name")
        if param_name in seen:
            raise RegistryLoadError(
                f"Operation '{operation}' declares parameter '{param_name}' twice"
            )
        if camel_to_snake(snake_to_camel(param_name)) != param_name:
            raise RegistryLoadError(
                f"Operation '{operation}' parameter '{param_name}' does not survive "
                "camelCase conversion"
            )
        required = entry_map.get("required", False)
        if not isinstance(required, bool):
            raise RegistryLoadError(
                f"Operation '{operation}' parameter '{param_name}' required must be a boolean"
            )
        seen.add(param_name)
        specs.append(ParameterSpec(name=param_name, required=required))
    return tuple(specs)


def parse_catalog(text: str) -> OperationRegistry:
    """Parse catalog TOML text into a registry."""

    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise RegistryLoadError("Invalid TOML in operation catalog") from exc

    version = document.get("metadata_version", _SUPPORTED_METADATA_VERSION)
    if version != _SUPPORTED_METADATA_VERSION:
        raise RegistryLoadError(f"Unsupported catalog metadata_version {version!r}")

    operations = document.get("operations")
    if not isinstance(operations, dict):
        raise RegistryLoadError("Operation catalog must define an [operations] table")
    return OperationRegistry.from_mapping(cast(dict[str, Any], operations))


@cache
def load_default_registry() -> OperationRegistry:
    """Load the packaged catalog once per process."""

    catalog = resources.files(_CATALOG_PACKAGE).joinpath(_CATALOG_RESOURCE)
    registry = parse_catalog(catalog.read_text(encoding="utf-8"))
    logger.debug("Loaded %d operations from the packaged catalog", len(registry))
    return registry


__all__ = [
    "OperationRegistry",
    "RegistryLoadError",
    "load_default_registry",
    "parse_catalog",
]
