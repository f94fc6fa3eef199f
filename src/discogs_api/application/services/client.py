"""Application facade for invoking catalog operations.

This layer ties the registry, parameter mapper, request builder, dispatcher
and response decoder together so callers only deal with operation names and
arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, final

from discogs_api.features.operations.domain import (
    DiscogsApiError,
    InvalidParameterError,
    ParameterIssue,
    RequestPlan,
)
from discogs_api.features.operations.usecases import (
    Dispatcher,
    OperationRegistry,
    build_request,
    decode_response,
    load_default_registry,
    map_arguments,
)
from discogs_api.platform.logging import logger


@final
class DiscogsClient:
    """Registry-driven Discogs client.

    Operations are called by name, either with positional values in declared
    order or with camelCase keyword arguments::

        client.invoke("getArtist", 139250)
        client.invoke("search", q="Daft Punk", type="artist")
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        registry: OperationRegistry | None = None,
    ) -> None:
        self._dispatcher: Dispatcher = dispatcher
        self._registry: OperationRegistry = registry if registry is not None else load_default_registry()

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def operation_names(self) -> tuple[str, ...]:
        """Return every operation name the client accepts."""

        return self._registry.names()

    def plan(self, operation_name: str, /, *args: Any, **kwargs: Any) -> RequestPlan:
        """Resolve an invocation into a request plan without sending it.

        Raises:
            UnknownOperationError: ``operation_name`` is not in the registry.
            InvalidParameterError: Arguments cannot be mapped or encoded.
        """
        definition = self._registry.lookup(operation_name)
        arguments = _normalize_arguments(operation_name, args, kwargs)
        params = map_arguments(definition, arguments)
        return build_request(definition, params)

    def invoke(self, operation_name: str, /, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """Call ``operation_name`` and return the decoded JSON object.

        Args:
            operation_name: camelCase operation name, e.g. ``getArtist``.
            *args: Positional values in declared parameter order, or a single
                mapping of camelCase names to values.
            **kwargs: camelCase named values.

        Returns:
            dict[str, Any]: Parsed response document.

        Raises:
            DiscogsApiError: Any usage, response or API-reported failure.
        """
        try:
            plan = self.plan(operation_name, *args, **kwargs)
            raw = self._dispatcher.execute(plan, operation_name=operation_name)
            return decode_response(raw)
        except DiscogsApiError as exc:
            logger.log(
                logging.WARNING,
                "%s failed: %s",
                operation_name,
                exc,
                extra={
                    "dispatch_event": "dispatch.request.error",
                    "operation": operation_name,
                    "error_kind": type(exc).__name__,
                    "error_message": str(exc),
                },
            )
            raise


def _normalize_arguments(
    operation_name: str,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> tuple[Any, ...] | Mapping[str, Any]:
    if args and kwargs:
        raise InvalidParameterError(
            "Cannot mix positional and named arguments",
            issue=ParameterIssue.MIXED_ARGUMENTS,
            operation_name=operation_name,
        )
    if kwargs:
        return kwargs
    if len(args) == 1 and isinstance(args[0], Mapping):
        return args[0]
    return args


__all__ = ["DiscogsClient"]
