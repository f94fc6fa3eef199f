"""Single-shot request dispatch.

Where: features/operations/usecases/dispatcher.py
What: Send one planned request through the transport with fixed headers.
Why: Keep URL joining, timing and transport-failure wrapping in one place.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import requests

from discogs_api.platform.logging import logger

from ..domain.errors import TransportFailureError
from ..domain.models import RequestPlan
from .ports import HTTPTransport, RawResponse
from .value_encoding import encode_query


class Dispatcher:
    """Execute request plans against one base URL."""

    def __init__(
        self,
        transport: HTTPTransport,
        base_url: str,
        headers: Mapping[str, str],
    ) -> None:
        self._transport: HTTPTransport = transport
        self._base_url: str = base_url if base_url.endswith("/") else base_url + "/"
        self._headers: Mapping[str, str] = MappingProxyType(dict(headers))

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Mapping[str, str]:
        """Headers sent with every request, read-only."""

        return self._headers

    def url_for(self, plan: RequestPlan) -> str:
        return self._base_url + plan.uri.lstrip("/")

    def execute(self, plan: RequestPlan, *, operation_name: str | None = None) -> RawResponse:
        """Send ``plan`` exactly once and return the raw response.

        Raises:
            TransportFailureError: The transport raised a network-level error.
        """
        url = self.url_for(plan)
        sends_body = plan.method.sends_body
        query = None if sends_body else dict(plan.query_params)
        body: dict[str, Any] | None = dict(plan.body_params) if sends_body else None

        log_uri = f"{plan.uri}?{encode_query(query)}" if query else plan.uri
        context: dict[str, Any] = {
            "operation": operation_name,
            "http_method": plan.method.value,
            "uri": log_uri,
        }
        self._log(logging.DEBUG, "dispatch.request.start", "Dispatching %s", log_uri, **context)

        started = time.perf_counter()
        try:
            response = self._transport.send(
                plan.method.value,
                url,
                headers=self._headers,
                query=query,
                body=body,
            )
        except TransportFailureError:
            raise
        except (requests.RequestException, OSError) as exc:
            self._log(
                logging.DEBUG,
                "dispatch.request.error",
                "Transport failed for %s",
                log_uri,
                error_kind=type(exc).__name__,
                error_message=str(exc),
                **context,
            )
            raise TransportFailureError(exc) from exc

        duration_ms = (time.perf_counter() - started) * 1000
        self._log(
            logging.DEBUG,
            "dispatch.request.complete",
            "Received status %s for %s",
            response.status,
            log_uri,
            status=response.status,
            duration_ms=duration_ms,
            **context,
        )
        return response

    @staticmethod
    def _log(level: int, event: str, message: str, *message_args: object, **context: Any) -> None:
        extra: dict[str, Any] = {"dispatch_event": event}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["Dispatcher"]
