"""Ports for operation dispatch.

Where: features/operations/usecases.
What: Transport protocol and raw response record consumed by the dispatcher.
Why: Keep the dispatch core independent of any concrete HTTP library.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(slots=True)
class RawResponse:
    """Status, headers and undecoded body returned by a transport."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@runtime_checkable
class HTTPTransport(Protocol):
    """Capability to send one HTTP request.

    Implementations raise ``requests.RequestException`` or ``OSError`` for
    network-level failures; any status code is a normal return.
    """

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> RawResponse:
        """Send the request and return the raw response."""
        ...


__all__ = ["HTTPTransport", "RawResponse"]
