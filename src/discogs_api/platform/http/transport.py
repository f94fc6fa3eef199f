"""Where: src/discogs_api/platform/http/transport.py
What: ``requests``-backed implementation of the HTTP transport port.
Why: Isolate the third-party HTTP client behind the protocol the dispatcher consumes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, cast

import requests

from discogs_api.config.settings import REQUEST_TIMEOUT
from discogs_api.features.operations.usecases.ports import RawResponse
from discogs_api.features.operations.usecases.value_encoding import encode_query


class RequestsTransport:
    """Send one request per call through a shared ``requests.Session``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self._session: requests.Session = session if session is not None else requests.Session()
        self._timeout: float = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> RawResponse:
        # Pre-encoded so spaces travel as %20 rather than "+".
        response = self._session.request(
            method,
            url,
            headers=dict(headers),
            params=encode_query(query) if query else None,
            json=dict(body) if body is not None else None,
            timeout=self._timeout,
        )
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        return RawResponse(
            status=int(response.status_code),
            headers={str(key): str(value) for key, value in header_items},
            body=response.content or b"",
        )

    def close(self) -> None:
        self._session.close()


__all__ = ["RequestsTransport"]
