"""Shared pytest fixtures: recording transports and synthetic registries."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from discogs_api.features.operations.usecases import OperationRegistry, RawResponse


@dataclass(slots=True)
class SentRequest:
    """One call observed by ``RecordingTransport``."""

    method: str
    url: str
    headers: dict[str, str]
    query: dict[str, str] | None
    body: dict[str, Any] | None


@dataclass
class RecordingTransport:
    """Transport double that records requests and replays canned responses."""

    responses: list[RawResponse] = field(default_factory=list)
    error: BaseException | None = None
    calls: list[SentRequest] = field(default_factory=list)

    def queue_json(self, payload: Any, status: int = 200) -> None:
        self.responses.append(RawResponse(status=status, body=json.dumps(payload).encode("utf-8")))

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> RawResponse:
        self.calls.append(
            SentRequest(
                method=method,
                url=url,
                headers=dict(headers),
                query=dict(query) if query is not None else None,
                body=dict(body) if body is not None else None,
            )
        )
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return RawResponse(status=200, body=b"{}")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def small_registry() -> OperationRegistry:
    """Registry with one operation per verb plus path and query parameters."""

    return OperationRegistry.from_mapping(
        {
            "getArtist": {
                "http_method": "GET",
                "uri": "artists/{id}",
                "parameters": [{"name": "id", "required": True}],
            },
            "listArtistReleases": {
                "uri": "artists/{id}/releases",
                "parameters": [
                    {"name": "id", "required": True},
                    {"name": "sort"},
                    {"name": "sort_order"},
                    {"name": "per_page"},
                ],
            },
            "addToFolder": {
                "http_method": "POST",
                "uri": "users/{username}/collection/folders/{folder_id}/releases/{release_id}",
                "requires_auth": True,
                "parameters": [
                    {"name": "username", "required": True},
                    {"name": "folder_id", "required": True},
                    {"name": "release_id", "required": True},
                ],
            },
            "deleteFolder": {
                "http_method": "DELETE",
                "uri": "users/{username}/collection/folders/{folder_id}",
                "requires_auth": True,
                "parameters": [
                    {"name": "username", "required": True},
                    {"name": "folder_id", "required": True},
                ],
            },
        }
    )
