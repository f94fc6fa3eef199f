"""Tests for client factories and header wiring."""

from __future__ import annotations

import re

from pytest_mock import MockerFixture

from conftest import RecordingTransport
from discogs_api import (
    create_client,
    create_client_with_consumer_credentials,
    create_client_with_oauth,
    create_client_with_personal_token,
    create_oauth_flow,
)
from discogs_api.config.config import Config
from discogs_api.features.operations.usecases import RawResponse, encode_query
from discogs_api.platform.http import RequestsTransport


def test_personal_token_search_scenario(transport: RecordingTransport) -> None:
    transport.queue_json({"results": [], "pagination": {"items": 0}})
    client = create_client_with_personal_token("abc123", transport=transport)

    result = client.invoke("search", q="Daft Punk")

    assert result["pagination"] == {"items": 0}
    call = transport.calls[0]
    assert call.method == "GET"
    assert call.url == "https://api.discogs.com/database/search"
    assert call.headers["Authorization"] == "Discogs token=abc123"
    assert call.query == {"q": "Daft Punk"}
    assert encode_query(call.query) == "q=Daft%20Punk"


def test_user_authorization_is_overridden(transport: RecordingTransport) -> None:
    client = create_client_with_personal_token(
        "abc123",
        headers={"Authorization": "Bearer malicious", "X-Client": "tests"},
        transport=transport,
    )

    _ = client.invoke("getArtist", id=1)

    headers = transport.calls[0].headers
    assert headers["Authorization"] == "Discogs token=abc123"
    assert headers["X-Client"] == "tests"
    assert "Bearer malicious" not in headers.values()


def test_anonymous_client_sends_default_headers(transport: RecordingTransport) -> None:
    config = Config(user_agent="MyApp/1.0 +https://example.com")
    client = create_client(transport=transport, config=config)

    _ = client.invoke("getRelease", id=249504)

    headers = transport.calls[0].headers
    assert headers == {"User-Agent": "MyApp/1.0 +https://example.com", "Accept": "application/json"}


def test_consumer_credentials_client(transport: RecordingTransport) -> None:
    client = create_client_with_consumer_credentials("key", "secret", transport=transport)

    _ = client.invoke("getMaster", id=1000)

    assert transport.calls[0].headers["Authorization"] == "Discogs key=key, secret=secret"


def test_oauth_header_is_computed_once(transport: RecordingTransport) -> None:
    client = create_client_with_oauth("ck", "cs", "at", "ts", transport=transport)

    _ = client.invoke("getIdentity")
    _ = client.invoke("getIdentity")

    first, second = (call.headers["Authorization"] for call in transport.calls)
    assert first == second
    assert first.startswith('OAuth oauth_consumer_key="ck", oauth_token="at", oauth_nonce="')
    assert re.search(r'oauth_nonce="[0-9a-f]{32}"', first)


def test_custom_base_url(transport: RecordingTransport) -> None:
    config = Config(base_url="http://localhost:8080/api")
    client = create_client(transport=transport, config=config)

    _ = client.invoke("getLabel", id=1)

    assert transport.calls[0].url == "http://localhost:8080/api/labels/1"


def test_default_transport_uses_configured_timeout(mocker: MockerFixture) -> None:
    session = mocker.patch("discogs_api.platform.http.transport.requests.Session")

    client = create_client(config=Config(timeout=5))
    transport = client.dispatcher._transport  # pyright: ignore[reportPrivateUsage]

    assert isinstance(transport, RequestsTransport)
    assert transport.timeout == 5.0
    session.assert_called_once_with()


def test_oauth_flow_factory_sends_default_headers(transport: RecordingTransport) -> None:
    flow = create_oauth_flow(transport=transport, config=Config(user_agent="Flow/1.0"))
    transport.responses.append(
        RawResponse(status=200, body=b"oauth_token=t&oauth_token_secret=s")
    )

    token = flow.get_request_token("ck", "cs", "oob")

    assert token.token == "t"
    headers = transport.calls[0].headers
    assert headers["User-Agent"] == "Flow/1.0"
    assert headers["Authorization"].startswith("OAuth ")
