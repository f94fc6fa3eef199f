"""Tests for the ``requests``-backed transport adapter."""

from __future__ import annotations

import pytest
import requests
from pytest_mock import MockerFixture

from discogs_api.platform.http import RequestsTransport


def _response(status: int, content: bytes, headers: dict[str, str] | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = content  # pyright: ignore[reportPrivateUsage]
    response.headers.update(headers or {})
    return response


def test_get_passes_pre_encoded_query(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.request.return_value = _response(
        200, b'{"results": []}', {"Content-Type": "application/json"}
    )
    transport = RequestsTransport(session, timeout=7.5)

    raw = transport.send(
        "GET",
        "https://api.discogs.com/database/search",
        headers={"User-Agent": "test/1.0"},
        query={"q": "Daft Punk", "type": "artist"},
    )

    session.request.assert_called_once_with(
        "GET",
        "https://api.discogs.com/database/search",
        headers={"User-Agent": "test/1.0"},
        params="q=Daft%20Punk&type=artist",
        json=None,
        timeout=7.5,
    )
    assert raw.status == 200
    assert raw.body == b'{"results": []}'
    assert raw.headers["Content-Type"] == "application/json"


def test_post_sends_json_body(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.request.return_value = _response(201, b'{"instance_id": 3}')
    transport = RequestsTransport(session)

    raw = transport.send(
        "POST",
        "https://api.discogs.com/users/u/collection/folders/1/releases/2",
        headers={},
        body={"username": "u"},
    )

    kwargs = session.request.call_args.kwargs
    assert kwargs["params"] is None
    assert kwargs["json"] == {"username": "u"}
    assert raw.status == 201


def test_error_status_is_returned(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.request.return_value = _response(404, b'{"message": "Release not found."}')

    raw = RequestsTransport(session).send("GET", "https://api.discogs.com/releases/0", headers={})

    assert raw.status == 404


def test_network_errors_propagate(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("offline")

    with pytest.raises(requests.ConnectionError):
        _ = RequestsTransport(session).send("GET", "https://api.discogs.com/", headers={})


def test_close_closes_session(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)

    RequestsTransport(session).close()

    session.close.assert_called_once_with()
