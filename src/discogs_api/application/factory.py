"""Where: src/discogs_api/application/factory.py
What: Build ready-to-use clients for each authorization scheme.
Why: Centralise header merging and transport wiring so callers pass only credentials.
Assumptions: - The Authorization header is computed once per client.
Trade-offs: - OAuth nonce and timestamp are therefore fixed for the client's lifetime.
"""

from __future__ import annotations

from collections.abc import Mapping

from discogs_api.config.config import Config
from discogs_api.config.settings import BASE_URL, DEFAULT_HEADERS, REQUEST_TIMEOUT
from discogs_api.features.auth.domain import (
    AuthContext,
    ConsumerCredentials,
    NoAuth,
    OAuth1Credentials,
    PersonalToken,
)
from discogs_api.features.auth.usecases import (
    OAuthFlow,
    build_authorization_header,
    merge_headers,
)
from discogs_api.features.operations.usecases import (
    Dispatcher,
    HTTPTransport,
    OperationRegistry,
)
from discogs_api.platform.http import RequestsTransport

from .services.client import DiscogsClient


def default_headers(config: Config | None = None) -> dict[str, str]:
    """Headers every request carries unless the caller overrides them."""

    if config is None:
        return dict(DEFAULT_HEADERS)
    return {
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }


def _endpoint(config: Config | None) -> tuple[str, float]:
    if config is None:
        return BASE_URL, REQUEST_TIMEOUT
    return config.base_url, config.timeout


def create_client_for(
    auth: AuthContext,
    *,
    headers: Mapping[str, str] | None = None,
    transport: HTTPTransport | None = None,
    registry: OperationRegistry | None = None,
    config: Config | None = None,
) -> DiscogsClient:
    """Wire a client for ``auth``.

    Args:
        auth: Credentials selecting the Authorization scheme.
        headers: Extra headers; a user Authorization is replaced whenever
            ``auth`` produces one.
        transport: HTTP transport; defaults to ``RequestsTransport``.
        registry: Operation registry; defaults to the packaged catalog.
        config: Settings source; defaults to the values in ``config.settings``.

    Returns:
        DiscogsClient: Client with headers fixed for its lifetime.
    """
    base_url, timeout = _endpoint(config)
    authorization = build_authorization_header(auth)
    merged = merge_headers(default_headers(config), headers, authorization)
    http = transport if transport is not None else RequestsTransport(timeout=timeout)
    dispatcher = Dispatcher(http, base_url, merged)
    return DiscogsClient(dispatcher, registry=registry)


def create_client(
    *,
    headers: Mapping[str, str] | None = None,
    transport: HTTPTransport | None = None,
    registry: OperationRegistry | None = None,
    config: Config | None = None,
) -> DiscogsClient:
    """Create an anonymous client."""

    return create_client_for(
        NoAuth(), headers=headers, transport=transport, registry=registry, config=config
    )


def create_client_with_consumer_credentials(
    consumer_key: str,
    consumer_secret: str,
    *,
    headers: Mapping[str, str] | None = None,
    transport: HTTPTransport | None = None,
    registry: OperationRegistry | None = None,
    config: Config | None = None,
) -> DiscogsClient:
    """Create a client authenticated with an application key and secret."""

    return create_client_for(
        ConsumerCredentials(consumer_key, consumer_secret),
        headers=headers,
        transport=transport,
        registry=registry,
        config=config,
    )


def create_client_with_personal_token(
    token: str,
    *,
    headers: Mapping[str, str] | None = None,
    transport: HTTPTransport | None = None,
    registry: OperationRegistry | None = None,
    config: Config | None = None,
) -> DiscogsClient:
    """Create a client authenticated with a personal access token."""

    return create_client_for(
        PersonalToken(token),
        headers=headers,
        transport=transport,
        registry=registry,
        config=config,
    )


def create_client_with_oauth(
    consumer_key: str,
    consumer_secret: str,
    access_token: str,
    token_secret: str,
    *,
    headers: Mapping[str, str] | None = None,
    transport: HTTPTransport | None = None,
    registry: OperationRegistry | None = None,
    config: Config | None = None,
) -> DiscogsClient:
    """Create a client signing requests with OAuth 1.0a PLAINTEXT."""

    return create_client_for(
        OAuth1Credentials(consumer_key, consumer_secret, access_token, token_secret),
        headers=headers,
        transport=transport,
        registry=registry,
        config=config,
    )


def create_oauth_flow(
    *,
    transport: HTTPTransport | None = None,
    config: Config | None = None,
) -> OAuthFlow:
    """Create the helper that exchanges OAuth request and access tokens."""

    base_url, timeout = _endpoint(config)
    http = transport if transport is not None else RequestsTransport(timeout=timeout)
    return OAuthFlow(http, base_url, default_headers(config))


__all__ = [
    "create_client",
    "create_client_for",
    "create_client_with_consumer_credentials",
    "create_client_with_oauth",
    "create_client_with_personal_token",
    "create_oauth_flow",
    "default_headers",
]
