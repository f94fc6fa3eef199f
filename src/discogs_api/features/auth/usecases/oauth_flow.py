"""OAuth 1.0a token exchange.

Where: features/auth/usecases/oauth_flow.py
What: Obtain request tokens, build the consent URL and exchange verifiers for access tokens.
Why: Applications acting for other users need access tokens before building an OAuth client.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Final
from urllib.parse import parse_qs, quote

import requests

from discogs_api.features.operations.domain.errors import (
    ResponseError,
    TransportFailureError,
)
from discogs_api.features.operations.usecases.ports import HTTPTransport, RawResponse
from discogs_api.platform.logging import logger

from .header_builder import (
    AUTHORIZATION_HEADER,
    OAUTH_SIGNATURE_METHOD,
    OAUTH_VERSION,
    format_oauth_header,
    generate_nonce,
    plaintext_signature,
)

AUTHORIZE_URL: Final[str] = "https://discogs.com/oauth/authorize"
REQUEST_TOKEN_PATH: Final[str] = "oauth/request_token"
ACCESS_TOKEN_PATH: Final[str] = "oauth/access_token"


class OAuthResponseError(ResponseError):
    """Raised when a token endpoint answers without the expected token pair."""

    def __init__(self, step: str, body: str, *, status: int | None = None) -> None:
        self.step: str = step
        self.body: str = body
        super().__init__(f"Invalid OAuth {step} response: {body}", status=status)


@dataclass(frozen=True, slots=True)
class RequestToken:
    """Temporary credentials returned by the request-token step."""

    token: str
    token_secret: str = field(repr=False)
    callback_confirmed: bool = False


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Long-lived token pair used to build OAuth credentials."""

    token: str
    token_secret: str = field(repr=False)


class OAuthFlow:
    """Drive the three-legged OAuth 1.0a exchange against one API host."""

    def __init__(
        self,
        transport: HTTPTransport,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        *,
        nonce_factory: Callable[[], str] = generate_nonce,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._transport: HTTPTransport = transport
        self._base_url: str = base_url if base_url.endswith("/") else base_url + "/"
        self._headers: dict[str, str] = dict(headers or {})
        self._nonce_factory: Callable[[], str] = nonce_factory
        self._clock: Callable[[], float] = clock

    def get_request_token(
        self,
        consumer_key: str,
        consumer_secret: str,
        callback_url: str,
    ) -> RequestToken:
        """Request temporary credentials for ``callback_url``.

        Raises:
            OAuthResponseError: The response lacks ``oauth_token`` or ``oauth_token_secret``.
            TransportFailureError: The request could not be sent.
        """
        params = {
            "oauth_consumer_key": consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
            "oauth_timestamp": str(int(self._clock())),
            "oauth_callback": callback_url,
            "oauth_version": OAUTH_VERSION,
            "oauth_signature": plaintext_signature(consumer_secret),
        }
        fields = self._exchange("request token", REQUEST_TOKEN_PATH, params)
        return RequestToken(
            token=fields["oauth_token"],
            token_secret=fields["oauth_token_secret"],
            callback_confirmed=fields.get("oauth_callback_confirmed", "false") == "true",
        )

    @staticmethod
    def authorization_url(request_token: str) -> str:
        """Return the page where the user approves ``request_token``."""

        return f"{AUTHORIZE_URL}?oauth_token={quote(request_token, safe='')}"

    def get_access_token(
        self,
        consumer_key: str,
        consumer_secret: str,
        request_token: str,
        request_token_secret: str,
        verifier: str,
    ) -> AccessToken:
        """Exchange an approved request token and its verifier for an access token."""

        params = {
            "oauth_consumer_key": consumer_key,
            "oauth_token": request_token,
            "oauth_verifier": verifier,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
            "oauth_timestamp": str(int(self._clock())),
            "oauth_version": OAUTH_VERSION,
            "oauth_signature": plaintext_signature(consumer_secret, request_token_secret),
        }
        fields = self._exchange("access token", ACCESS_TOKEN_PATH, params)
        return AccessToken(token=fields["oauth_token"], token_secret=fields["oauth_token_secret"])

    def _exchange(self, step: str, path: str, params: Mapping[str, str]) -> dict[str, str]:
        headers = dict(self._headers)
        headers[AUTHORIZATION_HEADER] = format_oauth_header(params)
        try:
            response = self._transport.send("GET", self._base_url + path, headers=headers)
        except TransportFailureError:
            raise
        except (requests.RequestException, OSError) as exc:
            raise TransportFailureError(exc) from exc

        fields = _parse_form(response)
        if not fields.get("oauth_token") or not fields.get("oauth_token_secret"):
            body = response.body.decode("utf-8", errors="replace")
            logger.warning("OAuth %s exchange failed (status=%s)", step, response.status)
            raise OAuthResponseError(step, body, status=response.status)

        logger.debug("OAuth %s obtained", step)
        return fields


def _parse_form(response: RawResponse) -> dict[str, str]:
    parsed = parse_qs(response.body.decode("utf-8", errors="replace"), keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items() if values}


__all__ = [
    "AUTHORIZE_URL",
    "AccessToken",
    "OAuthFlow",
    "OAuthResponseError",
    "RequestToken",
]
