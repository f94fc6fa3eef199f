"""Authorization header construction.

Where: features/auth/usecases/header_builder.py
What: Render the Authorization value for each credential type and merge client headers.
Why: Keep every wire format for credentials in one module, away from dispatch.

Notes:
- OAuth requests use the PLAINTEXT signature method; the signature is the two
  percent-encoded secrets joined with ``&`` and is inserted without re-encoding.
"""

from __future__ import annotations

import secrets
import time
from collections.abc import Callable, Mapping
from typing import Final
from urllib.parse import quote

from ..domain.credentials import (
    AuthContext,
    ConsumerCredentials,
    NoAuth,
    OAuth1Credentials,
    PersonalToken,
)

AUTHORIZATION_HEADER: Final[str] = "Authorization"
OAUTH_SIGNATURE_METHOD: Final[str] = "PLAINTEXT"
OAUTH_VERSION: Final[str] = "1.0"
NONCE_BYTES: Final[int] = 16


def generate_nonce() -> str:
    """Return 32 lowercase hex characters from a secure random source."""

    return secrets.token_hex(NONCE_BYTES)


def oauth_encode(value: str) -> str:
    """Percent-encode ``value`` keeping only unreserved characters."""

    return quote(value, safe="")


def plaintext_signature(consumer_secret: str, token_secret: str = "") -> str:
    return f"{oauth_encode(consumer_secret)}&{oauth_encode(token_secret)}"


def format_oauth_header(params: Mapping[str, str]) -> str:
    """Join OAuth parameters in the given order into an ``OAuth`` header value.

    Every value is percent-encoded except ``oauth_signature``, which must
    already be in its encoded form.
    """
    parts: list[str] = []
    for key, value in params.items():
        rendered = value if key == "oauth_signature" else oauth_encode(value)
        parts.append(f'{key}="{rendered}"')
    return "OAuth " + ", ".join(parts)


def build_authorization_header(
    context: AuthContext,
    *,
    nonce_factory: Callable[[], str] = generate_nonce,
    clock: Callable[[], float] = time.time,
) -> str | None:
    """Return the Authorization value for ``context``, or None for anonymous access.

    Args:
        context: Credentials selected by the caller.
        nonce_factory: Source of OAuth nonces.
        clock: Source of unix time for OAuth timestamps.

    Returns:
        str | None: Header value ready to send.
    """
    if isinstance(context, NoAuth):
        return None
    if isinstance(context, ConsumerCredentials):
        return f"Discogs key={context.key}, secret={context.secret}"
    if isinstance(context, PersonalToken):
        return f"Discogs token={context.token}"
    if isinstance(context, OAuth1Credentials):
        params = {
            "oauth_consumer_key": context.consumer_key,
            "oauth_token": context.access_token,
            "oauth_nonce": nonce_factory(),
            "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
            "oauth_timestamp": str(int(clock())),
            "oauth_version": OAUTH_VERSION,
            "oauth_signature": plaintext_signature(
                context.consumer_secret, context.token_secret
            ),
        }
        return format_oauth_header(params)
    raise TypeError(f"Unsupported authorization context: {type(context).__name__}")


def merge_headers(
    defaults: Mapping[str, str],
    user_headers: Mapping[str, str] | None,
    authorization: str | None,
) -> dict[str, str]:
    """Layer ``user_headers`` over ``defaults`` and pin ``authorization`` last.

    Header names match case-insensitively. A user header replaces a default
    with the same name; any user-supplied Authorization is dropped when
    ``authorization`` is set.
    """
    merged: dict[str, str] = dict(defaults)
    for name, value in (user_headers or {}).items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value

    if authorization is not None:
        for existing in [key for key in merged if key.lower() == AUTHORIZATION_HEADER.lower()]:
            del merged[existing]
        merged[AUTHORIZATION_HEADER] = authorization
    return merged


__all__ = [
    "AUTHORIZATION_HEADER",
    "build_authorization_header",
    "format_oauth_header",
    "generate_nonce",
    "merge_headers",
    "oauth_encode",
    "plaintext_signature",
]
