"""Summary: Credential records for the supported authorization schemes.
Why: Represent each scheme as its own immutable type so the header builder can match on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class NoAuth:
    """Anonymous access; no Authorization header is sent."""


@dataclass(frozen=True, slots=True)
class ConsumerCredentials:
    """Application consumer key and secret."""

    key: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class PersonalToken:
    """Personal access token generated from the Discogs developer settings."""

    token: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class OAuth1Credentials:
    """Consumer and access token pairs for OAuth 1.0a PLAINTEXT signing."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
    access_token: str = field(repr=False)
    token_secret: str = field(repr=False)


AuthContext = NoAuth | ConsumerCredentials | PersonalToken | OAuth1Credentials


__all__ = [
    "AuthContext",
    "ConsumerCredentials",
    "NoAuth",
    "OAuth1Credentials",
    "PersonalToken",
]
