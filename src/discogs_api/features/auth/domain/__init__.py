"""Credential records for the supported authorization schemes."""

from .credentials import (
    AuthContext,
    ConsumerCredentials,
    NoAuth,
    OAuth1Credentials,
    PersonalToken,
)

__all__ = [
    "AuthContext",
    "ConsumerCredentials",
    "NoAuth",
    "OAuth1Credentials",
    "PersonalToken",
]
