"""
Summary: Public surface for authorization header and OAuth helpers.
Why: Provide a stable import path for the client factories and tests.
"""

from .header_builder import (
    AUTHORIZATION_HEADER,
    build_authorization_header,
    generate_nonce,
    merge_headers,
)
from .oauth_flow import AccessToken, OAuthFlow, OAuthResponseError, RequestToken

__all__ = [
    "AUTHORIZATION_HEADER",
    "AccessToken",
    "OAuthFlow",
    "OAuthResponseError",
    "RequestToken",
    "build_authorization_header",
    "generate_nonce",
    "merge_headers",
]
