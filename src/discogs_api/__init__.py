"""Registry-driven client for the Discogs REST API.

Typical use::

    from discogs_api import create_client_with_personal_token

    client = create_client_with_personal_token("your-token")
    artist = client.invoke("getArtist", id=139250)
"""

from discogs_api.application.factory import (
    create_client,
    create_client_for,
    create_client_with_consumer_credentials,
    create_client_with_oauth,
    create_client_with_personal_token,
    create_oauth_flow,
)
from discogs_api.application.services import DiscogsClient
from discogs_api.features.auth.domain import (
    ConsumerCredentials,
    NoAuth,
    OAuth1Credentials,
    PersonalToken,
)
from discogs_api.features.auth.usecases import (
    AccessToken,
    OAuthFlow,
    OAuthResponseError,
    RequestToken,
)
from discogs_api.features.operations.domain import (
    ApiReportedError,
    ClientUsageError,
    DiscogsApiError,
    EmptyResponseError,
    InvalidParameterError,
    MalformedJsonError,
    ParameterIssue,
    RequestPlan,
    ResponseError,
    TransportFailureError,
    UnexpectedShapeError,
    UnknownOperationError,
)
from discogs_api.features.operations.usecases import (
    HTTPTransport,
    OperationRegistry,
    RawResponse,
    load_default_registry,
)

__version__ = "0.4.0"

__all__ = [
    "AccessToken",
    "ApiReportedError",
    "ClientUsageError",
    "ConsumerCredentials",
    "DiscogsApiError",
    "DiscogsClient",
    "EmptyResponseError",
    "HTTPTransport",
    "InvalidParameterError",
    "MalformedJsonError",
    "NoAuth",
    "OAuth1Credentials",
    "OAuthFlow",
    "OAuthResponseError",
    "OperationRegistry",
    "ParameterIssue",
    "PersonalToken",
    "RawResponse",
    "RequestPlan",
    "RequestToken",
    "ResponseError",
    "TransportFailureError",
    "UnexpectedShapeError",
    "UnknownOperationError",
    "create_client",
    "create_client_for",
    "create_client_with_consumer_credentials",
    "create_client_with_oauth",
    "create_client_with_personal_token",
    "create_oauth_flow",
    "load_default_registry",
]
