"""
/*
Path: src/discogs_api/features/operations/usecases/__init__.py
Summary: Package exports for operation mapping, building, dispatch and decoding.
Why: Give the client facade one stable namespace for the dispatch pipeline.
*/
"""

from .dispatcher import Dispatcher
from .parameter_mapper import map_arguments
from .ports import HTTPTransport, RawResponse
from .registry import (
    OperationRegistry,
    RegistryLoadError,
    load_default_registry,
    parse_catalog,
)
from .request_builder import MAX_PLACEHOLDERS, MAX_URI_LENGTH, build_request
from .response_decoder import decode_response
from .value_encoding import encode_query, stringify_value

__all__ = [
    "Dispatcher",
    "HTTPTransport",
    "MAX_PLACEHOLDERS",
    "MAX_URI_LENGTH",
    "OperationRegistry",
    "RawResponse",
    "RegistryLoadError",
    "build_request",
    "decode_response",
    "encode_query",
    "load_default_registry",
    "map_arguments",
    "parse_catalog",
    "stringify_value",
]
