# Path: src/discogs_api/platform/http/__init__.py
# Summary: HTTP transport adapters.
# Why: Single import path for the default ``requests`` transport.

from __future__ import annotations

from .transport import RequestsTransport

__all__ = ["RequestsTransport"]
