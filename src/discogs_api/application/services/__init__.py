"""Application services exposed to library users."""

from .client import DiscogsClient

__all__ = ["DiscogsClient"]
