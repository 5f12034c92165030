"""Platform-agnostic album search domain."""

from __future__ import annotations

from .aggregation import PlatformSearch, aggregate_platforms
from .errors import (
    AlbumSearchError,
    AuthenticationError,
    ProviderError,
    ProviderPayloadError,
    SearchTimeoutError,
    ValidationError,
)
from .model import (
    MAX_ALBUMS_PER_PLATFORM,
    UNKNOWN_YEAR,
    Album,
    Platform,
    PlatformOutcome,
    SearchResult,
    Track,
)

__all__ = [
    "MAX_ALBUMS_PER_PLATFORM",
    "UNKNOWN_YEAR",
    "Album",
    "AlbumSearchError",
    "AuthenticationError",
    "Platform",
    "PlatformOutcome",
    "PlatformSearch",
    "ProviderError",
    "ProviderPayloadError",
    "SearchResult",
    "SearchTimeoutError",
    "Track",
    "ValidationError",
    "aggregate_platforms",
]
