"""Error taxonomy for album searches."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Platform


class AlbumSearchError(RuntimeError):
    """Base class for every failure raised by the search core."""


class AuthenticationError(AlbumSearchError):
    """Raised when a platform credential cannot be acquired."""

    def __init__(self, message: str, *, platform: Platform) -> None:
        super().__init__(message)
        self.platform = platform


class ProviderError(AlbumSearchError):
    """Raised when a platform search or detail call fails.

    ``status`` carries the upstream HTTP status when there was one; it is
    ``None`` for transport failures such as timeouts or refused connections.
    """

    def __init__(self, message: str, *, platform: Platform, status: int | None = None) -> None:
        super().__init__(message)
        self.platform = platform
        self.status = status

    def __str__(self) -> str:
        base = super().__str__()
        if self.status is None:
            return f"[{self.platform}] {base}"
        return f"[{self.platform}] {base} (HTTP {self.status})"


class ProviderPayloadError(ProviderError):
    """Raised when a platform answered with a payload of unexpected shape."""


class SearchTimeoutError(AlbumSearchError):
    """Raised when an aggregation exceeds its overall deadline."""


class ValidationError(AlbumSearchError):
    """Raised by request boundaries for invalid search input."""
