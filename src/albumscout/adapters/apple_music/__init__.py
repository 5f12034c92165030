"""Apple Music adapter package."""

from __future__ import annotations

from .auth import generate_apple_music_token
from .client import AppleMusicClient
from .fetcher import search_albums
from .schema import AlbumResource, AlbumResponse, SearchResponse, TrackResource
from .translator import translate_album

__all__ = [
    "AlbumResource",
    "AlbumResponse",
    "AppleMusicClient",
    "SearchResponse",
    "TrackResource",
    "generate_apple_music_token",
    "search_albums",
    "translate_album",
]
