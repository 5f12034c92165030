"""Deezer adapter package."""

from __future__ import annotations

from .client import DeezerClient
from .fetcher import search_albums
from .schema import DeezerAlbum, DeezerSearchResponse, DeezerTrack
from .translator import translate_album

__all__ = [
    "DeezerAlbum",
    "DeezerClient",
    "DeezerSearchResponse",
    "DeezerTrack",
    "search_albums",
    "translate_album",
]
