"""Spotify adapter package."""

from __future__ import annotations

from .auth import fetch_spotify_token
from .client import SpotifyClient
from .fetcher import search_albums
from .schema import SpotifyAlbum, SpotifyArtist, SpotifySearchResponse, SpotifyTrack
from .translator import translate_album

__all__ = [
    "SpotifyAlbum",
    "SpotifyArtist",
    "SpotifyClient",
    "SpotifySearchResponse",
    "SpotifyTrack",
    "fetch_spotify_token",
    "search_albums",
    "translate_album",
]
