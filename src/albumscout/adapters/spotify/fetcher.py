"""Spotify album search entry point."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import build_search_query
from albumscout.domain.errors import AuthenticationError
from albumscout.domain.model import Platform

from .client import SpotifyClient
from .translator import translate_album

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient
    from albumscout.domain.model import Album

log = getLogger(__name__)


async def search_albums(
    artist_name: str,
    album_name: str | None = None,
    *,
    token: str | None,
    client: ResilientClient,
) -> list[Album]:
    """Search Spotify and return fully detailed albums in relevance order."""

    if not token:
        raise AuthenticationError(
            "Spotify search requires an access token", platform=Platform.SPOTIFY
        )

    spotify = SpotifyClient(client, token=token)
    album_ids = await spotify.search_album_ids(build_search_query(artist_name, album_name))
    log.info("Spotify search returned %s albums", len(album_ids))

    albums = await asyncio.gather(*(spotify.fetch_album(album_id) for album_id in album_ids))
    return [translate_album(album) for album in albums]
