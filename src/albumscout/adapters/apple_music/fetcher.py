"""Apple Music album search entry point."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import build_search_query
from albumscout.config.apple_music import DEFAULT_APPLE_MUSIC_STOREFRONT
from albumscout.domain.errors import AuthenticationError
from albumscout.domain.model import Platform

from .client import AppleMusicClient
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
    storefront: str = DEFAULT_APPLE_MUSIC_STOREFRONT,
) -> list[Album]:
    """Search one Apple Music storefront and return detailed albums."""

    if not token:
        raise AuthenticationError(
            "Apple Music search requires a developer token", platform=Platform.APPLE_MUSIC
        )

    apple_music = AppleMusicClient(client, token=token, storefront=storefront)
    album_ids = await apple_music.search_album_ids(build_search_query(artist_name, album_name))
    log.info("Apple Music search returned %s albums", len(album_ids))

    albums = await asyncio.gather(*(apple_music.fetch_album(album_id) for album_id in album_ids))
    return [translate_album(album) for album in albums]
