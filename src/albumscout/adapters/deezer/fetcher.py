"""Deezer album search entry point."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import build_search_query

from .client import DeezerClient
from .translator import translate_album

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient
    from albumscout.domain.model import Album

log = getLogger(__name__)


async def search_albums(
    artist_name: str,
    album_name: str | None = None,
    *,
    token: str | None = None,
    client: ResilientClient,
) -> list[Album]:
    """Search Deezer and return detailed albums; Deezer needs no credential."""

    del token
    deezer = DeezerClient(client)
    album_ids = await deezer.search_album_ids(build_search_query(artist_name, album_name))
    log.info("Deezer search returned %s albums", len(album_ids))

    albums = await asyncio.gather(*(deezer.fetch_album(album_id) for album_id in album_ids))
    return [translate_album(album) for album in albums]
