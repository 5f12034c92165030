"""HTTP client for the Spotify catalog search and album endpoints."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import SEARCH_LIMIT
from albumscout.adapters.responses import get_json, validate_payload
from albumscout.domain.model import Platform

from .schema import SpotifyAlbum, SpotifySearchResponse, SpotifyTrackPage

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient

    from .schema import SpotifyTrack

log = getLogger(__name__)


class SpotifyClient:
    """Bearer-authenticated access to the Spotify Web API."""

    def __init__(self, client: ResilientClient, *, token: str) -> None:
        self._client = client
        self._headers = {"Authorization": f"Bearer {token}"}

    async def search_album_ids(self, query: str, *, limit: int = SEARCH_LIMIT) -> list[str]:
        payload = await get_json(
            self._client,
            f"/search?q={query}&type=album&limit={limit}",
            platform=Platform.SPOTIFY,
            what="album search",
            headers=self._headers,
        )
        response = validate_payload(
            SpotifySearchResponse, payload, platform=Platform.SPOTIFY, what="album search"
        )
        return [item.id for item in response.albums.items]

    async def fetch_album(self, album_id: str) -> SpotifyAlbum:
        log.debug("Fetching Spotify album %s", album_id)
        payload = await get_json(
            self._client,
            f"/albums/{album_id}",
            platform=Platform.SPOTIFY,
            what="album details",
            headers=self._headers,
        )
        album = validate_payload(
            SpotifyAlbum, payload, platform=Platform.SPOTIFY, what="album details"
        )
        if album.tracks.next is None:
            return album

        tracks = await self._collect_tracks(album.tracks)
        return album.model_copy(update={"tracks": SpotifyTrackPage(items=tracks)})

    async def _collect_tracks(self, first_page: SpotifyTrackPage) -> list[SpotifyTrack]:
        tracks = list(first_page.items)
        next_url = first_page.next
        while next_url:
            payload = await get_json(
                self._client,
                next_url,
                platform=Platform.SPOTIFY,
                what="album tracks",
                headers=self._headers,
            )
            page = validate_payload(
                SpotifyTrackPage, payload, platform=Platform.SPOTIFY, what="album tracks"
            )
            tracks.extend(page.items)
            next_url = page.next
        return tracks
