"""HTTP client for the Apple Music catalog API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import SEARCH_LIMIT
from albumscout.adapters.responses import get_json, validate_payload
from albumscout.config.apple_music import DEFAULT_APPLE_MUSIC_STOREFRONT
from albumscout.domain.errors import ProviderPayloadError
from albumscout.domain.model import Platform

from .schema import AlbumRelationships, AlbumResponse, SearchResponse, TrackPage

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient

    from .schema import AlbumResource, TrackResource

log = getLogger(__name__)


class AppleMusicClient:
    """Developer-token authenticated access to one Apple Music storefront."""

    def __init__(
        self,
        client: ResilientClient,
        *,
        token: str,
        storefront: str = DEFAULT_APPLE_MUSIC_STOREFRONT,
    ) -> None:
        self._client = client
        self._headers = {"Authorization": f"Bearer {token}"}
        self._catalog = f"/v1/catalog/{storefront}"

    async def search_album_ids(self, term: str, *, limit: int = SEARCH_LIMIT) -> list[str]:
        payload = await get_json(
            self._client,
            f"{self._catalog}/search?term={term}&types=albums&limit={limit}",
            platform=Platform.APPLE_MUSIC,
            what="album search",
            headers=self._headers,
        )
        response = validate_payload(
            SearchResponse, payload, platform=Platform.APPLE_MUSIC, what="album search"
        )
        if response.results.albums is None:
            raise ProviderPayloadError(
                "album search response has no albums group", platform=Platform.APPLE_MUSIC
            )
        return [album.id for album in response.results.albums.data]

    async def fetch_album(self, album_id: str) -> AlbumResource:
        log.debug("Fetching Apple Music album %s", album_id)
        payload = await get_json(
            self._client,
            f"{self._catalog}/albums/{album_id}",
            platform=Platform.APPLE_MUSIC,
            what="album details",
            headers=self._headers,
        )
        response = validate_payload(
            AlbumResponse, payload, platform=Platform.APPLE_MUSIC, what="album details"
        )
        album = response.data[0]
        relationships = album.relationships
        if relationships is None or relationships.tracks is None or not relationships.tracks.next:
            return album

        tracks = await self._collect_tracks(relationships.tracks)
        return album.model_copy(
            update={
                "relationships": AlbumRelationships(
                    tracks=TrackPage(data=tracks),
                    artists=relationships.artists,
                )
            }
        )

    async def _collect_tracks(self, first_page: TrackPage) -> list[TrackResource]:
        tracks = list(first_page.data)
        next_url = first_page.next
        while next_url:
            payload = await get_json(
                self._client,
                next_url,
                platform=Platform.APPLE_MUSIC,
                what="album tracks",
                headers=self._headers,
            )
            page = validate_payload(
                TrackPage, payload, platform=Platform.APPLE_MUSIC, what="album tracks"
            )
            tracks.extend(page.data)
            next_url = page.next
        return tracks
