"""HTTP client for the public Deezer API."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters.mapping import SEARCH_LIMIT
from albumscout.adapters.responses import get_json, validate_payload
from albumscout.domain.errors import ProviderPayloadError
from albumscout.domain.model import Platform

from .schema import DeezerAlbum, DeezerErrorResponse, DeezerSearchResponse

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient

log = getLogger(__name__)


class DeezerClient:
    """Unauthenticated access to Deezer's search and album endpoints."""

    def __init__(self, client: ResilientClient) -> None:
        self._client = client

    async def search_album_ids(self, query: str, *, limit: int = SEARCH_LIMIT) -> list[int]:
        payload = await self._get(f"/search/album?q={query}&limit={limit}", what="album search")
        response = validate_payload(
            DeezerSearchResponse, payload, platform=Platform.DEEZER, what="album search"
        )
        if not response.data:
            raise ProviderPayloadError(
                "album search returned no albums", platform=Platform.DEEZER
            )
        return [album.id for album in response.data]

    async def fetch_album(self, album_id: int) -> DeezerAlbum:
        log.debug("Fetching Deezer album %s", album_id)
        payload = await self._get(f"/album/{album_id}", what="album details")
        return validate_payload(
            DeezerAlbum, payload, platform=Platform.DEEZER, what="album details"
        )

    async def _get(self, url: str, *, what: str) -> object:
        payload = await get_json(self._client, url, platform=Platform.DEEZER, what=what)
        # Deezer reports quota and lookup failures in-band with HTTP 200.
        if isinstance(payload, Mapping) and "error" in payload:
            error = validate_payload(
                DeezerErrorResponse, payload, platform=Platform.DEEZER, what=what
            ).error
            log.error("Deezer API error %s: %s", error.code, error.message)
            raise ProviderPayloadError(
                f"{what} failed: {error.message} (code {error.code})",
                platform=Platform.DEEZER,
            )
        return payload
