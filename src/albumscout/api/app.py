"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from fastapi import FastAPI

from albumscout import __version__
from albumscout.adapters.credentials import CredentialCache
from albumscout.app import search_all_platforms_async

from .routes import router

if TYPE_CHECKING:
    from albumscout.config import SearchSettings
    from albumscout.domain import SearchResult


class SearchService(Protocol):
    async def __call__(
        self,
        artist_name: str,
        album_name: str | None = None,
        *,
        settings: SearchSettings | None = None,
        credential_cache: CredentialCache | None = None,
    ) -> SearchResult: ...


def create_app(
    *,
    settings: SearchSettings | None = None,
    credential_cache: CredentialCache | None = None,
    search_service: SearchService | None = None,
) -> FastAPI:
    """Build the HTTP app; credentials are cached per app instance."""

    app = FastAPI(title="albumscout", version=__version__)
    app.state.settings = settings
    app.state.credential_cache = credential_cache or CredentialCache()
    app.state.search_service = search_service or search_all_platforms_async
    app.include_router(router)
    return app
