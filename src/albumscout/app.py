"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from albumscout.adapters import apple_music, deezer, spotify
from albumscout.adapters.http_resilience import ResilientClient
from albumscout.config import (
    ConfigurationError,
    get_apple_music_config,
    get_deezer_config,
    get_search_settings,
    get_spotify_config,
)
from albumscout.domain import (
    AuthenticationError,
    Platform,
    SearchResult,
    SearchTimeoutError,
    aggregate_platforms,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from albumscout.adapters.credentials import AccessToken, CredentialCache, TokenLoader
    from albumscout.adapters.http_resilience import ClientFactory
    from albumscout.config import AppleMusicConfig, DeezerConfig, SearchSettings, SpotifyConfig
    from albumscout.domain import PlatformSearch


log = getLogger(__name__)


async def search_all_platforms_async(
    artist_name: str,
    album_name: str | None = None,
    *,
    settings: SearchSettings | None = None,
    credential_cache: CredentialCache | None = None,
    spotify_config: SpotifyConfig | None = None,
    apple_music_config: AppleMusicConfig | None = None,
    deezer_config: DeezerConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SearchResult:
    """Search Spotify, Apple Music and Deezer concurrently.

    Both credentials are acquired before any platform is queried; a failure
    there raises ``AuthenticationError`` and nothing is searched. Missing
    configuration is only read (and reported) here, at first use.
    """

    effective_settings = settings or get_search_settings()
    album = album_name or None
    log.info("Starting album search: artist=%r, album=%r", artist_name, album)

    deadline = asyncio.timeout(effective_settings.request_timeout_seconds)
    try:
        async with deadline:
            result = await _search(
                artist_name,
                album,
                settings=effective_settings,
                credential_cache=credential_cache,
                spotify_config=spotify_config,
                apple_music_config=apple_music_config,
                deezer_config=deezer_config,
                client_factory=client_factory or ResilientClient,
            )
    except TimeoutError as exc:
        if not deadline.expired():
            raise
        log.error(
            "Album search exceeded %ss deadline", effective_settings.request_timeout_seconds
        )
        raise SearchTimeoutError(
            f"Album search did not finish within {effective_settings.request_timeout_seconds}s"
        ) from exc

    log.info(
        "Finished album search: spotify=%s, appleMusic=%s, deezer=%s, failed=%s",
        len(result.spotify),
        len(result.apple_music),
        len(result.deezer),
        [str(platform) for platform in result.failed_platforms],
    )
    return result


def search_all_platforms(
    artist_name: str,
    album_name: str | None = None,
    *,
    settings: SearchSettings | None = None,
    credential_cache: CredentialCache | None = None,
    spotify_config: SpotifyConfig | None = None,
    apple_music_config: AppleMusicConfig | None = None,
    deezer_config: DeezerConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SearchResult:
    """Blocking wrapper around :func:`search_all_platforms_async`."""

    return asyncio.run(
        search_all_platforms_async(
            artist_name,
            album_name,
            settings=settings,
            credential_cache=credential_cache,
            spotify_config=spotify_config,
            apple_music_config=apple_music_config,
            deezer_config=deezer_config,
            client_factory=client_factory,
        )
    )


async def _search(
    artist_name: str,
    album_name: str | None,
    *,
    settings: SearchSettings,
    credential_cache: CredentialCache | None,
    spotify_config: SpotifyConfig | None,
    apple_music_config: AppleMusicConfig | None,
    deezer_config: DeezerConfig | None,
    client_factory: ClientFactory,
) -> SearchResult:
    spotify_cfg = spotify_config or _load_config(get_spotify_config, Platform.SPOTIFY)
    apple_cfg = apple_music_config or _load_config(get_apple_music_config, Platform.APPLE_MUSIC)
    deezer_cfg = deezer_config or get_deezer_config()

    async with AsyncExitStack() as stack:
        spotify_http = await stack.enter_async_context(client_factory(spotify_cfg.resilience))
        apple_http = await stack.enter_async_context(client_factory(apple_cfg.resilience))
        deezer_http = await stack.enter_async_context(client_factory(deezer_cfg.resilience))

        log.info("Acquiring platform credentials")
        spotify_token = await _acquire(
            Platform.SPOTIFY,
            partial(spotify.fetch_spotify_token, spotify_cfg, spotify_http),
            credential_cache,
        )
        apple_token = await _acquire(
            Platform.APPLE_MUSIC,
            partial(_apple_music_token, apple_cfg),
            credential_cache,
        )

        searches: dict[Platform, PlatformSearch] = {
            Platform.SPOTIFY: partial(
                spotify.search_albums,
                artist_name,
                album_name,
                token=spotify_token.value,
                client=spotify_http,
            ),
            Platform.APPLE_MUSIC: partial(
                apple_music.search_albums,
                artist_name,
                album_name,
                token=apple_token.value,
                client=apple_http,
                storefront=apple_cfg.storefront,
            ),
            Platform.DEEZER: partial(
                deezer.search_albums,
                artist_name,
                album_name,
                client=deezer_http,
            ),
        }
        return await aggregate_platforms(searches, isolate_failures=settings.isolate_failures)


def _load_config[C](loader: Callable[[], C], platform: Platform) -> C:
    try:
        return loader()
    except ConfigurationError as exc:
        raise AuthenticationError(str(exc), platform=platform) from exc


async def _apple_music_token(config: AppleMusicConfig) -> AccessToken:
    return apple_music.generate_apple_music_token(config)


async def _acquire(
    platform: Platform,
    loader: TokenLoader,
    cache: CredentialCache | None,
) -> AccessToken:
    if cache is None:
        return await loader()
    return await cache.get(platform, loader)
