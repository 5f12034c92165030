from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import TYPE_CHECKING

import httpx
import pytest

from albumscout.adapters.credentials import CredentialCache
from albumscout.adapters.http_resilience import ResilientClient
from albumscout.app import search_all_platforms, search_all_platforms_async
from albumscout.domain import (
    AuthenticationError,
    Platform,
    ProviderError,
    ProviderPayloadError,
    SearchTimeoutError,
)
from tests.helpers.upstreams import (
    APPLE_MUSIC_HOST,
    DEEZER_HOST,
    SPOTIFY_ACCOUNTS_HOST,
    SPOTIFY_API_HOST,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from albumscout.config import (
        AppleMusicConfig,
        DeezerConfig,
        ResilienceConfig,
        SearchSettings,
        SpotifyConfig,
    )
    from albumscout.domain import SearchResult
    from tests.helpers.upstreams import FakeUpstreams

    SearchRunner = Callable[..., SearchResult]

CATALOG_HOSTS = (SPOTIFY_API_HOST, APPLE_MUSIC_HOST, DEEZER_HOST)


@pytest.fixture
def run_search(
    upstreams: FakeUpstreams,
    spotify_config: SpotifyConfig,
    apple_music_config: AppleMusicConfig,
    deezer_config: DeezerConfig,
    search_settings: SearchSettings,
) -> SearchRunner:
    def run(
        artist_name: str = "Coldplay",
        album_name: str | None = None,
        **overrides: object,
    ) -> SearchResult:
        options: dict[str, object] = {
            "settings": search_settings,
            "spotify_config": spotify_config,
            "apple_music_config": apple_music_config,
            "deezer_config": deezer_config,
            "client_factory": upstreams.client_factory,
        }
        options.update(overrides)
        return search_all_platforms(artist_name, album_name, **options)  # type: ignore[arg-type]

    return run


def test_artist_only_search_returns_all_platforms(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    result = run_search("Coldplay", "")

    payload = result.to_payload()
    assert set(payload) == {"spotify", "appleMusic", "deezer"}
    for platform in Platform:
        albums = result.albums_for(platform)
        assert albums
        assert len(albums) <= 5
        assert all(album.artist == "Coldplay" for album in albums)

    spotify_search = upstreams.requests_to(SPOTIFY_API_HOST)[0]
    apple_search = upstreams.requests_to(APPLE_MUSIC_HOST)[0]
    deezer_search = upstreams.requests_to(DEEZER_HOST)[0]
    assert spotify_search.url.params["q"] == "Coldplay"
    assert apple_search.url.params["term"] == "Coldplay"
    assert deezer_search.url.params["q"] == "Coldplay"


def test_credentials_are_passed_to_authenticated_platforms(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    run_search()

    spotify_auth = upstreams.requests_to(SPOTIFY_API_HOST)[0].headers["Authorization"]
    apple_auth = upstreams.requests_to(APPLE_MUSIC_HOST)[0].headers["Authorization"]
    assert spotify_auth == "Bearer spotify-access-token"
    assert apple_auth.startswith("Bearer ey")


def test_unreadable_apple_key_aborts_before_any_catalog_request(
    run_search: SearchRunner,
    upstreams: FakeUpstreams,
    apple_music_config: AppleMusicConfig,
    tmp_path: Path,
) -> None:
    broken = replace(apple_music_config, private_key_path=tmp_path / "nope.p8")

    with pytest.raises(AuthenticationError) as excinfo:
        run_search(apple_music_config=broken)

    assert excinfo.value.platform is Platform.APPLE_MUSIC
    for host in CATALOG_HOSTS:
        assert upstreams.requests_to(host) == []


def test_failed_spotify_token_aborts_before_any_catalog_request(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    upstreams.fail(SPOTIFY_ACCOUNTS_HOST, 400)

    with pytest.raises(AuthenticationError):
        run_search()

    for host in CATALOG_HOSTS:
        assert upstreams.requests_to(host) == []


def test_missing_spotify_environment_is_an_authentication_error(
    run_search: SearchRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SPOTIFY_CLIENT_ID", raising=False)
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)

    with pytest.raises(AuthenticationError, match="SPOTIFY_CLIENT_ID"):
        run_search(spotify_config=None)


def test_one_failing_platform_fails_whole_search(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    upstreams.fail(DEEZER_HOST, 503)

    with pytest.raises(ProviderError) as excinfo:
        run_search()

    assert excinfo.value.platform is Platform.DEEZER
    assert excinfo.value.status == 503


def test_isolated_failure_returns_remaining_platforms(
    run_search: SearchRunner, upstreams: FakeUpstreams, search_settings: SearchSettings
) -> None:
    upstreams.fail(DEEZER_HOST, 503)

    result = run_search(settings=replace(search_settings, isolate_failures=True))

    assert result.spotify
    assert result.apple_music
    assert result.deezer == ()
    assert result.to_payload(include_status=True)["status"] == {
        "spotify": "ok",
        "appleMusic": "ok",
        "deezer": "error",
    }


def test_whole_search_deadline(
    run_search: SearchRunner, upstreams: FakeUpstreams, search_settings: SearchSettings
) -> None:
    async def slow_handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == DEEZER_HOST:
            await asyncio.sleep(5)
        return upstreams.handler(request)

    def slow_factory(config: ResilienceConfig) -> ResilientClient:
        return ResilientClient(config, transport=httpx.MockTransport(slow_handler))

    with pytest.raises(SearchTimeoutError):
        run_search(
            settings=replace(search_settings, request_timeout_seconds=0.1),
            client_factory=slow_factory,
        )


def test_credential_cache_reuses_tokens_across_searches(
    upstreams: FakeUpstreams,
    spotify_config: SpotifyConfig,
    apple_music_config: AppleMusicConfig,
    deezer_config: DeezerConfig,
    search_settings: SearchSettings,
) -> None:
    cache = CredentialCache()

    async def scenario() -> None:
        for _ in range(2):
            await search_all_platforms_async(
                "Coldplay",
                settings=search_settings,
                credential_cache=cache,
                spotify_config=spotify_config,
                apple_music_config=apple_music_config,
                deezer_config=deezer_config,
                client_factory=upstreams.client_factory,
            )

    asyncio.run(scenario())

    assert len(upstreams.requests_to(SPOTIFY_ACCOUNTS_HOST)) == 1
    apple_tokens = {
        request.headers["Authorization"] for request in upstreams.requests_to(APPLE_MUSIC_HOST)
    }
    assert len(apple_tokens) == 1


def test_without_cache_each_search_fetches_a_fresh_token(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    run_search()
    run_search()

    assert len(upstreams.requests_to(SPOTIFY_ACCOUNTS_HOST)) == 2


def test_timeout_from_inside_a_search_is_not_the_deadline(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    def raising_handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == DEEZER_HOST:
            raise TimeoutError("socket timed out")
        return upstreams.handler(request)

    def raising_factory(config: ResilienceConfig) -> ResilientClient:
        return ResilientClient(config, transport=httpx.MockTransport(raising_handler))

    with pytest.raises(TimeoutError, match="socket timed out"):
        run_search(client_factory=raising_factory)


def test_zero_hit_deezer_search_fails_whole_search(
    run_search: SearchRunner, upstreams: FakeUpstreams
) -> None:
    upstreams.deezer_search = {"data": [], "total": 0}

    with pytest.raises(ProviderPayloadError) as excinfo:
        run_search("Nobody In Particular")

    assert excinfo.value.platform is Platform.DEEZER


def test_zero_hit_search_is_an_error_status_when_isolated(
    run_search: SearchRunner, upstreams: FakeUpstreams, search_settings: SearchSettings
) -> None:
    upstreams.deezer_search = {"data": [], "total": 0}
    upstreams.apple_search = {"results": {}}

    result = run_search(settings=replace(search_settings, isolate_failures=True))

    assert result.spotify
    assert result.to_payload(include_status=True)["status"] == {
        "spotify": "ok",
        "appleMusic": "error",
        "deezer": "error",
    }
