from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from albumscout.adapters.spotify import search_albums
from albumscout.domain import AuthenticationError, Platform, ProviderError, ProviderPayloadError
from tests.helpers.upstreams import SPOTIFY_API_HOST, load_fixture

if TYPE_CHECKING:
    from albumscout.config import SpotifyConfig
    from albumscout.domain import Album
    from tests.helpers.upstreams import FakeUpstreams


def _search(
    upstreams: FakeUpstreams,
    config: SpotifyConfig,
    album_name: str | None = None,
    *,
    token: str | None = "spotify-access-token",
) -> list[Album]:
    async def scenario() -> list[Album]:
        async with upstreams.client_factory(config.resilience) as client:
            return await search_albums("Coldplay", album_name, token=token, client=client)

    return asyncio.run(scenario())


def test_search_fetches_details_for_each_hit_in_order(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    albums = _search(upstreams, spotify_config)

    assert [album.name for album in albums] == ["Parachutes", "Parachutes"]
    requests = upstreams.requests_to(SPOTIFY_API_HOST)
    search_request = requests[0]
    assert search_request.url.path == "/v1/search"
    assert search_request.url.params["q"] == "Coldplay"
    assert search_request.url.params["type"] == "album"
    assert search_request.url.params["limit"] == "5"
    assert search_request.headers["Authorization"] == "Bearer spotify-access-token"
    assert sorted(request.url.path for request in requests[1:]) == [
        "/v1/albums/0RHX9XECH8IVI3LNgWDpmQ",
        "/v1/albums/6ZG5lRT77aJ3btmArcykra",
    ]


def test_album_name_is_appended_to_query(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    _search(upstreams, spotify_config, "A Rush of Blood")

    search_request = upstreams.requests_to(SPOTIFY_API_HOST)[0]
    assert search_request.url.params["q"] == "Coldplay A Rush of Blood"
    assert b"Coldplay%20A%20Rush%20of%20Blood" in search_request.url.raw_path


def test_empty_search_returns_no_albums(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    upstreams.spotify_search = {"albums": {"items": [], "next": None}}

    assert _search(upstreams, spotify_config) == []
    assert len(upstreams.requests_to(SPOTIFY_API_HOST)) == 1


def test_track_pages_are_followed(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    album_payload = load_fixture("spotify", "album.json")
    tracks = album_payload["tracks"]
    assert isinstance(tracks, dict)
    tracks["next"] = "https://api.spotify.com/v1/albums/6ZG5lRT77aJ3btmArcykra/tracks?offset=3"
    upstreams.spotify_album = album_payload
    upstreams.spotify_search = {"albums": {"items": [{"id": "6ZG5lRT77aJ3btmArcykra"}]}}
    page_two: dict[str, object] = {
        "items": [{"name": "Sparks", "track_number": 4, "duration_ms": 227000}],
        "next": None,
    }
    upstreams.routes["/v1/albums/6ZG5lRT77aJ3btmArcykra/tracks"] = page_two

    (album,) = _search(upstreams, spotify_config)

    assert [track.track_number for track in album.tracklist] == [1, 2, 3, 4]
    assert album.tracklist[-1].name == "Sparks"


def test_upstream_failure_carries_status(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    upstreams.fail(SPOTIFY_API_HOST, 503)

    with pytest.raises(ProviderError) as excinfo:
        _search(upstreams, spotify_config)

    assert excinfo.value.platform is Platform.SPOTIFY
    assert excinfo.value.status == 503


def test_missing_albums_container_is_a_payload_error(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    upstreams.spotify_search = {"artists": {"items": []}}

    with pytest.raises(ProviderPayloadError):
        _search(upstreams, spotify_config)


def test_search_requires_a_token(
    upstreams: FakeUpstreams, spotify_config: SpotifyConfig
) -> None:
    with pytest.raises(AuthenticationError):
        _search(upstreams, spotify_config, token=None)

    assert upstreams.requests == []
