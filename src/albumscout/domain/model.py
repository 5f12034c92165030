"""Unified album representation shared by every platform adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

MAX_ALBUMS_PER_PLATFORM: Final[int] = 5
UNKNOWN_YEAR: Final[str] = "Unknown"

JsonObject = dict[str, object]


class Platform(StrEnum):
    """Music catalogs queried by the aggregator; values are the result keys."""

    SPOTIFY = "spotify"
    APPLE_MUSIC = "appleMusic"
    DEEZER = "deezer"


@dataclass(frozen=True, slots=True)
class Track:
    track_number: int
    name: str
    duration: int  # milliseconds

    def to_payload(self) -> JsonObject:
        return {
            "trackNumber": self.track_number,
            "name": self.name,
            "duration": self.duration,
        }


@dataclass(frozen=True, slots=True)
class Album:
    name: str
    artist: str
    year: str
    artist_url: str | None = None
    cover_url: str | None = None
    album_url: str | None = None
    preview_url: str | None = None
    tracklist: tuple[Track, ...] = ()

    def to_payload(self) -> JsonObject:
        return {
            "name": self.name,
            "artist": self.artist,
            "artistUrl": self.artist_url,
            "year": self.year,
            "coverUrl": self.cover_url,
            "albumUrl": self.album_url,
            "previewUrl": self.preview_url,
            "tracklist": [track.to_payload() for track in self.tracklist],
        }


@dataclass(frozen=True, slots=True)
class PlatformOutcome:
    """Albums (or the failure) one platform contributed to a search."""

    platform: Platform
    albums: tuple[Album, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class SearchResult:
    spotify: tuple[Album, ...] = ()
    apple_music: tuple[Album, ...] = ()
    deezer: tuple[Album, ...] = ()
    outcomes: Mapping[Platform, PlatformOutcome] = field(default_factory=dict)

    @classmethod
    def from_outcomes(
        cls,
        outcomes: Mapping[Platform, PlatformOutcome],
        *,
        limit: int = MAX_ALBUMS_PER_PLATFORM,
    ) -> SearchResult:
        """Assemble a result, capping every platform at ``limit`` albums."""

        def capped(platform: Platform) -> tuple[Album, ...]:
            outcome = outcomes.get(platform)
            return outcome.albums[:limit] if outcome is not None else ()

        return cls(
            spotify=capped(Platform.SPOTIFY),
            apple_music=capped(Platform.APPLE_MUSIC),
            deezer=capped(Platform.DEEZER),
            outcomes=dict(outcomes),
        )

    def albums_for(self, platform: Platform) -> tuple[Album, ...]:
        match platform:
            case Platform.SPOTIFY:
                return self.spotify
            case Platform.APPLE_MUSIC:
                return self.apple_music
            case Platform.DEEZER:
                return self.deezer

    @property
    def failed_platforms(self) -> tuple[Platform, ...]:
        return tuple(p for p, outcome in self.outcomes.items() if not outcome.ok)

    def to_payload(self, *, include_status: bool = False) -> JsonObject:
        payload: JsonObject = {
            platform.value: [album.to_payload() for album in self.albums_for(platform)]
            for platform in Platform
        }
        if include_status:
            payload["status"] = {
                platform.value: "ok" if self._platform_ok(platform) else "error"
                for platform in Platform
            }
        return payload

    def _platform_ok(self, platform: Platform) -> bool:
        outcome = self.outcomes.get(platform)
        return outcome is None or outcome.ok
