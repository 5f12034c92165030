"""Translate Apple Music payloads into unified albums."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from albumscout.adapters.mapping import first_preview, release_year, resolve_artwork_template
from albumscout.domain.model import Album, Track

if TYPE_CHECKING:
    from .schema import AlbumResource, TrackResource

APPLE_MUSIC_WEB_URL: Final[str] = "https://music.apple.com"


def translate_album(album: AlbumResource) -> Album:
    attributes = album.attributes
    tracks = _track_resources(album)
    return Album(
        name=attributes.name,
        artist=attributes.artist_name,
        artist_url=_artist_url(album),
        year=release_year(attributes.release_date),
        cover_url=resolve_artwork_template(attributes.artwork.url),
        album_url=attributes.url,
        preview_url=first_preview(_preview_url(track) for track in tracks),
        tracklist=tuple(_translate_track(track) for track in tracks),
    )


def _track_resources(album: AlbumResource) -> list[TrackResource]:
    relationships = album.relationships
    if relationships is None or relationships.tracks is None:
        return []
    return relationships.tracks.data


def _translate_track(track: TrackResource) -> Track:
    attributes = track.attributes
    return Track(
        track_number=attributes.track_number,
        name=attributes.name,
        duration=attributes.duration_in_millis,
    )


def _preview_url(track: TrackResource) -> str | None:
    previews = track.attributes.previews
    return previews[0].url if previews else None


def _artist_url(album: AlbumResource) -> str | None:
    relationships = album.relationships
    if relationships is None or relationships.artists is None:
        return None
    artists = relationships.artists.data
    if not artists or not artists[0].href:
        return None
    return f"{APPLE_MUSIC_WEB_URL}{artists[0].href}"
