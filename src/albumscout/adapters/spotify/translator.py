"""Translate Spotify payloads into unified albums."""

from __future__ import annotations

from typing import TYPE_CHECKING

from albumscout.adapters.mapping import COVER_SIZE, first_preview, release_year
from albumscout.domain.model import Album, Track

if TYPE_CHECKING:
    from .schema import SpotifyAlbum, SpotifyImage, SpotifyTrack


def translate_album(album: SpotifyAlbum) -> Album:
    artist = album.artists[0]
    tracks = album.tracks.items
    return Album(
        name=album.name,
        artist=artist.name,
        artist_url=artist.external_urls.spotify,
        year=release_year(album.release_date),
        cover_url=_select_cover(album.images),
        album_url=album.external_urls.spotify,
        preview_url=first_preview(track.preview_url for track in tracks),
        tracklist=tuple(_translate_track(track) for track in tracks),
    )


def _translate_track(track: SpotifyTrack) -> Track:
    return Track(
        track_number=track.track_number,
        name=track.name,
        duration=track.duration_ms,
    )


def _select_cover(images: list[SpotifyImage]) -> str | None:
    # Spotify lists the same artwork in several fixed sizes, largest first.
    for image in images:
        if image.width == COVER_SIZE:
            return image.url
    return images[0].url if images else None
