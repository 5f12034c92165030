"""Translate Deezer payloads into unified albums."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from albumscout.adapters.mapping import first_preview, release_year, seconds_to_milliseconds
from albumscout.domain.model import Album, Track

if TYPE_CHECKING:
    from .schema import DeezerAlbum, DeezerTrack

DEEZER_ARTIST_URL: Final[str] = "https://www.deezer.com/artist/{artist_id}"


def translate_album(album: DeezerAlbum) -> Album:
    tracks = album.tracks.data
    return Album(
        name=album.title,
        artist=album.artist.name,
        artist_url=DEEZER_ARTIST_URL.format(artist_id=album.artist.id),
        year=release_year(album.release_date),
        cover_url=album.cover_medium,
        album_url=album.link,
        preview_url=first_preview(track.preview for track in tracks),
        tracklist=tuple(
            _translate_track(track, position=index) for index, track in enumerate(tracks, start=1)
        ),
    )


def _translate_track(track: DeezerTrack, *, position: int) -> Track:
    # Deezer's album payload carries no track numbers; list order is the disc order.
    return Track(
        track_number=position,
        name=track.title,
        duration=seconds_to_milliseconds(track.duration),
    )
