"""Minimal Pydantic models for the Spotify Web API catalog endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyExternalUrls(SpotifyBaseModel):
    spotify: str | None = None


class SpotifyImage(SpotifyBaseModel):
    url: str
    width: int | None = None
    height: int | None = None


class SpotifyArtist(SpotifyBaseModel):
    id: str | None = None
    name: str
    external_urls: SpotifyExternalUrls = Field(default_factory=SpotifyExternalUrls)


class SpotifyTrack(SpotifyBaseModel):
    name: str
    track_number: int
    duration_ms: int
    preview_url: str | None = None


class SpotifyPage(SpotifyBaseModel):
    href: str | None = None
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    total: int | None = None


class SpotifyTrackPage(SpotifyPage):
    items: list[SpotifyTrack] = Field(default_factory=list["SpotifyTrack"])


class SpotifyAlbum(SpotifyBaseModel):
    id: str
    name: str
    release_date: str
    artists: list[SpotifyArtist] = Field(min_length=1)
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    external_urls: SpotifyExternalUrls = Field(default_factory=SpotifyExternalUrls)
    tracks: SpotifyTrackPage = Field(default_factory=SpotifyTrackPage)


class SpotifyAlbumRef(SpotifyBaseModel):
    id: str
    name: str | None = None


class SpotifyAlbumRefPage(SpotifyPage):
    items: list[SpotifyAlbumRef] = Field(default_factory=list["SpotifyAlbumRef"])


class SpotifySearchResponse(SpotifyBaseModel):
    albums: SpotifyAlbumRefPage
