"""Pydantic models describing the Apple Music catalog payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AppleMusicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourceRef(AppleMusicBaseModel):
    id: str
    type: str | None = None
    href: str | None = None


class ResourceRefPage(AppleMusicBaseModel):
    data: list[ResourceRef] = Field(default_factory=list["ResourceRef"])
    next: str | None = None


class SearchResults(AppleMusicBaseModel):
    albums: ResourceRefPage | None = None


class SearchResponse(AppleMusicBaseModel):
    results: SearchResults


class Artwork(AppleMusicBaseModel):
    url: str
    width: int | None = None
    height: int | None = None


class Preview(AppleMusicBaseModel):
    url: str | None = None


class TrackAttributes(AppleMusicBaseModel):
    name: str
    track_number: int = Field(alias="trackNumber")
    duration_in_millis: int = Field(alias="durationInMillis")
    previews: list[Preview] = Field(default_factory=list["Preview"])


class TrackResource(AppleMusicBaseModel):
    id: str
    type: str | None = None
    attributes: TrackAttributes


class TrackPage(AppleMusicBaseModel):
    data: list[TrackResource] = Field(default_factory=list["TrackResource"])
    next: str | None = None


class AlbumRelationships(AppleMusicBaseModel):
    tracks: TrackPage | None = None
    artists: ResourceRefPage | None = None


class AlbumAttributes(AppleMusicBaseModel):
    name: str
    artist_name: str = Field(alias="artistName")
    release_date: str = Field(alias="releaseDate")
    url: str | None = None
    artwork: Artwork


class AlbumResource(AppleMusicBaseModel):
    id: str
    attributes: AlbumAttributes
    relationships: AlbumRelationships | None = None


class AlbumResponse(AppleMusicBaseModel):
    data: list[AlbumResource] = Field(min_length=1)
