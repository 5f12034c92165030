"""Pydantic models for the public Deezer API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeezerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class DeezerError(DeezerBaseModel):
    type: str | None = None
    message: str = "Unknown Deezer error"
    code: int | None = None


class DeezerErrorResponse(DeezerBaseModel):
    error: DeezerError


class DeezerAlbumRef(DeezerBaseModel):
    id: int
    title: str | None = None


class DeezerSearchResponse(DeezerBaseModel):
    data: list[DeezerAlbumRef]
    total: int | None = None
    next: str | None = None


class DeezerArtist(DeezerBaseModel):
    id: int
    name: str


class DeezerTrack(DeezerBaseModel):
    id: int | None = None
    title: str
    duration: int  # seconds
    preview: str | None = None


class DeezerTrackList(DeezerBaseModel):
    data: list[DeezerTrack] = Field(default_factory=list["DeezerTrack"])


class DeezerAlbum(DeezerBaseModel):
    id: int
    title: str
    link: str | None = None
    cover_medium: str | None = None
    release_date: str | None = None
    artist: DeezerArtist
    tracks: DeezerTrackList = Field(default_factory=DeezerTrackList)
