# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pydantic schemas for API request/response."""

from datetime import datetime
from typing import Annotated

from fastapi import Path
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)

# SQLite INTEGER is a signed 64-bit value
MAX_ID = 2**63 - 1


def _check_url(value: str) -> str:
    """Accept any absolute URL, keep the caller's spelling."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL format") from None
    return value


def _check_email(value: str) -> str:
    """Validate the address but store it exactly as sent (uniqueness is case-sensitive)."""
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid email format") from None
    return value


Url = Annotated[str, StringConstraints(max_length=500), AfterValidator(_check_url)]
Name = Annotated[str, StringConstraints(min_length=1, max_length=255)]
Email = Annotated[str, StringConstraints(max_length=255), AfterValidator(_check_email)]
# Positive integer that fits a storage INTEGER (ids, positions, durations)
PositiveInt = Annotated[int, Field(gt=0, le=MAX_ID)]
# Path ids: any storable integer, so unknown ids are 404 rather than 400
PathId = Annotated[int, Path(ge=-MAX_ID - 1, le=MAX_ID)]


def _check_release_year(value: int) -> int:
    if value < 1900:
        raise ValueError("Release year too old")
    if value > datetime.now().year + 1:
        raise ValueError("Release year cannot be in the future")
    return value


ReleaseYear = Annotated[int, AfterValidator(_check_release_year)]


class RequestModel(BaseModel):
    """Request bodies take JSON types as-is: no "200" for an int or "yes" for a bool."""

    model_config = ConfigDict(strict=True)


# Users
class UserCreate(RequestModel):
    name: Name
    email: Email


class UserUpdate(RequestModel):
    name: Name | None = None
    email: Email | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Artists
class ArtistCreate(RequestModel):
    name: Name
    bio: str | None = Field(None, max_length=2000)
    image_url: Url | None = None


class ArtistUpdate(RequestModel):
    name: Name | None = None
    bio: str | None = Field(None, max_length=2000)
    image_url: Url | None = None


class ArtistResponse(BaseModel):
    id: int
    name: str
    bio: str | None = None
    image_url: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Albums
class AlbumCreate(RequestModel):
    title: Name
    release_year: ReleaseYear | None = None
    cover_art_url: Url | None = None


class AlbumUpdate(RequestModel):
    title: Name | None = None
    release_year: ReleaseYear | None = None
    cover_art_url: Url | None = None


class AlbumArtistLink(RequestModel):
    artist_id: PositiveInt


class AlbumResponse(BaseModel):
    id: int
    title: str
    release_year: int | None = None
    cover_art_url: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Songs
class SongCreate(RequestModel):
    title: Name
    duration: PositiveInt  # seconds
    file_url: Url | None = None
    album_id: PositiveInt | None = None
    artist_ids: list[PositiveInt] = Field(min_length=1)


class SongUpdate(RequestModel):
    """Partial song update. album_id may be sent as null to detach the song."""

    title: Name | None = None
    duration: PositiveInt | None = None
    file_url: Url | None = None
    album_id: PositiveInt | None = None


class SongResponse(BaseModel):
    id: int
    title: str
    duration: int
    file_url: str | None = None
    album_id: int | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Playlists
class PlaylistCreate(RequestModel):
    name: Name
    description: str | None = Field(None, max_length=1000)
    user_id: PositiveInt
    is_public: bool = True


class PlaylistUpdate(RequestModel):
    name: Name | None = None
    description: str | None = Field(None, max_length=1000)
    is_public: bool | None = None


class PlaylistResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    user_id: int
    is_public: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PlaylistSongAdd(RequestModel):
    song_id: PositiveInt
    position: PositiveInt | None = None


class PlaylistSongReorder(RequestModel):
    new_position: PositiveInt


class PlaylistSongResponse(SongResponse):
    """Song as it appears inside a playlist."""

    position: int
    added_at: datetime


# Detail records
class AlbumDetailResponse(AlbumResponse):
    artists: list[ArtistResponse] = []
    songs: list[SongResponse] = []


class ArtistDetailResponse(ArtistResponse):
    songs: list[SongResponse] = []
    albums: list[AlbumResponse] = []


class SongDetailResponse(SongResponse):
    artists: list[ArtistResponse] = []
    album: AlbumResponse | None = None


class PlaylistDetailResponse(PlaylistResponse):
    songs: list[PlaylistSongResponse] = []
    user: UserResponse | None = None


# Association results
class MessageResponse(BaseModel):
    message: str


class PlaylistSongAdded(MessageResponse):
    position: int


class PlaylistSongMoved(MessageResponse):
    new_position: int
