# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Song API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import (
    PathId,
    SongCreate,
    SongDetailResponse,
    SongResponse,
    SongUpdate,
)
from playlist_server.database import get_db
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.details import get_song_detail
from playlist_server.repositories.songs import SongRepository

router = APIRouter(prefix="/songs", tags=["songs"])


@router.get("", response_model=list[SongResponse])
async def list_songs(db: AsyncSession = Depends(get_db)) -> list[SongResponse]:
    """List songs, newest first."""
    songs = await SongRepository(db).list_all()
    return [SongResponse.model_validate(s) for s in songs]


@router.get("/artist/{artist_id}", response_model=list[SongResponse])
async def list_songs_by_artist(artist_id: PathId, db: AsyncSession = Depends(get_db)) -> list[SongResponse]:
    """Songs credited to an artist (empty list for an unknown artist)."""
    songs = await AssociationManager(db).list_songs_for_artist(artist_id)
    return [SongResponse.model_validate(s) for s in songs]


@router.get("/album/{album_id}", response_model=list[SongResponse])
async def list_songs_by_album(album_id: PathId, db: AsyncSession = Depends(get_db)) -> list[SongResponse]:
    """Songs on an album in insertion order."""
    songs = await AssociationManager(db).list_songs_for_album(album_id)
    return [SongResponse.model_validate(s) for s in songs]


@router.get("/{song_id}", response_model=SongDetailResponse)
async def get_song(song_id: PathId, db: AsyncSession = Depends(get_db)) -> SongDetailResponse:
    """Get song with its artists and album."""
    return await get_song_detail(db, song_id)


@router.post("", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def create_song(data: SongCreate, db: AsyncSession = Depends(get_db)) -> SongResponse:
    """Create a song credited to one or more existing artists."""
    song = await SongRepository(db).create(
        title=data.title,
        duration=data.duration,
        artist_ids=data.artist_ids,
        file_url=data.file_url,
        album_id=data.album_id,
    )
    return SongResponse.model_validate(song)


@router.put("/{song_id}", response_model=SongResponse)
async def update_song(
    song_id: PathId,
    data: SongUpdate,
    db: AsyncSession = Depends(get_db),
) -> SongResponse:
    """Partial update. Send album_id: null to detach the song from its album."""
    song = await SongRepository(db).update(song_id, data.model_dump(exclude_unset=True))
    return SongResponse.model_validate(song)


@router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_song(song_id: PathId, db: AsyncSession = Depends(get_db)) -> None:
    await SongRepository(db).delete(song_id)
