# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Playlist API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import (
    PathId,
    PlaylistCreate,
    PlaylistDetailResponse,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongAdded,
    PlaylistSongMoved,
    PlaylistSongReorder,
    PlaylistUpdate,
)
from playlist_server.database import get_db
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.details import get_playlist_detail
from playlist_server.repositories.playlists import PlaylistRepository

router = APIRouter(prefix="/playlists", tags=["playlists"])


@router.get("", response_model=list[PlaylistResponse])
async def list_playlists(db: AsyncSession = Depends(get_db)) -> list[PlaylistResponse]:
    """List all playlists, newest first."""
    playlists = await PlaylistRepository(db).list_all()
    return [PlaylistResponse.model_validate(p) for p in playlists]


@router.get("/user/{user_id}", response_model=list[PlaylistResponse])
async def list_user_playlists(user_id: PathId, db: AsyncSession = Depends(get_db)) -> list[PlaylistResponse]:
    """Playlists owned by a user."""
    playlists = await AssociationManager(db).list_playlists_for_user(user_id)
    return [PlaylistResponse.model_validate(p) for p in playlists]


@router.get("/{playlist_id}", response_model=PlaylistDetailResponse)
async def get_playlist(playlist_id: PathId, db: AsyncSession = Depends(get_db)) -> PlaylistDetailResponse:
    """Get playlist with its owner and songs in position order."""
    return await get_playlist_detail(db, playlist_id)


@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
async def create_playlist(data: PlaylistCreate, db: AsyncSession = Depends(get_db)) -> PlaylistResponse:
    """Create a playlist for an existing user."""
    playlist = await PlaylistRepository(db).create(
        name=data.name,
        user_id=data.user_id,
        description=data.description,
        is_public=data.is_public,
    )
    return PlaylistResponse.model_validate(playlist)


@router.put("/{playlist_id}", response_model=PlaylistResponse)
async def update_playlist(
    playlist_id: PathId,
    data: PlaylistUpdate,
    db: AsyncSession = Depends(get_db),
) -> PlaylistResponse:
    playlist = await PlaylistRepository(db).update(playlist_id, data.model_dump(exclude_unset=True))
    return PlaylistResponse.model_validate(playlist)


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_playlist(playlist_id: PathId, db: AsyncSession = Depends(get_db)) -> None:
    await PlaylistRepository(db).delete(playlist_id)


@router.post(
    "/{playlist_id}/songs",
    response_model=PlaylistSongAdded,
    status_code=status.HTTP_201_CREATED,
)
async def add_song_to_playlist(
    playlist_id: PathId,
    data: PlaylistSongAdd,
    db: AsyncSession = Depends(get_db),
) -> PlaylistSongAdded:
    """Add a song to a playlist. Without a position it goes after the last one."""
    position = await AssociationManager(db).add_song_to_playlist(
        playlist_id, data.song_id, data.position
    )
    return PlaylistSongAdded(message="Song added to playlist", position=position)


@router.delete("/{playlist_id}/songs/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_song_from_playlist(
    playlist_id: PathId,
    song_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Remove a song from a playlist. Remaining positions are left as they are."""
    await AssociationManager(db).remove_song_from_playlist(playlist_id, song_id)


@router.put("/{playlist_id}/songs/{song_id}/position", response_model=PlaylistSongMoved)
async def reorder_song(
    playlist_id: PathId,
    song_id: PathId,
    data: PlaylistSongReorder,
    db: AsyncSession = Depends(get_db),
) -> PlaylistSongMoved:
    """Move a song to a new position. Other songs keep theirs, even if equal."""
    new_position = await AssociationManager(db).reorder_song(
        playlist_id, song_id, data.new_position
    )
    return PlaylistSongMoved(message="Song position updated", new_position=new_position)
