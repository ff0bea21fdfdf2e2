# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Album API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import (
    AlbumArtistLink,
    AlbumCreate,
    AlbumDetailResponse,
    AlbumResponse,
    AlbumUpdate,
    MessageResponse,
    PathId,
)
from playlist_server.database import get_db
from playlist_server.repositories.albums import AlbumRepository
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.details import get_album_detail

router = APIRouter(prefix="/albums", tags=["albums"])


@router.get("", response_model=list[AlbumResponse])
async def list_albums(db: AsyncSession = Depends(get_db)) -> list[AlbumResponse]:
    """List albums, newest release first."""
    albums = await AlbumRepository(db).list_all()
    return [AlbumResponse.model_validate(a) for a in albums]


@router.get("/{album_id}", response_model=AlbumDetailResponse)
async def get_album(album_id: PathId, db: AsyncSession = Depends(get_db)) -> AlbumDetailResponse:
    """Get album with its artists and songs."""
    return await get_album_detail(db, album_id)


@router.post("", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
async def create_album(data: AlbumCreate, db: AsyncSession = Depends(get_db)) -> AlbumResponse:
    album = await AlbumRepository(db).create(
        title=data.title,
        release_year=data.release_year,
        cover_art_url=data.cover_art_url,
    )
    return AlbumResponse.model_validate(album)


@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(
    album_id: PathId,
    data: AlbumUpdate,
    db: AsyncSession = Depends(get_db),
) -> AlbumResponse:
    album = await AlbumRepository(db).update(album_id, data.model_dump(exclude_unset=True))
    return AlbumResponse.model_validate(album)


@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_album(album_id: PathId, db: AsyncSession = Depends(get_db)) -> None:
    """Delete an album. Its songs remain with album_id cleared."""
    await AlbumRepository(db).delete(album_id)


@router.post(
    "/{album_id}/artists",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_artist_to_album(
    album_id: PathId,
    data: AlbumArtistLink,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Credit an artist on an album. 409 if already linked."""
    await AssociationManager(db).link_artist_to_album(album_id, data.artist_id)
    return MessageResponse(message="Artist added to album")
