# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Artist API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import (
    ArtistCreate,
    ArtistDetailResponse,
    ArtistResponse,
    ArtistUpdate,
    PathId,
)
from playlist_server.database import get_db
from playlist_server.repositories.artists import ArtistRepository
from playlist_server.repositories.details import get_artist_detail

router = APIRouter(prefix="/artists", tags=["artists"])


@router.get("", response_model=list[ArtistResponse])
async def list_artists(db: AsyncSession = Depends(get_db)) -> list[ArtistResponse]:
    """List artists by name."""
    artists = await ArtistRepository(db).list_all()
    return [ArtistResponse.model_validate(a) for a in artists]


@router.get("/{artist_id}", response_model=ArtistDetailResponse)
async def get_artist(artist_id: PathId, db: AsyncSession = Depends(get_db)) -> ArtistDetailResponse:
    """Get artist with their songs and albums."""
    return await get_artist_detail(db, artist_id)


@router.post("", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
async def create_artist(data: ArtistCreate, db: AsyncSession = Depends(get_db)) -> ArtistResponse:
    artist = await ArtistRepository(db).create(
        name=data.name, bio=data.bio, image_url=data.image_url
    )
    return ArtistResponse.model_validate(artist)


@router.put("/{artist_id}", response_model=ArtistResponse)
async def update_artist(
    artist_id: PathId,
    data: ArtistUpdate,
    db: AsyncSession = Depends(get_db),
) -> ArtistResponse:
    artist = await ArtistRepository(db).update(artist_id, data.model_dump(exclude_unset=True))
    return ArtistResponse.model_validate(artist)


@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artist(artist_id: PathId, db: AsyncSession = Depends(get_db)) -> None:
    """Delete an artist. Song and album links go with it; songs and albums stay."""
    await ArtistRepository(db).delete(artist_id)
