# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Assemble detail records: an entity plus its related collections.

Each collection is a separate read; there is no snapshot across them.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import (
    AlbumDetailResponse,
    AlbumResponse,
    ArtistDetailResponse,
    ArtistResponse,
    PlaylistDetailResponse,
    PlaylistResponse,
    PlaylistSongResponse,
    SongDetailResponse,
    SongResponse,
    UserResponse,
)
from playlist_server.repositories.albums import AlbumRepository
from playlist_server.repositories.artists import ArtistRepository
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.playlists import PlaylistRepository
from playlist_server.repositories.songs import SongRepository
from playlist_server.repositories.users import UserRepository


def _fields(record, schema) -> dict:
    return schema.model_validate(record).model_dump()


async def get_album_detail(db: AsyncSession, album_id: int) -> AlbumDetailResponse:
    album = await AlbumRepository(db).get(album_id)
    links = AssociationManager(db)
    artists = await links.list_artists_for_album(album_id)
    songs = await links.list_songs_for_album(album_id)
    return AlbumDetailResponse(
        **_fields(album, AlbumResponse),
        artists=[ArtistResponse.model_validate(a) for a in artists],
        songs=[SongResponse.model_validate(s) for s in songs],
    )


async def get_artist_detail(db: AsyncSession, artist_id: int) -> ArtistDetailResponse:
    artist = await ArtistRepository(db).get(artist_id)
    links = AssociationManager(db)
    songs = await links.list_songs_for_artist(artist_id)
    albums = await links.list_albums_for_artist(artist_id)
    return ArtistDetailResponse(
        **_fields(artist, ArtistResponse),
        songs=[SongResponse.model_validate(s) for s in songs],
        albums=[AlbumResponse.model_validate(a) for a in albums],
    )


async def get_song_detail(db: AsyncSession, song_id: int) -> SongDetailResponse:
    song = await SongRepository(db).get(song_id)
    artists = await AssociationManager(db).list_artists_for_song(song_id)
    album = await AlbumRepository(db).find(song.album_id) if song.album_id is not None else None
    return SongDetailResponse(
        **_fields(song, SongResponse),
        artists=[ArtistResponse.model_validate(a) for a in artists],
        album=AlbumResponse.model_validate(album) if album else None,
    )


async def get_playlist_detail(db: AsyncSession, playlist_id: int) -> PlaylistDetailResponse:
    playlist = await PlaylistRepository(db).get(playlist_id)
    rows = await AssociationManager(db).list_playlist_songs(playlist_id)
    user = await UserRepository(db).find(playlist.user_id)
    return PlaylistDetailResponse(
        **_fields(playlist, PlaylistResponse),
        songs=[
            PlaylistSongResponse(**_fields(song, SongResponse), position=position, added_at=added_at)
            for song, position, added_at in rows
        ],
        user=UserResponse.model_validate(user) if user else None,
    )
