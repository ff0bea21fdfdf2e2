# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Many-to-many links: album artists, song artists, and ordered playlist songs.

Playlist positions are plain integers. A song added without a position goes
after the current maximum; removals leave gaps and reordering never moves
other songs, so two songs can share a position.
"""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.errors import NotFoundError
from playlist_server.models import (
    Album,
    AlbumArtist,
    Artist,
    Playlist,
    PlaylistSong,
    Song,
    SongArtist,
)
from playlist_server.repositories.albums import AlbumRepository
from playlist_server.repositories.artists import ArtistRepository
from playlist_server.repositories.base import translate_conflicts
from playlist_server.repositories.playlists import PlaylistRepository
from playlist_server.repositories.songs import SongRepository

logger = logging.getLogger(__name__)

SONG_NOT_IN_PLAYLIST = "Song not found in playlist"


class AssociationManager:
    """Link/unlink operations and the read-only joins across link tables."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def link_artist_to_album(self, album_id: int, artist_id: int) -> None:
        await AlbumRepository(self.session).get(album_id)
        await ArtistRepository(self.session).get(artist_id)
        async with translate_conflicts(self.session, "Artist already linked to this album"):
            self.session.add(AlbumArtist(album_id=album_id, artist_id=artist_id))
            await self.session.commit()
        logger.info("Linked artist %s to album %s", artist_id, album_id)

    async def next_position(self, playlist_id: int) -> int:
        """One past the highest position in the playlist, 1 when empty."""
        max_pos = await self.session.scalar(
            select(func.max(PlaylistSong.position)).where(PlaylistSong.playlist_id == playlist_id)
        )
        return (max_pos or 0) + 1

    async def add_song_to_playlist(
        self, playlist_id: int, song_id: int, position: int | None = None
    ) -> int:
        """Append (or place) a song; returns the position it was stored at."""
        await PlaylistRepository(self.session).get(playlist_id)
        await SongRepository(self.session).get(song_id)
        if not position:
            position = await self.next_position(playlist_id)
        async with translate_conflicts(self.session, "Song already in playlist"):
            self.session.add(PlaylistSong(playlist_id=playlist_id, song_id=song_id, position=position))
            await self.session.commit()
        logger.info("Added song %s to playlist %s at position %s", song_id, playlist_id, position)
        return position

    async def _get_playlist_link(self, playlist_id: int, song_id: int) -> PlaylistSong:
        link = await self.session.get(PlaylistSong, (playlist_id, song_id))
        if link is None:
            raise NotFoundError(SONG_NOT_IN_PLAYLIST)
        return link

    async def remove_song_from_playlist(self, playlist_id: int, song_id: int) -> None:
        link = await self._get_playlist_link(playlist_id, song_id)
        await self.session.delete(link)
        await self.session.commit()

    async def reorder_song(self, playlist_id: int, song_id: int, new_position: int) -> int:
        link = await self._get_playlist_link(playlist_id, song_id)
        link.position = new_position
        await self.session.commit()
        return new_position

    async def list_songs_for_artist(self, artist_id: int) -> list[Song]:
        result = await self.session.execute(
            select(Song)
            .join(SongArtist, SongArtist.song_id == Song.id)
            .where(SongArtist.artist_id == artist_id)
            .order_by(Song.created_at.desc(), Song.id.desc())
        )
        return list(result.scalars().all())

    async def list_songs_for_album(self, album_id: int) -> list[Song]:
        result = await self.session.execute(
            select(Song).where(Song.album_id == album_id).order_by(Song.id)
        )
        return list(result.scalars().all())

    async def list_albums_for_artist(self, artist_id: int) -> list[Album]:
        result = await self.session.execute(
            select(Album)
            .join(AlbumArtist, AlbumArtist.album_id == Album.id)
            .where(AlbumArtist.artist_id == artist_id)
            .order_by(Album.release_year.desc(), Album.title)
        )
        return list(result.scalars().all())

    async def list_artists_for_album(self, album_id: int) -> list[Artist]:
        result = await self.session.execute(
            select(Artist)
            .join(AlbumArtist, AlbumArtist.artist_id == Artist.id)
            .where(AlbumArtist.album_id == album_id)
            .order_by(Artist.name)
        )
        return list(result.scalars().all())

    async def list_artists_for_song(self, song_id: int) -> list[Artist]:
        result = await self.session.execute(
            select(Artist)
            .join(SongArtist, SongArtist.artist_id == Artist.id)
            .where(SongArtist.song_id == song_id)
            .order_by(Artist.name)
        )
        return list(result.scalars().all())

    async def list_playlists_for_user(self, user_id: int) -> list[Playlist]:
        result = await self.session.execute(
            select(Playlist)
            .where(Playlist.user_id == user_id)
            .order_by(Playlist.created_at.desc(), Playlist.id.desc())
        )
        return list(result.scalars().all())

    async def list_playlist_songs(self, playlist_id: int) -> list[tuple[Song, int, datetime]]:
        """Songs of a playlist with their position and added_at, in position order."""
        result = await self.session.execute(
            select(Song, PlaylistSong.position, PlaylistSong.added_at)
            .join(PlaylistSong, PlaylistSong.song_id == Song.id)
            .where(PlaylistSong.playlist_id == playlist_id)
            .order_by(PlaylistSong.position, PlaylistSong.added_at)
        )
        return [tuple(row) for row in result.all()]
