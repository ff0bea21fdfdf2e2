# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Repository and association manager tests against a real SQLite file."""

import pytest
from sqlalchemy import func, select

from playlist_server.errors import ConflictError, NotFoundError, ValidationFailed
from playlist_server.models import Album, AlbumArtist, PlaylistSong, Song, SongArtist
from playlist_server.repositories.albums import AlbumRepository
from playlist_server.repositories.artists import ArtistRepository
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.details import get_album_detail
from playlist_server.repositories.playlists import PlaylistRepository
from playlist_server.repositories.songs import SongRepository
from playlist_server.repositories.users import UserRepository

pytestmark = pytest.mark.anyio


async def test_song_without_artists_is_rejected_before_insert(database):
    async with database.session_maker() as session:
        with pytest.raises(ValidationFailed):
            await SongRepository(session).create(title="X", duration=10, artist_ids=[])
        assert await SongRepository(session).list_all() == []


async def test_next_position(database):
    async with database.session_maker() as session:
        user = await UserRepository(session).create("Alice", "alice@example.com")
        artist = await ArtistRepository(session).create("The Midnight")
        playlist = await PlaylistRepository(session).create("Mix", user_id=user.id)
        links = AssociationManager(session)
        assert await links.next_position(playlist.id) == 1

        a = await SongRepository(session).create("A", 100, [artist.id])
        b = await SongRepository(session).create("B", 100, [artist.id])
        assert await links.add_song_to_playlist(playlist.id, a.id, position=4) == 4
        assert await links.next_position(playlist.id) == 5
        assert await links.add_song_to_playlist(playlist.id, b.id) == 5


async def test_email_check_is_case_sensitive(database):
    async with database.session_maker() as session:
        users = UserRepository(session)
        await users.create("Alice", "alice@example.com")
        assert await users.email_taken("alice@example.com")
        assert not await users.email_taken("ALICE@example.com")
        with pytest.raises(ConflictError):
            await users.create("Other", "alice@example.com")


async def test_album_detail_reads_links(database):
    async with database.session_maker() as session:
        album = await AlbumRepository(session).create("Worlds", 2014)
        artist = await ArtistRepository(session).create("Porter Robinson")
        await AssociationManager(session).link_artist_to_album(album.id, artist.id)
        song = await SongRepository(session).create("Sad Machine", 350, [artist.id], album_id=album.id)

        detail = await get_album_detail(session, album.id)
        assert detail.title == "Worlds"
        assert [a.id for a in detail.artists] == [artist.id]
        assert [s.id for s in detail.songs] == [song.id]

        with pytest.raises(NotFoundError):
            await get_album_detail(session, album.id + 100)


async def test_only_album_id_can_be_cleared(database):
    async with database.session_maker() as session:
        album = await AlbumRepository(session).create("Worlds", 2014)
        artist = await ArtistRepository(session).create("Porter Robinson")
        song = await SongRepository(session).create(
            "Language", 365, [artist.id], file_url="https://example.com/l.mp3", album_id=album.id
        )
        updated = await SongRepository(session).update(song.id, {"file_url": None, "album_id": None})
        assert updated.file_url == "https://example.com/l.mp3"
        assert updated.album_id is None


async def _count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


async def test_artist_delete_cascades_to_link_rows(database):
    async with database.session_maker() as session:
        artist = await ArtistRepository(session).create("Porter Robinson")
        album = await AlbumRepository(session).create("Worlds", 2014)
        await AssociationManager(session).link_artist_to_album(album.id, artist.id)
        await SongRepository(session).create("Language", 365, [artist.id], album_id=album.id)
        assert await _count(session, AlbumArtist) == 1
        assert await _count(session, SongArtist) == 1

        await ArtistRepository(session).delete(artist.id)
        assert await _count(session, AlbumArtist) == 0
        assert await _count(session, SongArtist) == 0
        assert await _count(session, Album) == 1
        assert await _count(session, Song) == 1


async def test_playlist_delete_cascades_to_playlist_songs(database):
    async with database.session_maker() as session:
        user = await UserRepository(session).create("Alice", "alice@example.com")
        artist = await ArtistRepository(session).create("The Midnight")
        keep = await PlaylistRepository(session).create("Keep", user_id=user.id)
        drop = await PlaylistRepository(session).create("Drop", user_id=user.id)
        song = await SongRepository(session).create("Sunset", 312, [artist.id])
        links = AssociationManager(session)
        await links.add_song_to_playlist(keep.id, song.id)
        await links.add_song_to_playlist(drop.id, song.id)

        await PlaylistRepository(session).delete(drop.id)
        rows = (await session.execute(select(PlaylistSong.playlist_id))).scalars().all()
        assert rows == [keep.id]
        assert await _count(session, Song) == 1
