#!/usr/bin/env python3
# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Reset the database with sample data. Run: python -m playlist_server.scripts.seed"""

import asyncio
import logging

from playlist_server.config import settings
from playlist_server.database import Database
from playlist_server.repositories.albums import AlbumRepository
from playlist_server.repositories.artists import ArtistRepository
from playlist_server.repositories.associations import AssociationManager
from playlist_server.repositories.playlists import PlaylistRepository
from playlist_server.repositories.songs import SongRepository
from playlist_server.repositories.users import UserRepository

logger = logging.getLogger(__name__)

USERS = [
    ("Alice Johnson", "alice@example.com"),
    ("Bob Smith", "bob@example.com"),
    ("Charlie Davis", "charlie@example.com"),
]

ARTISTS = [
    ("The Midnight", "Synthwave duo from Los Angeles", "https://example.com/midnight.jpg"),
    ("Daft Punk", "French electronic music duo", "https://example.com/daftpunk.jpg"),
    ("deadmau5", "Canadian electronic music producer", "https://example.com/deadmau5.jpg"),
    ("Porter Robinson", "American DJ and producer", "https://example.com/porter.jpg"),
    ("ODESZA", "American electronic music duo", "https://example.com/odesza.jpg"),
]

# (title, release_year, cover_art_url, artist index)
ALBUMS = [
    ("Endless Summer", 2016, "https://example.com/endless-summer.jpg", 0),
    ("Random Access Memories", 2013, "https://example.com/ram.jpg", 1),
    ("For Lack of a Better Name", 2009, "https://example.com/floan.jpg", 2),
    ("Worlds", 2014, "https://example.com/worlds.jpg", 3),
    ("A Moment Apart", 2017, "https://example.com/moment-apart.jpg", 4),
]

# (title, duration seconds, album index, artist indexes)
SONGS = [
    ("Sunset", 312, 0, [0]),
    ("Vampires", 347, 0, [0]),
    ("Get Lucky", 369, 1, [1]),
    ("Instant Crush", 337, 1, [1]),
    ("Strobe", 637, 2, [2]),
    ("Ghosts 'n' Stuff", 328, 2, [2]),
    ("Language", 365, 3, [3]),
    ("Sad Machine", 350, 3, [3]),
    ("A Moment Apart", 234, 4, [4]),
    ("Higher Ground", 250, 4, [4]),
    ("Lose Yourself to Dance", 353, None, [1, 0]),
]

# (name, description, owner index, song indexes in order)
PLAYLISTS = [
    ("Synthwave Nights", "Retro vibes for late drives", 0, [0, 1, 10]),
    ("Electronic Essentials", "The classics", 1, [2, 4, 6, 8]),
    ("Chill Mix", None, 2, [9, 7, 3]),
]


async def seed(database: Database) -> None:
    await database.drop_all()
    await database.init_db()

    async with database.session_maker() as session:
        user_ids = [(await UserRepository(session).create(n, e)).id for n, e in USERS]
        logger.info("Inserted %d users", len(user_ids))

        artist_ids = [
            (await ArtistRepository(session).create(n, bio, url)).id for n, bio, url in ARTISTS
        ]
        logger.info("Inserted %d artists", len(artist_ids))

        links = AssociationManager(session)
        album_ids = []
        for title, year, url, artist_idx in ALBUMS:
            album = await AlbumRepository(session).create(title, year, url)
            await links.link_artist_to_album(album.id, artist_ids[artist_idx])
            album_ids.append(album.id)
        logger.info("Inserted %d albums", len(album_ids))

        song_ids = []
        for title, duration, album_idx, artist_idxs in SONGS:
            song = await SongRepository(session).create(
                title=title,
                duration=duration,
                artist_ids=[artist_ids[i] for i in artist_idxs],
                album_id=album_ids[album_idx] if album_idx is not None else None,
            )
            song_ids.append(song.id)
        logger.info("Inserted %d songs", len(song_ids))

        for name, description, owner_idx, song_idxs in PLAYLISTS:
            playlist = await PlaylistRepository(session).create(
                name=name, user_id=user_ids[owner_idx], description=description
            )
            for i in song_idxs:
                await links.add_song_to_playlist(playlist.id, song_ids[i])
        logger.info("Inserted %d playlists", len(PLAYLISTS))


async def main():
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        await seed(database)
    finally:
        await database.dispose()
    print("Database seeded.")


if __name__ == "__main__":
    asyncio.run(main())
