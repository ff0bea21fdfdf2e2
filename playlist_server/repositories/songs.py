# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Song repository. A song is created together with its artist links."""

import logging

from playlist_server.errors import ValidationFailed
from playlist_server.models import Song, SongArtist
from playlist_server.repositories.base import Repository, translate_conflicts

logger = logging.getLogger(__name__)


class SongRepository(Repository[Song]):
    model = Song
    label = "Song"
    nullable_updates = frozenset({"album_id"})

    async def create(
        self,
        title: str,
        duration: int,
        artist_ids: list[int],
        file_url: str | None = None,
        album_id: int | None = None,
    ) -> Song:
        """Insert the song and link its artists in one commit.

        A missing album or artist fails the whole unit with ConflictError.
        """
        if not title or not duration:
            raise ValidationFailed("Title and duration are required")
        if not artist_ids:
            raise ValidationFailed("At least one artist is required")

        song = Song(title=title, duration=duration, file_url=file_url, album_id=album_id)
        self.session.add(song)
        async with translate_conflicts(self.session, "Song references a missing album or artist"):
            await self.session.flush()
            self.session.add_all(
                SongArtist(song_id=song.id, artist_id=artist_id)
                for artist_id in dict.fromkeys(artist_ids)
            )
            await self.session.commit()
        await self.session.refresh(song)
        logger.info("Created song %s with %d artist(s)", song.id, len(set(artist_ids)))
        return song
