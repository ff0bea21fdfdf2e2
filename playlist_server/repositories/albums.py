# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Album repository."""

from playlist_server.models import Album
from playlist_server.repositories.base import Repository


class AlbumRepository(Repository[Album]):
    model = Album
    label = "Album"

    def default_order(self) -> tuple:
        return (Album.release_year.desc(), Album.title.asc())

    async def create(
        self,
        title: str,
        release_year: int | None = None,
        cover_art_url: str | None = None,
    ) -> Album:
        return await self.insert(
            {"title": title, "release_year": release_year, "cover_art_url": cover_art_url}
        )
