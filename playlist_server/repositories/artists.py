# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Artist repository."""

from playlist_server.models import Artist
from playlist_server.repositories.base import Repository


class ArtistRepository(Repository[Artist]):
    model = Artist
    label = "Artist"

    def default_order(self) -> tuple:
        return (Artist.name.asc(), Artist.id.asc())

    async def create(self, name: str, bio: str | None = None, image_url: str | None = None) -> Artist:
        return await self.insert({"name": name, "bio": bio, "image_url": image_url})
