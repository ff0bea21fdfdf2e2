# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Playlist repository."""

from playlist_server.models import Playlist
from playlist_server.repositories.base import Repository
from playlist_server.repositories.users import UserRepository


class PlaylistRepository(Repository[Playlist]):
    model = Playlist
    label = "Playlist"

    async def create(
        self,
        name: str,
        user_id: int,
        description: str | None = None,
        is_public: bool = True,
    ) -> Playlist:
        await UserRepository(self.session).get(user_id)
        return await self.insert(
            {
                "name": name,
                "user_id": user_id,
                "description": description,
                "is_public": is_public,
            },
            conflict="Playlist owner no longer exists",
        )
