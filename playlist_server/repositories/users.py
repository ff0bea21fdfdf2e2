# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""User repository. Email is unique and checked before every write."""

from sqlalchemy import select

from playlist_server.errors import ConflictError
from playlist_server.models import User
from playlist_server.repositories.base import Repository

EMAIL_TAKEN = "Email already exists"


class UserRepository(Repository[User]):
    model = User
    label = "User"

    async def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Case-sensitive lookup; exclude_id skips the user being updated."""
        q = select(User.id).where(User.email == email)
        if exclude_id is not None:
            q = q.where(User.id != exclude_id)
        return await self.session.scalar(q.limit(1)) is not None

    async def create(self, name: str, email: str) -> User:
        if await self.email_taken(email):
            raise ConflictError(EMAIL_TAKEN)
        return await self.insert({"name": name, "email": email}, conflict=EMAIL_TAKEN)

    async def update(self, entity_id: int, fields: dict, conflict: str | None = None) -> User:
        await self.get(entity_id)
        email = fields.get("email")
        if email and await self.email_taken(email, exclude_id=entity_id):
            raise ConflictError(EMAIL_TAKEN)
        return await super().update(entity_id, fields, conflict=conflict or EMAIL_TAKEN)
