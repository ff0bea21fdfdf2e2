# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""User model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from playlist_server.models.base import Base
from playlist_server.models.timestamp import TimestampMixin


class User(Base, TimestampMixin):
    """Catalog user. Owns playlists."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
