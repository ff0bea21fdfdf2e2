# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Artist model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from playlist_server.models.base import Base
from playlist_server.models.timestamp import TimestampMixin


class Artist(Base, TimestampMixin):
    """Music artist."""

    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
