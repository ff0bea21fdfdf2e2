# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Database models."""

from playlist_server.models.base import Base
from playlist_server.models.user import User
from playlist_server.models.artist import Artist
from playlist_server.models.album import Album, AlbumArtist
from playlist_server.models.song import Song, SongArtist
from playlist_server.models.playlist import Playlist, PlaylistSong

__all__ = [
    "Base",
    "User",
    "Artist",
    "Album",
    "AlbumArtist",
    "Song",
    "SongArtist",
    "Playlist",
    "PlaylistSong",
]
