# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Configuration for Playlist Server."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (single SQLite file by default)
    database_url: str = "sqlite+aiosqlite:///./data/playlist.db"
    sql_echo: bool = False

    # "development" adds error details to 500 responses
    environment: str = "production"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    # CORS: comma-separated origins, or "*" for allow all
    cors_origins: str = "*"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
