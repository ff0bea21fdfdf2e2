# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pytest fixtures. Each test gets a fresh app on its own SQLite file."""

import pytest
from httpx import ASGITransport, AsyncClient

from playlist_server.config import Settings
from playlist_server.database import Database
from playlist_server.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        environment="development",
    )


@pytest.fixture
async def client(test_settings):
    app = create_app(test_settings)
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest.fixture
async def database(test_settings):
    db = Database(test_settings.database_url)
    await db.init_db()
    yield db
    await db.dispose()


@pytest.fixture
def create(client: AsyncClient):
    """POST a resource under /api and return the created JSON body."""

    async def _create(resource: str, **body) -> dict:
        r = await client.post(f"/api/{resource}", json=body)
        assert r.status_code == 201, r.text
        return r.json()

    return _create
