# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Artist endpoint tests."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.anyio


async def test_list_artists_by_name(client: AsyncClient, create):
    await create("artists", name="ODESZA")
    await create("artists", name="Daft Punk")
    await create("artists", name="The Midnight")
    r = await client.get("/api/artists")
    assert r.status_code == 200
    assert [a["name"] for a in r.json()] == ["Daft Punk", "ODESZA", "The Midnight"]


async def test_update_keeps_omitted_fields(client: AsyncClient, create):
    artist = await create(
        "artists", name="Daft Punk", bio="French duo", image_url="https://example.com/dp.jpg"
    )
    r = await client.put(f"/api/artists/{artist['id']}", json={"name": "Daft Punk (FR)"})
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "Daft Punk (FR)"
    assert data["bio"] == "French duo"
    assert data["image_url"] == "https://example.com/dp.jpg"


async def test_invalid_image_url_is_400(client: AsyncClient):
    r = await client.post("/api/artists", json={"name": "X", "image_url": "not a url"})
    assert r.status_code == 400
    assert "image_url" in r.json()["error"]


async def test_artist_detail_includes_songs_and_albums(client: AsyncClient, create):
    artist = await create("artists", name="Daft Punk")
    album = await create("albums", title="Random Access Memories", release_year=2013)
    r = await client.post(f"/api/albums/{album['id']}/artists", json={"artist_id": artist["id"]})
    assert r.status_code == 201
    song = await create("songs", title="Get Lucky", duration=369, artist_ids=[artist["id"]])

    r = await client.get(f"/api/artists/{artist['id']}")
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "Daft Punk"
    assert [s["id"] for s in data["songs"]] == [song["id"]]
    assert [a["id"] for a in data["albums"]] == [album["id"]]


async def test_delete_artist_removes_links_only(client: AsyncClient, create):
    artist = await create("artists", name="Daft Punk")
    song = await create("songs", title="Get Lucky", duration=369, artist_ids=[artist["id"]])

    r = await client.delete(f"/api/artists/{artist['id']}")
    assert r.status_code == 204

    r = await client.get(f"/api/songs/{song['id']}")
    assert r.status_code == 200
    assert r.json()["artists"] == []
    assert (await client.get(f"/api/songs/artist/{artist['id']}")).json() == []


async def test_delete_missing_artist_is_404(client: AsyncClient):
    r = await client.delete("/api/artists/424242")
    assert r.status_code == 404
    assert r.json()["error"] == "Artist not found"


async def test_delete_artist_removes_album_credits(client: AsyncClient, create):
    artist = await create("artists", name="Porter Robinson")
    album = await create("albums", title="Worlds", release_year=2014)
    await client.post(f"/api/albums/{album['id']}/artists", json={"artist_id": artist["id"]})

    assert (await client.delete(f"/api/artists/{artist['id']}")).status_code == 204

    r = await client.get(f"/api/albums/{album['id']}")
    assert r.status_code == 200
    assert r.json()["artists"] == []
