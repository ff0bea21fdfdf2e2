# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""User endpoint tests: CRUD and email uniqueness."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.anyio


async def test_create_and_get_user(client: AsyncClient, create):
    user = await create("users", name="Alice", email="alice@example.com")
    assert user["id"] > 0
    assert user["name"] == "Alice"
    assert user["created_at"]

    r = await client.get(f"/api/users/{user['id']}")
    assert r.status_code == 200
    assert r.json() == user


async def test_list_users_newest_first(client: AsyncClient, create):
    first = await create("users", name="A", email="a@example.com")
    second = await create("users", name="B", email="b@example.com")
    r = await client.get("/api/users")
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [second["id"], first["id"]]


async def test_duplicate_email_conflicts(client: AsyncClient, create):
    await create("users", name="Alice", email="alice@example.com")
    r = await client.post("/api/users", json={"name": "Other", "email": "alice@example.com"})
    assert r.status_code == 409
    assert r.json() == {"error": "Email already exists", "status": 409}


async def test_update_to_taken_email_conflicts(client: AsyncClient, create):
    await create("users", name="Alice", email="alice@example.com")
    bob = await create("users", name="Bob", email="bob@example.com")
    r = await client.put(f"/api/users/{bob['id']}", json={"email": "alice@example.com"})
    assert r.status_code == 409


async def test_update_with_own_email_does_not_conflict(client: AsyncClient, create):
    alice = await create("users", name="Alice", email="alice@example.com")
    r = await client.put(
        f"/api/users/{alice['id']}",
        json={"name": "Alice Cooper", "email": "alice@example.com"},
    )
    assert r.status_code == 200
    assert r.json()["name"] == "Alice Cooper"
    assert r.json()["email"] == "alice@example.com"


async def test_empty_update_leaves_user_unchanged(client: AsyncClient, create):
    alice = await create("users", name="Alice", email="alice@example.com")
    r = await client.put(f"/api/users/{alice['id']}", json={})
    assert r.status_code == 200
    assert r.json() == alice


async def test_null_fields_are_ignored_on_update(client: AsyncClient, create):
    alice = await create("users", name="Alice", email="alice@example.com")
    r = await client.put(f"/api/users/{alice['id']}", json={"name": None})
    assert r.status_code == 200
    assert r.json()["name"] == "Alice"


async def test_missing_user_is_404(client: AsyncClient):
    assert (await client.get("/api/users/9999")).status_code == 404
    r = await client.put("/api/users/9999", json={"name": "X"})
    assert r.status_code == 404
    r = await client.delete("/api/users/9999")
    assert r.status_code == 404
    assert r.json() == {"error": "User not found", "status": 404}


async def test_delete_user(client: AsyncClient, create):
    alice = await create("users", name="Alice", email="alice@example.com")
    r = await client.delete(f"/api/users/{alice['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert (await client.get(f"/api/users/{alice['id']}")).status_code == 404


async def test_validation_lists_every_failing_field(client: AsyncClient):
    r = await client.post("/api/users", json={"name": "", "email": "not-an-email"})
    assert r.status_code == 400
    body = r.json()
    assert body["status"] == 400
    assert body["error"].startswith("Validation failed: ")
    assert "name:" in body["error"]
    assert "email:" in body["error"]


async def test_non_integer_id_is_400(client: AsyncClient):
    r = await client.get("/api/users/abc")
    assert r.status_code == 400


async def test_email_is_stored_as_sent(client: AsyncClient, create):
    mixed = await create("users", name="Bob", email="bob@Example.COM")
    assert mixed["email"] == "bob@Example.COM"
    lower = await create("users", name="Bobby", email="bob@example.com")
    assert lower["email"] == "bob@example.com"

    r = await client.get(f"/api/users/{mixed['id']}")
    assert r.json()["email"] == "bob@Example.COM"
    r = await client.put(f"/api/users/{lower['id']}", json={"email": "bob@Example.COM"})
    assert r.status_code == 409


async def test_email_must_be_a_string(client: AsyncClient):
    r = await client.post("/api/users", json={"name": "Alice", "email": 42})
    assert r.status_code == 400
