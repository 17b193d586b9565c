"""Owners, associations and board members."""
from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_owner_crud_and_property_link(client):
    created = await client.post("/api/owners", json={"name": "John Doe", "email": "john@example.com"})
    assert created.status_code == 201
    owner = created.json()
    assert owner["properties"] == []

    prop = (await client.post("/api/properties", json={"name": "Main St", "owner_id": owner["id"]})).json()
    assert prop["owner"]["name"] == "John Doe"

    updated = await client.put(f"/api/owners/{owner['id']}", json={"phone": "555-0101"})
    assert updated.status_code == 200
    assert updated.json()["phone"] == "555-0101"
    assert updated.json()["email"] == "john@example.com"
    assert [p["id"] for p in updated.json()["properties"]] == [prop["id"]]


@pytest.mark.asyncio
async def test_delete_owner_detaches_properties(client):
    owner = (await client.post("/api/owners", json={"name": "John Doe"})).json()
    prop = (await client.post("/api/properties", json={"name": "Main St", "owner_id": owner["id"]})).json()

    response = await client.delete(f"/api/owners/{owner['id']}")

    assert response.status_code == 204
    assert (await client.get(f"/api/owners/{owner['id']}")).status_code == 404
    kept = (await client.get(f"/api/properties/{prop['id']}")).json()
    assert kept["owner_id"] is None
    assert kept["owner"] is None


@pytest.mark.asyncio
async def test_association_with_board_members(client):
    prop = (await client.post("/api/properties", json={"name": "Main St"})).json()
    association = (
        await client.post(
            "/api/associations",
            json={"property_id": prop["id"], "name": "Main St HOA", "fee": 100, "due_date": "2025-02-01"},
        )
    ).json()
    member = await client.post(
        "/api/board-members",
        json={"association_id": association["id"], "name": "Alice Brown", "email": "alice@example.com"},
    )
    assert member.status_code == 201
    assert member.json()["association"]["name"] == "Main St HOA"

    detail = (await client.get(f"/api/associations/{association['id']}")).json()
    assert detail["property"]["id"] == prop["id"]
    assert [m["name"] for m in detail["board_members"]] == ["Alice Brown"]
    assert detail["due_date"] == "2025-02-01"

    assert (await client.delete(f"/api/associations/{association['id']}")).status_code == 204
    assert (await client.get(f"/api/board-members/{member.json()['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_association_reference_checks(client):
    response = await client.post("/api/associations", json={"property_id": 5, "name": "Ghost HOA"})
    assert response.status_code == 400
    assert response.json()["field"] == "property_id"

    member = await client.post("/api/board-members", json={"association_id": 5, "name": "Nobody"})
    assert member.status_code == 400
    assert member.json()["error"] == "association_id references missing Association 5"


@pytest.mark.asyncio
async def test_board_member_update_and_delete(client):
    prop = (await client.post("/api/properties", json={"name": "Main St"})).json()
    first = (await client.post("/api/associations", json={"property_id": prop["id"], "name": "HOA 1"})).json()
    second = (await client.post("/api/associations", json={"property_id": prop["id"], "name": "HOA 2"})).json()
    member = (await client.post("/api/board-members", json={"association_id": first["id"], "name": "Alice"})).json()

    moved = await client.put(f"/api/board-members/{member['id']}", json={"association_id": second["id"]})
    assert moved.json()["association_id"] == second["id"]

    assert (await client.delete(f"/api/board-members/{member['id']}")).status_code == 204
    assert (await client.delete(f"/api/board-members/{member['id']}")).status_code == 404
