"""Photos and maintenance tickets."""
from __future__ import annotations

import pytest


async def _unit(client) -> tuple[dict, dict]:
    prop = (
        await client.post("/api/properties", json={"name": "Main St", "addresses": [{"street": "123 Main St"}]})
    ).json()
    unit = (
        await client.post("/api/units", json={"address_id": prop["addresses"][0]["id"], "unit_number": "101"})
    ).json()
    return prop, unit


@pytest.mark.asyncio
async def test_photo_needs_an_owner_record(client):
    response = await client.post("/api/photos", json={"url": "https://example.com/a.jpg"})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_primary_photo_is_unique_per_unit(client):
    prop, unit = await _unit(client)

    first = (
        await client.post("/api/photos", json={"url": "https://e.com/1.jpg", "unit_id": unit["id"], "is_primary": True})
    ).json()
    second = (
        await client.post("/api/photos", json={"url": "https://e.com/2.jpg", "unit_id": unit["id"], "is_primary": True})
    ).json()
    property_photo = (
        await client.post(
            "/api/photos", json={"url": "https://e.com/p.jpg", "property_id": prop["id"], "is_primary": True}
        )
    ).json()

    photos = {p["id"]: p for p in (await client.get(f"/api/photos?unit_id={unit['id']}")).json()}
    assert photos[first["id"]]["is_primary"] is False
    assert photos[second["id"]]["is_primary"] is True
    assert (await client.get(f"/api/photos/{property_photo['id']}")).json()["is_primary"] is True

    back = await client.put(f"/api/photos/{first['id']}", json={"is_primary": True})
    assert back.json()["is_primary"] is True
    assert (await client.get(f"/api/photos/{second['id']}")).json()["is_primary"] is False


@pytest.mark.asyncio
async def test_photo_filters_and_delete(client):
    prop, unit = await _unit(client)
    await client.post("/api/photos", json={"url": "https://e.com/p.jpg", "property_id": prop["id"]})
    unit_photo = (await client.post("/api/photos", json={"url": "https://e.com/u.jpg", "unit_id": unit["id"]})).json()

    assert len((await client.get("/api/photos")).json()) == 2
    assert len((await client.get(f"/api/photos?property_id={prop['id']}")).json()) == 1
    assert (await client.get(f"/api/units/{unit['id']}")).json()["photos"][0]["id"] == unit_photo["id"]

    assert (await client.delete(f"/api/photos/{unit_photo['id']}")).status_code == 204
    assert (await client.get(f"/api/photos?unit_id={unit['id']}")).json() == []

    unknown = await client.post("/api/photos", json={"url": "https://e.com/x.jpg", "unit_id": 404})
    assert unknown.json()["field"] == "unit_id"


@pytest.mark.asyncio
async def test_ticket_lifecycle_stamps_resolution(client):
    _, unit = await _unit(client)

    created = await client.post(
        "/api/maintenance",
        json={"unit_id": unit["id"], "title": "Broken heater", "priority": "high"},
    )
    assert created.status_code == 201
    ticket = created.json()
    assert ticket["status"] == "open"
    assert ticket["priority"] == "high"
    assert ticket["resolved_at"] is None
    assert ticket["unit"]["unit_number"] == "101"

    resolved = (await client.put(f"/api/maintenance/{ticket['id']}", json={"status": "resolved"})).json()
    assert resolved["resolved_at"] is not None

    reopened = (await client.put(f"/api/maintenance/{ticket['id']}", json={"status": "in_progress"})).json()
    assert reopened["resolved_at"] is None


@pytest.mark.asyncio
async def test_ticket_filters_and_validation(client):
    _, unit = await _unit(client)
    first = (await client.post("/api/maintenance", json={"unit_id": unit["id"], "title": "Paint"})).json()
    await client.post("/api/maintenance", json={"unit_id": unit["id"], "title": "Lock", "status": "closed"})

    open_tickets = (await client.get("/api/maintenance?status=open")).json()
    assert [t["id"] for t in open_tickets] == [first["id"]]
    assert len((await client.get(f"/api/maintenance?unit_id={unit['id']}")).json()) == 2

    bad_status = await client.post("/api/maintenance", json={"unit_id": unit["id"], "title": "X", "status": "done"})
    assert bad_status.status_code == 400

    null_status = await client.put(f"/api/maintenance/{first['id']}", json={"status": None})
    assert null_status.status_code == 400

    missing_unit = await client.post("/api/maintenance", json={"unit_id": 999, "title": "X"})
    assert missing_unit.json()["field"] == "unit_id"

    assert (await client.delete(f"/api/maintenance/{first['id']}")).status_code == 204


@pytest.mark.asyncio
async def test_filters_reject_out_of_range_ids(client):
    huge = 2**63

    photos = await client.get(f"/api/photos?unit_id={huge}")
    tickets = await client.get(f"/api/maintenance?unit_id={huge}")

    assert photos.status_code == 400
    assert photos.json()["code"] == "VALIDATION_ERROR"
    assert tickets.status_code == 400
    assert (await client.get(f"/api/photos/{huge}")).status_code == 404
