"""Unit placement rules and tenant lifecycle."""
from __future__ import annotations

import pytest


async def _property_with_address(client, name: str = "Oak Ave Property") -> tuple[dict, dict]:
    response = await client.post(
        "/api/properties",
        json={"name": name, "addresses": [{"street": "456 Oak Ave", "city": "Seattle", "state": "WA"}]},
    )
    assert response.status_code == 201, response.text
    prop = response.json()
    return prop, prop["addresses"][0]


@pytest.mark.asyncio
async def test_unit_placed_by_address_inherits_property(client):
    prop, address = await _property_with_address(client)

    response = await client.post(
        "/api/units",
        json={"address_id": address["id"], "unit_number": "201", "rent_amount": 1500},
    )

    assert response.status_code == 201
    unit = response.json()
    assert unit["property_id"] == prop["id"]
    assert unit["address"]["id"] == address["id"]
    assert unit["property"]["name"] == "Oak Ave Property"
    assert unit["status"] == "vacant"
    assert unit["tenants"] == []

    by_address = (await client.get(f"/api/properties/{prop['id']}")).json()["addresses"][0]
    assert [u["unit_number"] for u in by_address["units"]] == ["201"]


@pytest.mark.asyncio
async def test_unit_placement_errors(client):
    prop, address = await _property_with_address(client)
    other, _ = await _property_with_address(client, name="Other")

    neither = await client.post("/api/units", json={"unit_number": "1"})
    mismatch = await client.post(
        "/api/units",
        json={"property_id": other["id"], "address_id": address["id"], "unit_number": "1"},
    )
    missing_address = await client.post("/api/units", json={"address_id": 999, "unit_number": "1"})
    missing_property = await client.post("/api/units", json={"property_id": 999, "unit_number": "1"})

    assert neither.status_code == 400
    assert mismatch.status_code == 400
    assert mismatch.json()["code"] == "VALIDATION_ERROR"
    assert missing_address.status_code == 400
    assert missing_address.json()["field"] == "address_id"
    assert missing_property.json()["field"] == "property_id"
    assert (await client.get("/api/units")).json() == []


@pytest.mark.asyncio
async def test_moving_unit_to_another_property_drops_old_address(client):
    prop, address = await _property_with_address(client)
    other, _ = await _property_with_address(client, name="Other")
    unit = (await client.post("/api/units", json={"address_id": address["id"], "unit_number": "7"})).json()

    response = await client.put(f"/api/units/{unit['id']}", json={"property_id": other["id"], "status": "occupied"})

    assert response.status_code == 200
    moved = response.json()
    assert moved["property_id"] == other["id"]
    assert moved["address_id"] is None
    assert moved["status"] == "occupied"


@pytest.mark.asyncio
async def test_delete_unit_removes_tenants_payments_and_tickets(client):
    _, address = await _property_with_address(client)
    unit = (await client.post("/api/units", json={"address_id": address["id"], "unit_number": "101"})).json()
    tenant = (
        await client.post(
            "/api/tenants",
            json={
                "unit_id": unit["id"],
                "name": "Jane Smith",
                "lease_start_date": "2025-01-01",
                "lease_end_date": "2026-01-01",
                "rent": 1200,
            },
        )
    ).json()
    payment = (
        await client.post("/api/payments", json={"tenant_id": tenant["id"], "amount": 1200, "date": "2025-01-01"})
    ).json()
    ticket = (await client.post("/api/maintenance", json={"unit_id": unit["id"], "title": "Leaky tap"})).json()

    detail = (await client.get(f"/api/units/{unit['id']}")).json()
    assert [t["id"] for t in detail["tenants"]] == [tenant["id"]]
    assert [t["id"] for t in detail["maintenance_tickets"]] == [ticket["id"]]

    response = await client.delete(f"/api/units/{unit['id']}")

    assert response.status_code == 204
    assert (await client.get(f"/api/tenants/{tenant['id']}")).status_code == 404
    assert (await client.get(f"/api/payments/{payment['id']}")).status_code == 404
    assert (await client.get(f"/api/maintenance/{ticket['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_tenant_lease_dates_and_payments(client):
    _, address = await _property_with_address(client)
    unit = (await client.post("/api/units", json={"address_id": address["id"], "unit_number": "101"})).json()

    backwards = await client.post(
        "/api/tenants",
        json={
            "unit_id": unit["id"],
            "name": "Jane Smith",
            "lease_start_date": "2026-01-01",
            "lease_end_date": "2025-01-01",
        },
    )
    assert backwards.status_code == 400

    tenant = (
        await client.post(
            "/api/tenants",
            json={"unit_id": unit["id"], "name": "Jane Smith", "lease_start_date": "2025-01-01"},
        )
    ).json()
    bad_end = await client.put(f"/api/tenants/{tenant['id']}", json={"lease_end_date": "2024-12-31"})
    assert bad_end.status_code == 400

    renewed = await client.put(f"/api/tenants/{tenant['id']}", json={"lease_end_date": "2026-06-30"})
    assert renewed.status_code == 200
    assert renewed.json()["lease_end_date"] == "2026-06-30"

    await client.post("/api/payments", json={"tenant_id": tenant["id"], "amount": 1200})
    detail = (await client.get(f"/api/tenants/{tenant['id']}")).json()
    assert detail["unit"]["unit_number"] == "101"
    assert [p["status"] for p in detail["payments"]] == ["pending"]


@pytest.mark.asyncio
async def test_tenant_requires_existing_unit(client):
    response = await client.post("/api/tenants", json={"unit_id": 42, "name": "Nobody"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "unit_id references missing Unit 42",
        "code": "INVALID_REFERENCE",
        "field": "unit_id",
    }


@pytest.mark.asyncio
async def test_delete_tenant_removes_payments(client):
    _, address = await _property_with_address(client)
    unit = (await client.post("/api/units", json={"address_id": address["id"], "unit_number": "101"})).json()
    tenant = (await client.post("/api/tenants", json={"unit_id": unit["id"], "name": "Jane"})).json()
    payment = (await client.post("/api/payments", json={"tenant_id": tenant["id"], "amount": 10})).json()

    assert (await client.delete(f"/api/tenants/{tenant['id']}")).status_code == 204
    assert (await client.get(f"/api/payments/{payment['id']}")).status_code == 404
    assert (await client.get(f"/api/units/{unit['id']}")).json()["tenants"] == []


@pytest.mark.asyncio
async def test_tenant_unit_cannot_be_cleared(client):
    prop, _ = await _property_with_address(client)
    unit = (await client.post("/api/units", json={"property_id": prop["id"], "unit_number": "101"})).json()
    tenant = (await client.post("/api/tenants", json={"unit_id": unit["id"], "name": "Jane Smith"})).json()

    response = await client.put(f"/api/tenants/{tenant['id']}", json={"unit_id": None})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert (await client.get(f"/api/tenants/{tenant['id']}")).json()["unit_id"] == unit["id"]
