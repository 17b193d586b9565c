"""Property endpoints: composite writes, address handling and cascading deletes."""
from __future__ import annotations

import asyncio

import pytest


def _by_id(items: list[dict]) -> dict[int, dict]:
    return {item["id"]: item for item in items}


async def _create_property(client, **overrides) -> dict:
    body = {
        "name": "Main St Property",
        "type": "multi_family",
        "value": 500000,
        "addresses": [
            {"street": "123 Main St", "city": "Portland", "state": "OR", "zip": "97201"},
            {"street": "125 Main St", "city": "Portland", "state": "OR", "zip": "97201", "is_primary": True},
        ],
        "photos": [{"url": "https://example.com/front.jpg", "name": "Front"}],
    }
    body.update(overrides)
    response = await client.post("/api/properties", json=body)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_property_with_nested_children(client):
    created = await _create_property(client)

    assert created["name"] == "Main St Property"
    assert created["status"] == "active"
    assert [a["street"] for a in created["addresses"]] == ["123 Main St", "125 Main St"]
    assert [a["is_primary"] for a in created["addresses"]] == [True, False]
    assert created["photos"][0]["is_primary"] is True
    assert created["owner"] is None
    assert created["portfolios"] == []

    fetched = await client.get(f"/api/properties/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["addresses"] == created["addresses"]


@pytest.mark.asyncio
async def test_create_property_with_unknown_owner_is_rejected(client):
    response = await client.post("/api/properties", json={"name": "Orphan", "owner_id": 999})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_REFERENCE"
    assert body["field"] == "owner_id"

    listing = await client.get("/api/properties")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_failed_child_write_rolls_back_whole_property(client):
    response = await client.post(
        "/api/properties",
        json={
            "name": "Half Written",
            "addresses": [{"street": "1 First Ave"}],
            "photos": [{"name": "missing url"}],
        },
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert (await client.get("/api/properties")).json() == []


@pytest.mark.asyncio
async def test_update_reconciles_address_list(client):
    created = await _create_property(client)
    first, second = created["addresses"]

    response = await client.put(
        f"/api/properties/{created['id']}",
        json={
            "value": 550000,
            "addresses": [
                {"id": second["id"], "street": "125 Main Street"},
                {"street": "127 Main St", "city": "Portland"},
            ],
        },
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["value"] == 550000
    addresses = updated["addresses"]
    assert first["id"] not in _by_id(addresses)
    kept = _by_id(addresses)[second["id"]]
    assert kept["street"] == "125 Main Street"
    assert kept["city"] == "Portland"
    assert kept["is_primary"] is True
    assert [a["is_primary"] for a in addresses].count(True) == 1


@pytest.mark.asyncio
async def test_update_without_lists_leaves_children_alone(client):
    created = await _create_property(client)

    response = await client.put(f"/api/properties/{created['id']}", json={"name": "Renamed"})

    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert response.json()["addresses"] == created["addresses"]
    assert response.json()["photos"] == created["photos"]


@pytest.mark.asyncio
async def test_empty_address_list_removes_addresses_and_their_units(client):
    created = await _create_property(client)
    address_id = created["addresses"][0]["id"]
    unit = await client.post("/api/units", json={"address_id": address_id, "unit_number": "101"})
    assert unit.status_code == 201

    response = await client.put(f"/api/properties/{created['id']}", json={"addresses": []})

    assert response.status_code == 200
    assert response.json()["addresses"] == []
    assert (await client.get(f"/api/units/{unit.json()['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_photo_list_first_entry_is_primary(client):
    created = await _create_property(client)
    existing = created["photos"][0]

    response = await client.put(
        f"/api/properties/{created['id']}",
        json={"photos": [{"url": "https://example.com/back.jpg"}, {"id": existing["id"], "is_primary": True}]},
    )

    photos = response.json()["photos"]
    assert len(photos) == 2
    assert _by_id(photos)[existing["id"]]["is_primary"] is False
    assert [p for p in photos if p["is_primary"]][0]["url"] == "https://example.com/back.jpg"


@pytest.mark.asyncio
async def test_delete_property_cascades_and_keeps_ledger(client):
    owner = (await client.post("/api/owners", json={"name": "John Doe"})).json()
    created = await _create_property(client, owner_id=owner["id"])
    address_id = created["addresses"][0]["id"]
    unit = (await client.post("/api/units", json={"address_id": address_id, "unit_number": "101"})).json()
    tenant = (await client.post("/api/tenants", json={"unit_id": unit["id"], "name": "Jane Smith"})).json()
    payment = (await client.post("/api/payments", json={"tenant_id": tenant["id"], "amount": 1200})).json()
    association = (
        await client.post("/api/associations", json={"property_id": created["id"], "name": "Main St HOA"})
    ).json()
    account_type = (await client.post("/api/account-types", json={"name": "Income"})).json()
    account = (
        await client.post("/api/accounts", json={"name": "Rent Income", "account_type_id": account_type["id"]})
    ).json()
    transaction = (
        await client.post(
            "/api/transactions",
            json={"account_id": account["id"], "property_id": created["id"], "amount": 1200},
        )
    ).json()

    response = await client.delete(f"/api/properties/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert (await client.get(f"/api/properties/{created['id']}")).status_code == 404
    assert (await client.get(f"/api/units/{unit['id']}")).status_code == 404
    assert (await client.get(f"/api/tenants/{tenant['id']}")).status_code == 404
    assert (await client.get(f"/api/payments/{payment['id']}")).status_code == 404
    assert (await client.get(f"/api/associations/{association['id']}")).status_code == 404
    assert (await client.get(f"/api/photos?property_id={created['id']}")).json() == []

    surviving = await client.get(f"/api/transactions/{transaction['id']}")
    assert surviving.status_code == 200
    assert surviving.json()["property_id"] is None
    assert (await client.get(f"/api/owners/{owner['id']}")).json()["properties"] == []


@pytest.mark.asyncio
async def test_missing_property_returns_not_found_body(client):
    response = await client.get("/api/properties/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Property 999 not found", "code": "RESOURCE_NOT_FOUND"}

    assert (await client.delete("/api/properties/999")).status_code == 404
    assert (await client.put("/api/properties/999", json={"name": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_add_address_first_one_becomes_primary(client):
    created = await _create_property(client, addresses=[])
    url = f"/api/properties/{created['id']}/addresses"

    first = await client.post(url, json={"street": "1 Oak Ave"})
    second = await client.post(url, json={"street": "3 Oak Ave"})
    third = await client.post(url, json={"street": "5 Oak Ave", "is_primary": True})

    assert first.status_code == 201
    assert first.json()["is_primary"] is True
    assert second.json()["is_primary"] is False
    assert third.json()["is_primary"] is True

    listing = await client.get(url)
    primaries = [a["id"] for a in listing.json() if a["is_primary"]]
    assert primaries == [third.json()["id"]]


@pytest.mark.asyncio
async def test_address_primary_switch_and_unset(client):
    created = await _create_property(client)
    first, second = created["addresses"]

    promoted = await client.put(f"/api/properties/addresses/{second['id']}", json={"is_primary": True})
    assert promoted.status_code == 200
    assert promoted.json()["is_primary"] is True

    addresses = _by_id((await client.get(f"/api/properties/{created['id']}/addresses")).json())
    assert addresses[first["id"]]["is_primary"] is False

    rejected = await client.put(f"/api/properties/addresses/{second['id']}", json={"is_primary": False})
    assert rejected.status_code == 400

    renamed = await client.put(f"/api/properties/addresses/{first['id']}", json={"city": "Salem"})
    assert renamed.json()["city"] == "Salem"
    assert renamed.json()["is_primary"] is False


@pytest.mark.asyncio
async def test_deleting_primary_address_promotes_next(client):
    created = await _create_property(
        client,
        addresses=[{"street": "A"}, {"street": "B"}, {"street": "C"}],
    )
    first, second, third = created["addresses"]

    response = await client.delete(f"/api/properties/addresses/{first['id']}")

    assert response.status_code == 204
    addresses = _by_id((await client.get(f"/api/properties/{created['id']}/addresses")).json())
    assert set(addresses) == {second["id"], third["id"]}
    assert addresses[second["id"]]["is_primary"] is True
    assert addresses[third["id"]]["is_primary"] is False


@pytest.mark.asyncio
async def test_replace_address_list_endpoint(client):
    created = await _create_property(client)
    keep = created["addresses"][1]

    response = await client.put(
        f"/api/properties/{created['id']}/addresses",
        json=[{"id": keep["id"]}, {"street": "9 New Rd"}],
    )

    assert response.status_code == 200
    addresses = response.json()
    assert [a["id"] for a in addresses][0] == keep["id"]
    assert addresses[0]["is_primary"] is True
    assert addresses[0]["street"] == keep["street"]
    assert addresses[1]["street"] == "9 New Rd"

    missing = await client.get("/api/properties/999/addresses")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_concurrent_property_creates(client):
    responses = await asyncio.gather(
        *(
            client.post(
                "/api/properties",
                json={"name": f"Property {index}", "addresses": [{"street": f"{index} Elm St"}]},
            )
            for index in range(5)
        )
    )

    assert [r.status_code for r in responses] == [201] * 5
    listing = (await client.get("/api/properties")).json()
    assert sorted(p["name"] for p in listing) == [f"Property {index}" for index in range(5)]
    assert all(p["addresses"][0]["is_primary"] for p in listing)


@pytest.mark.asyncio
async def test_null_for_required_column_is_rejected(client):
    prop = await _create_property(client)

    response = await client.put(f"/api/properties/{prop['id']}", json={"name": None})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert (await client.get(f"/api/properties/{prop['id']}")).json()["name"] == "Main St Property"


@pytest.mark.asyncio
async def test_out_of_range_ids(client):
    huge = 2**63

    assert (await client.get(f"/api/properties/{huge}")).status_code == 404
    assert (await client.delete(f"/api/properties/{huge}")).status_code == 404

    response = await client.post("/api/properties", json={"name": "Orphan", "owner_id": huge})
    assert response.status_code == 400
    assert response.json()["field"] == "owner_id"
    assert (await client.get("/api/properties")).json() == []
