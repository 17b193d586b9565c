"""Account types, accounts, transaction types and transactions."""
from __future__ import annotations

import pytest


async def _account(client, name: str = "Rent Income") -> dict:
    account_type = (await client.post("/api/account-types", json={"name": "Income"})).json()
    response = await client.post("/api/accounts", json={"name": name, "account_type_id": account_type["id"]})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_account_type_names_are_unique(client):
    first = await client.post("/api/account-types", json={"name": "Asset"})
    duplicate = await client.post("/api/account-types", json={"name": "Asset"})

    assert first.status_code == 201
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "CONFLICT"
    assert [t["name"] for t in (await client.get("/api/account-types")).json()] == ["Asset"]


@pytest.mark.asyncio
async def test_account_type_in_use_cannot_be_deleted(client):
    account = await _account(client)

    blocked = await client.delete(f"/api/account-types/{account['account_type_id']}")
    assert blocked.status_code == 409

    assert (await client.delete(f"/api/accounts/{account['id']}")).status_code == 204
    assert (await client.delete(f"/api/account-types/{account['account_type_id']}")).status_code == 204


@pytest.mark.asyncio
async def test_account_with_transactions_cannot_be_deleted(client):
    account = await _account(client)
    transaction = await client.post(
        "/api/transactions",
        json={"account_id": account["id"], "amount": 1200, "date": "2025-01-01", "description": "Rent Payment"},
    )
    assert transaction.status_code == 201

    response = await client.delete(f"/api/accounts/{account['id']}")

    assert response.status_code == 409
    detail = (await client.get(f"/api/accounts/{account['id']}")).json()
    assert detail["account_type"]["name"] == "Income"
    assert [t["description"] for t in detail["transactions"]] == ["Rent Payment"]


@pytest.mark.asyncio
async def test_deleting_transaction_type_untypes_transactions(client):
    account = await _account(client)
    tx_type = (await client.post("/api/transaction-types", json={"name": "Income"})).json()
    transaction = (
        await client.post(
            "/api/transactions",
            json={"account_id": account["id"], "transaction_type_id": tx_type["id"], "amount": 50},
        )
    ).json()
    assert transaction["transaction_type"]["name"] == "Income"

    assert (await client.delete(f"/api/transaction-types/{tx_type['id']}")).status_code == 204

    kept = (await client.get(f"/api/transactions/{transaction['id']}")).json()
    assert kept["transaction_type_id"] is None
    assert kept["transaction_type"] is None


@pytest.mark.asyncio
async def test_transaction_references_are_checked(client):
    account = await _account(client)

    missing_account = await client.post("/api/transactions", json={"account_id": 77, "amount": 1})
    missing_property = await client.post(
        "/api/transactions", json={"account_id": account["id"], "property_id": 77, "amount": 1}
    )
    missing_amount = await client.post("/api/transactions", json={"account_id": account["id"]})

    assert missing_account.json()["field"] == "account_id"
    assert missing_property.json()["field"] == "property_id"
    assert missing_amount.status_code == 400
    assert missing_amount.json()["code"] == "VALIDATION_ERROR"
    assert missing_amount.json()["details"][0]["field"] == "body.amount"


@pytest.mark.asyncio
async def test_transaction_update_and_rename_types(client):
    account = await _account(client)
    transaction = (await client.post("/api/transactions", json={"account_id": account["id"], "amount": 10})).json()

    updated = await client.put(f"/api/transactions/{transaction['id']}", json={"amount": 12.5})
    assert updated.json()["amount"] == 12.5
    assert updated.json()["account"]["id"] == account["id"]

    renamed = await client.put(f"/api/account-types/{account['account_type_id']}", json={"name": "Revenue"})
    assert renamed.json()["name"] == "Revenue"

    assert (await client.delete(f"/api/transactions/{transaction['id']}")).status_code == 204
    assert (await client.get(f"/api/transactions/{transaction['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_transaction_amount_cannot_be_cleared(client):
    account = await _account(client)
    transaction = (await client.post("/api/transactions", json={"account_id": account["id"], "amount": 100})).json()

    response = await client.put(f"/api/transactions/{transaction['id']}", json={"amount": None})

    assert response.status_code == 400
    assert (await client.get(f"/api/transactions/{transaction['id']}")).json()["amount"] == 100
