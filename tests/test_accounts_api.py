from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "path, prefix",
    [
        ("/api/owners", "OW-"),
        ("/api/partnership-accounts", "PA-"),
        ("/api/property-accounts", "PP-"),
    ],
)
def test_account_crud_round_trip(client, path, prefix):
    r = client.post(path, json={"name": "Hamza Traders", "mobileNo": "0300-1234567", "code": "HT"})
    assert r.status_code == 201, r.text
    created = r.json()["data"]
    assert created["referCode"] == f"{prefix}0001"
    assert created["mobileNo"] == "0300-1234567"

    r = client.put(f"{path}/{created['id']}", json={"description": "wholesale", "referCode": "XX-9999"})
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["description"] == "wholesale"
    assert updated["referCode"] == f"{prefix}0001"

    second = client.post(path, json={"name": "Noor Estates"}).json()["data"]
    assert second["referCode"] == f"{prefix}0002"

    assert client.get(f"{path}/{created['id']}").json()["data"]["name"] == "Hamza Traders"

    r = client.delete(f"{path}/{created['id']}", params={"mode": "hard"})
    assert r.status_code == 200
    assert client.get(f"{path}/{created['id']}").status_code == 404


def test_owner_update_messages_and_null_clearing(client):
    r = client.post("/api/owners", json={"name": "Hamza Traders", "description": "wholesale"})
    assert r.json()["message"] == "Owner created successfully"
    created = r.json()["data"]

    r = client.put(f"/api/owners/{created['id']}", json={"description": None, "name": None})
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Owner updated successfully"
    updated = r.json()["data"]
    assert updated["description"] is None
    assert updated["name"] == "Hamza Traders"


def test_owner_requires_name(client):
    r = client.post("/api/owners", json={"mobileNo": "0300"})
    assert r.status_code == 400
    assert r.json() == {"status": "fail", "message": "Required fields: name"}


def test_account_list_search_and_inactive_filter(client):
    a = client.post("/api/owners", json={"name": "Hamza Traders"}).json()["data"]
    b = client.post("/api/owners", json={"name": "Noor Estates"}).json()["data"]
    client.delete(f"/api/owners/{b['id']}")

    active = client.get("/api/owners").json()
    assert [o["id"] for o in active["data"]] == [a["id"]]

    inactive = client.get("/api/owners", params={"isActive": "false"}).json()
    assert [o["id"] for o in inactive["data"]] == [b["id"]]

    found = client.get("/api/owners", params={"search": "hamza"}).json()
    assert found["total"] == 1


def test_actor_header_is_recorded(client):
    r = client.post(
        "/api/partnership-accounts",
        json={"name": "Joint Venture"},
        headers={"X-User-Email": "ops@example.com"},
    )
    assert r.json()["data"]["createdBy"] == "ops@example.com"


def test_liability_defaults_and_refer_code(client):
    r = client.post("/api/liabilities", json={"description": "Bank loan", "amount": 150000})
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["referCode"] == "LB-0001"
    assert data["liabilityType"] == "other"
    assert data["amount"] == 150000
    assert data["date"]


def test_liability_requires_description_and_amount(client):
    r = client.post("/api/liabilities", json={"description": "Tax due"})
    assert r.status_code == 400
    assert r.json()["message"] == "Required fields: description, amount"


def test_liability_update_and_soft_delete(client):
    created = client.post(
        "/api/liabilities",
        json={"description": "Payable to mill", "amount": 500, "liabilityType": "payable"},
    ).json()["data"]

    r = client.put(f"/api/liabilities/{created['id']}", json={"amount": 650})
    assert r.json()["data"]["amount"] == 650

    r = client.delete(f"/api/liabilities/{created['id']}")
    assert r.json() == {"status": "success", "message": "Liability deleted successfully"}
    assert client.get("/api/liabilities").json()["total"] == 0
    assert client.get(f"/api/liabilities/{created['id']}").json()["data"]["isActive"] is False


def test_unknown_liability_is_404(client):
    r = client.delete("/api/liabilities/77")
    assert r.status_code == 404
    assert r.json()["message"] == "Liability not found"
