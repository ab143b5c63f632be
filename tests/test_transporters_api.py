from __future__ import annotations


def _payload(**overrides) -> dict:
    body = {
        "name": "Khyber Freight",
        "contactPerson": "Usman Khan",
        "phoneNumber": "+92-321-5550000",
        "email": "  Dispatch@Khyber.example.com ",
        "address": "GT Road, Peshawar",
        "city": "Peshawar",
        "country": "Pakistan",
        "vehicleTypes": ["truck", "container"],
        "routes": [
            {"origin": "Peshawar", "destination": "Karachi", "estimatedDays": 3, "ratePerKg": 12.5},
        ],
        "commissionRate": 2.5,
        "paymentTerms": "credit_30",
        "rating": 4,
    }
    body.update(overrides)
    return body


def test_create_transporter_normalizes_email_and_keeps_routes(client):
    r = client.post("/api/transporters", json=_payload())
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["email"] == "dispatch@khyber.example.com"
    assert data["vehicleTypes"] == ["truck", "container"]
    assert data["routes"] == [
        {"origin": "Peshawar", "destination": "Karachi", "estimatedDays": 3, "ratePerKg": 12.5}
    ]
    assert data["paymentTerms"] == "credit_30"
    assert data["commissionRate"] == 2.5


def test_defaults_applied(client):
    body = _payload()
    for key in ("vehicleTypes", "routes", "commissionRate", "paymentTerms", "rating", "email"):
        body.pop(key)
    data = client.post("/api/transporters", json=body).json()["data"]
    assert data["vehicleTypes"] == []
    assert data["routes"] == []
    assert data["commissionRate"] == 0
    assert data["paymentTerms"] == "on_delivery"


def test_required_fields(client):
    body = _payload()
    body.pop("address")
    r = client.post("/api/transporters", json=body)
    assert r.status_code == 400
    assert r.json()["message"] == "Required fields: name, contactPerson, phoneNumber, address"


def test_invalid_values_are_rejected(client):
    assert client.post("/api/transporters", json=_payload(email="not-an-email")).status_code == 400
    assert client.post("/api/transporters", json=_payload(rating=6)).status_code == 400
    assert client.post("/api/transporters", json=_payload(commissionRate=101)).status_code == 400
    assert client.post("/api/transporters", json=_payload(vehicleTypes=["bicycle"])).status_code == 400
    bad_route = [{"origin": "A", "destination": "B", "estimatedDays": 0}]
    assert client.post("/api/transporters", json=_payload(routes=bad_route)).status_code == 400


def test_search_matches_name_contact_and_city(client):
    client.post("/api/transporters", json=_payload())
    client.post(
        "/api/transporters",
        json=_payload(name="Sindh Movers", contactPerson="Sara Memon", city="Hyderabad"),
    )

    assert client.get("/api/transporters", params={"search": "hyder"}).json()["total"] == 1
    assert client.get("/api/transporters", params={"search": "usman"}).json()["total"] == 1
    assert client.get("/api/transporters", params={"search": "h"}).json()["total"] == 2


def test_update_replaces_routes(client):
    created = client.post("/api/transporters", json=_payload()).json()["data"]
    r = client.put(
        f"/api/transporters/{created['id']}",
        json={"routes": [{"origin": "Lahore", "destination": "Multan", "estimatedDays": 1}]},
    )
    assert r.status_code == 200
    assert r.json()["data"]["routes"] == [{"origin": "Lahore", "destination": "Multan", "estimatedDays": 1, "ratePerKg": None}]
