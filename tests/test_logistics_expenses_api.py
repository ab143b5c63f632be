from __future__ import annotations

from backoffice.core.config import settings


def _payload(masters: dict, **overrides) -> dict:
    body = {
        "transporter": masters["transporter"],
        "route": "Karachi-Lahore",
        "vehicleContainerNo": "TRK-4411",
        "freightCost": 1000,
        "borderCrossingCharges": 200,
        "transporterCommission": 50,
        "serviceFee": 25,
        "transitWarehouseCharges": 15,
        "localTransportCharges": 10,
        "currency": masters["currency"],
        "exchangeRate": 2,
        "paymentMethod": "bank",
    }
    body.update(overrides)
    return body


def _create(client, masters, **overrides) -> dict:
    r = client.post("/api/logistics-expenses", json=_payload(masters, **overrides))
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_derives_total_cost_and_pkr_amount(client, masters):
    r = client.post("/api/logistics-expenses", json=_payload(masters))
    assert r.status_code == 201, r.text
    assert r.json()["message"] == "Logistics expense created successfully"
    data = r.json()["data"]
    assert data["totalCost"] == 1300
    assert data["amountInPKR"] == 2600
    assert data["transportStatus"] == "pending"
    assert data["transporter"]["name"] == "Indus Haulage"
    assert data["currency"]["code"] == "USD"


def test_client_supplied_totals_are_ignored(client, masters):
    data = _create(client, masters, totalCost=5, amountInPKR=5)
    assert data["totalCost"] == 1300
    assert data["amountInPKR"] == 2600


def test_exchange_rate_defaults_to_currency_rate(client, masters):
    body = _payload(masters, freightCost=100)
    for key in (
        "exchangeRate",
        "borderCrossingCharges",
        "transporterCommission",
        "serviceFee",
        "transitWarehouseCharges",
        "localTransportCharges",
    ):
        body.pop(key)
    r = client.post("/api/logistics-expenses", json=body)
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["exchangeRate"] == 280
    assert data["borderCrossingCharges"] == 0
    assert data["totalCost"] == 100
    assert data["amountInPKR"] == 28000


def test_zero_exchange_rate_falls_back_to_currency_rate(client, masters):
    data = _create(client, masters, exchangeRate=0)
    assert data["exchangeRate"] == 280
    assert data["amountInPKR"] == 1300 * 280


def test_missing_required_fields_message(client, masters):
    body = _payload(masters)
    body.pop("paymentMethod")
    r = client.post("/api/logistics-expenses", json=body)
    assert r.status_code == 400
    assert r.json() == {
        "status": "fail",
        "message": "Required fields: transporter, route, freightCost, currency, paymentMethod",
    }


def test_zero_freight_cost_counts_as_missing(client, masters):
    r = client.post("/api/logistics-expenses", json=_payload(masters, freightCost=0))
    assert r.status_code == 400
    assert r.json()["message"].startswith("Required fields:")


def test_negative_component_is_rejected(client, masters):
    r = client.post("/api/logistics-expenses", json=_payload(masters, serviceFee=-1))
    assert r.status_code == 400
    assert r.json()["status"] == "fail"


def test_updating_freight_cost_recomputes_totals(client, masters):
    created = _create(client, masters)
    r = client.put(f"/api/logistics-expenses/{created['id']}", json={"freightCost": 2000})
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Logistics expense updated successfully"
    data = r.json()["data"]
    assert data["freightCost"] == 2000
    assert data["totalCost"] == 2300
    assert data["amountInPKR"] == 4600


def test_updating_rate_recomputes_pkr_amount(client, masters):
    created = _create(client, masters)
    r = client.put(f"/api/logistics-expenses/{created['id']}", json={"exchangeRate": 3})
    data = r.json()["data"]
    assert data["totalCost"] == 1300
    assert data["amountInPKR"] == 3900


def test_zeroing_every_component_unsets_pkr_amount(client, masters):
    created = _create(client, masters)
    r = client.put(
        f"/api/logistics-expenses/{created['id']}",
        json={
            "freightCost": 0,
            "borderCrossingCharges": 0,
            "transporterCommission": 0,
            "serviceFee": 0,
            "transitWarehouseCharges": 0,
            "localTransportCharges": 0,
        },
    )
    data = r.json()["data"]
    assert data["totalCost"] == 0
    assert data["amountInPKR"] is None


def test_transport_status_records_arrival_only_on_delivery(client, masters):
    created = _create(client, masters)

    r = client.put(
        f"/api/logistics-expenses/{created['id']}/status",
        json={"transportStatus": "in_transit", "arrivalDate": "2025-05-01T00:00:00"},
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Transport status updated successfully"
    assert r.json()["data"]["arrivalDate"] is None

    r = client.put(
        f"/api/logistics-expenses/{created['id']}/status",
        json={"transportStatus": "delivered", "arrivalDate": "2025-05-02T08:00:00"},
    )
    data = r.json()["data"]
    assert data["transportStatus"] == "delivered"
    assert data["arrivalDate"].startswith("2025-05-02T08:00")


def test_transport_guard_blocks_leaving_terminal_state(client, masters, monkeypatch):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", True)
    created = _create(client, masters)
    client.put(f"/api/logistics-expenses/{created['id']}/status", json={"transportStatus": "cancelled"})

    r = client.put(f"/api/logistics-expenses/{created['id']}/status", json={"transportStatus": "in_transit"})
    assert r.status_code == 400


def test_route_summary_totals_and_average(client, masters):
    _create(client, masters)
    _create(client, masters, route="Karachi-Lahore-Peshawar", freightCost=700, exchangeRate=1)
    _create(client, masters, route="Quetta-Karachi", freightCost=100)
    gone = _create(client, masters)
    client.delete(f"/api/logistics-expenses/{gone['id']}")

    r = client.get("/api/logistics-expenses/route/lahore")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    assert body["results"] == 2
    assert body["totalAmount"] == 2600 + 1000
    assert body["averageCost"] == 1800


def test_route_summary_with_no_matches(client, masters):
    body = client.get("/api/logistics-expenses/route/nowhere").json()
    assert body["results"] == 0
    assert body["totalAmount"] == 0
    assert body["averageCost"] == 0


def test_list_filters_by_route_and_status(client, masters):
    a = _create(client, masters)
    b = _create(client, masters, route="Gwadar-Quetta")
    client.put(f"/api/logistics-expenses/{b['id']}/status", json={"transportStatus": "in_transit"})

    by_route = client.get("/api/logistics-expenses", params={"route": "karachi"}).json()
    assert [e["id"] for e in by_route["data"]] == [a["id"]]

    by_status = client.get("/api/logistics-expenses", params={"status": "in_transit"}).json()
    assert [e["id"] for e in by_status["data"]] == [b["id"]]


def test_unknown_expense_is_404(client, masters):
    r = client.put("/api/logistics-expenses/404", json={"freightCost": 1})
    assert r.status_code == 404
    assert r.json()["message"] == "Logistics expense not found"


def test_explicit_null_clears_optional_fields_only(client, masters):
    created = _create(client, masters, notes="paid in advance")
    r = client.put(
        f"/api/logistics-expenses/{created['id']}",
        json={"notes": None, "route": None, "freightCost": None},
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["notes"] is None
    assert data["route"] == "Karachi-Lahore"
    assert data["freightCost"] == 1000
    assert data["totalCost"] == 1300
