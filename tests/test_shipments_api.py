from __future__ import annotations

import re
from datetime import datetime

from backoffice.core.config import settings


def _payload(masters: dict, **overrides) -> dict:
    body = {
        "supplier": masters["supplier"],
        "transporter": masters["transporter"],
        "currency": masters["currency"],
        "products": [
            {"product": masters["product_a"], "quantity": 10, "unitPrice": 2.5},
            {"product": masters["product_b"], "quantity": 4, "unitPrice": 12},
        ],
        "origin": {"country": "China", "city": "Shanghai", "address": "Pudong Dock 4"},
        "destination": {"country": "Pakistan", "city": "Karachi", "warehouse": masters["warehouse"]},
        "shipmentDate": "2025-03-10T00:00:00",
        "totalWeight": 1200,
    }
    body.update(overrides)
    return body


def _create(client, masters, **overrides) -> dict:
    r = client.post("/api/shipments", json=_payload(masters, **overrides))
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_generates_identifiers_and_total_value(client, masters):
    r = client.post("/api/shipments", json=_payload(masters))
    assert r.status_code == 201, r.text
    assert r.json()["message"] == "Shipment created successfully"
    data = r.json()["data"]

    year = datetime.now().year
    assert data["shipmentId"] == f"SHP-{year}-001"
    assert re.fullmatch(rf"BATCH-\d{{2}}{year}-001", data["batchNo"])
    assert re.fullmatch(r"TRK\d{6}[A-Z0-9]{6}", data["trackingNumber"])
    assert data["totalValue"] == 73
    assert data["status"] == "pending"
    assert data["origin"]["city"] == "Shanghai"
    assert data["destination"]["warehouse"]["name"] == "Karachi Central"
    assert [p["product"]["name"] for p in data["products"]] == ["Cotton Yarn", "Polyester Fibre"]


def test_create_without_currency_lists_required_fields(client, masters):
    body = _payload(masters)
    body.pop("currency")
    r = client.post("/api/shipments", json=body)
    assert r.status_code == 400
    assert r.json() == {
        "status": "fail",
        "message": "Required fields: supplier, products, origin, destination, currency",
    }


def test_create_with_empty_products_leaves_total_value_unset(client, masters):
    r = client.post("/api/shipments", json=_payload(masters, products=[]))
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["products"] == []
    assert data["totalValue"] is None


def test_create_without_products_key_is_rejected(client, masters):
    body = _payload(masters)
    body.pop("products")
    r = client.post("/api/shipments", json=body)
    assert r.status_code == 400
    assert r.json()["message"].startswith("Required fields:")


def test_invalid_status_value_is_a_400(client, masters):
    r = client.post("/api/shipments", json=_payload(masters, status="lost"))
    assert r.status_code == 400
    assert r.json()["status"] == "fail"


def test_sequence_continues_across_creations(client, masters):
    _create(client, masters)
    second = _create(client, masters)
    assert second["shipmentId"].endswith("-002")
    assert second["batchNo"].endswith("-002")


def test_get_unknown_shipment_is_404(client, masters):
    r = client.get("/api/shipments/999")
    assert r.status_code == 404
    assert r.json() == {"status": "fail", "message": "Shipment not found"}


def test_update_cannot_change_identifiers_and_recomputes_value(client, masters):
    created = _create(client, masters)

    r = client.put(
        f"/api/shipments/{created['id']}",
        json={
            "shipmentId": "SHP-1999-999",
            "batchNo": "BATCH-011999-999",
            "trackingNumber": "TRK000000AAAAAA",
            "totalValue": 1,
            "products": [{"product": masters["product_a"], "quantity": 2, "unitPrice": 100}],
            "notes": "re-packed",
        },
    )
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Shipment updated successfully"
    data = r.json()["data"]
    assert data["shipmentId"] == created["shipmentId"]
    assert data["batchNo"] == created["batchNo"]
    assert data["trackingNumber"] == created["trackingNumber"]
    assert data["totalValue"] == 200
    assert data["notes"] == "re-packed"
    assert len(data["products"]) == 1


def test_soft_delete_keeps_shipment_addressable_but_hides_it_from_list(client, masters):
    keep = _create(client, masters)
    gone = _create(client, masters)

    r = client.delete(f"/api/shipments/{gone['id']}")
    assert r.status_code == 200
    assert r.json()["status"] == "success"

    r = client.get(f"/api/shipments/{gone['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["isActive"] is False

    listing = client.get("/api/shipments").json()
    assert [s["id"] for s in listing["data"]] == [keep["id"]]
    assert listing["total"] == 1


def test_soft_deleted_rows_still_advance_the_sequence(client, masters):
    first = _create(client, masters)
    client.delete(f"/api/shipments/{first['id']}")
    second = _create(client, masters)
    assert second["shipmentId"].endswith("-002")


def test_hard_delete_removes_row(client, masters):
    created = _create(client, masters)
    r = client.delete(f"/api/shipments/{created['id']}", params={"mode": "hard"})
    assert r.status_code == 200
    assert client.get(f"/api/shipments/{created['id']}").status_code == 404


def test_pending_to_delivered_is_allowed_by_default(client, masters):
    created = _create(client, masters)
    r = client.put(
        f"/api/shipments/{created['id']}/status",
        json={"status": "delivered", "actualArrival": "2025-04-01T09:30:00"},
    )
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Shipment status updated successfully"
    data = r.json()["data"]
    assert data["status"] == "delivered"
    assert data["actualArrival"].startswith("2025-04-01T09:30")
    assert data["totalValue"] == 73


def test_status_guard_rejects_skipping_steps_when_enabled(client, masters, monkeypatch):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", True)
    created = _create(client, masters)

    r = client.put(f"/api/shipments/{created['id']}/status", json={"status": "delivered"})
    assert r.status_code == 400
    assert "pending -> delivered" in r.json()["message"]

    r = client.put(f"/api/shipments/{created['id']}/status", json={"status": "shipped"})
    assert r.status_code == 200


def test_list_filters_and_search(client, masters):
    a = _create(client, masters)
    b = _create(client, masters)
    client.put(f"/api/shipments/{b['id']}/status", json={"status": "in_transit"})

    by_status = client.get("/api/shipments", params={"status": "in_transit"}).json()
    assert [s["id"] for s in by_status["data"]] == [b["id"]]

    by_search = client.get("/api/shipments", params={"search": a["shipmentId"].lower()}).json()
    assert [s["id"] for s in by_search["data"]] == [a["id"]]

    paged = client.get("/api/shipments", params={"limit": 1, "page": 2}).json()
    assert paged["results"] == 1
    assert paged["total"] == 2
    assert paged["pages"] == 2


def test_list_field_projection(client, masters):
    _create(client, masters)
    listing = client.get("/api/shipments", params={"fields": "shipmentId,status"}).json()
    assert set(listing["data"][0].keys()) == {"id", "shipmentId", "status"}


def test_analytics_groups_by_status_and_supplier(client, masters):
    _create(client, masters)
    second = _create(client, masters, products=[{"product": masters["product_a"], "quantity": 1, "unitPrice": 27}])
    client.put(f"/api/shipments/{second['id']}/status", json={"status": "shipped"})
    _create(client, masters, shipmentDate="2024-01-05T00:00:00")

    r = client.get(
        "/api/shipments/analytics",
        params={"dateFrom": "2025-01-01T00:00:00", "dateTo": "2025-12-31T23:59:59"},
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]

    by_status = {row["status"]: row for row in data["byStatus"]}
    assert by_status["pending"]["count"] == 1
    assert by_status["pending"]["totalValue"] == 73
    assert by_status["shipped"]["totalValue"] == 27

    assert data["bySupplier"] == [
        {"supplierId": masters["supplier"], "supplierName": "Acme Textiles", "count": 2, "totalValue": 100}
    ]
    assert data["total"] == {"totalShipments": 2, "totalValue": 100, "avgValue": 50}


def test_explicit_null_clears_notes_and_transporter(client, masters):
    created = _create(client, masters, notes="x")
    assert created["transporter"]["name"] == "Indus Haulage"

    r = client.put(
        f"/api/shipments/{created['id']}",
        json={"notes": None, "transporter": None, "supplier": None, "status": None},
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["notes"] is None
    assert data["transporter"] is None
    assert data["supplier"]["name"] == "Acme Textiles"
    assert data["status"] == "pending"
    assert data["totalValue"] == 73
