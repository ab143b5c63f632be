from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from backoffice.api.deps.request_identity import get_request_email
from backoffice.api.errors import handle_errors, not_found, require_fields
from backoffice.api.responses import dump, dump_many, envelope, paged_envelope, project
from backoffice.crud.list_query import ListParams
from backoffice.crud.shipment import (
    create_shipment,
    delete_shipment,
    get_shipment,
    list_shipments,
    update_shipment,
    update_shipment_status,
)
from backoffice.db.session import get_db
from backoffice.models.enums import ShipmentStatus
from backoffice.schemas.shipment import (
    ShipmentAnalytics,
    ShipmentCreate,
    ShipmentOut,
    ShipmentStatusUpdate,
    ShipmentUpdate,
)
from backoffice.services.analytics_service import shipment_analytics

router = APIRouter(tags=["shipments"])

REQUIRED_FIELDS = {
    "supplier_id": "supplier",
    "products": "products",
    "origin": "origin",
    "destination": "destination",
    "currency_id": "currency",
}


@router.get("")
@router.get("/")
@handle_errors
def list_shipments_api(
    request: Request,
    status_filter: Optional[ShipmentStatus] = Query(None, alias="status"),
    supplier: Optional[int] = Query(None, ge=1),
    transporter: Optional[int] = Query(None, ge=1),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    params = ListParams.from_query(request.query_params)
    rows, total = list_shipments(
        db,
        params,
        status=status_filter,
        supplier_id=supplier,
        transporter_id=transporter,
        search=search,
    )
    items = project(dump_many(ShipmentOut, rows), params.fields)
    return paged_envelope(items, total=total, page=params.page, limit=params.limit)


# Declared before /{row_id} so "analytics" is not parsed as an id.
@router.get("/analytics")
@handle_errors
def shipment_analytics_api(
    date_from: Optional[datetime] = Query(None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(None, alias="dateTo"),
    db: Session = Depends(get_db),
):
    stats = shipment_analytics(db, date_from=date_from, date_to=date_to)
    return envelope(data=dump(ShipmentAnalytics, stats))


@router.get("/{row_id}")
@handle_errors
def get_shipment_api(row_id: int, db: Session = Depends(get_db)):
    obj = get_shipment(db, row_id)
    if not obj:
        raise not_found("Shipment")
    return envelope(data=dump(ShipmentOut, obj))


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
@handle_errors
def create_shipment_api(
    payload: ShipmentCreate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    require_fields(payload, REQUIRED_FIELDS)
    obj = create_shipment(db, payload, actor=actor)
    return envelope(message="Shipment created successfully", data=dump(ShipmentOut, obj))


@router.put("/{row_id}")
@handle_errors
def update_shipment_api(
    row_id: int,
    payload: ShipmentUpdate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    obj = update_shipment(db, row_id, payload, actor=actor)
    if not obj:
        raise not_found("Shipment")
    return envelope(message="Shipment updated successfully", data=dump(ShipmentOut, obj))


@router.put("/{row_id}/status")
@handle_errors
def update_shipment_status_api(
    row_id: int,
    payload: ShipmentStatusUpdate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    obj = update_shipment_status(
        db,
        row_id,
        payload.status,
        actual_arrival=payload.actual_arrival,
        actor=actor,
    )
    if not obj:
        raise not_found("Shipment")
    return envelope(message="Shipment status updated successfully", data=dump(ShipmentOut, obj))


@router.delete("/{row_id}")
@handle_errors
def delete_shipment_api(
    row_id: int,
    mode: str = Query("soft", pattern="^(soft|hard)$"),
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    ok = delete_shipment(db, row_id, actor=actor, mode=mode)
    if not ok:
        raise not_found("Shipment")
    return envelope(message="Shipment deleted successfully")
