from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from backoffice.core.flow_logging import flow_info
from backoffice.crud.base import apply_patch, commit
from backoffice.crud.list_query import ListParams, paginate
from backoffice.models.enums import ShipmentStatus
from backoffice.models.shipment import Shipment, ShipmentDocument, ShipmentProduct
from backoffice.schemas.shipment import (
    DestinationIn,
    OriginIn,
    ShipmentCreate,
    ShipmentDocumentIn,
    ShipmentProductIn,
    ShipmentUpdate,
)
from backoffice.services.financials import apply_shipment_value
from backoffice.services.identifiers import ShipmentIdentifierService
from backoffice.services.status_policy import check_shipment_transition

logger = logging.getLogger(__name__)

# Handled separately from the flat column patch.
_NESTED_FIELDS = {"products", "documents", "origin", "destination"}


def _line_items(products: Iterable[ShipmentProductIn]) -> list[ShipmentProduct]:
    return [
        ShipmentProduct(
            line_no=idx,
            product_id=line.product_id,
            quantity=line.quantity,
            unit_price=line.unit_price,
        )
        for idx, line in enumerate(products, start=1)
    ]


def _documents(documents: Iterable[ShipmentDocumentIn]) -> list[ShipmentDocument]:
    rows = []
    for doc in documents:
        row = ShipmentDocument(
            document_type=doc.document_type,
            file_name=doc.file_name,
            file_url=doc.file_url,
        )
        if doc.upload_date is not None:
            row.upload_date = doc.upload_date
        rows.append(row)
    return rows


def _apply_origin(obj: Shipment, origin: OriginIn) -> None:
    obj.origin_country = origin.country
    obj.origin_city = origin.city
    obj.origin_address = origin.address


def _apply_destination(obj: Shipment, destination: DestinationIn) -> None:
    obj.destination_country = destination.country
    obj.destination_city = destination.city
    obj.destination_warehouse_id = destination.warehouse_id


def create_shipment(
    db: Session,
    data: ShipmentCreate,
    *,
    actor: str,
    identifiers: ShipmentIdentifierService | None = None,
) -> Shipment:
    identifiers = identifiers or ShipmentIdentifierService(db)
    shipment_number, batch_no, tracking_number = identifiers.generate()

    obj = Shipment(
        shipment_number=shipment_number,
        batch_no=batch_no,
        tracking_number=tracking_number,
        supplier_id=data.supplier_id,
        transporter_id=data.transporter_id,
        currency_id=data.currency_id,
        status=data.status or ShipmentStatus.PENDING,
        shipment_date=data.shipment_date,
        estimated_arrival=data.estimated_arrival,
        total_weight=data.total_weight,
        notes=data.notes,
        created_by=actor,
        last_changed_by=actor,
    )
    _apply_origin(obj, data.origin)
    _apply_destination(obj, data.destination)
    obj.products = _line_items(data.products or [])
    obj.documents = _documents(data.documents or [])

    apply_shipment_value(obj)
    db.add(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "shipment_created id=%s shipment_id=%s batch_no=%s lines=%s total_value=%s",
        obj.id,
        obj.shipment_number,
        obj.batch_no,
        len(obj.products),
        obj.total_value,
        category="shipment",
    )
    return obj


def get_shipment(db: Session, row_id: int) -> Shipment | None:
    return db.get(Shipment, row_id)


def list_shipments(
    db: Session,
    params: ListParams,
    *,
    status: ShipmentStatus | None = None,
    supplier_id: int | None = None,
    transporter_id: int | None = None,
    search: str | None = None,
) -> tuple[list[Shipment], int]:
    stmt = select(Shipment).where(Shipment.is_active.is_(True))

    if status is not None:
        stmt = stmt.where(Shipment.status == status)

    if supplier_id is not None:
        stmt = stmt.where(Shipment.supplier_id == supplier_id)

    if transporter_id is not None:
        stmt = stmt.where(Shipment.transporter_id == transporter_id)

    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(
                Shipment.shipment_number.ilike(pattern),
                Shipment.batch_no.ilike(pattern),
                Shipment.tracking_number.ilike(pattern),
            )
        )

    return paginate(db, stmt, Shipment, params)


def update_shipment(db: Session, row_id: int, data: ShipmentUpdate, *, actor: str) -> Shipment | None:
    obj = db.get(Shipment, row_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True, exclude=_NESTED_FIELDS)
    if patch.get("status") is not None:
        check_shipment_transition(obj.status, patch["status"])
    apply_patch(obj, patch)

    fields_set = data.model_fields_set
    if "products" in fields_set and data.products is not None:
        obj.products = _line_items(data.products)
    if "documents" in fields_set and data.documents is not None:
        obj.documents = _documents(data.documents)
    if data.origin is not None:
        _apply_origin(obj, data.origin)
    if data.destination is not None:
        _apply_destination(obj, data.destination)

    obj.last_changed_by = actor
    apply_shipment_value(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "shipment_updated id=%s fields=%s total_value=%s",
        obj.id,
        sorted(fields_set),
        obj.total_value,
        category="shipment",
    )
    return obj


def update_shipment_status(
    db: Session,
    row_id: int,
    status: ShipmentStatus,
    *,
    actual_arrival: datetime | None = None,
    actor: str,
) -> Shipment | None:
    obj = db.get(Shipment, row_id)
    if not obj:
        return None

    previous = obj.status
    check_shipment_transition(previous, status)
    obj.status = status
    if actual_arrival:
        obj.actual_arrival = actual_arrival

    obj.last_changed_by = actor
    apply_shipment_value(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "shipment_status_changed id=%s from=%s to=%s",
        obj.id,
        getattr(previous, "value", previous),
        status.value,
        category="shipment",
    )
    return obj


def delete_shipment(db: Session, row_id: int, *, actor: str, mode: str = "soft") -> bool:
    obj = db.get(Shipment, row_id)
    if not obj:
        return False

    if mode == "hard":
        db.delete(obj)
        commit(db)
        return True

    obj.is_active = False
    obj.last_changed_by = actor
    apply_shipment_value(obj)
    commit(db)
    flow_info(logger, "shipment_deactivated id=%s", obj.id, category="shipment")
    return True
