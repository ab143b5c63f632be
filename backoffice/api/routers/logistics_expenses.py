from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from backoffice.api.deps.request_identity import get_request_email
from backoffice.api.errors import handle_errors, not_found, require_fields
from backoffice.api.responses import dump, dump_many, envelope, paged_envelope, project
from backoffice.crud.list_query import ListParams
from backoffice.crud.logistics_expense import (
    MissingReferenceError,
    create_expense,
    delete_expense,
    get_expense,
    list_expenses,
    update_expense,
    update_transport_status,
)
from backoffice.db.session import get_db
from backoffice.models.enums import TransportStatus
from backoffice.schemas.logistics_expense import (
    LogisticsExpenseCreate,
    LogisticsExpenseOut,
    LogisticsExpenseUpdate,
    TransportStatusUpdate,
)
from backoffice.services.analytics_service import route_summary

router = APIRouter(tags=["logistics-expenses"])

REQUIRED_FIELDS = {
    "transporter_id": "transporter",
    "route": "route",
    "freight_cost": "freightCost",
    "currency_id": "currency",
    "payment_method": "paymentMethod",
}


@router.get("")
@router.get("/")
@handle_errors
def list_expenses_api(
    request: Request,
    transporter: Optional[int] = Query(None, ge=1),
    route: Optional[str] = Query(None),
    status_filter: Optional[TransportStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    params = ListParams.from_query(request.query_params)
    rows, total = list_expenses(
        db,
        params,
        transporter_id=transporter,
        route=route,
        transport_status=status_filter,
    )
    items = project(dump_many(LogisticsExpenseOut, rows), params.fields)
    return paged_envelope(items, total=total, page=params.page, limit=params.limit)


@router.get("/route/{route}")
@handle_errors
def expenses_by_route_api(route: str, db: Session = Depends(get_db)):
    summary = route_summary(db, route)
    return envelope(
        data=dump_many(LogisticsExpenseOut, summary.expenses),
        results=len(summary.expenses),
        totalAmount=float(summary.total_amount),
        averageCost=float(summary.average_cost),
    )


@router.get("/{row_id}")
@handle_errors
def get_expense_api(row_id: int, db: Session = Depends(get_db)):
    obj = get_expense(db, row_id)
    if not obj:
        raise not_found("Logistics expense")
    return envelope(data=dump(LogisticsExpenseOut, obj))


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
@handle_errors
def create_expense_api(
    payload: LogisticsExpenseCreate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    require_fields(payload, REQUIRED_FIELDS)
    try:
        obj = create_expense(db, payload, actor=actor)
    except MissingReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return envelope(message="Logistics expense created successfully", data=dump(LogisticsExpenseOut, obj))


@router.put("/{row_id}")
@handle_errors
def update_expense_api(
    row_id: int,
    payload: LogisticsExpenseUpdate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    obj = update_expense(db, row_id, payload, actor=actor)
    if not obj:
        raise not_found("Logistics expense")
    return envelope(message="Logistics expense updated successfully", data=dump(LogisticsExpenseOut, obj))


@router.put("/{row_id}/status")
@handle_errors
def update_transport_status_api(
    row_id: int,
    payload: TransportStatusUpdate,
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    obj = update_transport_status(
        db,
        row_id,
        payload.transport_status,
        arrival_date=payload.arrival_date,
        actor=actor,
    )
    if not obj:
        raise not_found("Logistics expense")
    return envelope(message="Transport status updated successfully", data=dump(LogisticsExpenseOut, obj))


@router.delete("/{row_id}")
@handle_errors
def delete_expense_api(
    row_id: int,
    mode: str = Query("soft", pattern="^(soft|hard)$"),
    db: Session = Depends(get_db),
    actor: str = Depends(get_request_email),
):
    ok = delete_expense(db, row_id, actor=actor, mode=mode)
    if not ok:
        raise not_found("Logistics expense")
    return envelope(message="Logistics expense deleted successfully")
