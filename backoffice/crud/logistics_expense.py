from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backoffice.core.flow_logging import flow_info
from backoffice.crud.base import apply_patch, commit
from backoffice.crud.list_query import ListParams, paginate
from backoffice.models.enums import TransportStatus
from backoffice.models.logistics_expense import LogisticsExpense
from backoffice.models.masters import Currency
from backoffice.schemas.logistics_expense import LogisticsExpenseCreate, LogisticsExpenseUpdate
from backoffice.services.financials import EXPENSE_COST_COMPONENTS, apply_expense_totals
from backoffice.services.status_policy import check_transport_transition

logger = logging.getLogger(__name__)


class MissingReferenceError(Exception):
    """Raised when a referenced record needed for a write does not exist."""

    def __init__(self, label: str):
        super().__init__(f"{label} not found")
        self.label = label


def _document_json(data: LogisticsExpenseCreate) -> dict[str, Any] | None:
    if data.supporting_document is None:
        return None
    return data.supporting_document.model_dump(mode="json", by_alias=True, exclude_none=True)


def _resolve_exchange_rate(db: Session, currency_id: int, exchange_rate):
    # 0 counts as not supplied.
    if exchange_rate:
        return exchange_rate
    currency = db.get(Currency, currency_id)
    if currency is None:
        raise MissingReferenceError("Currency")
    return currency.exchange_rate


def create_expense(db: Session, data: LogisticsExpenseCreate, *, actor: str) -> LogisticsExpense:
    values = data.model_dump(exclude={"supporting_document", "exchange_rate"})
    for name in EXPENSE_COST_COMPONENTS:
        if values.get(name) is None:
            values[name] = 0

    obj = LogisticsExpense(
        **{k: v for k, v in values.items() if v is not None},
        exchange_rate=_resolve_exchange_rate(db, data.currency_id, data.exchange_rate),
        supporting_document=_document_json(data),
        created_by=actor,
        last_changed_by=actor,
    )

    apply_expense_totals(obj)
    db.add(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "expense_created id=%s route=%s total_cost=%s amount_in_pkr=%s",
        obj.id,
        obj.route,
        obj.total_cost,
        obj.amount_in_pkr,
        category="logistics_expense",
    )
    return obj


def get_expense(db: Session, row_id: int) -> LogisticsExpense | None:
    return db.get(LogisticsExpense, row_id)


def list_expenses(
    db: Session,
    params: ListParams,
    *,
    transporter_id: int | None = None,
    route: str | None = None,
    transport_status: TransportStatus | None = None,
) -> tuple[list[LogisticsExpense], int]:
    stmt = select(LogisticsExpense).where(LogisticsExpense.is_active.is_(True))

    if transporter_id is not None:
        stmt = stmt.where(LogisticsExpense.transporter_id == transporter_id)

    if route:
        stmt = stmt.where(LogisticsExpense.route.ilike(f"%{route}%"))

    if transport_status is not None:
        stmt = stmt.where(LogisticsExpense.transport_status == transport_status)

    return paginate(db, stmt, LogisticsExpense, params)


def update_expense(
    db: Session,
    row_id: int,
    data: LogisticsExpenseUpdate,
    *,
    actor: str,
) -> LogisticsExpense | None:
    obj = db.get(LogisticsExpense, row_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True, exclude={"supporting_document"})
    if patch.get("transport_status") is not None:
        check_transport_transition(obj.transport_status, patch["transport_status"])
    apply_patch(obj, patch)
    if "supporting_document" in data.model_fields_set and data.supporting_document is not None:
        obj.supporting_document = _document_json(data)

    obj.last_changed_by = actor
    apply_expense_totals(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "expense_updated id=%s fields=%s total_cost=%s amount_in_pkr=%s",
        obj.id,
        sorted(data.model_fields_set),
        obj.total_cost,
        obj.amount_in_pkr,
        category="logistics_expense",
    )
    return obj


def update_transport_status(
    db: Session,
    row_id: int,
    transport_status: TransportStatus,
    *,
    arrival_date: datetime | None = None,
    actor: str,
) -> LogisticsExpense | None:
    obj = db.get(LogisticsExpense, row_id)
    if not obj:
        return None

    previous = obj.transport_status
    check_transport_transition(previous, transport_status)
    obj.transport_status = transport_status
    # Arrival is only recorded together with a delivery.
    if transport_status == TransportStatus.DELIVERED and arrival_date:
        obj.arrival_date = arrival_date

    obj.last_changed_by = actor
    apply_expense_totals(obj)
    commit(db)
    db.refresh(obj)

    flow_info(
        logger,
        "expense_status_changed id=%s from=%s to=%s",
        obj.id,
        getattr(previous, "value", previous),
        transport_status.value,
        category="logistics_expense",
    )
    return obj


def delete_expense(db: Session, row_id: int, *, actor: str, mode: str = "soft") -> bool:
    obj = db.get(LogisticsExpense, row_id)
    if not obj:
        return False

    if mode == "hard":
        db.delete(obj)
        commit(db)
        return True

    obj.is_active = False
    obj.last_changed_by = actor
    apply_expense_totals(obj)
    commit(db)
    return True
