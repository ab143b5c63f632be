from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from backoffice.models.logistics_expense import LogisticsExpense
from backoffice.models.masters import Supplier
from backoffice.models.shipment import Shipment


@dataclass
class RouteSummary:
    expenses: list[LogisticsExpense]
    total_amount: Decimal
    average_cost: Decimal


def _shipment_filters(date_from: datetime | None, date_to: datetime | None) -> list:
    filters = [Shipment.is_active.is_(True)]
    if date_from is not None:
        filters.append(Shipment.shipment_date >= date_from)
    if date_to is not None:
        filters.append(Shipment.shipment_date <= date_to)
    return filters


def shipment_analytics(
    db: Session,
    *,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
) -> dict:
    """
    Shipment counts and value grouped by status and by supplier, plus overall
    totals. Shipments without line items carry no value and add 0 to sums.
    """
    filters = _shipment_filters(date_from, date_to)
    value_sum = func.coalesce(func.sum(Shipment.total_value), 0)

    status_rows = db.execute(
        select(Shipment.status, func.count(Shipment.id), value_sum)
        .where(*filters)
        .group_by(Shipment.status)
        .order_by(Shipment.status)
    ).all()

    supplier_rows = db.execute(
        select(Shipment.supplier_id, Supplier.name, func.count(Shipment.id), value_sum.label("total_value"))
        .outerjoin(Supplier, Supplier.id == Shipment.supplier_id)
        .where(*filters)
        .group_by(Shipment.supplier_id, Supplier.name)
        .order_by(value_sum.desc(), Shipment.supplier_id)
    ).all()

    total_shipments, total_value, avg_value = db.execute(
        select(
            func.count(Shipment.id),
            value_sum,
            func.coalesce(func.avg(Shipment.total_value), 0),
        ).where(*filters)
    ).one()

    return {
        "by_status": [
            {"status": status, "count": count, "total_value": value}
            for status, count, value in status_rows
        ],
        "by_supplier": [
            {
                "supplier_id": supplier_id,
                "supplier_name": name,
                "count": count,
                "total_value": value,
            }
            for supplier_id, name, count, value in supplier_rows
        ],
        "total": {
            "total_shipments": total_shipments,
            "total_value": total_value,
            "avg_value": avg_value,
        },
    }


def route_summary(db: Session, route: str) -> RouteSummary:
    """Active expenses whose route contains `route`, with PKR total and average."""
    stmt = (
        select(LogisticsExpense)
        .where(
            LogisticsExpense.is_active.is_(True),
            LogisticsExpense.route.ilike(f"%{route}%"),
        )
        .order_by(LogisticsExpense.created_at.desc(), LogisticsExpense.id.desc())
    )
    expenses = list(db.execute(stmt).scalars().all())

    total_amount = sum(
        (Decimal(str(e.amount_in_pkr)) if e.amount_in_pkr is not None else Decimal("0") for e in expenses),
        Decimal("0"),
    )
    average_cost = total_amount / len(expenses) if expenses else Decimal("0")
    return RouteSummary(expenses=expenses, total_amount=total_amount, average_cost=average_cost)
