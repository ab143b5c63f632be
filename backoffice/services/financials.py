"""
Derived financial fields for logistics expenses and shipments.

These are plain functions so every write path can call them explicitly right
before `commit()`; nothing here is wired into ORM lifecycle events.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

EXPENSE_COST_COMPONENTS: tuple[str, ...] = (
    "freight_cost",
    "border_crossing_charges",
    "transporter_commission",
    "service_fee",
    "transit_warehouse_charges",
    "local_transport_charges",
)

_ZERO = Decimal("0")


@dataclass(frozen=True)
class ExpenseTotals:
    total_cost: Decimal
    # None means "leave unset", which is not the same as zero.
    amount_in_pkr: Decimal | None


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.1 from dragging binary noise into the sum.
    return Decimal(str(value))


def derive_expense_totals(
    components: Mapping[str, Any],
    exchange_rate: Any,
) -> ExpenseTotals:
    """
    Sum the six cost components and convert the sum at `exchange_rate`.

    Missing components count as 0. `amount_in_pkr` is only produced when the
    total is non-zero and a non-zero rate is present; a zero-cost expense
    keeps it unset even with a valid rate.
    """
    total_cost = sum(
        (_to_decimal(components.get(name)) for name in EXPENSE_COST_COMPONENTS),
        _ZERO,
    )

    amount_in_pkr: Decimal | None = None
    if total_cost and exchange_rate:
        amount_in_pkr = total_cost * _to_decimal(exchange_rate)

    return ExpenseTotals(total_cost=total_cost, amount_in_pkr=amount_in_pkr)


def _line_value(item: Any) -> Decimal:
    if isinstance(item, Mapping):
        quantity = item.get("quantity")
        unit_price = item.get("unit_price", item.get("unitPrice"))
    else:
        quantity = getattr(item, "quantity", None)
        unit_price = getattr(item, "unit_price", None)
    return _to_decimal(quantity) * _to_decimal(unit_price)


def derive_shipment_value(line_items: Iterable[Any] | None) -> Decimal | None:
    """Σ quantity × unit_price over the lines, in order; None for no lines."""
    if not line_items:
        return None
    items = list(line_items)
    if not items:
        return None

    total = _ZERO
    for item in items:
        total += _line_value(item)
    return total


def apply_expense_totals(expense: Any) -> ExpenseTotals:
    """Recompute and write `total_cost` / `amount_in_pkr` on an expense record."""
    components = {name: getattr(expense, name, None) for name in EXPENSE_COST_COMPONENTS}
    totals = derive_expense_totals(components, getattr(expense, "exchange_rate", None))
    expense.total_cost = totals.total_cost
    expense.amount_in_pkr = totals.amount_in_pkr
    return totals


def apply_shipment_value(shipment: Any) -> Decimal | None:
    """Recompute and write `total_value` on a shipment record."""
    total_value = derive_shipment_value(getattr(shipment, "products", None))
    shipment.total_value = total_value
    return total_value
