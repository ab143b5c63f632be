"""
Seed the number range rows and the PKR base currency.

Safe to run repeatedly; existing rows are left untouched.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session

from backoffice.db.session import SessionLocal
from backoffice.models.masters import Currency
from backoffice.models.number_range import SysNumberRange
from backoffice.services.number_range_service import DEFAULT_RANGES


def _ensure_range(db: Session, category: str, prefix: str, padding: int) -> bool:
    existing = (
        db.query(SysNumberRange)
        .filter(SysNumberRange.doc_category == category)
        .first()
    )
    if existing:
        return False
    db.add(
        SysNumberRange(
            doc_category=category,
            prefix=prefix,
            current_value=0,
            padding=padding,
            include_year=False,
            is_active=True,
        )
    )
    return True


def _ensure_base_currency(db: Session) -> bool:
    existing = db.query(Currency).filter(Currency.code == "PKR").first()
    if existing:
        return False
    db.add(
        Currency(
            name="Pakistani Rupee",
            code="PKR",
            symbol="Rs",
            exchange_rate=Decimal("1"),
            is_base_currency=True,
        )
    )
    return True


def seed(db: Session) -> int:
    created = 0
    for category, cfg in DEFAULT_RANGES.items():
        if _ensure_range(db, category, cfg["prefix"], cfg["padding"]):
            created += 1
    if _ensure_base_currency(db):
        created += 1
    db.commit()
    return created


def main():
    db = SessionLocal()
    try:
        created = seed(db)
        print(f"Seed complete. Added {created} rows.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
