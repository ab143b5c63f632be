from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from backoffice.models.number_range import SysNumberRange

# Default formatting for categories whose range row is created on first use.
DEFAULT_RANGES: dict[str, dict] = {
    "LIABILITY": {"prefix": "LB-", "padding": 4},
    "OWNER": {"prefix": "OW-", "padding": 4},
    "PARTNERSHIP_ACCOUNT": {"prefix": "PA-", "padding": 4},
    "PROPERTY_ACCOUNT": {"prefix": "PP-", "padding": 4},
    "SHIPMENT": {"prefix": "", "padding": 3},
}


class NumberRangeError(Exception):
    """Raised when no usable number range exists for a category."""


class NumberRangeService:
    @staticmethod
    def _locked_range(db: Session, category: str) -> SysNumberRange | None:
        # Row-level lock (SELECT ... FOR UPDATE); held until the caller commits.
        stmt = (
            select(SysNumberRange)
            .where(SysNumberRange.doc_category == category)
            .with_for_update()
        )
        return db.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _ensure_range(db: Session, category: str) -> SysNumberRange:
        range_config = NumberRangeService._locked_range(db, category)
        if range_config is not None:
            return range_config

        defaults = DEFAULT_RANGES.get(category)
        if defaults is None:
            raise NumberRangeError(f"No number range defined for category: {category}")

        range_config = SysNumberRange(
            doc_category=category,
            prefix=defaults["prefix"],
            padding=defaults["padding"],
            current_value=0,
            include_year=False,
            is_active=True,
        )
        db.add(range_config)
        db.flush()
        return range_config

    @staticmethod
    def _increment(db: Session, category: str) -> SysNumberRange:
        """
        Atomic read-lock-increment of the category counter.
        The new value becomes durable when the caller commits.
        """
        range_config = NumberRangeService._ensure_range(db, category)
        if not range_config.is_active:
            raise NumberRangeError(f"Number range for {category} is inactive")

        range_config.current_value += 1
        db.flush()
        return range_config

    @staticmethod
    def next_value(db: Session, category: str) -> int:
        return NumberRangeService._increment(db, category).current_value

    @staticmethod
    def get_next_number(db: Session, category: str) -> str:
        """Next formatted document number, e.g. 'LB-0007'."""
        range_config = NumberRangeService._increment(db, category)

        padded_number = str(range_config.current_value).zfill(range_config.padding)
        year_str = f"{datetime.now().year}-" if range_config.include_year else ""
        return f"{range_config.prefix}{year_str}{padded_number}"
