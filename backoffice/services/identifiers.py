"""
Human-readable shipment identifiers.

    shipmentId      SHP-2025-003
    batchNo         BATCH-032025-003
    trackingNumber  TRK482913K7Q2ZD

In `count` numbering mode the sequence part is `count(shipment rows) + 1`,
inactive rows included. That is a read-then-write sequence: two concurrent
creations can observe the same count and produce the same shipmentId, and
the unique constraint then rejects the second insert. `sequence` mode draws
the number from the row-locked SHIPMENT counter instead.
"""

from __future__ import annotations

import secrets
import string
import time
from collections.abc import Callable
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from backoffice.core.config import settings
from backoffice.models.shipment import Shipment
from backoffice.services.number_range_service import NumberRangeService

TRACKING_ALPHABET = string.ascii_uppercase + string.digits
TRACKING_RANDOM_LENGTH = 6
SHIPMENT_SEQUENCE_CATEGORY = "SHIPMENT"


def format_shipment_id(year: int, sequence: int) -> str:
    return f"SHP-{year}-{sequence:03d}"


def format_batch_no(month: int, year: int, sequence: int) -> str:
    return f"BATCH-{month:02d}{year}-{sequence:03d}"


def format_tracking_number(epoch_ms: int, suffix: str) -> str:
    return f"TRK{str(epoch_ms)[-6:]}{suffix}"


def _random_suffix(length: int = TRACKING_RANDOM_LENGTH) -> str:
    return "".join(secrets.choice(TRACKING_ALPHABET) for _ in range(length))


class ShipmentIdentifierService:
    """
    Generates the three shipment identifiers for one creation.

    `clock`, `epoch_ms` and `random_suffix` are injectable so formatting can
    be pinned in tests.
    """

    def __init__(
        self,
        db: Session,
        *,
        clock: Callable[[], datetime] | None = None,
        epoch_ms: Callable[[], int] | None = None,
        random_suffix: Callable[[], str] | None = None,
        numbering_mode: str | None = None,
    ) -> None:
        self.db = db
        self._clock = clock or datetime.now
        self._epoch_ms = epoch_ms or (lambda: time.time_ns() // 1_000_000)
        self._random_suffix = random_suffix or _random_suffix
        self._mode = (numbering_mode or settings.SHIPMENT_NUMBERING_MODE or "count").lower()

    def shipment_count(self) -> int:
        stmt = select(func.count()).select_from(Shipment)
        return int(self.db.execute(stmt).scalar_one())

    def _next_sequence(self) -> int:
        if self._mode == "sequence":
            return NumberRangeService.next_value(self.db, SHIPMENT_SEQUENCE_CATEGORY)
        return self.shipment_count() + 1

    def next_shipment_id(self) -> str:
        return format_shipment_id(self._clock().year, self._next_sequence())

    def next_batch_no(self) -> str:
        now = self._clock()
        return format_batch_no(now.month, now.year, self._next_sequence())

    def next_tracking_number(self) -> str:
        return format_tracking_number(self._epoch_ms(), self._random_suffix())

    def generate(self) -> tuple[str, str, str]:
        """(shipment_id, batch_no, tracking_number) for a new shipment."""
        if self._mode == "sequence":
            # One counter draw shared by both sequence-bearing identifiers.
            now = self._clock()
            sequence = self._next_sequence()
            return (
                format_shipment_id(now.year, sequence),
                format_batch_no(now.month, now.year, sequence),
                self.next_tracking_number(),
            )
        return (
            self.next_shipment_id(),
            self.next_batch_no(),
            self.next_tracking_number(),
        )
