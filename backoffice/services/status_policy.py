from __future__ import annotations

import enum

from backoffice.core.config import settings
from backoffice.models.enums import ShipmentStatus, TransportStatus


class StatusTransitionError(Exception):
    """Raised when the transition guard rejects a status write."""


# Only consulted when STATUS_TRANSITION_GUARD_ENABLED is on. Writing the
# current status again is always allowed.
SHIPMENT_TRANSITIONS: dict[ShipmentStatus, set[ShipmentStatus]] = {
    ShipmentStatus.PENDING: {ShipmentStatus.SHIPPED, ShipmentStatus.CANCELLED},
    ShipmentStatus.SHIPPED: {ShipmentStatus.IN_TRANSIT, ShipmentStatus.CANCELLED},
    ShipmentStatus.IN_TRANSIT: {
        ShipmentStatus.CUSTOMS_CLEARANCE,
        ShipmentStatus.DELIVERED,
        ShipmentStatus.CANCELLED,
    },
    ShipmentStatus.CUSTOMS_CLEARANCE: {ShipmentStatus.DELIVERED, ShipmentStatus.CANCELLED},
    ShipmentStatus.DELIVERED: set(),
    ShipmentStatus.CANCELLED: set(),
}

TRANSPORT_TRANSITIONS: dict[TransportStatus, set[TransportStatus]] = {
    TransportStatus.PENDING: {TransportStatus.IN_TRANSIT, TransportStatus.CANCELLED},
    TransportStatus.IN_TRANSIT: {TransportStatus.DELIVERED, TransportStatus.CANCELLED},
    TransportStatus.DELIVERED: set(),
    TransportStatus.CANCELLED: set(),
}


def _check(
    table: dict,
    current: enum.Enum | str | None,
    new: enum.Enum,
    enum_cls: type[enum.Enum],
) -> None:
    if not settings.STATUS_TRANSITION_GUARD_ENABLED:
        return
    if current is None:
        return
    current = enum_cls(current)
    if current == new:
        return
    if new not in table.get(current, set()):
        raise StatusTransitionError(
            f"Invalid status transition: {current.value} -> {new.value}"
        )


def check_shipment_transition(current: ShipmentStatus | str | None, new: ShipmentStatus) -> None:
    _check(SHIPMENT_TRANSITIONS, current, new, ShipmentStatus)


def check_transport_transition(current: TransportStatus | str | None, new: TransportStatus) -> None:
    _check(TRANSPORT_TRANSITIONS, current, new, TransportStatus)
