from __future__ import annotations

import pytest

from backoffice.core.config import settings
from backoffice.models.enums import ShipmentStatus, TransportStatus
from backoffice.services.status_policy import (
    StatusTransitionError,
    check_shipment_transition,
    check_transport_transition,
)


def test_guard_disabled_allows_any_write(monkeypatch):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", False)
    check_shipment_transition(ShipmentStatus.DELIVERED, ShipmentStatus.PENDING)
    check_transport_transition(TransportStatus.CANCELLED, TransportStatus.IN_TRANSIT)


@pytest.mark.parametrize(
    "current, new",
    [
        ("pending", ShipmentStatus.SHIPPED),
        ("shipped", ShipmentStatus.IN_TRANSIT),
        ("in_transit", ShipmentStatus.CUSTOMS_CLEARANCE),
        ("customs_clearance", ShipmentStatus.DELIVERED),
        ("in_transit", ShipmentStatus.CANCELLED),
        ("delivered", ShipmentStatus.DELIVERED),
    ],
)
def test_guard_allows_forward_shipment_moves(monkeypatch, current, new):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", True)
    check_shipment_transition(current, new)


def test_guard_rejects_leaving_terminal_shipment_state(monkeypatch):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", True)
    with pytest.raises(StatusTransitionError, match="delivered -> in_transit"):
        check_shipment_transition(ShipmentStatus.DELIVERED, ShipmentStatus.IN_TRANSIT)


def test_guard_rejects_backwards_transport_move(monkeypatch):
    monkeypatch.setattr(settings, "STATUS_TRANSITION_GUARD_ENABLED", True)
    with pytest.raises(StatusTransitionError):
        check_transport_transition(TransportStatus.IN_TRANSIT, TransportStatus.PENDING)
