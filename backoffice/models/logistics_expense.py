from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base
from backoffice.models.enums import PaymentMethod, TransportStatus, enum_column_type
from backoffice.models.mixins import AuditMixin, SoftDeleteMixin

if TYPE_CHECKING:
    from backoffice.models.masters import Currency, Warehouse
    from backoffice.models.shipment import Shipment
    from backoffice.models.transporter import Transporter


class LogisticsExpense(AuditMixin, SoftDeleteMixin, Base):
    """
    Cost of moving goods along a route.
    `total_cost` and `amount_in_pkr` are derived before every write.
    """

    __tablename__ = "logistics_expense"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    transporter_id: Mapped[int] = mapped_column(
        ForeignKey("transporter.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    route: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    vehicle_container_no: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Cost components
    freight_cost: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    border_crossing_charges: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)
    transporter_commission: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)
    service_fee: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)
    transit_warehouse_charges: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)
    local_transport_charges: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, default=0)

    # Derived
    total_cost: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    amount_in_pkr: Mapped[Decimal | None] = mapped_column(Numeric(20, 4), nullable=True)

    currency_id: Mapped[int] = mapped_column(ForeignKey("currency.id", ondelete="RESTRICT"), nullable=False)
    exchange_rate: Mapped[Decimal] = mapped_column(Numeric(18, 6), nullable=False)

    linked_shipment_id: Mapped[int | None] = mapped_column(
        ForeignKey("shipment.id", ondelete="SET NULL"), nullable=True
    )
    linked_warehouse_id: Mapped[int | None] = mapped_column(
        ForeignKey("warehouse.id", ondelete="SET NULL"), nullable=True
    )

    payment_method: Mapped[PaymentMethod] = mapped_column(
        enum_column_type(PaymentMethod, "payment_method_enum"),
        nullable=False,
    )
    # {"fileName": ..., "fileUrl": ..., "fileType": ..., "uploadDate": ...}
    supporting_document: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    transport_status: Mapped[TransportStatus] = mapped_column(
        enum_column_type(TransportStatus, "transport_status_enum"),
        nullable=False,
        default=TransportStatus.PENDING,
        index=True,
    )
    departure_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    arrival_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    transporter: Mapped["Transporter"] = relationship("Transporter")
    currency: Mapped["Currency"] = relationship("Currency")
    linked_shipment: Mapped["Shipment"] = relationship("Shipment")
    linked_warehouse: Mapped["Warehouse"] = relationship("Warehouse")
