from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from backoffice.db.base import Base
from backoffice.models.enums import ShipmentDocumentType, ShipmentStatus, enum_column_type
from backoffice.models.mixins import AuditMixin, SoftDeleteMixin

if TYPE_CHECKING:
    from backoffice.models.masters import Currency, Product, Supplier, Warehouse
    from backoffice.models.transporter import Transporter


class ShipmentProduct(Base):
    """
    One line of the shipment's product list.
    `line_no` preserves the order the lines were submitted in.
    """

    __tablename__ = "shipment_product"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    shipment_id: Mapped[int] = mapped_column(
        ForeignKey("shipment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    line_no: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[int] = mapped_column(
        ForeignKey("product.id", ondelete="RESTRICT"), nullable=False
    )
    quantity: Mapped[Decimal] = mapped_column(Numeric(15, 3), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    shipment: Mapped["Shipment"] = relationship("Shipment", back_populates="products")
    product: Mapped["Product"] = relationship("Product")

    def __repr__(self) -> str:
        return f"<ShipmentProduct(shipment={self.shipment_id}, line={self.line_no})>"


class ShipmentDocument(Base):
    __tablename__ = "shipment_document"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    shipment_id: Mapped[int] = mapped_column(
        ForeignKey("shipment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    document_type: Mapped[ShipmentDocumentType] = mapped_column(
        enum_column_type(ShipmentDocumentType, "shipment_document_type_enum"),
        nullable=False,
    )
    file_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    upload_date: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    shipment: Mapped["Shipment"] = relationship("Shipment", back_populates="documents")


class Shipment(AuditMixin, SoftDeleteMixin, Base):
    """
    Physical movement of goods from a supplier to a destination.

    `shipment_number`, `batch_no` and `tracking_number` are assigned once at
    creation. `total_value` is derived from the product lines before every
    write (see backoffice.services.financials).
    """

    __tablename__ = "shipment"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Wire name: shipmentId
    shipment_number: Mapped[str] = mapped_column(String(30), unique=True, index=True, nullable=False)
    batch_no: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    tracking_number: Mapped[str | None] = mapped_column(String(30), nullable=True, index=True)

    supplier_id: Mapped[int] = mapped_column(ForeignKey("supplier.id", ondelete="RESTRICT"), nullable=False)
    transporter_id: Mapped[int | None] = mapped_column(
        ForeignKey("transporter.id", ondelete="RESTRICT"), nullable=True
    )
    currency_id: Mapped[int] = mapped_column(ForeignKey("currency.id", ondelete="RESTRICT"), nullable=False)

    origin_country: Mapped[str] = mapped_column(String(100), nullable=False)
    origin_city: Mapped[str] = mapped_column(String(100), nullable=False)
    origin_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    destination_country: Mapped[str] = mapped_column(String(100), nullable=False)
    destination_city: Mapped[str] = mapped_column(String(100), nullable=False)
    destination_warehouse_id: Mapped[int | None] = mapped_column(
        ForeignKey("warehouse.id", ondelete="RESTRICT"), nullable=True
    )

    status: Mapped[ShipmentStatus] = mapped_column(
        enum_column_type(ShipmentStatus, "shipment_status_enum"),
        nullable=False,
        default=ShipmentStatus.PENDING,
        index=True,
    )
    shipment_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    estimated_arrival: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    actual_arrival: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    total_weight: Mapped[Decimal | None] = mapped_column(Numeric(15, 3), nullable=True)
    total_value: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    supplier: Mapped["Supplier"] = relationship("Supplier")
    transporter: Mapped["Transporter"] = relationship("Transporter")
    currency: Mapped["Currency"] = relationship("Currency")
    destination_warehouse: Mapped["Warehouse"] = relationship("Warehouse")

    products: Mapped[list["ShipmentProduct"]] = relationship(
        "ShipmentProduct",
        back_populates="shipment",
        cascade="all, delete-orphan",
        order_by="ShipmentProduct.line_no",
    )
    documents: Mapped[list["ShipmentDocument"]] = relationship(
        "ShipmentDocument",
        back_populates="shipment",
        cascade="all, delete-orphan",
        order_by="ShipmentDocument.id",
    )

    @property
    def origin(self) -> dict:
        return {
            "country": self.origin_country,
            "city": self.origin_city,
            "address": self.origin_address,
        }

    @property
    def destination(self) -> dict:
        return {
            "country": self.destination_country,
            "city": self.destination_city,
            "warehouse": self.destination_warehouse,
        }
