from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from backoffice.models.enums import PaymentMethod, TransportStatus
from .base import AuditOut, BaseSchema, WriteSchema
from .refs import CurrencyRef, ShipmentRef, TransporterRef, WarehouseRef

_money = dict(ge=0, max_digits=15, decimal_places=2)


class SupportingDocument(WriteSchema):
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    upload_date: Optional[datetime] = None


class LogisticsExpenseCreate(WriteSchema):
    transporter_id: Optional[int] = Field(default=None, alias="transporter")
    route: Optional[str] = Field(default=None, max_length=255)
    vehicle_container_no: Optional[str] = Field(default=None, max_length=50)

    freight_cost: Optional[Decimal] = Field(default=None, **_money)
    border_crossing_charges: Optional[Decimal] = Field(default=None, **_money)
    transporter_commission: Optional[Decimal] = Field(default=None, **_money)
    service_fee: Optional[Decimal] = Field(default=None, **_money)
    transit_warehouse_charges: Optional[Decimal] = Field(default=None, **_money)
    local_transport_charges: Optional[Decimal] = Field(default=None, **_money)

    currency_id: Optional[int] = Field(default=None, alias="currency")
    # Falls back to the currency's rate when omitted on create.
    exchange_rate: Optional[Decimal] = Field(default=None, ge=0)

    linked_shipment_id: Optional[int] = Field(default=None, alias="linkedShipment")
    linked_warehouse_id: Optional[int] = Field(default=None, alias="linkedWarehouse")
    payment_method: Optional[PaymentMethod] = None
    supporting_document: Optional[SupportingDocument] = None
    departure_date: Optional[datetime] = None
    arrival_date: Optional[datetime] = None
    notes: Optional[str] = None


class LogisticsExpenseUpdate(LogisticsExpenseCreate):
    """Mutable expense fields. totalCost and amountInPKR are derived, never accepted."""

    transport_status: Optional[TransportStatus] = None
    is_active: Optional[bool] = None


class TransportStatusUpdate(WriteSchema):
    transport_status: TransportStatus
    arrival_date: Optional[datetime] = None


class SupportingDocumentOut(BaseSchema):
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    upload_date: Optional[datetime] = None


class LogisticsExpenseOut(AuditOut):
    id: int
    transporter: Optional[TransporterRef] = None
    route: str
    vehicle_container_no: Optional[str] = None
    freight_cost: float
    border_crossing_charges: float = 0
    transporter_commission: float = 0
    service_fee: float = 0
    transit_warehouse_charges: float = 0
    local_transport_charges: float = 0
    total_cost: Optional[float] = None
    currency: Optional[CurrencyRef] = None
    exchange_rate: float
    amount_in_pkr: Optional[float] = Field(default=None, serialization_alias="amountInPKR")
    linked_shipment: Optional[ShipmentRef] = None
    linked_warehouse: Optional[WarehouseRef] = None
    payment_method: PaymentMethod
    supporting_document: Optional[SupportingDocumentOut] = None
    transport_status: TransportStatus
    departure_date: Optional[datetime] = None
    arrival_date: Optional[datetime] = None
    notes: Optional[str] = None
