from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from backoffice.models.enums import ShipmentDocumentType, ShipmentStatus
from .base import AuditOut, BaseSchema, WriteSchema
from .refs import CurrencyRef, ProductRef, SupplierRef, TransporterRef, WarehouseRef


class OriginIn(WriteSchema):
    country: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)


class DestinationIn(WriteSchema):
    country: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1, max_length=100)
    warehouse_id: Optional[int] = Field(default=None, alias="warehouse")


class ShipmentProductIn(WriteSchema):
    product_id: int = Field(alias="product")
    quantity: Decimal = Field(ge=0, max_digits=15, decimal_places=3)
    unit_price: Decimal = Field(ge=0, max_digits=15, decimal_places=2)


class ShipmentDocumentIn(WriteSchema):
    document_type: ShipmentDocumentType
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    upload_date: Optional[datetime] = None


class ShipmentCreate(WriteSchema):
    # Presence of supplier/products/origin/destination/currency is checked by
    # the endpoint so a missing one yields the fixed "Required fields" message.
    supplier_id: Optional[int] = Field(default=None, alias="supplier")
    transporter_id: Optional[int] = Field(default=None, alias="transporter")
    products: Optional[List[ShipmentProductIn]] = None
    origin: Optional[OriginIn] = None
    destination: Optional[DestinationIn] = None
    status: Optional[ShipmentStatus] = None
    shipment_date: Optional[datetime] = None
    estimated_arrival: Optional[datetime] = None
    total_weight: Optional[Decimal] = Field(default=None, ge=0)
    currency_id: Optional[int] = Field(default=None, alias="currency")
    documents: Optional[List[ShipmentDocumentIn]] = None
    notes: Optional[str] = None


class ShipmentUpdate(ShipmentCreate):
    """Mutable shipment fields. shipmentId, batchNo, trackingNumber and totalValue are not among them."""

    actual_arrival: Optional[datetime] = None
    is_active: Optional[bool] = None


class ShipmentStatusUpdate(WriteSchema):
    status: ShipmentStatus
    actual_arrival: Optional[datetime] = None


class ShipmentProductOut(BaseSchema):
    product: Optional[ProductRef] = None
    quantity: float
    unit_price: float


class ShipmentDocumentOut(BaseSchema):
    id: int
    document_type: ShipmentDocumentType
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    upload_date: Optional[datetime] = None


class OriginOut(BaseSchema):
    country: str
    city: str
    address: Optional[str] = None


class DestinationOut(BaseSchema):
    country: str
    city: str
    warehouse: Optional[WarehouseRef] = None


class ShipmentOut(AuditOut):
    id: int
    shipment_number: str = Field(serialization_alias="shipmentId")
    batch_no: str
    tracking_number: Optional[str] = None
    supplier: Optional[SupplierRef] = None
    transporter: Optional[TransporterRef] = None
    products: List[ShipmentProductOut] = []
    origin: OriginOut
    destination: DestinationOut
    status: ShipmentStatus
    shipment_date: Optional[datetime] = None
    estimated_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    total_weight: Optional[float] = None
    total_value: Optional[float] = None
    currency: Optional[CurrencyRef] = None
    documents: List[ShipmentDocumentOut] = []
    notes: Optional[str] = None


class StatusBreakdown(BaseSchema):
    status: ShipmentStatus
    count: int
    total_value: float


class SupplierBreakdown(BaseSchema):
    supplier_id: int
    supplier_name: Optional[str] = None
    count: int
    total_value: float


class ShipmentTotals(BaseSchema):
    total_shipments: int = 0
    total_value: float = 0
    avg_value: float = 0


class ShipmentAnalytics(BaseSchema):
    by_status: List[StatusBreakdown] = []
    by_supplier: List[SupplierBreakdown] = []
    total: ShipmentTotals = ShipmentTotals()
