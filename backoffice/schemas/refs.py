"""Compact views of referenced records, embedded in responses ("populate")."""

from typing import Optional

from pydantic import Field

from backoffice.models.enums import ShipmentStatus
from .base import BaseSchema


class CurrencyRef(BaseSchema):
    id: int
    name: str
    code: Optional[str] = None
    symbol: Optional[str] = None
    exchange_rate: Optional[float] = None


class SupplierRef(BaseSchema):
    id: int
    name: str
    email: Optional[str] = None
    contact_person: Optional[str] = None
    phone_number: Optional[str] = None


class TransporterRef(BaseSchema):
    id: int
    name: str
    contact_person: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class ProductRef(BaseSchema):
    id: int
    name: str
    sku: Optional[str] = None
    category: Optional[str] = None


class WarehouseRef(BaseSchema):
    id: int
    name: str
    location: Optional[str] = None


class ShipmentRef(BaseSchema):
    id: int
    shipment_number: str = Field(serialization_alias="shipmentId")
    batch_no: str
    status: ShipmentStatus
