from decimal import Decimal
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .base import AuditOut, WriteSchema


class CurrencyCreate(WriteSchema):
    name: Optional[str] = Field(default=None, max_length=100)
    code: Optional[str] = Field(default=None, max_length=10)
    symbol: Optional[str] = Field(default=None, max_length=10)
    exchange_rate: Optional[Decimal] = Field(default=None, ge=0)
    is_base_currency: Optional[bool] = None

    @field_validator("code")
    @classmethod
    def uppercase_code(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if v else v


class CurrencyUpdate(CurrencyCreate):
    is_active: Optional[bool] = None


class CurrencyOut(AuditOut):
    id: int
    name: str
    code: Optional[str] = None
    symbol: str
    exchange_rate: float
    is_base_currency: bool = False


class SupplierCreate(WriteSchema):
    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    contact_person: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class SupplierUpdate(SupplierCreate):
    is_active: Optional[bool] = None


class SupplierOut(AuditOut):
    id: int
    name: str
    email: Optional[str] = None
    contact_person: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class ProductCreate(WriteSchema):
    name: Optional[str] = Field(default=None, max_length=255)
    sku: Optional[str] = Field(default=None, max_length=60)
    category: Optional[str] = None
    description: Optional[str] = None


class ProductUpdate(ProductCreate):
    is_active: Optional[bool] = None


class ProductOut(AuditOut):
    id: int
    name: str
    sku: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None


class WarehouseCreate(WriteSchema):
    name: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0)


class WarehouseUpdate(WarehouseCreate):
    is_active: Optional[bool] = None


class WarehouseOut(AuditOut):
    id: int
    name: str
    location: Optional[str] = None
    capacity: Optional[int] = None
