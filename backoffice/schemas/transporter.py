from decimal import Decimal
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from backoffice.models.enums import PaymentTerms, VehicleType
from .base import AuditOut, BaseSchema, WriteSchema


class TransporterRoute(WriteSchema):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    estimated_days: Optional[int] = Field(default=None, ge=1)
    rate_per_kg: Optional[float] = Field(default=None, ge=0)


class TransporterCreate(WriteSchema):
    name: Optional[str] = Field(default=None, max_length=255)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    city: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    vehicle_types: Optional[List[VehicleType]] = None
    routes: Optional[List[TransporterRoute]] = None
    commission_rate: Optional[Decimal] = Field(default=None, ge=0, le=100)
    payment_terms: Optional[PaymentTerms] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or None
        return v


class TransporterUpdate(TransporterCreate):
    is_active: Optional[bool] = None


class TransporterRouteOut(BaseSchema):
    origin: str
    destination: str
    estimated_days: Optional[int] = None
    rate_per_kg: Optional[float] = None


class TransporterOut(AuditOut):
    id: int
    name: str
    contact_person: str
    phone_number: str
    email: Optional[str] = None
    address: str
    city: Optional[str] = None
    country: Optional[str] = None
    vehicle_types: List[VehicleType] = []
    routes: List[TransporterRouteOut] = []
    commission_rate: float = 0
    payment_terms: PaymentTerms
    rating: Optional[int] = None
