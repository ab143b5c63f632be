from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from backoffice.models.enums import LiabilityType
from .base import AuditOut, WriteSchema


class AccountCreate(WriteSchema):
    """Owner / partnership account / property account payload."""

    name: Optional[str] = Field(default=None, max_length=255)
    mobile_no: Optional[str] = Field(default=None, max_length=50)
    code: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = None


class AccountUpdate(AccountCreate):
    is_active: Optional[bool] = None


class AccountOut(AuditOut):
    id: int
    name: str
    mobile_no: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    refer_code: str


class LiabilityCreate(WriteSchema):
    date: Optional[datetime] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
    liability_type: Optional[LiabilityType] = None


class LiabilityUpdate(LiabilityCreate):
    is_active: Optional[bool] = None


class LiabilityOut(AuditOut):
    id: int
    date: datetime
    description: str
    amount: float
    liability_type: LiabilityType
    refer_code: str
