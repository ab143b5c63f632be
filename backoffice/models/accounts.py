from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from backoffice.db.base import Base
from backoffice.models.enums import LiabilityType, enum_column_type
from backoffice.models.mixins import AuditMixin, SoftDeleteMixin


class AccountColumnsMixin:
    """Shared shape of owner / partnership / property account records."""

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    mobile_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    code: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    refer_code: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)


class Owner(AccountColumnsMixin, AuditMixin, SoftDeleteMixin, Base):
    __tablename__ = "owner"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


class PartnershipAccount(AccountColumnsMixin, AuditMixin, SoftDeleteMixin, Base):
    __tablename__ = "partnership_account"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


class PropertyAccount(AccountColumnsMixin, AuditMixin, SoftDeleteMixin, Base):
    __tablename__ = "property_account"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


class Liability(AuditMixin, SoftDeleteMixin, Base):
    __tablename__ = "liability"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), index=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    liability_type: Mapped[LiabilityType] = mapped_column(
        enum_column_type(LiabilityType, "liability_type_enum"),
        nullable=False,
        default=LiabilityType.OTHER,
        index=True,
    )
    refer_code: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
