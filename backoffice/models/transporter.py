from decimal import Decimal

from sqlalchemy import JSON, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base
from backoffice.models.enums import PaymentTerms, enum_column_type
from backoffice.models.mixins import AuditMixin, SoftDeleteMixin


class Transporter(AuditMixin, SoftDeleteMixin, Base):
    """A haulier that moves shipments; referenced by shipments and logistics expenses."""

    __tablename__ = "transporter"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # ["truck", "ship", ...]
    vehicle_types: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # [{"origin": ..., "destination": ..., "estimatedDays": ..., "ratePerKg": ...}]
    routes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    commission_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False, default=0)
    payment_terms: Mapped[PaymentTerms] = mapped_column(
        enum_column_type(PaymentTerms, "payment_terms_enum"),
        nullable=False,
        default=PaymentTerms.ON_DELIVERY,
    )
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
