from sqlalchemy import BigInteger, Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base


class SysNumberRange(Base):
    __tablename__ = "sys_number_ranges"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Document category: 'LIABILITY', 'OWNER', 'SHIPMENT', ...
    doc_category: Mapped[str] = mapped_column(String(40), nullable=False)

    prefix: Mapped[str] = mapped_column(String(10), nullable=False)  # e.g., 'LB-'
    current_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    padding: Mapped[int] = mapped_column(Integer, nullable=False, default=4)  # 4 -> 0001

    include_year: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # One sequence per category
    __table_args__ = (
        UniqueConstraint("doc_category", name="uix_number_range_category"),
    )
