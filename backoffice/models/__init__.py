# Import all models so they register themselves on Base.metadata
# (Alembic's env.py and the test fixtures rely on this).
from backoffice.db.base import Base  # noqa: F401
from backoffice.models.number_range import SysNumberRange  # noqa: F401
from backoffice.models.masters import Currency, Product, Supplier, Warehouse  # noqa: F401
from backoffice.models.accounts import (  # noqa: F401
    Liability,
    Owner,
    PartnershipAccount,
    PropertyAccount,
)
from backoffice.models.transporter import Transporter  # noqa: F401
from backoffice.models.shipment import Shipment, ShipmentDocument, ShipmentProduct  # noqa: F401
from backoffice.models.logistics_expense import LogisticsExpense  # noqa: F401
