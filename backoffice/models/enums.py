import enum

from sqlalchemy import Enum as SAEnum


class ShipmentStatus(str, enum.Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    IN_TRANSIT = "in_transit"
    CUSTOMS_CLEARANCE = "customs_clearance"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class TransportStatus(str, enum.Enum):
    PENDING = "pending"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    BANK = "bank"
    CREDIT = "credit"
    MIXED = "mixed"


class LiabilityType(str, enum.Enum):
    LOAN = "loan"
    PAYABLE = "payable"
    TAX = "tax"
    OTHER = "other"


class PaymentTerms(str, enum.Enum):
    ADVANCE = "advance"
    ON_DELIVERY = "on_delivery"
    CREDIT_30 = "credit_30"
    CREDIT_60 = "credit_60"


class VehicleType(str, enum.Enum):
    TRUCK = "truck"
    CONTAINER = "container"
    VAN = "van"
    SHIP = "ship"
    PLANE = "plane"


class ShipmentDocumentType(str, enum.Enum):
    INVOICE = "invoice"
    PACKING_LIST = "packing_list"
    BILL_OF_LADING = "bill_of_lading"
    CUSTOMS_DECLARATION = "customs_declaration"
    INSURANCE = "insurance"


def enum_column_type(enum_cls: type[enum.Enum], name: str) -> SAEnum:
    # Stored as VARCHAR of the lower-case value rather than a native DB enum.
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
