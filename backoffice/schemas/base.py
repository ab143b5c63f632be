from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    # Wire names are camelCase (freightCost, isActive); Python names stay snake_case.
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class WriteSchema(BaseSchema):
    """
    Request body base. Unknown keys are dropped, so identity and derived
    fields (shipmentId, totalCost, ...) cannot be written by a client.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
        str_strip_whitespace=True,
    )


class AuditOut(BaseSchema):
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    last_changed_by: Optional[str] = None
