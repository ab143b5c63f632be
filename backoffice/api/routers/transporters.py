from typing import Any, Dict

from backoffice.api.routers.factory import create_crud_router
from backoffice.crud.base import CRUDBase
from backoffice.models.transporter import Transporter
from backoffice.schemas.transporter import (
    TransporterCreate,
    TransporterOut,
    TransporterRoute,
    TransporterUpdate,
)

transporter_crud = CRUDBase(Transporter, search_fields=("name", "contact_person", "city"))


def _json_columns(values: Dict[str, Any]) -> Dict[str, Any]:
    # JSON columns hold plain values: enum values and camelCase route dicts.
    if values.get("vehicle_types") is not None:
        values["vehicle_types"] = [getattr(v, "value", v) for v in values["vehicle_types"]]
    if values.get("routes") is not None:
        values["routes"] = [
            TransporterRoute.model_validate(r).model_dump(mode="json", by_alias=True, exclude_none=True)
            for r in values["routes"]
        ]
    return values


router = create_crud_router(
    transporter_crud,
    create_schema=TransporterCreate,
    update_schema=TransporterUpdate,
    out_schema=TransporterOut,
    label="Transporter",
    tags=["transporters"],
    required={
        "name": "name",
        "contact_person": "contactPerson",
        "phone_number": "phoneNumber",
        "address": "address",
    },
    values_hook=_json_columns,
)
