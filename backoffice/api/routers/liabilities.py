from backoffice.api.routers.factory import create_crud_router
from backoffice.crud.base import CRUDBase
from backoffice.models.accounts import Liability
from backoffice.schemas.accounts import LiabilityCreate, LiabilityOut, LiabilityUpdate

liability_crud = CRUDBase(
    Liability,
    refer_code_category="LIABILITY",
    search_fields=("description", "refer_code"),
)

router = create_crud_router(
    liability_crud,
    create_schema=LiabilityCreate,
    update_schema=LiabilityUpdate,
    out_schema=LiabilityOut,
    label="Liability",
    tags=["liabilities"],
    required={"description": "description", "amount": "amount"},
)
