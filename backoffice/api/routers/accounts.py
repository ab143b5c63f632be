from backoffice.api.routers.factory import create_crud_router
from backoffice.crud.base import CRUDBase
from backoffice.models.accounts import Owner, PartnershipAccount, PropertyAccount
from backoffice.schemas.accounts import AccountCreate, AccountOut, AccountUpdate

_SEARCH = ("name", "code", "refer_code")
_REQUIRED = {"name": "name"}

owner_crud = CRUDBase(Owner, refer_code_category="OWNER", search_fields=_SEARCH)
partnership_account_crud = CRUDBase(
    PartnershipAccount, refer_code_category="PARTNERSHIP_ACCOUNT", search_fields=_SEARCH
)
property_account_crud = CRUDBase(
    PropertyAccount, refer_code_category="PROPERTY_ACCOUNT", search_fields=_SEARCH
)

owners_router = create_crud_router(
    owner_crud,
    create_schema=AccountCreate,
    update_schema=AccountUpdate,
    out_schema=AccountOut,
    label="Owner",
    tags=["owners"],
    required=_REQUIRED,
)

partnership_accounts_router = create_crud_router(
    partnership_account_crud,
    create_schema=AccountCreate,
    update_schema=AccountUpdate,
    out_schema=AccountOut,
    label="Partnership account",
    tags=["partnership-accounts"],
    required=_REQUIRED,
)

property_accounts_router = create_crud_router(
    property_account_crud,
    create_schema=AccountCreate,
    update_schema=AccountUpdate,
    out_schema=AccountOut,
    label="Property account",
    tags=["property-accounts"],
    required=_REQUIRED,
)
