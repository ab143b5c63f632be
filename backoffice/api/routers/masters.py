from backoffice.api.routers.factory import create_crud_router
from backoffice.crud.base import CRUDBase
from backoffice.models.masters import Currency, Product, Supplier, Warehouse
from backoffice.schemas.masters import (
    CurrencyCreate,
    CurrencyOut,
    CurrencyUpdate,
    ProductCreate,
    ProductOut,
    ProductUpdate,
    SupplierCreate,
    SupplierOut,
    SupplierUpdate,
    WarehouseCreate,
    WarehouseOut,
    WarehouseUpdate,
)

currencies_router = create_crud_router(
    CRUDBase(Currency, search_fields=("name", "code")),
    create_schema=CurrencyCreate,
    update_schema=CurrencyUpdate,
    out_schema=CurrencyOut,
    label="Currency",
    tags=["currencies"],
    required={"name": "name", "symbol": "symbol"},
)

suppliers_router = create_crud_router(
    CRUDBase(Supplier, search_fields=("name", "contact_person", "email")),
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
    out_schema=SupplierOut,
    label="Supplier",
    tags=["suppliers"],
    required={"name": "name"},
)

products_router = create_crud_router(
    CRUDBase(Product, search_fields=("name", "sku")),
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    out_schema=ProductOut,
    label="Product",
    tags=["products"],
    required={"name": "name"},
)

warehouses_router = create_crud_router(
    CRUDBase(Warehouse, search_fields=("name", "location")),
    create_schema=WarehouseCreate,
    update_schema=WarehouseUpdate,
    out_schema=WarehouseOut,
    label="Warehouse",
    tags=["warehouses"],
    required={"name": "name"},
)
