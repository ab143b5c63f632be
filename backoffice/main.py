from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice.api.deps.request_identity import resolve_request_identity
from backoffice.api.errors import http_exception_handler, validation_exception_handler
from backoffice.api.routers.accounts import (
    owners_router,
    partnership_accounts_router,
    property_accounts_router,
)
from backoffice.api.routers.liabilities import router as liabilities_router
from backoffice.api.routers.logistics_expenses import router as logistics_expenses_router
from backoffice.api.routers.masters import (
    currencies_router,
    products_router,
    suppliers_router,
    warehouses_router,
)
from backoffice.api.routers.shipments import router as shipments_router
from backoffice.api.routers.transporters import router as transporters_router
from backoffice.core.config import settings

app = FastAPI(title="Backoffice API")

_origins = [o for o in settings.CORS_ALLOW_ORIGINS.split(",") if o] or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

_protected = [Depends(resolve_request_identity)]

app.include_router(liabilities_router, prefix="/api/liabilities", dependencies=_protected)
app.include_router(owners_router, prefix="/api/owners", dependencies=_protected)
app.include_router(partnership_accounts_router, prefix="/api/partnership-accounts", dependencies=_protected)
app.include_router(property_accounts_router, prefix="/api/property-accounts", dependencies=_protected)
app.include_router(transporters_router, prefix="/api/transporters", dependencies=_protected)
app.include_router(shipments_router, prefix="/api/shipments", dependencies=_protected)
app.include_router(logistics_expenses_router, prefix="/api/logistics-expenses", dependencies=_protected)
app.include_router(currencies_router, prefix="/api/currencies", dependencies=_protected)
app.include_router(suppliers_router, prefix="/api/suppliers", dependencies=_protected)
app.include_router(products_router, prefix="/api/products", dependencies=_protected)
app.include_router(warehouses_router, prefix="/api/warehouses", dependencies=_protected)


@app.get("/health")
def health():
    return {"status": "up"}
