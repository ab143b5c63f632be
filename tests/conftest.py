from __future__ import annotations

import os
import sys
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import importlib

fastapi_app = importlib.import_module("backoffice.main").app
from backoffice.db.base import Base
from backoffice.db.session import get_db

# Ensure all models are registered with SQLAlchemy metadata
import backoffice.models  # noqa: F401
from backoffice.models.masters import Currency, Product, Supplier, Warehouse
from backoffice.models.transporter import Transporter


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, _connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture(scope="function")
def db_session(engine):
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(engine, db_session):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def masters(db_session) -> dict:
    """One of each referenced master record, returned as ids."""
    currency = Currency(name="US Dollar", code="USD", symbol="$", exchange_rate=Decimal("280"))
    supplier = Supplier(name="Acme Textiles", email="sales@acme.example.com")
    product_a = Product(name="Cotton Yarn", sku="CY-01")
    product_b = Product(name="Polyester Fibre", sku="PF-02")
    warehouse = Warehouse(name="Karachi Central", location="Karachi")
    transporter = Transporter(
        name="Indus Haulage",
        contact_person="Ali Raza",
        phone_number="+92-300-0000000",
        address="Port Qasim, Karachi",
        city="Karachi",
        vehicle_types=["truck"],
        routes=[],
    )
    db_session.add_all([currency, supplier, product_a, product_b, warehouse, transporter])
    db_session.commit()
    return {
        "currency": currency.id,
        "supplier": supplier.id,
        "product_a": product_a.id,
        "product_b": product_b.id,
        "warehouse": warehouse.id,
        "transporter": transporter.id,
    }
