from __future__ import annotations

from starlette.datastructures import QueryParams

from backoffice.core.config import settings
from backoffice.crud.list_query import ListParams, paginate, to_snake
from backoffice.models.masters import Warehouse
from sqlalchemy import select


def test_to_snake():
    assert to_snake("isActive") == "is_active"
    assert to_snake("createdAt") == "created_at"
    assert to_snake("name") == "name"


def test_list_params_defaults_and_clamping(monkeypatch):
    monkeypatch.setattr(settings, "MAX_PAGE_LIMIT", 50)
    params = ListParams.from_query(QueryParams("page=0&limit=900&fields=name, code&status=open"))
    assert params.page == 1
    assert params.limit == 50
    assert params.fields == ["name", "code"]
    assert params.filters == {"status": "open"}

    params = ListParams.from_query(QueryParams("limit=abc"))
    assert params.limit == settings.DEFAULT_PAGE_LIMIT


def _seed_warehouses(db_session, count: int):
    db_session.add_all([Warehouse(name=f"W{idx:02d}", capacity=idx) for idx in range(count)])
    db_session.commit()


def test_paginate_returns_total_and_page_slice(db_session):
    _seed_warehouses(db_session, 12)
    params = ListParams(page=2, limit=5, sort="name")

    rows, total = paginate(db_session, select(Warehouse), Warehouse, params)
    assert total == 12
    assert [w.name for w in rows] == ["W05", "W06", "W07", "W08", "W09"]


def test_paginate_sort_descending_and_unknown_fields_ignored(db_session):
    _seed_warehouses(db_session, 3)
    params = ListParams(page=1, limit=10, sort="-capacity,bogus")

    rows, _ = paginate(db_session, select(Warehouse), Warehouse, params)
    assert [w.capacity for w in rows] == [2, 1, 0]
