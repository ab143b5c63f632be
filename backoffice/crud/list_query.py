"""
Generic list helper: equality filters, sort, field projection, pagination.
Callers add their own entity-specific predicates before handing the
statement over.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.orm import Session

from backoffice.core.config import settings

RESERVED_PARAMS = {"page", "limit", "sort", "fields"}


def to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass
class ListParams:
    page: int = 1
    limit: int = 10
    sort: str | None = None
    fields: list[str] | None = None
    filters: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_query(cls, query_params, *, default_limit: int | None = None) -> "ListParams":
        def _int(key: str, default: int) -> int:
            try:
                return int(query_params.get(key, default))
            except (TypeError, ValueError):
                return default

        limit = _int("limit", default_limit or settings.DEFAULT_PAGE_LIMIT)
        limit = max(1, min(limit, settings.MAX_PAGE_LIMIT))
        page = max(1, _int("page", 1))
        raw_fields = query_params.get("fields")
        fields = [f.strip() for f in raw_fields.split(",") if f.strip()] if raw_fields else None
        filters = {k: v for k, v in query_params.items() if k not in RESERVED_PARAMS}
        return cls(page=page, limit=limit, sort=query_params.get("sort"), fields=fields, filters=filters)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _coerce(column, raw: str):
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw
    if python_type is bool:
        return raw.strip().lower() in {"1", "true", "yes", "y", "on"}
    if python_type is int:
        return int(raw)
    return raw


def apply_filters(stmt: Select, model, filters: dict[str, str]) -> Select:
    """Equality filters on real columns; unknown keys are ignored."""
    columns = inspect(model).columns
    for key, raw in filters.items():
        name = to_snake(key)
        if name not in columns:
            continue
        column = getattr(model, name)
        try:
            value = _coerce(columns[name], raw)
        except ValueError:
            continue
        stmt = stmt.where(column == value)
    return stmt


def apply_sort(stmt: Select, model, sort: str | None) -> Select:
    columns = inspect(model).columns
    order_by = []
    for token in (sort or "-createdAt").split(","):
        token = token.strip()
        if not token:
            continue
        descending = token.startswith("-")
        name = to_snake(token.lstrip("-+"))
        if name not in columns:
            continue
        column = getattr(model, name)
        order_by.append(column.desc() if descending else column.asc())
    # Stable paging across equal sort keys.
    order_by.append(model.id.desc())
    return stmt.order_by(*order_by)


def paginate(db: Session, stmt: Select, model, params: ListParams) -> tuple[list, int]:
    """Run `stmt` with sort + paging; returns (rows, total matching rows)."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = int(db.execute(count_stmt).scalar_one())

    paged = apply_sort(stmt, model, params.sort).offset(params.offset).limit(params.limit)
    rows = list(db.execute(paged).scalars().unique().all())
    return rows, total


def default_active_filter(stmt: Select, model, filters: dict[str, str]) -> Select:
    # Lists show active records unless the caller filters on isActive explicitly.
    if "isActive" in filters or "is_active" in filters:
        return stmt
    return stmt.where(model.is_active.is_(True))
