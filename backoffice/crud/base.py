from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from sqlalchemy import inspect, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.crud.list_query import ListParams, apply_filters, default_active_filter, paginate
from backoffice.services.number_range_service import NumberRangeService

ModelType = TypeVar("ModelType")


class DuplicateError(Exception):
    """Raised when a unique or foreign key constraint rejects a write."""


def commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateError(f"Constraint violated: {e.orig}") from e
    except SQLAlchemyError:
        db.rollback()
        raise


def apply_patch(obj: Any, patch: dict[str, Any]) -> None:
    """
    Copies every key present in the patch. An explicit None clears a nullable
    column and is ignored for NOT NULL ones.
    """
    columns = inspect(obj).mapper.columns
    for k, v in patch.items():
        if v is None and (k not in columns or not columns[k].nullable):
            continue
        setattr(obj, k, v)


class CRUDBase(Generic[ModelType]):
    """
    Plain create/read/update/delete for master-style records.

    When `refer_code_category` is set, a refer code is drawn from the number
    range counter on create and never changed afterwards.
    """

    def __init__(
        self,
        model: type[ModelType],
        *,
        refer_code_category: str | None = None,
        search_fields: Iterable[str] = (),
    ) -> None:
        self.model = model
        self.refer_code_category = refer_code_category
        self.search_fields = tuple(search_fields)

    def get(self, db: Session, row_id: int) -> ModelType | None:
        return db.get(self.model, row_id)

    def list(
        self,
        db: Session,
        params: ListParams,
        *,
        search: str | None = None,
    ) -> tuple[list[ModelType], int]:
        filters = {k: v for k, v in params.filters.items() if k != "search"}
        stmt = select(self.model)
        stmt = default_active_filter(stmt, self.model, filters)
        stmt = apply_filters(stmt, self.model, filters)
        if search and self.search_fields:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(*[getattr(self.model, name).ilike(pattern) for name in self.search_fields])
            )
        return paginate(db, stmt, self.model, params)

    def create(self, db: Session, values: dict[str, Any], *, actor: str) -> ModelType:
        obj = self.model(**{k: v for k, v in values.items() if v is not None})
        if self.refer_code_category:
            obj.refer_code = NumberRangeService.get_next_number(db, self.refer_code_category)
        obj.created_by = actor
        obj.last_changed_by = actor
        db.add(obj)
        commit(db)
        db.refresh(obj)
        return obj

    def update(self, db: Session, row_id: int, patch: dict[str, Any], *, actor: str) -> ModelType | None:
        obj = db.get(self.model, row_id)
        if not obj:
            return None

        apply_patch(obj, patch)
        obj.last_changed_by = actor
        commit(db)
        db.refresh(obj)
        return obj

    def delete(self, db: Session, row_id: int, *, actor: str, mode: str = "soft") -> bool:
        """
        mode:
          - "soft": sets is_active=False (row stays addressable by id)
          - "hard": deletes the row
        """
        obj = db.get(self.model, row_id)
        if not obj:
            return False

        if mode == "hard":
            db.delete(obj)
            commit(db)
            return True

        obj.is_active = False
        obj.last_changed_by = actor
        commit(db)
        return True
