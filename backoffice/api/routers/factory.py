from typing import Any, Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backoffice.api.deps.request_identity import get_request_email
from backoffice.api.errors import handle_errors, not_found, require_fields
from backoffice.api.responses import dump, dump_many, envelope, paged_envelope, project
from backoffice.crud.base import CRUDBase
from backoffice.crud.list_query import ListParams
from backoffice.db.session import get_db

ValuesHook = Callable[[Dict[str, Any]], Dict[str, Any]]


def create_crud_router(
    crud: CRUDBase,
    *,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    label: str,
    tags: List[str],
    required: Optional[Dict[str, str]] = None,
    values_hook: Optional[ValuesHook] = None,
) -> APIRouter:
    """
    Standard list/get/create/update/delete routes for one master entity.

    `required` maps attribute -> wire name for the create-time presence check.
    `values_hook` reshapes the dumped payload before it reaches the model
    (JSON columns, enum lists).
    """
    router = APIRouter(tags=tags)
    required = required or {}

    def _values(payload: BaseModel, *, exclude_unset: bool) -> Dict[str, Any]:
        values = payload.model_dump(exclude_unset=exclude_unset)
        return values_hook(values) if values_hook else values

    @router.get("")
    @router.get("/")
    @handle_errors
    def list_items(
        request: Request,
        search: Optional[str] = Query(None),
        db: Session = Depends(get_db),
    ):
        params = ListParams.from_query(request.query_params)
        rows, total = crud.list(db, params, search=search)
        items = project(dump_many(out_schema, rows), params.fields)
        return paged_envelope(items, total=total, page=params.page, limit=params.limit)

    @router.get("/{row_id}")
    @handle_errors
    def get_item(row_id: int, db: Session = Depends(get_db)):
        obj = crud.get(db, row_id)
        if not obj:
            raise not_found(label)
        return envelope(data=dump(out_schema, obj))

    @router.post("", status_code=status.HTTP_201_CREATED)
    @router.post("/", status_code=status.HTTP_201_CREATED)
    @handle_errors
    def create_item(
        payload: create_schema,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        actor: str = Depends(get_request_email),
    ):
        require_fields(payload, required)
        obj = crud.create(db, _values(payload, exclude_unset=False), actor=actor)
        return envelope(message=f"{label} created successfully", data=dump(out_schema, obj))

    @router.put("/{row_id}")
    @handle_errors
    def update_item(
        row_id: int,
        payload: update_schema,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        actor: str = Depends(get_request_email),
    ):
        obj = crud.update(db, row_id, _values(payload, exclude_unset=True), actor=actor)
        if not obj:
            raise not_found(label)
        return envelope(message=f"{label} updated successfully", data=dump(out_schema, obj))

    @router.delete("/{row_id}")
    @handle_errors
    def delete_item(
        row_id: int,
        mode: str = Query("soft", pattern="^(soft|hard)$"),
        db: Session = Depends(get_db),
        actor: str = Depends(get_request_email),
    ):
        ok = crud.delete(db, row_id, actor=actor, mode=mode)
        if not ok:
            raise not_found(label)
        return envelope(message=f"{label} deleted successfully")

    return router
