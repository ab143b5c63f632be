"""JSON envelope builders: {status, message?, data?, results?, total?, page?, pages?}."""

from __future__ import annotations

import math
from typing import Any, Iterable

from pydantic import BaseModel


def dump(schema: type[BaseModel], obj: Any) -> dict:
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)


def dump_many(schema: type[BaseModel], objs: Iterable[Any]) -> list[dict]:
    return [dump(schema, obj) for obj in objs]


def project(items: list[dict], fields: list[str] | None) -> list[dict]:
    if not fields:
        return items
    keep = set(fields) | {"id"}
    return [{k: v for k, v in item.items() if k in keep} for item in items]


def envelope(
    *,
    data: Any = None,
    message: str | None = None,
    status: str = "success",
    **extra: Any,
) -> dict:
    body: dict[str, Any] = {"status": status}
    if message is not None:
        body["message"] = message
    body.update({k: v for k, v in extra.items() if v is not None})
    if data is not None:
        body["data"] = data
    return body


def paged_envelope(items: list[dict], *, total: int, page: int, limit: int, **extra: Any) -> dict:
    return envelope(
        data=items,
        results=len(items),
        total=total,
        page=page,
        pages=math.ceil(total / limit) if limit else 0,
        **extra,
    )
