from __future__ import annotations

import functools
import logging
from decimal import Decimal
from typing import Any, Callable, Sequence

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice.services.status_policy import StatusTransitionError

logger = logging.getLogger(__name__)


def required_fields_message(wire_names: Sequence[str]) -> str:
    return f"Required fields: {', '.join(wire_names)}"


def _is_blank(value: Any) -> bool:
    # Empty lists and objects count as present; zero and "" do not.
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float, Decimal)) and value == 0


def require_fields(payload: Any, fields: dict[str, str]) -> None:
    """
    400 when any of the given attributes is blank (None, "", 0, False).
    `fields` maps python attribute -> wire name used in the message.
    """
    missing = [attr for attr in fields if _is_blank(getattr(payload, attr, None))]

    if missing:
        raise HTTPException(status_code=400, detail=required_fields_message(list(fields.values())))


def not_found(label: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{label} not found")


def handle_errors(func: Callable) -> Callable:
    """
    Handler boundary: 4xx HTTPExceptions pass through, a rejected status
    transition becomes 400, anything else becomes 500 carrying the raw
    error message.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except StatusTransitionError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except Exception as exc:
            logger.exception("handler_error endpoint=%s error=%s", func.__name__, exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return wrapper


def _status_label(status_code: int) -> str:
    return "error" if status_code >= 500 else "fail"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": _status_label(exc.status_code), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def _format_validation_errors(errors: Sequence[dict]) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        where = ".".join(loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"status": "fail", "message": _format_validation_errors(exc.errors())},
    )
