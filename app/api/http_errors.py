from __future__ import annotations

from fastapi import HTTPException

from app.services.errors import NotFoundError


def not_found_error(exc: NotFoundError | None = None, *, detail: str | None = None) -> HTTPException:
    if detail is None:
        detail = str(exc) if exc is not None else "Not found"
    return HTTPException(status_code=404, detail=detail)


def value_error(
    exc: ValueError,
    *,
    default_status: int = 400,
    default_detail: str | None = None,
) -> HTTPException:
    return HTTPException(
        status_code=default_status,
        detail=default_detail if default_detail is not None else str(exc),
    )
