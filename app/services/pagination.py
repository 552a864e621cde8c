from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings


def clamp_page(limit: int | None, offset: int | None) -> tuple[int, int]:
    # 0 / None fall back to the default, same as an absent query param
    limit = min(limit or settings.pagination_default_limit, settings.pagination_max_limit)
    offset = offset or 0
    return limit, offset


async def paginate(db: AsyncSession, model: Any, *, limit: int | None = None, offset: int | None = None) -> dict:
    # Relations are never loaded here; detail endpoints do that per row.
    limit, offset = clamp_page(limit, offset)

    total = (await db.execute(sa.select(sa.func.count()).select_from(model))).scalar_one()
    rows = (
        await db.execute(
            sa.select(model).order_by(model.id.asc()).offset(offset).limit(limit)
        )
    ).scalars().all()

    return {
        "data": list(rows),
        "total": int(total),
        "limit": limit,
        "offset": offset,
    }
