from __future__ import annotations

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import AsyncSessionLocal, get_db_session
from app.db.unit_of_work import UnitOfWork


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_db_session():
        yield session


def get_unit_of_work() -> UnitOfWork:
    # Each workflow opens its own session through the unit of work; it never
    # borrows the request's read session.
    return UnitOfWork(AsyncSessionLocal)
