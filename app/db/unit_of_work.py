from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitOfWork:
    """Runs a block of statements as one all-or-nothing transaction.

    Every ``run`` call gets its own session (and so its own pooled
    connection). The session is closed on every exit path, which hands the
    connection back to the pool even if COMMIT or ROLLBACK raised.

    Steps that must share the transaction take the ``session`` handed to
    ``work`` as an argument; calling ``run`` again always starts a separate
    transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def run(self, work: Callable[[AsyncSession], Awaitable[T]]) -> T:
        session = self._session_factory()
        try:
            transaction = await session.begin()
            logger.debug("transaction started")
            try:
                result = await work(session)
            except BaseException as exc:
                logger.warning("rolling back transaction after %s", type(exc).__name__)
                await transaction.rollback()
                raise
            await transaction.commit()
            logger.debug("transaction committed")
            return result
        finally:
            await session.close()
