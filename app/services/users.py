from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.unit_of_work import UnitOfWork
from app.models.user import User, UserStatus
from app.services.errors import InvalidInputError
from app.services.pagination import paginate

logger = logging.getLogger(__name__)

# Bounds the size of the single UPDATE statement and how long it holds locks.
MAX_STATUS_BATCH = 500


class StatusUpdate(Protocol):
    user_id: int
    status: UserStatus


async def list_users(db: AsyncSession, *, limit: int | None = None, offset: int | None = None) -> dict:
    return await paginate(db, User, limit=limit, offset=offset)


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    q = sa.select(User).options(selectinload(User.groups)).where(User.id == user_id)
    return (await db.execute(q)).scalar_one_or_none()


def _status_by_user(updates: Iterable[StatusUpdate]) -> dict[int, UserStatus]:
    # later entries overwrite earlier ones for the same user
    mapping: dict[int, UserStatus] = {}
    for item in updates:
        mapping[item.user_id] = item.status
    return mapping


def build_bulk_status_update(status_by_user: dict[int, UserStatus]) -> sa.Update:
    """UPDATE users SET status = CASE id WHEN :id THEN :status ... END WHERE id IN (...)"""
    new_status = sa.case(
        {user_id: status.value for user_id, status in status_by_user.items()},
        value=User.id,
    )
    return (
        sa.update(User)
        .where(User.id.in_(list(status_by_user)))
        .values(status=new_status)
        .execution_options(synchronize_session=False)
    )


async def update_user_statuses(uow: UnitOfWork, updates: Sequence[StatusUpdate]) -> dict:
    """Set many users' statuses with one statement in one transaction.

    ``count`` is the number of entries submitted, not the number of rows the
    store reports as changed; ids that do not exist are not detected.
    """
    if len(updates) == 0:
        raise InvalidInputError("No users provided for update")

    if len(updates) > MAX_STATUS_BATCH:
        raise InvalidInputError(f"Maximum {MAX_STATUS_BATCH} users can be updated at once")

    stmt = build_bulk_status_update(_status_by_user(updates))

    async def _work(session: AsyncSession) -> None:
        await session.execute(stmt)

    await uow.run(_work)
    logger.info("updated status for %d users", len(updates))

    return {
        "message": f"Successfully updated {len(updates)} users",
        "count": len(updates),
    }
