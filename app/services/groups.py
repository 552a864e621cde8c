from __future__ import annotations

import logging

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.unit_of_work import UnitOfWork
from app.models.group import Group, GroupStatus
from app.models.user_group import UserGroup
from app.services.pagination import paginate

logger = logging.getLogger(__name__)


async def list_groups(db: AsyncSession, *, limit: int | None = None, offset: int | None = None) -> dict:
    return await paginate(db, Group, limit=limit, offset=offset)


async def get_group_by_id(db: AsyncSession, group_id: int) -> Group | None:
    q = sa.select(Group).options(selectinload(Group.users)).where(Group.id == group_id)
    return (await db.execute(q)).scalar_one_or_none()


async def count_group_members(db: AsyncSession, group_id: int) -> int:
    q = sa.select(sa.func.count()).select_from(UserGroup).where(UserGroup.group_id == group_id)
    return int((await db.execute(q)).scalar_one())


async def get_group_member_count(db: AsyncSession, group_id: int) -> int:
    return await count_group_members(db, group_id)


async def set_group_status(db: AsyncSession, group_id: int, status: GroupStatus) -> None:
    """Write ``status`` to one group row on ``db``'s open transaction.

    There is no read-before-write: the caller decides the target status, and a
    missing ``group_id`` updates zero rows without raising.
    """
    await db.execute(
        sa.update(Group)
        .where(Group.id == group_id)
        .values(status=status)
        .execution_options(synchronize_session=False)
    )


async def set_group_status_empty(db: AsyncSession, group_id: int) -> None:
    await set_group_status(db, group_id, GroupStatus.EMPTY)


async def set_group_status_active(db: AsyncSession, group_id: int) -> None:
    await set_group_status(db, group_id, GroupStatus.ACTIVE)


async def set_group_status_inactive(db: AsyncSession, group_id: int) -> None:
    await set_group_status(db, group_id, GroupStatus.INACTIVE)


_STATUS_SETTERS = {
    GroupStatus.EMPTY: set_group_status_empty,
    GroupStatus.ACTIVE: set_group_status_active,
    GroupStatus.INACTIVE: set_group_status_inactive,
}


async def update_group_status(uow: UnitOfWork, group_id: int, status: GroupStatus) -> None:
    """Administrative status change, committed as its own transaction."""

    async def _work(session: AsyncSession) -> None:
        await _STATUS_SETTERS[status](session, group_id)

    await uow.run(_work)
    logger.info("group %s status set to %s", group_id, status.value)
