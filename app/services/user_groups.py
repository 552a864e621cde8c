from __future__ import annotations

import logging

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.unit_of_work import UnitOfWork
from app.models.group import Group, GroupStatus
from app.models.user import User
from app.models.user_group import UserGroup
from app.services.errors import NotFoundError
from app.services.groups import count_group_members, set_group_status_empty

logger = logging.getLogger(__name__)


async def _membership_exists(db: AsyncSession, user_id: int, group_id: int) -> bool:
    # One round trip proves the pair is linked and both rows exist.
    q = (
        sa.select(User.id, Group.id)
        .select_from(UserGroup)
        .join(User, UserGroup.user_id == User.id)
        .join(Group, UserGroup.group_id == Group.id)
        .where(User.id == user_id, Group.id == group_id)
    )
    return (await db.execute(q)).first() is not None


async def remove_user_from_group(uow: UnitOfWork, user_id: int, group_id: int) -> dict:
    """Delete a membership and mark the group EMPTY if it was the last one.

    Existence check, delete, recount and the status write share one
    transaction, so a concurrent removal from the same group never acts on a
    stale count. Any failure rolls all of it back.

    Only the emptying transition is automatic. A group that still has members
    is reported as ACTIVE and its stored status is left untouched.
    """

    async def _work(session: AsyncSession) -> int:
        if not await _membership_exists(session, user_id, group_id):
            raise NotFoundError(f"User {user_id} is not a member of group {group_id}")

        await session.execute(
            sa.delete(UserGroup)
            .where(UserGroup.user_id == user_id, UserGroup.group_id == group_id)
            .execution_options(synchronize_session=False)
        )

        remaining = await count_group_members(session, group_id)
        if remaining == 0:
            await set_group_status_empty(session, group_id)
        return remaining

    remaining = await uow.run(_work)
    group_status = GroupStatus.EMPTY if remaining == 0 else GroupStatus.ACTIVE
    logger.info(
        "user %s removed from group %s (%s members left)", user_id, group_id, remaining
    )

    return {
        "message": f"User {user_id} removed from group {group_id}",
        "groupStatus": group_status,
    }
