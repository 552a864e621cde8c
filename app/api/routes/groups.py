from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_unit_of_work
from app.api.http_errors import not_found_error
from app.db.unit_of_work import UnitOfWork
from app.schemas.groups import (
    GroupPage,
    GroupDetailResponse,
    GroupMemberCountResponse,
    SetGroupStatusRequest,
)
from app.services.groups import (
    list_groups,
    get_group_by_id,
    get_group_member_count,
    update_group_status,
)

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=GroupPage)
async def list_groups_route(
    limit: int | None = Query(default=None, ge=0),
    offset: int | None = Query(default=None, ge=0),
    db: AsyncSession = Depends(get_db),
):
    page = await list_groups(db, limit=limit, offset=offset)
    return GroupPage.model_validate(page, from_attributes=True)


@router.get("/{group_id}", response_model=GroupDetailResponse)
async def group_detail_route(
    group_id: int,
    db: AsyncSession = Depends(get_db),
):
    group = await get_group_by_id(db, group_id)
    if group is None:
        raise not_found_error(detail=f"Group {group_id} not found")
    return GroupDetailResponse.model_validate(group)


@router.get("/{group_id}/member-count", response_model=GroupMemberCountResponse)
async def group_member_count_route(
    group_id: int,
    db: AsyncSession = Depends(get_db),
):
    count = await get_group_member_count(db, group_id)
    return GroupMemberCountResponse(group_id=group_id, count=count)


@router.put("/{group_id}/status", status_code=204)
async def set_group_status_route(
    group_id: int,
    payload: SetGroupStatusRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    # Unknown group ids are a silent no-op, same as the service.
    await update_group_status(uow, group_id, payload.status)
    return Response(status_code=204)
