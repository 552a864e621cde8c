from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_unit_of_work
from app.api.http_errors import not_found_error, value_error
from app.db.unit_of_work import UnitOfWork
from app.schemas.users import (
    UserPage,
    UserDetailResponse,
    UpdateUserStatusesRequest,
    UpdateUserStatusesResponse,
)
from app.services.errors import InvalidInputError
from app.services.users import list_users, get_user_by_id, update_user_statuses

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserPage)
async def list_users_route(
    limit: int | None = Query(default=None, ge=0),
    offset: int | None = Query(default=None, ge=0),
    db: AsyncSession = Depends(get_db),
):
    page = await list_users(db, limit=limit, offset=offset)
    return UserPage.model_validate(page, from_attributes=True)


@router.patch("/statuses", response_model=UpdateUserStatusesResponse)
async def update_user_statuses_route(
    payload: UpdateUserStatusesRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    try:
        result = await update_user_statuses(uow, payload.users)
        return UpdateUserStatusesResponse(**result)
    except InvalidInputError as e:
        raise value_error(e) from e


@router.get("/{user_id}", response_model=UserDetailResponse)
async def user_detail_route(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    user = await get_user_by_id(db, user_id)
    if user is None:
        raise not_found_error(detail=f"User {user_id} not found")
    return UserDetailResponse.model_validate(user)
