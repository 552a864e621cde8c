from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_unit_of_work
from app.api.http_errors import not_found_error
from app.db.unit_of_work import UnitOfWork
from app.schemas.user_groups import RemoveUserFromGroupResponse
from app.services.errors import NotFoundError
from app.services.user_groups import remove_user_from_group

router = APIRouter(prefix="/user-groups", tags=["user-groups"])


@router.delete("/{user_id}/{group_id}", response_model=RemoveUserFromGroupResponse)
async def remove_user_from_group_route(
    user_id: int,
    group_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    try:
        result = await remove_user_from_group(uow, user_id, group_id)
        return RemoveUserFromGroupResponse(**result)
    except NotFoundError as e:
        raise not_found_error(e) from e
