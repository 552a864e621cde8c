from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.models.group import GroupStatus
from app.models.user import UserStatus


class UserListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    status: UserStatus | None
    created_at: datetime


class UserPage(BaseModel):
    data: List[UserListItem]
    total: int
    limit: int
    offset: int


class UserGroupItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: GroupStatus


class UserDetailResponse(UserListItem):
    groups: List[UserGroupItem]


class UpdateUserStatusItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId", gt=0)
    status: UserStatus


class UpdateUserStatusesRequest(BaseModel):
    # size limits are enforced by the service so they surface as 400, not 422
    users: List[UpdateUserStatusItem]


class UpdateUserStatusesResponse(BaseModel):
    message: str
    count: int
