from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.models.group import GroupStatus
from app.models.user import UserStatus


class GroupListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: GroupStatus
    created_at: datetime


class GroupPage(BaseModel):
    data: List[GroupListItem]
    total: int
    limit: int
    offset: int


class GroupMember(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    status: UserStatus | None


class GroupDetailResponse(GroupListItem):
    users: List[GroupMember]


class GroupMemberCountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    group_id: int = Field(alias="groupId")
    count: int


class SetGroupStatusRequest(BaseModel):
    status: GroupStatus
