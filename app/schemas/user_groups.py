from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.models.group import GroupStatus


class RemoveUserFromGroupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    group_status: GroupStatus = Field(alias="groupStatus")
