from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base_class import Base


class UserGroup(Base):
    """Membership row: the user belongs to the group. The pair is the key."""

    __tablename__ = "user_groups"

    user_id: Mapped[int] = mapped_column(
        sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    group_id: Mapped[int] = mapped_column(
        sa.Integer, sa.ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    __table_args__ = (
        sa.Index("ix_user_groups_group_id_user_id", "group_id", "user_id"),
    )
