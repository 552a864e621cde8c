from __future__ import annotations

import enum
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


class GroupStatus(str, enum.Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    INACTIVE = "inactive"


class Group(Base):
    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(sa.String(255), nullable=False)

    status: Mapped[GroupStatus] = mapped_column(
        sa.Enum(
            GroupStatus,
            name="group_status",
            native_enum=False,
            length=255,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=GroupStatus.EMPTY,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)

    users = relationship("User", secondary="user_groups", back_populates="groups", order_by="User.id")
