from __future__ import annotations

import enum
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


class UserStatus(str, enum.Enum):
    PENDING = "pending"
    ACTIVE = "active"
    BLOCKED = "blocked"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    email: Mapped[str] = mapped_column(sa.String(320), unique=True, index=True, nullable=False)

    status: Mapped[UserStatus | None] = mapped_column(
        sa.Enum(
            UserStatus,
            name="user_status",
            native_enum=False,
            length=255,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=True,
        default=None,
    )

    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)

    groups = relationship("Group", secondary="user_groups", back_populates="users", order_by="Group.id")
