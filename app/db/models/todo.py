"""
Todo 模型：每条记录归属一个用户，所有读写都按 owner_id 过滤
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from uuid6 import uuid7

from app.db.models.base import Base, qualified, utcnow


class Todo(Base):
    """Todo 表"""

    __tablename__ = "todos"
    __table_args__ = (
        Index("ix_todos_owner_created", "owner_id", "created_at"),
        Base.__table_args__,
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    title: Mapped[str] = mapped_column(String(255), nullable=False, comment="标题")
    description: Mapped[str | None] = mapped_column(Text, comment="描述（可选）")
    completed: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default="false", nullable=False, comment="是否完成"
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey(qualified("users.id"), ondelete="CASCADE"),
        nullable=False,
        comment="所属用户",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), comment="创建时间"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        comment="更新时间",
    )
