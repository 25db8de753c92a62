"""
用户模型
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from uuid6 import uuid7

from app.db.models.base import Base, utcnow


class User(Base):
    """用户表：email 唯一，注册后不再修改"""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, comment="登录邮箱")
    hashed_pwd: Mapped[str] = mapped_column(String(256), nullable=False, comment="bcrypt 密码哈希")
    name: Mapped[str] = mapped_column(String(128), nullable=False, comment="姓名")
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
