"""
SQLAlchemy 声明基类：所有模型继承此 Base
配置了 DB_SCHEMA 时所有表放在该 schema 下做数据隔离
"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase

from app.config import get_settings

settings = get_settings()
SCHEMA: str | None = None if settings.is_sqlite else (settings.DB_SCHEMA or None)


def qualified(name: str) -> str:
    """外键引用带上 schema 前缀：qualified("users.id") → "todo_app.users.id" """
    return f"{SCHEMA}.{name}" if SCHEMA else name


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """声明基类，统一使用配置的 schema"""

    __abstract__ = True

    __table_args__ = {"schema": SCHEMA}
