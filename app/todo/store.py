"""
Todo 存储层

所有查询都带 owner_id 条件：别人的 Todo 与不存在的 Todo 表现一致（NotFound），
不向调用方泄露记录是否存在。
"""

import uuid
from typing import Any

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Todo
from app.errors import InvalidToken, NotFound, ValidationError
from app.observability.metrics import TODO_OP_TOTAL

log = structlog.get_logger()

UPDATABLE_FIELDS = ("title", "description", "completed")


def _parse_id(raw: str | uuid.UUID) -> uuid.UUID:
    """非法 id 同样按 NotFound 处理"""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise NotFound()


def _clean_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


class TodoStore:
    """用户级 Todo 列表的 CRUD"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_owner(self, owner_id: str | uuid.UUID) -> list[Todo]:
        """按创建时间倒序返回该用户的全部 Todo"""
        result = await self.db.execute(
            select(Todo)
            .where(Todo.owner_id == _parse_id(owner_id))
            .order_by(Todo.created_at.desc(), Todo.id.desc())
        )
        TODO_OP_TOTAL.labels(op="list").inc()
        return list(result.scalars().all())

    async def create(
        self, owner_id: str | uuid.UUID, title: str | None, description: str | None = None
    ) -> Todo:
        todo = Todo(
            title=_clean_title(title),
            description=description,
            completed=False,
            owner_id=_parse_id(owner_id),
        )
        self.db.add(todo)
        try:
            await self.db.commit()
        except IntegrityError:
            # owner_id 外键不成立：Token 签名有效但对应用户已不存在
            await self.db.rollback()
            log.warning("Todo 创建失败，所属用户不存在", owner_id=str(owner_id))
            raise InvalidToken()
        TODO_OP_TOTAL.labels(op="create").inc()
        log.info("Todo 已创建", todo_id=str(todo.id))
        return todo

    async def _get_owned(self, todo_id: str | uuid.UUID, owner_id: str | uuid.UUID) -> Todo:
        result = await self.db.execute(
            select(Todo).where(Todo.id == _parse_id(todo_id), Todo.owner_id == _parse_id(owner_id))
        )
        todo = result.scalar_one_or_none()
        if todo is None:
            raise NotFound()
        return todo

    async def update(
        self, todo_id: str | uuid.UUID, owner_id: str | uuid.UUID, fields: dict[str, Any]
    ) -> Todo:
        """只修改 fields 中出现的 title / description / completed"""
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        if "title" in changes:
            changes["title"] = _clean_title(changes["title"])
        if "completed" in changes and changes["completed"] is None:
            del changes["completed"]

        todo = await self._get_owned(todo_id, owner_id)
        for key, value in changes.items():
            setattr(todo, key, value)
        await self.db.commit()
        TODO_OP_TOTAL.labels(op="update").inc()
        return todo

    async def delete(self, todo_id: str | uuid.UUID, owner_id: str | uuid.UUID) -> None:
        result = await self.db.execute(
            delete(Todo).where(Todo.id == _parse_id(todo_id), Todo.owner_id == _parse_id(owner_id))
        )
        if result.rowcount == 0:
            raise NotFound()
        await self.db.commit()
        TODO_OP_TOTAL.labels(op="delete").inc()
        log.info("Todo 已删除", todo_id=str(todo_id))
