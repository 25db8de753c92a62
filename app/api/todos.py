"""
/todos 接口：登录用户的 Todo 增删改查

所有路由依赖 get_current_user，校验通过的 user.id 作为归属过滤条件传入 TodoStore。
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.engine import get_db
from app.security.auth import AuthenticatedUser, get_current_user
from app.todo.schemas import TodoCreate, TodoOut, TodoUpdate
from app.todo.store import TodoStore

router = APIRouter(prefix="/todos", tags=["Todo"])
log = structlog.get_logger()


@router.get("", response_model=list[TodoOut])
async def list_todos(
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """当前用户的全部 Todo，最新创建的在前"""
    return await TodoStore(db).list_by_owner(user.id)


@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(
    body: TodoCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TodoStore(db).create(user.id, body.title, body.description)


@router.put("/{todo_id}", response_model=TodoOut)
async def update_todo(
    todo_id: str,
    body: TodoUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """部分更新：只修改请求体中出现的字段"""
    return await TodoStore(db).update(todo_id, user.id, body.model_dump(exclude_unset=True))


@router.delete("/{todo_id}")
async def delete_todo(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await TodoStore(db).delete(todo_id, user.id)
    return {"message": "Todo deleted successfully"}
