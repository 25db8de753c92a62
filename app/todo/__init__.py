"""
Todo 模块：按用户隔离的任务列表

提供 SQLAlchemy 持久化的 TodoStore 与请求/响应 schema，
所有读写都以请求方 user_id 作为归属过滤条件。
"""

from app.todo.schemas import TodoCreate, TodoOut, TodoUpdate
from app.todo.store import TodoStore

__all__ = ["TodoCreate", "TodoOut", "TodoUpdate", "TodoStore"]
