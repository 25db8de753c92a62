"""
Todo 请求/响应模型

更新接口只修改请求里显式给出的字段（exclude_unset），
与只传 completed 的勾选操作兼容。
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TITLE_MAX_LENGTH = 255  # 与 todos.title 列长度一致


class TodoCreate(BaseModel):
    title: str = Field("", max_length=TITLE_MAX_LENGTH)
    description: str | None = None


class TodoUpdate(BaseModel):
    title: str | None = Field(None, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    completed: bool | None = None


class TodoOut(BaseModel):
    """单个 Todo 条目"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    description: str | None = None
    completed: bool
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
