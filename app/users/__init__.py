"""
用户模块：注册 / 查找 / 凭证校验
"""

from app.users.schemas import UserPublic
from app.users.store import UserStore

__all__ = ["UserPublic", "UserStore"]
