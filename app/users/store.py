"""
用户存储层：email 唯一约束 + bcrypt 凭证校验

唯一性先查后写，并发注册撞上唯一索引时同样映射为 DuplicateEmail。
"""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User
from app.errors import DuplicateEmail, InvalidCredentials
from app.security.passwords import DUMMY_HASH, hash_password, verify_password

log = structlog.get_logger()


class UserStore:
    """用户表 CRUD（仅注册与查询，无修改/删除路径）"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, *, email: str, password: str, name: str) -> User:
        """创建用户，邮箱已存在时抛 DuplicateEmail"""
        if await self.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(email=email, hashed_pwd=hash_password(password), name=name)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmail()

        log.info("用户注册成功", user_id=str(user.id))
        return user

    async def authenticate(self, *, email: str, password: str) -> User:
        """校验邮箱 + 密码；邮箱不存在与密码错误返回同一个错误"""
        user = await self.find_by_email(email)
        if user is None:
            verify_password(password, DUMMY_HASH)
            raise InvalidCredentials()

        if not verify_password(password, user.hashed_pwd):
            raise InvalidCredentials()

        return user
