"""
认证接口：注册 + 登录，成功后签发 JWT

登出由客户端丢弃 Token 完成，服务端不保存会话。
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.engine import get_db
from app.security.auth import create_access_token
from app.users.schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from app.users.store import UserStore

router = APIRouter(tags=["认证"])
log = structlog.get_logger()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """用户注册：邮箱唯一，成功后直接签发 Token"""
    user = await UserStore(db).register(email=body.email, password=body.password, name=body.name)
    token = create_access_token(sub=str(user.id), email=user.email)

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """用户登录：校验密码，签发 JWT"""
    user = await UserStore(db).authenticate(email=body.email, password=body.password)
    token = create_access_token(sub=str(user.id), email=user.email)

    log.info("用户登录成功", user_id=str(user.id))
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserPublic.model_validate(user),
    )
