"""
JWT 鉴权模块：Token 签发 / 校验 + FastAPI 鉴权依赖

Token 无状态：有效性只取决于签名与 exp，没有黑名单，签发后无法提前失效。
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt
import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import get_settings
from app.errors import AuthenticationRequired, ExpiredToken, InvalidToken
from app.observability.metrics import AUTH_FAILURE_TOTAL

settings = get_settings()
log = structlog.get_logger()

# auto_error=False：缺少 Token 时由 get_current_user 自行返回 401
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AuthenticatedUser:
    """鉴权后的用户上下文，贯穿整个请求生命周期"""

    id: str
    email: str
    exp: int = 0


def create_access_token(*, sub: str, email: str, issued_at: datetime | None = None) -> str:
    """签发 access_token，有效期固定为 ACCESS_TOKEN_EXPIRE_MINUTES"""
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": sub,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> AuthenticatedUser:
    """
    校验 Token 并返回其中的身份信息。

    Raises:
        ExpiredToken: 已过期
        InvalidToken: 签名错误 / 格式错误 / 缺少 sub、exp / sub 不是 UUID
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredToken()
    except jwt.InvalidTokenError:
        raise InvalidToken()

    # sub 必须是用户 UUID，否则签名再正确也视为无效 Token
    try:
        user_id = uuid.UUID(str(payload["sub"]))
    except ValueError:
        raise InvalidToken()

    return AuthenticatedUser(
        id=str(user_id),
        email=payload.get("email", ""),
        exp=payload["exp"],
    )


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """FastAPI 依赖注入：缺少 Token → 401，无效或过期 → 403"""
    if credentials is None or not credentials.credentials:
        AUTH_FAILURE_TOTAL.labels(reason="missing").inc()
        raise AuthenticationRequired()

    try:
        user = verify_access_token(credentials.credentials)
    except ExpiredToken:
        AUTH_FAILURE_TOTAL.labels(reason="expired").inc()
        log.info("Token 已过期")
        raise
    except InvalidToken:
        AUTH_FAILURE_TOTAL.labels(reason="invalid").inc()
        log.info("Token 校验失败")
        raise

    # request.state 与外层 RequestLoggerMiddleware 共享，请求结束日志据此带上 user_id
    request.state.user_id = user.id
    structlog.contextvars.bind_contextvars(user_id=user.id)
    return user
