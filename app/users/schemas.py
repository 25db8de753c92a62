"""
用户相关请求/响应模型
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def check_bcrypt_limit(cls, v: str) -> str:
        """bcrypt 只接受 72 字节以内的输入，超长直接拒绝而不是截断"""
        if len(v.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("email", "name")
    @classmethod
    def strip_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return v.strip()


class UserPublic(BaseModel):
    """对外暴露的用户信息（不含密码哈希）"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    name: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserPublic
