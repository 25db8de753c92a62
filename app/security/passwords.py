"""
密码哈希：bcrypt 单向哈希 + 校验
"""

import bcrypt

from app.config import get_settings

settings = get_settings()


def hash_password(password: str) -> str:
    """生成密码哈希"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """校验密码（bcrypt.checkpw 内部做恒定时间比较）"""
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # 库中存的哈希格式损坏时按校验失败处理
        return False


# 邮箱不存在时也跑一次 checkpw，让两条失败路径耗时一致
DUMMY_HASH = hash_password("dummy-password-for-timing")
