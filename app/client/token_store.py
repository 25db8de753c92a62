"""
客户端 Token 本地持久化：跨会话保留，登出或失效时删除
"""

import os
from pathlib import Path

DEFAULT_TOKEN_PATH = Path.home() / ".todo_service" / "token"


class TokenStore:
    """单文件保存 bearer token"""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else DEFAULT_TOKEN_PATH

    def load(self) -> str | None:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        os.chmod(self.path, 0o600)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
