"""
Todo 客户端：HTTP API 封装 + 本地 Token 持久化，供控制台界面使用
"""

from app.client.api_client import ClientResult, TodoClient
from app.client.token_store import TokenStore

__all__ = ["ClientResult", "TodoClient", "TokenStore"]
