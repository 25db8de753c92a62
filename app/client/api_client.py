"""
Todo API 客户端（httpx 异步）

每个方法返回 ClientResult：
- 成功：success=True，data 为响应 JSON
- 服务端拒绝：success=False，error 原样取响应里的 message
- 网络层失败：success=False，error="Network error"
"""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from app.client.token_store import TokenStore

log = structlog.get_logger()

NETWORK_ERROR = "Network error"
DEFAULT_BASE_URL = "http://localhost:8000"


@dataclass
class ClientResult:
    """客户端调用标准化结果"""

    success: bool
    data: Any = None
    error: str | None = None
    status_code: int | None = None

    @classmethod
    def ok(cls, data: Any, status_code: int | None = None) -> "ClientResult":
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def fail(cls, error: str, status_code: int | None = None) -> "ClientResult":
        return cls(success=False, error=error, status_code=status_code)


class TodoClient:
    """封装认证与 Todo 接口，Token 保存在 TokenStore 中"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self.token_store = token_store or TokenStore()
        self.user: dict | None = None
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TodoClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def token(self) -> str | None:
        return self.token_store.load()

    @property
    def is_logged_in(self) -> bool:
        return self.token is not None

    # ── 底层请求 ──

    async def _request(self, method: str, path: str, *, auth: bool = True, **kwargs) -> ClientResult:
        headers = kwargs.pop("headers", {})
        token = self.token
        if auth and token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            resp = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            log.warning("请求失败", method=method, path=path, error=str(e))
            return ClientResult.fail(NETWORK_ERROR)

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.is_success:
            return ClientResult.ok(body, resp.status_code)

        message = body.get("message") if isinstance(body, dict) else None
        return ClientResult.fail(message or f"HTTP {resp.status_code}", resp.status_code)

    # ── 认证 ──

    async def _authenticate(self, path: str, payload: dict) -> ClientResult:
        result = await self._request("POST", path, auth=False, json=payload)
        if result.success:
            self.token_store.save(result.data["token"])
            self.user = result.data["user"]
        return result

    async def register(self, name: str, email: str, password: str) -> ClientResult:
        return await self._authenticate("/register", {"name": name, "email": email, "password": password})

    async def login(self, email: str, password: str) -> ClientResult:
        return await self._authenticate("/login", {"email": email, "password": password})

    def logout(self) -> None:
        """服务端无会话，丢弃本地 Token 即为登出"""
        self.token_store.clear()
        self.user = None

    async def restore_session(self) -> bool:
        """用本地保存的 Token 拉一次列表，被拒绝（或网络失败）则丢弃 Token"""
        if not self.is_logged_in:
            return False
        result = await self.list_todos()
        if not result.success:
            self.logout()
            return False
        return True

    # ── Todo ──

    async def list_todos(self) -> ClientResult:
        return await self._request("GET", "/todos")

    async def add_todo(self, title: str, description: str | None = None) -> ClientResult:
        return await self._request("POST", "/todos", json={"title": title, "description": description})

    async def update_todo(self, todo_id: str, **fields) -> ClientResult:
        return await self._request("PUT", f"/todos/{todo_id}", json=fields)

    async def toggle_todo(self, todo: dict) -> ClientResult:
        return await self.update_todo(todo["id"], completed=not todo["completed"])

    async def delete_todo(self, todo_id: str) -> ClientResult:
        return await self._request("DELETE", f"/todos/{todo_id}")
