"""
Todo 控制台客户端：登录 / 注册表单 + 任务列表

运行方式：
    python scripts/todo_console.py [--base-url http://localhost:8000]

Token 保存在 ~/.todo_service/token，下次启动自动恢复，/logout 后删除。

列表界面命令：
    /add      — 新建任务
    /edit N   — 编辑第 N 条
    /done N   — 切换第 N 条完成状态
    /del N    — 删除第 N 条
    /logout   — 登出
    /quit     — 退出
"""

import argparse
import asyncio
import sys
from pathlib import Path

from prompt_toolkit import PromptSession

# 确保项目根目录在 sys.path 中
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.client import ClientResult, TodoClient
from app.client.api_client import DEFAULT_BASE_URL

GRAY, RED, GREEN, CYAN, RESET = "\033[90m", "\033[31m", "\033[32m", "\033[36m", "\033[0m"


def _error(result: ClientResult) -> None:
    print(f"{RED}  错误: {result.error}{RESET}")


def render_todos(todos: list[dict]) -> None:
    print(f"\n{CYAN}== My Todos ({len(todos)}) =={RESET}")
    if not todos:
        print(f"{GRAY}  暂无任务，输入 /add 新建{RESET}")
    for i, todo in enumerate(todos, start=1):
        mark = f"{GREEN}[x]{RESET}" if todo["completed"] else "[ ]"
        print(f"  {i:>2}. {mark} {todo['title']}")
        if todo.get("description"):
            print(f"      {GRAY}{todo['description']}{RESET}")
    print()


async def auth_form(client: TodoClient, session: PromptSession) -> bool:
    """登录 / 注册表单，成功返回 True，用户放弃返回 False"""
    is_login = True
    while True:
        title = "Login" if is_login else "Sign Up"
        print(f"\n{CYAN}== {title} =={RESET}  {GRAY}(/switch 切换登录/注册, /quit 退出){RESET}")

        name = ""
        if not is_login:
            name = (await session.prompt_async("Full Name: ")).strip()
            if name == "/quit":
                return False
            if name == "/switch":
                is_login = True
                continue

        email = (await session.prompt_async("Email: ")).strip()
        if email == "/quit":
            return False
        if email == "/switch":
            is_login = not is_login
            continue

        password = await session.prompt_async("Password: ", is_password=True)

        if is_login:
            result = await client.login(email, password)
        else:
            result = await client.register(name, email, password)

        if result.success:
            print(f"{GREEN}  欢迎, {client.user['name']}{RESET}")
            return True
        _error(result)


def _pick(todos: list[dict], arg: str) -> dict | None:
    try:
        index = int(arg) - 1
    except ValueError:
        return None
    if 0 <= index < len(todos):
        return todos[index]
    return None


async def dashboard(client: TodoClient, session: PromptSession) -> bool:
    """任务列表主循环，登出返回 True，退出返回 False"""
    todos: list[dict] = []

    async def refresh() -> None:
        nonlocal todos
        result = await client.list_todos()
        if result.success:
            todos = result.data
        else:
            _error(result)

    await refresh()
    while True:
        render_todos(todos)
        try:
            line = (await session.prompt_async("> ")).strip()
        except (EOFError, KeyboardInterrupt):
            return False
        command, _, arg = line.partition(" ")

        if command == "/quit":
            return False
        if command == "/logout":
            client.logout()
            print(f"{GRAY}  已登出{RESET}")
            return True

        if command == "/add":
            title = (await session.prompt_async("Todo title: ")).strip()
            if not title:
                continue
            description = (await session.prompt_async("Description (optional): ")).strip()
            result = await client.add_todo(title, description or None)
        elif command in ("/edit", "/done", "/del"):
            todo = _pick(todos, arg)
            if todo is None:
                print(f"{RED}  无效序号: {arg}{RESET}")
                continue
            if command == "/done":
                result = await client.toggle_todo(todo)
            elif command == "/del":
                result = await client.delete_todo(todo["id"])
            else:
                title = await session.prompt_async("Title: ", default=todo["title"])
                description = await session.prompt_async("Description: ", default=todo.get("description") or "")
                result = await client.update_todo(
                    todo["id"], title=title, description=description or None, completed=todo["completed"]
                )
        else:
            print(f"{GRAY}  命令: /add | /edit N | /done N | /del N | /logout | /quit{RESET}")
            continue

        if not result.success:
            _error(result)
        await refresh()


async def main(base_url: str) -> None:
    session = PromptSession()
    async with TodoClient(base_url=base_url) as client:
        logged_in = await client.restore_session()
        while True:
            try:
                if not logged_in and not await auth_form(client, session):
                    break
                logged_in = False
                if not await dashboard(client, session):
                    break
            except (EOFError, KeyboardInterrupt):
                break
    print("再见！")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Todo 控制台客户端")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args()
    asyncio.run(main(args.base_url))
