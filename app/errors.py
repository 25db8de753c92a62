"""
应用级异常 + FastAPI 异常处理器

所有业务异常继承 TodoServiceError，自带 HTTP 状态码与对外消息，
由 register_exception_handlers 统一渲染为 {"message": ...}。
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = structlog.get_logger()


class TodoServiceError(Exception):
    """业务异常基类"""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TodoServiceError):
    """请求字段缺失或不合法"""

    status_code = 400
    default_message = "Invalid request"


class DuplicateEmail(ValidationError):
    default_message = "User already exists"


class InvalidCredentials(ValidationError):
    """邮箱不存在与密码错误共用同一个错误，避免枚举用户"""

    default_message = "Invalid credentials"


class AuthenticationRequired(TodoServiceError):
    status_code = 401
    default_message = "Access token required"


class InvalidToken(TodoServiceError):
    """签名错误 / 格式错误 / 缺少必要 claim"""

    status_code = 403
    default_message = "Invalid or expired token"


class ExpiredToken(InvalidToken):
    pass


class NotFound(TodoServiceError):
    """不存在与不属于当前用户不做区分"""

    status_code = 404
    default_message = "Todo not found"


# ── 异常处理器 ──

async def _service_error_handler(request: Request, exc: TodoServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """pydantic 请求体校验失败统一按 400 返回，取第一条错误作为消息"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg', 'invalid')}" if field else first.get("msg", "invalid")
    else:
        message = ValidationError.default_message
    return JSONResponse(status_code=400, content={"message": message})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("未处理异常", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(TodoServiceError, _service_error_handler)
    application.add_exception_handler(RequestValidationError, _request_validation_handler)
    application.add_exception_handler(Exception, _unhandled_error_handler)
