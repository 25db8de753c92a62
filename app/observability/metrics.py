"""
Prometheus 指标定义

所有指标统一在此文件定义，中间件和业务代码按需引用。
"""

from prometheus_client import Counter, Histogram

# ── 请求级指标 ──

REQUEST_TOTAL = Counter(
    "todo_request_total",
    "HTTP 请求总数",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "todo_request_duration_ms",
    "HTTP 请求耗时（毫秒）",
    ["method", "endpoint"],
    buckets=[5, 10, 25, 50, 100, 200, 500, 1000, 2000],
)

# ── 鉴权指标 ──

AUTH_FAILURE_TOTAL = Counter(
    "todo_auth_failure_total",
    "鉴权失败总数",
    ["reason"],  # missing/invalid/expired
)

# ── 业务指标 ──

TODO_OP_TOTAL = Counter(
    "todo_op_total",
    "Todo 操作总数",
    ["op"],  # list/create/update/delete
)
