"""
请求追踪中间件

- 从 X-Request-ID 头读取请求 ID，没有则自动生成
- 在响应头中返回 X-Request-ID 和 X-Response-Time
- 按状态码分级记录访问日志

使用示例：
    from app.middleware import RequestTraceMiddleware

    app.add_middleware(RequestTraceMiddleware)
"""

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.infra.logging import RequestTimer, get_logger, set_request_id

logger = get_logger(__name__)

# 高频低价值请求不记录成功日志
SKIP_PATHS = ("/health", "/favicon.ico")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestTraceMiddleware(BaseHTTPMiddleware):
    """请求追踪中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        set_request_id(request_id)
        timer = RequestTimer()

        try:
            response = await call_next(request)
        except Exception as e:
            metrics = timer.get_metrics()
            logger.error(
                f"{request.method} {request.url.path} - 500 - {metrics['total_ms']:.0f}ms",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": 500,
                    "duration_ms": metrics["total_ms"],
                    "error": str(e),
                },
            )
            raise

        metrics = timer.get_metrics()
        level = _level_for(response.status_code)
        if level > logging.INFO or request.url.path not in SKIP_PATHS:
            logger.log(
                level,
                f"{request.method} {request.url.path} - {response.status_code} - {metrics['total_ms']:.0f}ms",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": metrics["total_ms"],
                },
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{metrics['total_ms']:.0f}ms"
        return response
