"""
中间件模块

- RequestTraceMiddleware: 请求 ID 追踪和访问日志
"""

from app.middleware.request_trace import RequestTraceMiddleware

__all__ = ["RequestTraceMiddleware"]
