"""
日志配置

开发环境输出彩色控制台日志，生产环境输出 JSON 格式日志（便于 ELK/Loki 聚合）。
每条日志会带上当前请求的 X-Request-ID：RequestContextFilter 在处理器上把它写入
LogRecord.request_id，两个格式化器都从这里读取。

使用示例：
    from app.infra.logging import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info(f"menuCode: {menu_code}")
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from app.config import get_settings

# 请求上下文变量
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# LogRecord 自带的属性（随 Python 版本变化，直接从空记录取），其余视为 extra
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}


def get_request_id() -> str | None:
    """获取当前请求 ID"""
    return request_id_var.get()


def set_request_id(request_id: str | None) -> None:
    """设置当前请求 ID"""
    request_id_var.set(request_id)


def _request_id_of(record: logging.LogRecord) -> str | None:
    # 未经过 RequestContextFilter 的记录（例如直接调用 format）回退到上下文变量
    return getattr(record, "request_id", None) or get_request_id()


class RequestContextFilter(logging.Filter):
    """把当前请求 ID 写入 LogRecord.request_id"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON 格式日志，一条日志一行：

    {"timestamp": "...", "level": "INFO", "logger": "app.api.routes.menu",
     "message": "menuCode: 7", "request_id": "abc123", "extra": {...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = _request_id_of(record)
        if request_id:
            payload["request_id"] = request_id

        extra = {
            key: value for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        elif record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        # ensure_ascii=False：菜单名等韩文内容原样输出
        return json.dumps(payload, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    控制台日志（开发环境）

    2024-01-01 00:00:00 INFO     [req-id] app.api.routes.menu - menuCode: 7
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(request_tag)s%(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        # 在副本上改写 levelname，避免影响同一记录的其他处理器
        record = logging.makeLogRecord(vars(record))

        request_id = _request_id_of(record)
        record.request_tag = f"[{request_id[:8]}] " if request_id else ""

        levelname = f"{record.levelname:8}"
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.use_color and color:
            levelname = f"{color}{levelname}{self.RESET}"
        record.levelname = levelname

        return super().format(record)


def setup_logging(
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """
    配置应用日志

    Args:
        level: 日志级别（DEBUG/INFO/WARNING/ERROR），默认从配置读取
        json_format: 是否使用 JSON 格式，默认读取 log_json，未设置时生产环境使用 JSON
    """
    settings = get_settings()

    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    if json_format is None:
        json_format = settings.log_json
    if json_format is None:
        json_format = settings.environment not in ("dev", "development", "test")

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(JSONFormatter() if json_format else ConsoleFormatter(use_color=sys.stdout.isatty()))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for noisy_logger in ("uvicorn.access", "aiosqlite", "asyncio"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    # database_echo 打开时保留 SQL 日志，便于观察 ORM 生成的语句
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("app").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """获取 logger 实例，name 通常使用 __name__"""
    return logging.getLogger(name)


class RequestTimer:
    """请求计时器，get_metrics() 返回 {"total_ms": ...}"""

    def __init__(self):
        self.start_time = time.perf_counter()

    def get_metrics(self) -> dict[str, float]:
        elapsed = time.perf_counter() - self.start_time
        return {"total_ms": round(elapsed * 1000, 2)}
