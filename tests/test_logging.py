import json
import logging

from app.config import get_settings
from app.infra.logging import (
    ConsoleFormatter,
    JSONFormatter,
    RequestContextFilter,
    RequestTimer,
    set_request_id,
    setup_logging,
)


def _record(msg: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("app.api.routes.menu", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_keeps_korean_and_request_id():
    set_request_id("req-json")
    try:
        payload = json.loads(JSONFormatter().format(_record("menuName: 민트미역국", menu_code=7)))
    finally:
        set_request_id(None)

    assert payload["message"] == "menuName: 민트미역국"
    assert payload["request_id"] == "req-json"
    assert payload["extra"] == {"menu_code": 7}


def test_filtered_request_id_is_not_repeated_in_extra():
    """经过 RequestContextFilter 的记录，request_id 只出现在顶层"""
    record = _record("menuCode: 7")
    set_request_id("req-filter")
    try:
        RequestContextFilter().filter(record)
    finally:
        set_request_id(None)

    payload = json.loads(JSONFormatter().format(record))

    assert payload["request_id"] == "req-filter"
    assert "extra" not in payload


def test_console_formatter_prefixes_short_request_id():
    set_request_id("abcdef1234567890")
    try:
        line = ConsoleFormatter(use_color=False).format(_record("menuCode: 7"))
    finally:
        set_request_id(None)

    assert "INFO     [abcdef12] " in line
    assert line.endswith("app.api.routes.menu - menuCode: 7")


def test_console_formatter_does_not_touch_original_record():
    record = _record("menuCode: 7", level=logging.WARNING)

    line = ConsoleFormatter(use_color=True).format(record)

    assert "\033[33m" in line
    assert record.levelname == "WARNING"
    assert not hasattr(record, "request_tag")


def test_setup_logging_selects_formatter():
    setup_logging(level="DEBUG", json_format=True)
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JSONFormatter)
    assert any(isinstance(f, RequestContextFilter) for f in handler.filters)
    assert logging.getLogger("app").level == logging.DEBUG

    setup_logging(level=get_settings().log_level, json_format=False)
    assert isinstance(logging.getLogger().handlers[0].formatter, ConsoleFormatter)


def test_request_timer_reports_total_only():
    metrics = RequestTimer().get_metrics()

    assert set(metrics) == {"total_ms"}
    assert metrics["total_ms"] >= 0
