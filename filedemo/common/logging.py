# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Union

from filedemo.common.errors import ConfigurationError
from filedemo.common.request_id import get_request_id

LOG_FORMAT = "[%(asctime)s - %(levelname)s - rid=%(request_id)s - %(name)s - %(message)s]"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        setattr(record, "request_id", get_request_id())
        return True


def resolve_level(level: Union[int, str]) -> int:
    """"info" / "INFO" / 20 -> 20；未知级别属于启动期配置错误"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """初始化全局日志，可重复调用"""

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    # 给现有 handler 全部加 filter
    for h in root.handlers:
        has_filter = any(isinstance(f, RequestIdFilter) for f in getattr(h, "filters", []))
        if not has_filter:
            h.addFilter(RequestIdFilter())

    # 访问日志由 AccessLogMiddleware 统一输出
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
