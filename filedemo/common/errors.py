# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class ConfigurationError(Exception):
    """启动期配置错误（如非法挂载路径、未知日志级别），不会被转换成 HTTP 响应"""


@dataclass
class AppError(Exception):
    """请求期异常统一"""
    code: str
    message: str
    status_code: int = 400
    detail: Optional[Any] = None


class HandlerError(AppError):
    def __init__(self, code: str = "HANDLER_ERROR", message: str = "handler failed", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=503, detail=detail)
