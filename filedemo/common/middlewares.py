# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from filedemo.common.request_id import (
    REQUEST_ID_HEADER,
    accept_request_id,
    new_request_id,
    reset_request_id,
    set_request_id,
)

access_logger = logging.getLogger("filedemo.access")
logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = accept_request_id(request.headers.get(REQUEST_ID_HEADER)) or new_request_id()
        token = set_request_id(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """每个请求一行访问日志：方法、路径、状态码、客户端、耗时"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            client = f"{request.client.host}:{request.client.port}" if request.client else "-"
            access_logger.info(
                '"%s %s" %s from %s in %.2fms',
                request.method,
                path,
                status_code,
                client,
                elapsed_ms,
            )


class RecovererMiddleware(BaseHTTPMiddleware):
    """兜底：handler 里未处理的异常记录堆栈并返回 500，进程继续服务"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:  # noqa: BLE001
            logger.exception("Unhandled error: %s %s", request.method, request.url.path)
            return PlainTextResponse("Internal Server Error", status_code=500)
