# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from filedemo.common.errors import AppError

logger = logging.getLogger(__name__)

HandlerResult = Optional[Response]
HandlerFunc = Callable[[Request], Union[HandlerResult, Awaitable[HandlerResult]]]
Endpoint = Callable[[Request], Awaitable[Response]]

ERROR_STATUS_CODE = 503
ERROR_BODY = "bad"


def error_handler(fn: HandlerFunc) -> Endpoint:
    """把"可能失败"的 handler 适配成普通路由 endpoint

    handler 通过抛 AppError 表示失败，此时固定返回 503 "bad"，错误内容不回传给客户端；
    其它异常不在这里处理，交给 RecovererMiddleware。
    """

    is_async = inspect.iscoroutinefunction(fn)

    async def endpoint(request: Request) -> Response:
        try:
            if is_async:
                response = await fn(request)
            else:
                response = await run_in_threadpool(fn, request)
        except AppError as exc:
            logger.warning(
                "handler %s failed: code=%s message=%s",
                getattr(fn, "__name__", repr(fn)),
                exc.code,
                exc.message,
            )
            return PlainTextResponse(ERROR_BODY, status_code=ERROR_STATUS_CODE)
        return response if response is not None else Response()

    endpoint.__name__ = getattr(fn, "__name__", endpoint.__name__)
    endpoint.__doc__ = getattr(fn, "__doc__", None)
    return endpoint
