# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional


REQUEST_ID_HEADER = "X-Request-Id"
MAX_REQUEST_ID_LENGTH = 128

# 上游带来的 id 会原样写进日志和响应头，只接受可见 ASCII
_VALID_REQUEST_ID = re.compile(r"^[\x21-\x7e]+$")

_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")


def new_request_id() -> str:
    return uuid.uuid4().hex


def accept_request_id(incoming: Optional[str]) -> Optional[str]:
    """校验上游传入的 request id，不合法时返回 None（由调用方重新生成）"""
    if not incoming:
        return None
    incoming = incoming.strip()
    if len(incoming) > MAX_REQUEST_ID_LENGTH or not _VALID_REQUEST_ID.match(incoming):
        return None
    return incoming


def set_request_id(request_id: str) -> Token:
    return _request_id_ctx.set(request_id or "-")


def reset_request_id(token: Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str:
    return _request_id_ctx.get() or "-"
