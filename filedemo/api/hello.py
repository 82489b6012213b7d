# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from filedemo.common.errors import HandlerError
from filedemo.common.handler import error_handler


router = APIRouter(tags=["hello"])


@router.get("/", response_class=PlainTextResponse)
def hello() -> str:
    return "hello world"


def picture(request: Request) -> PlainTextResponse:
    """带 err 参数时模拟失败，错误内容会被 error_handler 吞掉"""
    # 与 net/url 的 Query().Get 一致：同名参数取第一个
    values = request.query_params.getlist("err")
    err = values[0] if values else None
    if err:
        raise HandlerError(message=err)
    return PlainTextResponse("A whole bunch of messages and such")


router.add_api_route("/picture", error_handler(picture), methods=["GET"])
