# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from filedemo.common.errors import AppError
from filedemo.common.request_id import get_request_id


def _err_payload(code: str, message: str, detail: Any = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "code": code,
        "message": message,
        "request_id": get_request_id(),
    }
    if detail is not None:
        data["detail"] = detail
    return data


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=exc.status_code,
        content=_err_payload(exc.code, exc.message, exc.detail),
    )
