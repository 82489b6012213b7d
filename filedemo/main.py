# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from filedemo.api import hello as hello_api
from filedemo.common.errors import AppError
from filedemo.common.exception_handlers import app_error_handler
from filedemo.common.logging import setup_logging
from filedemo.common.middlewares import AccessLogMiddleware, RecovererMiddleware, RequestIdMiddleware
from filedemo.common.staticfiles import file_server
from filedemo.infra.config import Settings, settings as default_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """组装应用；路由表只在这里构建，之后不再修改"""

    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="filedemo",
        version="1.0.0",
    )

    # ---------- middlewares / handlers ----------

    # 后加的在外层：请求依次经过 request id -> access log -> recoverer
    app.add_middleware(RecovererMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(AppError, app_error_handler)

    # ---------- routes ----------

    app.include_router(hello_api.router)

    # ./data 下的文件挂到 /files
    file_server(app, settings.FILES_MOUNT_PATH, settings.files_root())

    return app


app = create_app()
