# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
import os
from typing import Union

from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from filedemo.common.errors import ConfigurationError

logger = logging.getLogger(__name__)

WILDCARD = "{filepath:path}"
_FORBIDDEN_CHARS = "{}*"


def _route_path(request: Request) -> str:
    """请求路径（去掉 root_path，与路由匹配时看到的一致）"""
    path: str = request.scope["path"]
    root_path: str = request.scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        path = path[len(root_path):]
    return path


def file_server(router: Union[FastAPI, APIRouter], path: str, directory: Union[str, os.PathLike]) -> None:
    """在 router 上挂载静态文件路由：path 下的 GET 请求映射到 directory 下的文件

    - path 不允许带路由参数语法（{ } *），否则启动期直接抛 ConfigurationError
    - path 不以 / 结尾时，额外注册一个 301 跳转到 path + "/"
    - 请求时按实际匹配到的路由模板去掉前缀，再交给 StaticFiles 查找文件
    """

    if not path or not path.startswith("/"):
        raise ConfigurationError(f"file_server mount path must start with '/': {path!r}")
    if any(c in path for c in _FORBIDDEN_CHARS):
        raise ConfigurationError("file_server does not permit any URL parameters.")

    if path != "/" and not path.endswith("/"):

        async def redirect_to_slash(request: Request) -> Response:
            return RedirectResponse(_route_path(request) + "/", status_code=301)

        router.add_api_route(path, redirect_to_slash, methods=["GET"], include_in_schema=False)
        path += "/"

    pattern = path + WILDCARD
    files = StaticFiles(directory=directory, html=True, check_dir=False)

    async def serve_file(request: Request) -> Response:
        # include_router 带 prefix 时，scope 里的路由模板才是完整前缀
        route = request.scope.get("route")
        matched = getattr(route, "path", pattern)
        prefix = matched[: -len("/" + WILDCARD)]

        rel = _route_path(request)
        if rel.startswith(prefix):
            rel = rel[len(prefix):]
        rel = os.path.normpath(os.path.join(*rel.split("/")))
        return await files.get_response(rel, request.scope)

    router.add_api_route(pattern, serve_file, methods=["GET"], include_in_schema=False)
    logger.info("static files mounted: %s -> %s", pattern, os.fspath(directory))
