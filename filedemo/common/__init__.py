# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（错误/日志/request id/静态文件挂载等）

约定：
- 路由启动期校验失败统一抛 ConfigurationError，进程直接起不来
- 请求期业务错误统一通过 AppError 抛出，由 error_handler 或全局异常处理转为响应
- request_id 通过 middleware 注入，并写入日志，便于排障
"""

from __future__ import annotations
