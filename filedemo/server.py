# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import uvicorn

from filedemo.infra.config import settings


def main() -> None:
    # 日志由 setup_logging 统一配置，uvicorn 不再装自己的 handler，也不重复打访问日志
    uvicorn.run(
        "filedemo.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
