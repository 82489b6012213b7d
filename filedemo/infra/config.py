# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """全局配置，从 .env / 环境变量读取"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 监听
    HOST: str = Field(
        "0.0.0.0",
        description="监听地址",
        validation_alias=AliasChoices("HOST", "host"),
    )
    PORT: int = Field(
        3333,
        description="监听端口",
        validation_alias=AliasChoices("PORT", "port"),
    )

    LOG_LEVEL: str = Field(
        "INFO",
        description="root logger 级别: DEBUG / INFO / WARNING / ERROR",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # 静态文件
    FILES_MOUNT_PATH: str = Field(
        "/files",
        description="静态文件挂载的 URL 前缀，不能包含 { } *",
        validation_alias=AliasChoices("FILES_MOUNT_PATH", "files_mount_path"),
    )
    FILES_DIR: str = Field(
        "data",
        description="静态文件根目录，相对路径按进程工作目录解析",
        validation_alias=AliasChoices("FILES_DIR", "FILE_ROOT", "files_dir"),
    )

    def files_root(self) -> Path:
        root = Path(self.FILES_DIR)
        if not root.is_absolute():
            root = Path.cwd() / root
        return root


settings = Settings()
