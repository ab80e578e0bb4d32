"""
ComputingProvider — 工具自身的运行配置
使用 pydantic-settings 从环境变量 / .env 文件读取
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# 项目根目录（pyproject.toml 所在位置）
_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class ProviderSettings(BaseSettings):
    """节点仓库位置、默认部署模式、日志级别"""
    model_config = SettingsConfigDict(
        env_prefix="CP_",
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CP_PATH：config.toml 与 store_data/ 所在目录
    path: Path = Path("~/.swan/computing")
    # CP_STANDALONE：独立部署模式，必填字段更少
    standalone: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("path")
    @classmethod
    def _expand_path(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v
