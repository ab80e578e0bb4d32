"""
ComputingProvider — 配置相关异常
"""

from __future__ import annotations


class ConfigError(Exception):
    """读取 / 解析 / 写入配置失败（可恢复，由调用方决定如何处理）"""


class MissingFieldsError(ConfigError):
    """必填字段缺失，节点不允许在配置不完整时运行"""

    def __init__(self, path: tuple[str, ...], config_file: str = ""):
        self.path = tuple(path)
        self.config_file = config_file
        dotted = ".".join(self.path)
        where = f" ({config_file})" if config_file else ""
        super().__init__(f"缺少必填字段: {dotted}{where}")
