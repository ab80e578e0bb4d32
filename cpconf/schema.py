"""
ComputingProvider — 必填字段校验
必填项用 (段,) 或 (段, 键) 元组声明，按 TOML 原始键名匹配；
两种部署模式只是选择不同的元组列表
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

KeyPath = tuple[str, ...]

# 集成模式：全部八个配置段 + 较多叶子字段
INTEGRATED_REQUIRED: tuple[KeyPath, ...] = (
    ("API",),
    ("LOG",),
    ("UBI",),
    ("HUB",),
    ("MCS",),
    ("Registry",),
    ("RPC",),
    ("CONTRACT",),

    ("API", "MultiAddress"),
    ("API", "Domain"),
    ("API", "RedisUrl"),

    ("LOG", "CrtFile"),
    ("LOG", "KeyFile"),

    ("UBI", "UbiTask"),
    ("UBI", "UbiEnginePk"),
    ("UBI", "UbiUrl"),

    ("HUB", "ServerUrl"),
    ("HUB", "AccessToken"),
    ("HUB", "WalletAddress"),

    ("MCS", "ApiKey"),
    ("MCS", "BucketName"),
    ("MCS", "Network"),
    ("MCS", "FileCachePath"),

    ("RPC", "SWAN_TESTNET"),

    ("CONTRACT", "SWAN_CONTRACT"),
    ("CONTRACT", "SWAN_COLLATERAL_CONTRACT"),
)

# 独立模式：不依赖 MCS / Registry 等
STANDALONE_REQUIRED: tuple[KeyPath, ...] = (
    ("API",),
    ("UBI",),
    ("HUB",),

    ("API", "MultiAddress"),
    ("API", "RedisUrl"),

    ("UBI", "UbiTask"),
    ("UBI", "UbiEnginePk"),
    ("UBI", "UbiUrl"),

    ("RPC", "SWAN_TESTNET"),

    ("CONTRACT", "SWAN_CONTRACT"),
    ("CONTRACT", "SWAN_COLLATERAL_CONTRACT"),
)


def required_fields(standalone: bool) -> tuple[KeyPath, ...]:
    return STANDALONE_REQUIRED if standalone else INTEGRATED_REQUIRED


def collect_keys(raw: dict[str, Any], prefix: KeyPath = ()) -> set[KeyPath]:
    """
    解码元数据：返回文档中真实出现过的所有键路径（含中间表）
    用来区分"缺失"与"存在但为零值"
    """
    keys: set[KeyPath] = set()
    for key, value in raw.items():
        path = prefix + (key,)
        keys.add(path)
        if isinstance(value, dict):
            keys |= collect_keys(value, path)
    return keys


def find_missing(defined: set[KeyPath], schema: Iterable[KeyPath]) -> Optional[KeyPath]:
    """按声明顺序返回第一个缺失的键路径，全部存在则返回 None"""
    for path in schema:
        if path not in defined:
            return path
    return None
