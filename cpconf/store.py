"""
ComputingProvider — 配置存储
1. 读取 config.toml → ComputeNodeConfig，并按部署模式校验必填字段
2. 首次运行时生成默认目录树（config.toml + store_data/conf/redis.conf）
3. 局部改写 config.toml（MultiAddress / NodeName / Port）
"""

from __future__ import annotations

import logging
import socket
import tomllib
from pathlib import Path
from typing import Any, Optional

import tomli_w
from pydantic import ValidationError

from cpconf.errors import ConfigError, MissingFieldsError
from cpconf.models import ComputeNodeConfig
from cpconf.schema import collect_keys, find_missing, required_fields

logger = logging.getLogger("cpnode.conf.store")

CONFIG_FILE_NAME = "config.toml"
REDIS_CONFIG_FILE_NAME = "redis.conf"
DATA_DIR = Path("store_data") / "data"
CONF_DIR = Path("store_data") / "conf"

# get_rpc_by_name 唯一识别的名称
DEFAULT_RPC = "swan"

# 随包分发的默认文件
_DEFAULTS_DIR = Path(__file__).resolve().parent / "defaults"


# ============================================================
# 读写工具
# ============================================================

def _parse_toml(text: str, source: str) -> dict[str, Any]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"解析 TOML 失败, path: {source}, error: {e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"读取配置文件失败, path: {path}, error: {e}") from e
    return _parse_toml(text, str(path))


def _to_config(raw: dict[str, Any], source: str) -> ComputeNodeConfig:
    try:
        return ComputeNodeConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"配置字段类型错误, path: {source}, error: {e}") from e


def _write_config(path: Path, config: ComputeNodeConfig) -> None:
    """先写同目录临时文件再替换，写入失败时原文件保持不变"""
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            tomli_w.dump(config.to_toml_dict(), f)
        tmp.replace(path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise ConfigError(f"写入 {CONFIG_FILE_NAME} 失败, path: {path}, error: {e}") from e


def _ensure_dir(path: Path) -> None:
    """目录不存在则创建，已存在不报错"""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"创建目录失败, path: {path}, error: {e}") from e


def _bundled(name: str) -> str:
    path = _DEFAULTS_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"读取内置默认文件失败, path: {path}, error: {e}") from e


def _hostname() -> str:
    try:
        name = socket.gethostname()
    except OSError as e:
        raise ConfigError(f"获取主机名失败, error: {e}") from e
    if not name:
        raise ConfigError("获取主机名失败, error: 主机名为空")
    return name


# ============================================================
# ConfigStore
# ============================================================

class ConfigStore:
    """
    持有当前进程使用的 ComputeNodeConfig
    load() 在启动时调用一次，之后只读；reset() 用于显式释放
    """

    def __init__(self) -> None:
        self._config: Optional[ComputeNodeConfig] = None
        self._config_file: Optional[Path] = None

    @property
    def config(self) -> Optional[ComputeNodeConfig]:
        """未加载时为 None"""
        return self._config

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    def load(self, repo_path: str | Path, standalone: bool = False) -> ComputeNodeConfig:
        """
        读取 <repo_path>/config.toml 并校验必填字段
        - 文件不可读 / TOML 格式错误 / 字段类型不符 → ConfigError
        - 必填字段缺失 → MissingFieldsError（调用方应终止进程）
        校验通过后才替换当前配置
        """
        config_file = Path(repo_path) / CONFIG_FILE_NAME
        raw = _read_toml(config_file)
        config = _to_config(raw, str(config_file))

        missing = find_missing(collect_keys(raw), required_fields(standalone))
        if missing is not None:
            raise MissingFieldsError(missing, str(config_file))

        self._config = config
        self._config_file = config_file
        logger.info(
            "已加载配置 %s (mode=%s)",
            config_file, "standalone" if standalone else "integrated",
        )
        return config

    def rpc_by_name(self, rpc_name: str) -> str:
        """按名称查 RPC 地址；未识别的名称返回空字符串"""
        if self._config is None:
            return ""
        if rpc_name == DEFAULT_RPC:
            return self._config.rpc.swan_testnet
        return ""

    def reset(self) -> None:
        self._config = None
        self._config_file = None


# ---------- 进程级默认实例 ----------
_store = ConfigStore()


def init_config(repo_path: str | Path, standalone: bool = False) -> ComputeNodeConfig:
    """启动时加载配置到进程级默认实例"""
    return _store.load(repo_path, standalone)


def get_config() -> Optional[ComputeNodeConfig]:
    """返回进程级配置；init_config 之前调用得到 None"""
    return _store.config


def get_rpc_by_name(rpc_name: str) -> str:
    return _store.rpc_by_name(rpc_name)


def reset_config() -> None:
    _store.reset()


# ============================================================
# 目录树生成与局部改写
# ============================================================

def generate_repo(repo_path: str | Path) -> None:
    """
    生成默认目录树，已存在的文件一律不覆盖（可重复执行）:
      <repo>/config.toml
      <repo>/store_data/data/
      <repo>/store_data/conf/redis.conf
    config.toml 先解析为 ComputeNodeConfig 再重新编码，格式会被规范化
    """
    repo = Path(repo_path)
    _ensure_dir(repo / DATA_DIR)
    conf_dir = repo / CONF_DIR
    _ensure_dir(conf_dir)

    redis_conf = conf_dir / REDIS_CONFIG_FILE_NAME
    if redis_conf.exists():
        logger.debug("%s 已存在，跳过", redis_conf)
    else:
        try:
            redis_conf.write_text(_bundled(REDIS_CONFIG_FILE_NAME), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"写入 redis 配置失败, path: {redis_conf}, error: {e}") from e
        logger.info("已生成 %s", redis_conf)

    config_file = repo / CONFIG_FILE_NAME
    if config_file.exists():
        logger.debug("%s 已存在，跳过", config_file)
        return

    template = _to_config(
        _parse_toml(_bundled(CONFIG_FILE_NAME), f"<default {CONFIG_FILE_NAME}>"),
        f"<default {CONFIG_FILE_NAME}>",
    )
    _write_config(config_file, template)
    logger.info("已生成 %s", config_file)


def update_config_file(
    repo_path: str | Path,
    multi_address: str = "",
    node_name: str = "",
    port: int = 0,
) -> ComputeNodeConfig:
    """
    重新读取磁盘上的 config.toml，改写以下字段后写回原路径:
      - multi_address 非空且与当前值不同（去空白、忽略大小写）时替换
      - node_name 非空则直接使用，否则取本机主机名
      - port 非 0 时替换
    不修改进程级配置，需要新值请重新 init_config
    """
    config_file = Path(repo_path) / CONFIG_FILE_NAME
    config = _to_config(_read_toml(config_file), str(config_file))

    new_address = multi_address.strip()
    if new_address and new_address.casefold() != config.api.multi_address.strip().casefold():
        logger.info("MultiAddress: %s → %s", config.api.multi_address, multi_address)
        config.api.multi_address = multi_address

    if node_name.strip():
        config.api.node_name = node_name
    else:
        config.api.node_name = _hostname()

    if port != 0:
        config.api.port = port

    # 用新文件整体替换旧文件
    _write_config(config_file, config)
    logger.info(
        "已更新 %s (node_name=%s, port=%d)",
        config_file, config.api.node_name, config.api.port,
    )
    return config
