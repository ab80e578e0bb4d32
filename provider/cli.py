"""
ComputingProvider — 配置管理命令行
  init   生成默认目录树并写入 MultiAddress / NodeName / Port
  check  加载并校验 config.toml（必填字段缺失时以状态码 1 退出）
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from cpconf.errors import ConfigError, MissingFieldsError
from cpconf.settings import ProviderSettings
from cpconf.store import (
    DEFAULT_RPC,
    generate_repo,
    get_rpc_by_name,
    init_config,
    update_config_file,
)

logger = logging.getLogger("cpnode.provider")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="算力节点配置工具")
    parser.add_argument(
        "--repo",
        type=Path,
        default=None,
        help="config.toml 所在目录（默认 $CP_PATH）",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init_p = sub.add_parser("init", help="生成默认目录树并写入节点字段")
    init_p.add_argument("--multi-address", default="", help="节点对外公开的 multiaddr")
    init_p.add_argument("--node-name", default="", help="节点名称（默认取主机名）")
    init_p.add_argument("--port", type=int, default=0, help="监听端口（0 表示保持不变）")

    check_p = sub.add_parser("check", help="加载并校验 config.toml")
    check_p.add_argument(
        "--standalone",
        action="store_true",
        help="按独立模式的必填字段校验",
    )
    return parser


def _cmd_init(repo: Path, args: argparse.Namespace) -> int:
    generate_repo(repo)
    config = update_config_file(repo, args.multi_address, args.node_name, args.port)
    print(f"已初始化 {repo}")
    print(f"  NodeName:     {config.api.node_name}")
    print(f"  MultiAddress: {config.api.multi_address}")
    print(f"  Port:         {config.api.port}")
    return 0


def _cmd_check(repo: Path, standalone: bool) -> int:
    config = init_config(repo, standalone)
    print(f"配置校验通过 (mode={'standalone' if standalone else 'integrated'})")
    print(f"  NodeName:     {config.api.node_name}")
    print(f"  MultiAddress: {config.api.multi_address}")
    print(f"  Port:         {config.api.port}")
    print(f"  RPC[{DEFAULT_RPC}]:    {get_rpc_by_name(DEFAULT_RPC)}")
    return 0


def main(argv: Optional[Sequence[str]] = None, settings: Optional[ProviderSettings] = None) -> int:
    """命令行入口，返回进程退出码"""
    settings = settings or ProviderSettings()
    args = build_parser().parse_args(argv)
    repo = (args.repo.expanduser() if args.repo else settings.path)

    try:
        if args.command == "init":
            return _cmd_init(repo, args)
        return _cmd_check(repo, args.standalone or settings.standalone)
    except MissingFieldsError as e:
        # 配置不完整时节点绝不能运行
        logger.critical("必填字段缺失: %s", ".".join(e.path))
        return 1
    except ConfigError as e:
        logger.error("%s", e)
        return 1
