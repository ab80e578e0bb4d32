#!/usr/bin/env python3
"""
ComputingProvider — 配置工具启动脚本
"""

import logging
import sys

from cpconf.settings import ProviderSettings


def main():
    from provider.cli import main as cli_main

    settings = ProviderSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(cli_main(settings=settings))


if __name__ == "__main__":
    main()
