"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from wp_package_parser.cli.app import app, inspect, meta, readme, version

__all__ = [
    "app",
    "inspect",
    "meta",
    "readme",
    "version",
]
