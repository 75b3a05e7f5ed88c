"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from wp_package_parser.reporters.base import Reporter
from wp_package_parser.reporters.rich_reporter import RichReporter
from wp_package_parser.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
