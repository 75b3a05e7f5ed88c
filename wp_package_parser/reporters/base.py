"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from wp_package_parser.archive.models import PackageResult
from wp_package_parser.core.readme import ReadmeDocument


class Reporter(Protocol):
    """报告器协议"""

    def report_package(self, result: PackageResult, target: str) -> None:
        """输出包解析结果"""
        ...

    def report_readme(self, readme: ReadmeDocument, target: str) -> None:
        """输出 readme.txt 解析结果"""
        ...
