"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import Any, TextIO

from wp_package_parser.archive.models import PackageResult
from wp_package_parser.core.readme import ReadmeDocument


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report_package(self, result: PackageResult, target: str) -> None:
        """生成 JSON 格式的包报告"""
        self._dump({"target": target, **result.to_dict()})

    def report_readme(self, readme: ReadmeDocument, target: str) -> None:
        """生成 JSON 格式的 readme 报告"""
        self._dump({"target": target, **readme.to_dict()})

    def report_meta(self, meta: dict[str, Any]) -> None:
        """输出更新检查器元数据"""
        self._dump(meta)

    def _dump(self, data: dict[str, Any]) -> None:
        json_str = json.dumps(data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
