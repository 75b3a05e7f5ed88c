"""
WP-Package-Parser: 从 WordPress 插件/主题 ZIP 包中提取元数据。

不执行包中的任何代码，只解析插件头、主题头和 readme.txt。
"""

from wp_package_parser.archive import PackageResult, ScanConfig, parse_package, scan_archive
from wp_package_parser.core import (
    ReadmeDocument,
    get_file_headers,
    get_plugin_headers,
    get_theme_headers,
    parse_readme,
)
from wp_package_parser.metadata import get_plugin_package_meta

__version__ = "0.1.0"

__all__ = [
    "PackageResult",
    "ReadmeDocument",
    "ScanConfig",
    "get_file_headers",
    "get_plugin_headers",
    "get_plugin_package_meta",
    "get_theme_headers",
    "parse_package",
    "parse_readme",
    "scan_archive",
    "__version__",
]
