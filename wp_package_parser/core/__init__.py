"""
Core Layer - 核心层

包含文件头解析器、readme.txt 解析器和 Markdown 转换。
"""

from wp_package_parser.core.headers import (
    get_file_headers,
    get_plugin_headers,
    get_theme_headers,
    strip_tags,
    PLUGIN_HEADER_FIELDS,
    THEME_HEADER_FIELDS,
)
from wp_package_parser.core.readme import (
    parse_readme,
    ReadmeDocument,
    ParserState,
    README_HEADER_FIELDS,
)
from wp_package_parser.core.text import decode_text

__all__ = [
    # headers
    "get_file_headers",
    "get_plugin_headers",
    "get_theme_headers",
    "strip_tags",
    "PLUGIN_HEADER_FIELDS",
    "THEME_HEADER_FIELDS",
    # readme
    "parse_readme",
    "ReadmeDocument",
    "ParserState",
    "README_HEADER_FIELDS",
    # text
    "decode_text",
]
