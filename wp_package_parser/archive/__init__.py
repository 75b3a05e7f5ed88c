"""
Archive Layer - 归档层

负责打开 ZIP 包、过滤条目并分派给解析器。
"""

from wp_package_parser.archive.models import (
    ArchiveEntry,
    PackageResult,
    ScanConfig,
    normalize_entry_name,
    DEFAULT_MAX_DEPTH,
    DEFAULT_HEADER_BYTES,
)
from wp_package_parser.archive.reader import (
    ArchiveReader,
    ZipArchiveReader,
    open_archive,
)
from wp_package_parser.archive.scanner import parse_package, scan_archive

__all__ = [
    # models
    "ArchiveEntry",
    "PackageResult",
    "ScanConfig",
    "normalize_entry_name",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_HEADER_BYTES",
    # reader
    "ArchiveReader",
    "ZipArchiveReader",
    "open_archive",
    # scanner
    "parse_package",
    "scan_archive",
]
