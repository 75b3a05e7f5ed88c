"""
归档扫描器

遍历插件/主题 ZIP 包中的条目，找到插件主文件（或主题 style.css）
和 readme.txt 并解析。不会执行包中的任何代码。
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from wp_package_parser.archive.models import ArchiveEntry, PackageResult, ScanConfig
from wp_package_parser.archive.reader import (
    ENTRY_READ_ERRORS,
    ArchiveReader,
    ArchiveSource,
    open_archive,
)
from wp_package_parser.core.headers import get_plugin_headers, get_theme_headers
from wp_package_parser.core.readme import ReadmeDocument, parse_readme
from wp_package_parser.errors import ArchiveOpenError

logger = logging.getLogger(__name__)

# 条目回调类型：每个通过过滤的条目调用一次
EntryCallback = Callable[[ArchiveEntry], None]


def _is_candidate(entry: ArchiveEntry, config: ScanConfig) -> bool:
    """跳过目录、空文件以及嵌套过深的文件"""
    if entry.depth > config.max_depth:
        return False
    return entry.size > 0


def scan_archive(
    reader: ArchiveReader,
    apply_markdown: bool = False,
    *,
    config: Optional[ScanConfig] = None,
    transform: Optional[Callable[[str], str]] = None,
    on_entry: Optional[EntryCallback] = None,
) -> Optional[PackageResult]:
    """
    扫描已打开的归档

    Args:
        reader: 归档读取器
        apply_markdown: 是否将 readme 段落转换为 HTML
        config: 扫描配置
        transform: readme 段落转换函数
        on_entry: 条目回调（用于显示进度）

    Returns:
        PackageResult；找不到插件头或主题头时返回 None
    """
    config = config or ScanConfig()

    header: Optional[dict[str, Any]] = None
    readme: Optional[ReadmeDocument] = None
    readme_checked = False
    plugin_file: Optional[str] = None
    stylesheet: Optional[str] = None
    package_type: Optional[str] = None

    for index in range(reader.entry_count()):
        if readme_checked and header is not None:
            break

        entry = reader.stat_entry(index)
        if not _is_candidate(entry, config):
            continue

        if on_entry:
            on_entry(entry)

        basename = entry.basename.lower()

        try:
            if not readme_checked and basename == config.readme_name.lower():
                logger.debug(f"Parsing readme: {entry.name}")
                readme = parse_readme(reader.read_entry(index), apply_markdown, transform)
                readme_checked = True
                if readme is None:
                    logger.debug(f"{entry.name} has no valid title line, ignored")

            if header is not None:
                continue

            if basename == config.stylesheet_name.lower():
                header = get_theme_headers(reader.read_entry_prefix(index, config.header_bytes))
                if header is not None:
                    logger.debug(f"Found theme headers in {entry.name}")
                    stylesheet = entry.name
                    package_type = "theme"
            elif entry.extension == config.plugin_extension:
                header = get_plugin_headers(reader.read_entry_prefix(index, config.header_bytes))
                if header is not None:
                    logger.debug(f"Found plugin headers in {entry.name}")
                    plugin_file = entry.name
                    package_type = "plugin"
        except ENTRY_READ_ERRORS as e:
            logger.warning(f"Failed to read {entry.name}, skipping: {e}")

    if package_type is None:
        return None

    return PackageResult(
        type=package_type,
        header=header,
        readme=readme,
        plugin_file=plugin_file,
        stylesheet=stylesheet,
    )


def parse_package(
    source: ArchiveSource,
    apply_markdown: bool = False,
    *,
    config: Optional[ScanConfig] = None,
    transform: Optional[Callable[[str], str]] = None,
    on_entry: Optional[EntryCallback] = None,
) -> Optional[PackageResult]:
    """
    从 ZIP 包中提取插件/主题元数据和 readme.txt

    Args:
        source: ZIP 文件路径、ZIP 字节数据或二进制文件对象
        apply_markdown: 是否将 readme 段落转换为 HTML

    Returns:
        PackageResult；文件不存在、无法打开或不包含插件/主题时返回 None
    """
    try:
        with open_archive(source) as reader:
            return scan_archive(
                reader,
                apply_markdown,
                config=config,
                transform=transform,
                on_entry=on_entry,
            )
    except ArchiveOpenError as e:
        label = source if isinstance(source, (str, Path)) else "<archive data>"
        logger.warning(f"Cannot read package {label}: {e}")
        return None
