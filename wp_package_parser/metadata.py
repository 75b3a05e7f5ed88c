"""
更新检查器元数据

将 PackageResult 展平为 plugin-update-checker 使用的元数据格式。
这是旧接口，保留用于向后兼容。
"""

import re
from pathlib import Path, PurePosixPath
from typing import Any, Optional, Union

from wp_package_parser.archive.models import PackageResult
from wp_package_parser.archive.scanner import parse_package
from wp_package_parser.core.headers import strip_tags


# 元数据头字段 -> 元数据字段
HEADER_META_FIELDS: dict[str, str] = {
    "Name": "name",
    "Version": "version",
    "PluginURI": "homepage",
    "Author": "author",
    "AuthorURI": "author_homepage",
}

README_META_FIELDS = ("requires", "tested")


def normalize_section_name(name: str) -> str:
    """段落名转为小写，空格替换为下划线（Upgrade Notice -> upgrade_notice）"""
    return name.lower().replace(' ', '_')


def extract_upgrade_notice(upgrade_notice_html: str, version: str) -> Optional[str]:
    """
    从已渲染为 HTML 的 "Upgrade Notice" 段落中提取指定版本的升级提示

    形如 <h4>1.2</h4><p>提示内容</p>，取版本标题后的第一个段落。
    """
    pattern = re.compile(
        r'<h4>\s*' + re.escape(version) + r'\s*</h4>[^<>]*?<p>(.+?)</p>',
        re.IGNORECASE | re.DOTALL,
    )
    match = pattern.search(upgrade_notice_html)
    if not match:
        return None
    return strip_tags(match.group(1)).strip()


def get_plugin_package_meta(
    package_info: Union[str, Path, PackageResult, None],
) -> dict[str, Any]:
    """
    提取插件包元数据

    Args:
        package_info: ZIP 文件路径，或 parse_package() 的返回值

    Returns:
        元数据字典，可能包含 name、version、homepage、author、author_homepage、
        requires、tested、sections、upgrade_notice、slug
    """
    if isinstance(package_info, (str, Path)):
        package_info = parse_package(package_info, True) if Path(package_info).is_file() else None

    meta: dict[str, Any] = {}
    if package_info is None:
        return meta

    for header_field, meta_field in HEADER_META_FIELDS.items():
        value = package_info.header.get(header_field)
        if value:
            meta[meta_field] = value

    readme = package_info.readme
    if readme is not None:
        for readme_field in README_META_FIELDS:
            value = getattr(readme, readme_field)
            if value:
                meta[readme_field] = value

        if readme.sections:
            meta["sections"] = {
                normalize_section_name(name): content
                for name, content in readme.sections.items()
            }

        upgrade_notice = meta.get("sections", {}).get("upgrade_notice")
        if upgrade_notice is not None and "version" in meta:
            notice = extract_upgrade_notice(upgrade_notice, meta["version"])
            if notice is not None:
                meta["upgrade_notice"] = notice

    if package_info.plugin_file:
        slug = PurePosixPath(package_info.plugin_file).parent.name.lower()
        if slug:
            meta["slug"] = slug

    return meta
