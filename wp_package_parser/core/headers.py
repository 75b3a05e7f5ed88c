"""
文件头元数据解析器

从插件主文件（PHP）或主题样式表（style.css）的注释头中提取
"Label: value" 形式的元数据，规则与 WordPress 的 get_file_data() 一致：
- 每个字段必须位于单独一行
- 同一字段只取第一次出现的值
- 值在 "*/" 或 "?>" 处截断
"""

import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from bs4 import BeautifulSoup

from wp_package_parser.core.text import decode_text


# ============================================================
# 字段映射（内部键 -> 文件中使用的标签）
# ============================================================

PLUGIN_HEADER_FIELDS: Mapping[str, str] = MappingProxyType({
    "Name": "Plugin Name",
    "PluginURI": "Plugin URI",
    "Version": "Version",
    "Description": "Description",
    "Author": "Author",
    "AuthorURI": "Author URI",
    "TextDomain": "Text Domain",
    "DomainPath": "Domain Path",
    "Network": "Network",
    # "Site Wide Only" 已被 "Network" 取代
    "_sitewide": "Site Wide Only",
})

THEME_HEADER_FIELDS: Mapping[str, str] = MappingProxyType({
    "Name": "Theme Name",
    "ThemeURI": "Theme URI",
    "Description": "Description",
    "Author": "Author",
    "AuthorURI": "Author URI",
    "Version": "Version",
    "Template": "Template",
    "Status": "Status",
    "Tags": "Tags",
    "TextDomain": "Text Domain",
    "DomainPath": "Domain Path",
    "DetailsURI": "Details URI",
})

# 注释结束符或 PHP 结束标记之后的内容都丢弃
CLOSING_MARKER_PATTERN = re.compile(r'\s*(?:\*/|\?>).*')


def _header_pattern(label: str) -> re.Pattern:
    """构造匹配某个标签的正则（标签按字面量匹配）"""
    return re.compile(
        r'^[ \t/*#@]*' + re.escape(label) + r':(.*)$',
        re.IGNORECASE | re.MULTILINE,
    )


def strip_tags(text: str) -> str:
    """移除 HTML 标签，只保留文本（HTML 实体统一解码）"""
    return BeautifulSoup(text, "html.parser").get_text()


def get_file_headers(file_contents: str | bytes, header_map: Mapping[str, str]) -> dict[str, str]:
    """
    从文件内容中提取元数据头

    Args:
        file_contents: 文件内容（只需前 8 KiB，WordPress 本身也只扫描这么多）
        header_map: 内部键 -> 标签 的映射

    Returns:
        每个内部键对应一个去除首尾空白的字符串，未找到时为空字符串
    """
    text = decode_text(file_contents)

    # 兼容以 CR 作为换行符的系统
    text = text.replace('\r', '\n')

    headers: dict[str, str] = {}
    for field, label in header_map.items():
        match = _header_pattern(label).search(text)
        if match and match.group(1).strip():
            headers[field] = CLOSING_MARKER_PATTERN.sub('', match.group(1)).strip()
        else:
            headers[field] = ''

    return headers


def get_plugin_headers(file_contents: str | bytes) -> Optional[dict[str, Any]]:
    """
    解析插件主文件的元数据头

    除字段映射中的键外，结果还包含：
    - Network: bool，插件是否只能在整个网络中启用
    - Title: 与 Name 相同（向后兼容）

    Returns:
        元数据字典；若没有 "Plugin Name" 则认为不是插件文件，返回 None
    """
    headers: dict[str, Any] = get_file_headers(file_contents, PLUGIN_HEADER_FIELDS)

    # "Site Wide Only" 是 "Network" 的旧名称
    sitewide = headers.pop('_sitewide')
    if not headers['Network'] and sitewide:
        headers['Network'] = sitewide
    headers['Network'] = headers['Network'].lower() == 'true'

    headers['Title'] = headers['Name']

    if not headers['Name']:
        return None
    return headers


def get_theme_headers(file_contents: str | bytes) -> Optional[dict[str, Any]]:
    """
    解析主题样式表的元数据头

    Tags 字段会被转换为标签列表（去除 HTML、按逗号拆分、丢弃空项）。

    Returns:
        元数据字典；若没有 "Theme Name" 则返回 None
    """
    headers: dict[str, Any] = get_file_headers(file_contents, THEME_HEADER_FIELDS)

    tags = (tag.strip() for tag in strip_tags(headers['Tags']).split(','))
    headers['Tags'] = [tag for tag in tags if tag]

    if not headers['Name']:
        return None
    return headers
