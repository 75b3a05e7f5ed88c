"""
readme.txt 解析器

解析 WordPress.org 格式的 readme.txt：

    === Plugin Name ===
    Contributors: alice, bob
    Tags: tag1, tag2
    Requires at least: 5.0
    Tested up to: 6.4
    Stable tag: 1.0

    Short description.

    == Description ==
    ...

解析按固定的状态顺序推进（标题 -> 头部 -> 简介 -> 段落），
只使用一个向前移动的行游标。并不完全模拟 wordpress.org 的解析行为。
"""

import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Callable, Optional

from wp_package_parser.core.text import decode_text


# ============================================================
# 配置常量
# ============================================================

# 标题行，例如 "=== My Plugin ==="
TITLE_PATTERN = re.compile(r'={3,}\s*(.+?)\s*={3,}')

# 段落标题行，例如 "== Installation =="
SECTION_PATTERN = re.compile(r'^\s*==\s+(.+?)\s+==\s*$')

# readme 头部标签 -> ReadmeDocument 字段
README_HEADER_FIELDS: dict[str, str] = {
    "Contributors": "contributors",
    "Donate link": "donate",
    "Tags": "tags",
    "Requires at least": "requires",
    "Tested up to": "tested",
    "Stable tag": "stable",
}

# 逗号分隔的列表字段
LIST_FIELDS = ("contributors", "tags")


# ============================================================
# 数据模型
# ============================================================

@dataclass
class ReadmeDocument:
    """
    解析后的 readme.txt

    Attributes:
        name: 插件名称
        contributors: wordpress.org 用户名列表
        donate: 捐赠链接
        tags: 标签列表
        requires: 最低 WordPress 版本
        tested: 已测试的最高 WordPress 版本
        stable: 最新稳定版的 SVN 标签（或 "trunk"）
        short_description: 简短描述
        sections: 段落标题 -> 段落内容，保留标题的大小写和格式
    """
    name: str
    contributors: list[str] = field(default_factory=list)
    donate: str = ""
    tags: list[str] = field(default_factory=list)
    requires: str = ""
    tested: str = ""
    stable: str = ""
    short_description: str = ""
    sections: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


class ParserState(Enum):
    """解析状态"""
    READING_TITLE = "title"
    READING_HEADERS = "headers"
    READING_SUMMARY = "summary"
    READING_SECTIONS = "sections"
    DONE = "done"


class _LineCursor:
    """单向行游标"""

    def __init__(self, lines: list[str]):
        self._lines = lines
        self._pos = 0

    def has_next(self) -> bool:
        return self._pos < len(self._lines)

    def next(self) -> Optional[str]:
        if not self.has_next():
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line


# ============================================================
# 解析函数
# ============================================================

def _split_list(value: str) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(',')]


def _flush_section(doc: ReadmeDocument, title: Optional[str], buffer: list[str]) -> None:
    """保存上一个段落；重复的标题保留首次出现的位置，内容以最后一次为准"""
    if title is not None:
        doc.sections[title] = '\n'.join(buffer).strip()


def _render_sections(
    sections: dict[str, str],
    transform: Optional[Callable[[str], str]],
) -> dict[str, str]:
    from wp_package_parser.core.markup import convert_h4_headers

    if transform is None:
        from wp_package_parser.core.markup import markdown_to_html
        transform = markdown_to_html

    return {
        title: transform(convert_h4_headers(content))
        for title, content in sections.items()
    }


def parse_readme(
    readme_txt: str | bytes,
    apply_markdown: bool = False,
    transform: Optional[Callable[[str], str]] = None,
) -> Optional[ReadmeDocument]:
    """
    解析 readme.txt 内容

    Args:
        readme_txt: readme.txt 的内容
        apply_markdown: 是否将段落内容转换为 HTML
        transform: 段落转换函数（str -> str），默认使用 markdown-it-py

    Returns:
        ReadmeDocument；首行不是 "=== 名称 ===" 形式时返回 None
    """
    text = decode_text(readme_txt).strip(" \t\n\r")
    lines = [line.rstrip('\r') for line in text.split('\n')]
    cursor = _LineCursor(lines)

    fields: dict[str, str] = {}
    doc: Optional[ReadmeDocument] = None
    current_section: Optional[str] = None
    buffer: list[str] = []

    state = ParserState.READING_TITLE
    while state is not ParserState.DONE:
        if state is ParserState.READING_TITLE:
            match = TITLE_PATTERN.search(cursor.next() or '')
            name = match.group(1).strip() if match else ''
            if not name:
                return None
            doc = ReadmeDocument(name=name)
            state = ParserState.READING_HEADERS

        elif state is ParserState.READING_HEADERS:
            # 行耗尽时按空行处理
            key, sep, value = (cursor.next() or '').partition(':')
            if key in README_HEADER_FIELDS:
                fields[README_HEADER_FIELDS[key]] = value.strip() if sep else ''
            if not key.strip():
                for attr, raw in fields.items():
                    setattr(doc, attr, _split_list(raw) if attr in LIST_FIELDS else raw)
                state = ParserState.READING_SUMMARY

        elif state is ParserState.READING_SUMMARY:
            doc.short_description = cursor.next() or ''
            state = ParserState.READING_SECTIONS

        elif state is ParserState.READING_SECTIONS:
            if not cursor.has_next():
                _flush_section(doc, current_section, buffer)
                state = ParserState.DONE
                continue

            line = cursor.next()
            match = SECTION_PATTERN.match(line)
            if match:
                _flush_section(doc, current_section, buffer)
                current_section = match.group(1)
                buffer = []
            else:
                buffer.append(line)

    if apply_markdown:
        doc.sections = _render_sections(doc.sections, transform)

    return doc
