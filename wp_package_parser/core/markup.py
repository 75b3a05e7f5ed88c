"""
readme.txt 段落的 Markdown 转换

使用 markdown-it-py 将段落内容渲染为 HTML。WordPress 的 readme 标准
还使用了一些自定义标记，例如 "= H4 标题 ="，在渲染前先转换为 <h4>。
"""

import re
from typing import Callable

from markdown_it import MarkdownIt

# 段落转换函数类型：接收原始文本，返回 HTML
MarkupTransform = Callable[[str], str]

# "= 标题 =" 独占一行
H4_HEADER_PATTERN = re.compile(r'^[ \t]*=[ \t]*(.+?)[ \t]*=[ \t]*$', re.MULTILINE)


def convert_h4_headers(text: str) -> str:
    """把 "= 标题 =" 行改写为 <h4> 标签，后面补一个空行使其成为独立的 HTML 块"""
    return H4_HEADER_PATTERN.sub(r'<h4>\1</h4>\n', text)


# CommonMark 渲染器（允许内嵌 HTML），只读，可在多次调用间共享
_MARKDOWN = MarkdownIt("commonmark", {"html": True})


def markdown_to_html(text: str) -> str:
    """CommonMark 渲染"""
    return _MARKDOWN.render(text)
