"""
文本解码

尽力将归档条目的字节内容解码为文本。
"""

import codecs
import logging

logger = logging.getLogger(__name__)

# UTF-8 字符最多 4 字节，截断读取最多切掉 3 字节
_MAX_PARTIAL_SEQUENCE = 3


def decode_text(data: bytes | str) -> str:
    """
    将字节解码为文本，不会抛出异常

    先按 UTF-8 解码（去掉 BOM）；如果只是末尾的多字节字符被截断读取切开，
    则丢弃这个不完整的字符；其他情况回退为 Latin-1。

    Args:
        data: 字节内容（已是字符串时原样返回）

    Returns:
        解码后的文本
    """
    if isinstance(data, str):
        return data

    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        if e.reason == "unexpected end of data" and e.start >= len(data) - _MAX_PARTIAL_SEQUENCE:
            return data[:e.start].decode("utf-8")
        logger.debug(f"Input is not valid UTF-8 ({e.reason}), decoding as Latin-1")
        return data.decode("latin-1")
