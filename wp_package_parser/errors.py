"""
异常定义

公共解析接口不会抛出这些异常，而是返回 None；
它们只在归档打开等内部边界上使用。
"""


class PackageParserError(Exception):
    """解析错误基类"""
    pass


class ArchiveOpenError(PackageParserError):
    """归档无法打开（文件不存在、不可读或不是有效的 ZIP）"""
    pass
