"""
数据模型定义

包含归档扫描使用的所有数据类。
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Optional

from wp_package_parser.core.readme import ReadmeDocument


# ============================================================
# 配置
# ============================================================

# 只检查根目录及其下一级目录中的文件
DEFAULT_MAX_DEPTH = 1

# WordPress 只扫描文件的前 8 KiB 来查找元数据头
DEFAULT_HEADER_BYTES = 8 * 1024


@dataclass
class ScanConfig:
    """
    扫描配置

    Attributes:
        max_depth: 允许的最大目录深度（路径中 "/" 的数量）
        header_bytes: 读取插件/主题文件的字节数
        readme_name: readme 文件名（不区分大小写）
        stylesheet_name: 主题样式表文件名（不区分大小写）
        plugin_extension: 插件主文件扩展名
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    header_bytes: int = DEFAULT_HEADER_BYTES
    readme_name: str = "readme.txt"
    stylesheet_name: str = "style.css"
    plugin_extension: str = "php"


# ============================================================
# 数据模型
# ============================================================

def normalize_entry_name(name: str) -> str:
    """反斜杠转为斜杠，并去掉首尾斜杠"""
    return name.replace('\\', '/').strip('/')


@dataclass
class ArchiveEntry:
    """
    归档条目

    Attributes:
        index: 条目在归档中的序号
        name: 规范化后的相对路径
        size: 解压后的大小（字节）
    """
    index: int
    name: str
    size: int

    @property
    def depth(self) -> int:
        return self.name.count('/')

    @property
    def basename(self) -> str:
        return self.name.rsplit('/', 1)[-1]

    @property
    def extension(self) -> str:
        return self.name.rsplit('.', 1)[-1].lower()


@dataclass
class PackageResult:
    """
    插件或主题包的解析结果

    Attributes:
        type: "plugin" 或 "theme"
        header: 插件或主题的元数据头
        readme: readme.txt 解析结果（如果存在且有效）
        plugin_file: 插件主文件的相对路径（仅插件）
        stylesheet: 主题 style.css 的相对路径（仅主题）
    """
    type: Literal["plugin", "theme"]
    header: dict[str, Any] = field(default_factory=dict)
    readme: Optional[ReadmeDocument] = None
    plugin_file: Optional[str] = None
    stylesheet: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        """序列化为 JSON 字符串"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "PackageResult":
        """从 JSON 字符串反序列化"""
        data = json.loads(json_str)
        readme = data.get("readme")
        return cls(
            type=data["type"],
            header=data.get("header", {}),
            readme=ReadmeDocument(**readme) if readme else None,
            plugin_file=data.get("plugin_file"),
            stylesheet=data.get("stylesheet"),
        )
