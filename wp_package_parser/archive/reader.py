"""
归档读取器

扫描器只需要列出条目并读取字节，因此只依赖一个小的 ArchiveReader 协议。
ZipArchiveReader 基于标准库 zipfile 实现该协议。
"""

import io
import logging
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Protocol, Union

from wp_package_parser.archive.models import ArchiveEntry, normalize_entry_name
from wp_package_parser.errors import ArchiveOpenError

logger = logging.getLogger(__name__)

ArchiveSource = Union[str, Path, bytes, BinaryIO]

# 读取单个损坏或加密的条目时可能出现的异常
ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    RuntimeError,
)


class ArchiveReader(Protocol):
    """归档条目的只读访问协议"""

    def entry_count(self) -> int:
        ...

    def stat_entry(self, index: int) -> ArchiveEntry:
        ...

    def read_entry(self, index: int) -> bytes:
        ...

    def read_entry_prefix(self, index: int, max_bytes: int) -> bytes:
        ...

    def close(self) -> None:
        ...


class ZipArchiveReader:
    """基于 zipfile.ZipFile 的归档读取器"""

    def __init__(self, source: ArchiveSource):
        if isinstance(source, bytes):
            source = io.BytesIO(source)
        try:
            self._zip = zipfile.ZipFile(source, "r")
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
            raise ArchiveOpenError(f"Cannot open archive: {e}") from e
        self._infos = self._zip.infolist()
        logger.debug(f"Opened archive with {len(self._infos)} entries")

    def entry_count(self) -> int:
        return len(self._infos)

    def stat_entry(self, index: int) -> ArchiveEntry:
        info = self._infos[index]
        return ArchiveEntry(
            index=index,
            name=normalize_entry_name(info.filename),
            size=info.file_size,
        )

    def read_entry(self, index: int) -> bytes:
        return self._zip.read(self._infos[index])

    def read_entry_prefix(self, index: int, max_bytes: int) -> bytes:
        """最多读取 max_bytes 字节，不解压整个条目"""
        with self._zip.open(self._infos[index]) as f:
            return f.read(max_bytes)

    def close(self) -> None:
        self._zip.close()


@contextmanager
def open_archive(source: ArchiveSource) -> Iterator[ArchiveReader]:
    """
    打开 ZIP 归档，保证在任何退出路径上都会关闭

    Args:
        source: ZIP 文件路径、ZIP 字节数据或二进制文件对象

    Raises:
        ArchiveOpenError: 路径不存在或不可读，或数据不是有效的 ZIP 归档
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise ArchiveOpenError(f"Archive not found: {path}")

    reader = ZipArchiveReader(source)
    try:
        yield reader
    finally:
        reader.close()
