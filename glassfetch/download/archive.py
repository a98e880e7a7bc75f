"""
压缩包解析

从下载得到的 zip 数据中取出目录文件。
"""

import io
import zipfile

from glassfetch.exceptions import DownloadArchiveError


def extract_last_file(data: bytes) -> bytes:
    """
    返回压缩包中最后一个文件条目的内容

    压缩包通常只包含一个目录文件，前面可能有目录条目或说明文件，
    因此取条目列表中的最后一个文件（跳过目录条目）。
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            entries = [info for info in archive.infolist() if not info.is_dir()]
            if not entries:
                raise DownloadArchiveError("压缩包中没有文件")
            return archive.read(entries[-1])
    except zipfile.BadZipFile as e:
        raise DownloadArchiveError(
            f"无法解析 zip 压缩包: {e}", context={"size": len(data)}
        )
