"""
文件校验器

计算 SHA256 并与预期值比对，校验失败的文件会被删除。
"""

import hashlib
import os
from typing import Optional

import aiofiles
from loguru import logger

from glassfetch.models import VerifyStatus


class FileVerifier:
    """文件校验器"""

    chunk_size = 65536

    @staticmethod
    async def calc_sha256(file_path: str) -> Optional[str]:
        """
        计算文件的 SHA256 值

        Args:
            file_path: 文件路径

        Returns:
            十六进制摘要，文件不存在时返回 None
        """
        if not os.path.isfile(file_path):
            return None

        sha256 = hashlib.sha256()
        async with aiofiles.open(file_path, "rb") as f:
            while True:
                data = await f.read(FileVerifier.chunk_size)
                if not data:
                    break
                sha256.update(data)
        return sha256.hexdigest()

    @staticmethod
    async def check(file_path: str, expected_sha256: str) -> VerifyStatus:
        """
        校验文件，摘要不匹配时删除文件

        比较是区分大小写的十六进制字符串比较。
        """
        current = await FileVerifier.calc_sha256(file_path)
        if current is None:
            logger.info(f"[缺失] 文件不存在: {file_path}")
            return VerifyStatus.MISSING

        if current == expected_sha256:
            logger.info(f"[通过] 文件校验通过: {file_path}")
            return VerifyStatus.VERIFIED

        logger.info(f"[移除] 删除校验失败的文件: {file_path}")
        logger.debug(f"预期 {expected_sha256}，实际 {current}")
        os.remove(file_path)
        return VerifyStatus.MISMATCH

    @staticmethod
    async def verify_source(file_path: str, expected_sha256: str) -> bool:
        """校验通过返回 True；否则（缺失或已删除）返回 False"""
        status = await FileVerifier.check(file_path, expected_sha256)
        return status is VerifyStatus.VERIFIED
