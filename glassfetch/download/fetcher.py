"""
数据源下载器

通过 GET 或表单 POST 获取 zip 压缩包，并把其中的目录文件写入本地。
"""

import os
from dataclasses import dataclass
from typing import Optional

import aiofiles
import aiohttp
from loguru import logger

from glassfetch.download.archive import extract_last_file
from glassfetch.exceptions import DownloadError, DownloadFileError, DownloadNetworkError

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


@dataclass
class DownloadResult:
    """下载结果"""

    path: str
    url: str
    success: bool
    size: int = 0
    error: Optional[str] = None


class SourceFetcher:
    """数据源下载器"""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owned_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owned_session = True
        return self._session

    async def _request(self, url: str, post_data: Optional[str]) -> bytes:
        if post_data is None:
            request = self.session.get(url)
        else:
            request = self.session.post(url, data=post_data, headers=FORM_HEADERS)

        try:
            async with request as response:
                if response.status >= 400:
                    raise DownloadNetworkError(
                        f"HTTP {response.status}",
                        context={"url": url, "status": response.status},
                    )
                return await response.read()
        except aiohttp.ClientError as e:
            raise DownloadNetworkError(f"请求失败: {e}", context={"url": url})

    async def _write(self, path: str, content: bytes) -> None:
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            raise DownloadFileError(f"写入文件失败: {e}", context={"path": path})

    async def download_source(
        self, path: str, url: str, post_data: Optional[str] = None
    ) -> DownloadResult:
        """
        下载并解压数据源到 ``path``

        Args:
            path: 目标文件路径，已存在时会被覆盖
            url: 下载地址
            post_data: 表单编码的请求体，提供时改用 POST

        Returns:
            DownloadResult，失败时 success 为 False，不抛出异常
        """
        logger.info(f"[下载] 从 {url} 获取数据源")
        try:
            body = await self._request(url, post_data)
            content = extract_last_file(body)
            await self._write(path, content)
        except DownloadError as e:
            logger.error(f"[错误] 下载 {url} 失败: {e}")
            return DownloadResult(path=path, url=url, success=False, error=str(e))
        except Exception as e:
            logger.error(f"[错误] 下载 {url} 时发生异常: {e!r}")
            return DownloadResult(path=path, url=url, success=False, error=repr(e))

        logger.debug(f"[完成] 已写入 {len(content)} 字节到 {path}")
        return DownloadResult(path=path, url=url, success=True, size=len(content))

    async def close(self) -> None:
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
