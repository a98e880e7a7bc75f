"""
数据源校验

逐个校验本地目录文件，缺失或损坏时尝试下载一次并重新校验。
"""

import os
from typing import Any, List, MutableSequence, Optional

import aiohttp
from loguru import logger

from glassfetch.download import FileVerifier, SourceFetcher
from glassfetch.models import SourceDescriptor, SourceOutcome, VerifyReport


class SourceVerifier:
    """数据源校验器"""

    def __init__(
        self,
        source_dir: str,
        extension: str = "agf",
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.source_dir = source_dir
        self.extension = extension
        self.verifier = FileVerifier()
        self.fetcher = SourceFetcher(session)

    def source_path(self, source: SourceDescriptor) -> str:
        return os.path.join(self.source_dir, source.filename(self.extension))

    async def verify(self, source: SourceDescriptor) -> SourceOutcome:
        """校验单个数据源，必要时下载一次"""
        path = self.source_path(source)
        status = await self.verifier.check(path, source.sha256)
        outcome = SourceOutcome(name=source.name, path=path, status=status)
        if outcome.verified or not source.has_download:
            return outcome

        result = await self.fetcher.download_source(path, source.url, source.post_data)
        outcome.attempted = True
        outcome.error = result.error
        outcome.status = await self.verifier.check(path, source.sha256)
        return outcome

    async def run(self, sources: List[Any]) -> VerifyReport:
        """按顺序处理所有数据源"""
        report = VerifyReport()
        try:
            for item in sources:
                source = SourceDescriptor.coerce(item)
                report.outcomes.append(await self.verify(source))
        finally:
            await self.fetcher.close()

        if report.dropped:
            logger.warning(
                f"{len(report.dropped)} 个数据源未通过校验: {', '.join(report.dropped)}"
            )
        return report


async def verify_sources(
    sources: MutableSequence[Any],
    source_dir: str,
    extension: str = "agf",
    session: Optional[aiohttp.ClientSession] = None,
) -> MutableSequence[Any]:
    """
    校验 ``source_dir`` 中的数据源文件

    ``sources`` 中的每一项为 ``[name, sha256, url, post_data]``（后两项可选）
    或 SourceDescriptor。未通过校验的项会从 ``sources`` 中原地删除，
    剩余项保持原有顺序。返回同一个列表对象。
    """
    report = await SourceVerifier(source_dir, extension, session).run(list(sources))
    sources[:] = [
        item for item, outcome in zip(list(sources), report.outcomes) if outcome.verified
    ]
    return sources
