"""
GlassFetch 下载层

包含文件校验、下载与压缩包解析。
"""

from glassfetch.download.archive import extract_last_file
from glassfetch.download.fetcher import DownloadResult, SourceFetcher
from glassfetch.download.verifier import FileVerifier

__all__ = [
    "DownloadResult",
    "FileVerifier",
    "SourceFetcher",
    "extract_last_file",
]
