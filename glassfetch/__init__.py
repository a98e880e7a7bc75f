"""
GlassFetch - 玻璃目录文件校验与下载工具
"""

__version__ = "0.1.0"

from glassfetch.download import FileVerifier, SourceFetcher
from glassfetch.models import GlassFetchConfig, SourceDescriptor, VerifyReport
from glassfetch.sources import SourceVerifier, verify_sources

__all__ = [
    "__version__",
    "FileVerifier",
    "GlassFetchConfig",
    "SourceDescriptor",
    "SourceFetcher",
    "SourceVerifier",
    "VerifyReport",
    "verify_sources",
]
