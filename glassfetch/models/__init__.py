"""
GlassFetch 数据模型包

包含配置模型和数据源模型定义。
"""

from glassfetch.models.config import GlassFetchConfig
from glassfetch.models.source import (
    SourceDescriptor,
    SourceOutcome,
    VerifyReport,
    VerifyStatus,
)

__all__ = [
    "GlassFetchConfig",
    "SourceDescriptor",
    "SourceOutcome",
    "VerifyReport",
    "VerifyStatus",
]
