"""
配置模型
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from glassfetch.exceptions import ConfigValidationError
from glassfetch.models.source import SourceDescriptor


@dataclass
class GlassFetchConfig:
    """GlassFetch 主配置"""

    source_dir: str
    extension: str = "agf"
    sources: List[SourceDescriptor] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GlassFetchConfig":
        if not isinstance(data, dict):
            raise ConfigValidationError("配置内容必须是一个表")

        source_dir = data.get("source_dir")
        if not source_dir or not isinstance(source_dir, str):
            raise ConfigValidationError("缺少 source_dir 配置")

        extension = data.get("extension", "agf")
        if not isinstance(extension, str) or not extension.strip("."):
            raise ConfigValidationError(
                "extension 必须是非空字符串", context={"extension": extension}
            )

        # [[source]] 表与 sources 数组可以同时存在
        arrays = data.get("sources") or []
        tables = data.get("source") or []
        if not isinstance(arrays, list):
            raise ConfigValidationError("sources 必须是列表")
        if not isinstance(tables, list):
            raise ConfigValidationError("source 必须是表数组")
        raw_sources = arrays + tables

        return cls(
            source_dir=source_dir,
            extension=extension.lstrip("."),
            sources=[SourceDescriptor.coerce(item) for item in raw_sources],
        )
