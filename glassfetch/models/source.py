"""
数据源模型

描述一个可校验、可下载的玻璃目录文件，以及校验过程的结果。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from glassfetch.exceptions import ConfigValidationError


class VerifyStatus(Enum):
    """文件校验状态"""

    VERIFIED = "verified"
    MISSING = "missing"
    MISMATCH = "mismatch"


@dataclass
class SourceDescriptor:
    """
    数据源描述

    对应序列形式 ``[name, sha256, url, post_data]``，后两项可省略。
    ``post_data`` 存在时使用 POST 请求（表单编码）代替 GET。
    """

    name: str
    sha256: str
    url: Optional[str] = None
    post_data: Optional[str] = None

    @property
    def has_download(self) -> bool:
        return bool(self.url)

    def filename(self, extension: str = "agf") -> str:
        return f"{self.name}.{extension.lstrip('.')}"

    def to_list(self) -> List[str]:
        items = [self.name, self.sha256]
        if self.url is not None:
            items.append(self.url)
            if self.post_data is not None:
                items.append(self.post_data)
        return items

    @classmethod
    def from_sequence(cls, items: Sequence[str]) -> "SourceDescriptor":
        if not isinstance(items, (list, tuple)) or not 2 <= len(items) <= 4:
            raise ConfigValidationError(
                "数据源格式应为 [name, sha256, url, post_data]，后两项可选",
                context={"source": items},
            )
        for item in items:
            if not isinstance(item, str):
                raise ConfigValidationError(
                    "数据源的每一项都必须是字符串", context={"source": list(items)}
                )
        return cls(*items)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceDescriptor":
        name = data.get("name")
        sha256 = data.get("sha256", data.get("checksum"))
        if not name or not sha256:
            raise ConfigValidationError(
                "数据源缺少 name 或 sha256", context={"source": data}
            )
        for key in ("url", "post_data"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ConfigValidationError(
                    f"数据源字段 {key} 必须是字符串", context={"source": data}
                )
        if not isinstance(name, str) or not isinstance(sha256, str):
            raise ConfigValidationError(
                "数据源的 name 和 sha256 必须是字符串", context={"source": data}
            )
        return cls(
            name=name,
            sha256=sha256,
            url=data.get("url"),
            post_data=data.get("post_data"),
        )

    @classmethod
    def coerce(cls, value: Any) -> "SourceDescriptor":
        """从描述对象、字典或字符串序列构造"""
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        return cls.from_sequence(value)


@dataclass
class SourceOutcome:
    """单个数据源的处理结果"""

    name: str
    path: str
    status: VerifyStatus
    attempted: bool = False
    error: Optional[str] = None

    @property
    def verified(self) -> bool:
        return self.status is VerifyStatus.VERIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "status": self.status.value,
            "downloaded": self.attempted,
            "error": self.error,
        }


@dataclass
class VerifyReport:
    """一次校验任务的汇总"""

    outcomes: List[SourceOutcome] = field(default_factory=list)

    @property
    def verified(self) -> List[str]:
        return [o.name for o in self.outcomes if o.verified]

    @property
    def dropped(self) -> List[str]:
        return [o.name for o in self.outcomes if not o.verified]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "verified": self.verified,
            "dropped": self.dropped,
            "sources": [o.to_dict() for o in self.outcomes],
        }
