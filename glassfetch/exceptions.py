"""
GlassFetch 异常体系

分层的异常结构，带错误代码和上下文信息，可序列化为字典。
"""

from typing import Any, Dict, Optional


class GlassFetchError(Exception):
    """GlassFetch 基础异常类"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        return "E000"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(GlassFetchError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置文件无法解析"""

    def _get_default_code(self) -> str:
        return "E101"


class ConfigValidationError(ConfigError):
    """配置内容不合法"""

    def _get_default_code(self) -> str:
        return "E102"


class DownloadError(GlassFetchError):
    """下载相关错误"""

    def _get_default_code(self) -> str:
        return "E300"


class DownloadNetworkError(DownloadError):
    """网络请求失败或返回错误状态码"""

    def _get_default_code(self) -> str:
        return "E301"


class DownloadArchiveError(DownloadError):
    """响应内容不是可用的 zip 压缩包"""

    def _get_default_code(self) -> str:
        return "E302"


class DownloadFileError(DownloadError):
    """写入目标文件失败"""

    def _get_default_code(self) -> str:
        return "E303"


__all__ = [
    "GlassFetchError",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "DownloadError",
    "DownloadNetworkError",
    "DownloadArchiveError",
    "DownloadFileError",
]
