"""
日志模块

使用 loguru 提供统一的日志记录功能。
"""

import os
import sys
from typing import Optional

from loguru import logger


def setup_logger(
    level: Optional[str] = None,
    sink=sys.stderr,
    colorize: Optional[bool] = None,
) -> None:
    """
    设置日志记录器

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        sink: 输出目标
        colorize: 是否启用颜色，默认仅在终端输出时启用
    """
    if level is None:
        level = "DEBUG" if os.environ.get("GLASSFETCH_DEBUG", "0") == "1" else "INFO"
    if colorize is None:
        colorize = hasattr(sink, "isatty") and sink.isatty()

    logger.remove()
    logger.add(
        sink=sink,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <8}</level> | {message}",
        level=level,
        colorize=colorize,
        backtrace=(level == "DEBUG"),
        diagnose=(level == "DEBUG"),
    )

    if level == "DEBUG":
        logger.debug("DEBUG 模式已启用")


__all__ = ["logger", "setup_logger"]
