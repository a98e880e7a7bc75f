"""
pytest 公共夹具

提供 zip 数据构造与伪造的 aiohttp session。
"""

import io
import sys
import zipfile
from unittest.mock import AsyncMock, MagicMock

import pytest

from glassfetch.logger import logger, setup_logger


@pytest.fixture
def make_zip():
    """按顺序写入条目，值为 None 的条目作为目录"""

    def _make(entries):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            for name, content in entries:
                if content is None:
                    archive.writestr(zipfile.ZipInfo(name.rstrip("/") + "/"), b"")
                else:
                    archive.writestr(name, content)
        return buffer.getvalue()

    return _make


@pytest.fixture
def fake_session():
    """返回一个 GET/POST 都响应给定内容的 session"""

    def _make(body: bytes = b"", status: int = 200, error: Exception = None):
        response = MagicMock()
        response.status = status
        response.read = AsyncMock(return_value=body)

        session = MagicMock()
        session.closed = False
        for method in (session.get, session.post):
            if error is not None:
                method.return_value.__aenter__.side_effect = error
            else:
                method.return_value.__aenter__.return_value = response
        return session

    return _make


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI 会把日志输出指向临时流，测试结束后恢复"""
    yield
    setup_logger(sink=sys.stderr, colorize=False)


@pytest.fixture
def log_records():
    """收集 loguru 日志记录"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
