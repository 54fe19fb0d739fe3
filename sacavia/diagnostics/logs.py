"""内存日志缓冲与 API 配置诊断。"""

from __future__ import annotations

import logging
from collections import deque
from threading import Lock

from sacavia.config import Config

logger = logging.getLogger(__name__)

_MAX_LOG_LINES = 1000
_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_buffer: deque[str] = deque(maxlen=_MAX_LOG_LINES)
_lock = Lock()


class InMemoryLogHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        with _lock:
            _buffer.append(message)


def init_log_buffer(level: int = logging.DEBUG) -> None:
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, InMemoryLogHandler):
            return
    handler = InMemoryLogHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)


def get_logs(limit: int = 200) -> list[str]:
    safe_limit = min(max(limit, 1), _MAX_LOG_LINES)
    with _lock:
        return list(_buffer)[-safe_limit:]


def log_api_configuration(config: Config) -> None:
    """启动时打印当前环境与基础地址，仅在 DEBUG 级别输出。"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("API Configuration:")
    logger.debug("Environment: %s", config.environment_name)
    logger.debug("Base URL: %s", config.base_api_url)
