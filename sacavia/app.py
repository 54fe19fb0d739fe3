"""应用启动入口。"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from sacavia.config import Config
from sacavia.diagnostics.logs import get_logs, init_log_buffer, log_api_configuration
from sacavia.media.urls import MediaURLResolver

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def _log_level(environ: Mapping[str, str]) -> str:
    value = environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    name = value.strip().upper() if isinstance(value, str) else ""
    # 未知级别名 getLevelName 返回 "Level xxx" 字符串
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class App:
    config: Config
    resolver: MediaURLResolver

    def recent_logs(self, limit: int = 200) -> list[str]:
        """调试页面用：返回内存缓冲中最近的日志行。"""
        return get_logs(limit)


def create_app(environ: Mapping[str, str] | None = None) -> App:
    """进程启动时调用一次：初始化日志、确定环境、打印 API 配置。"""
    source = os.environ if environ is None else environ
    level = _log_level(source)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")
    init_log_buffer()
    config = Config.from_env(source)
    log_api_configuration(config)
    logger.info("Sacavia 客户端已启动 (%s)", config.environment_name)
    return App(config=config, resolver=MediaURLResolver(config))
