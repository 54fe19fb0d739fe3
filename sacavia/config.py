"""运行环境配置。"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

# 开发环境连本地服务，生产环境连 sacavia.com
IS_DEVELOPMENT = False

DEVELOPMENT_BASE_URL = "http://localhost:3000"
PRODUCTION_BASE_URL = "https://sacavia.com"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key)
    if not isinstance(value, str):
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class Config:
    """API 环境配置，启动时构建一次，之后只读。"""

    is_development: bool = IS_DEVELOPMENT
    base_api_url: str = PRODUCTION_BASE_URL

    @classmethod
    def from_flag(cls, is_development: bool) -> "Config":
        base_api_url = DEVELOPMENT_BASE_URL if is_development else PRODUCTION_BASE_URL
        return cls(is_development=is_development, base_api_url=base_api_url)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """只读取 SACAVIA_DEVELOPMENT 开关，两个地址本身不可覆盖。"""
        source = os.environ if environ is None else environ
        return cls.from_flag(_env_bool(source, "SACAVIA_DEVELOPMENT", IS_DEVELOPMENT))

    @property
    def environment_name(self) -> str:
        return "Development" if self.is_development else "Production"

    @property
    def web_api_url(self) -> str:
        return f"{self.base_api_url}/api"


def get_default_config() -> Config:
    return Config.from_flag(IS_DEVELOPMENT)
