"""媒体 URL 构建与规范化。"""

from __future__ import annotations

import re
import string
from urllib.parse import urlsplit

from sacavia.config import Config

LEGACY_HOST = "www.sacavia.com"
CANONICAL_HOST = "sacavia.com"
LEGACY_MEDIA_PATH = "/api/media/"
MEDIA_FILE_PATH = "/api/media/file/"

# RFC 3986 允许出现在 URL 中的字符
_URL_CHARS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _is_absolute_url(candidate: str) -> bool:
    if not candidate or any(ch not in _URL_CHARS for ch in candidate):
        return False
    if _BAD_ESCAPE_RE.search(candidate):
        return False
    try:
        parts = urlsplit(candidate)
        parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


def _to_url(candidate: str) -> str | None:
    return candidate if _is_absolute_url(candidate) else None


def canonicalize_host(url: str) -> str:
    # "www.www.sacavia.com" 替换一次后仍含旧域名
    while LEGACY_HOST in url:
        url = url.replace(LEGACY_HOST, CANONICAL_HOST)
    return url


def canonicalize_media_path(path: str) -> str:
    if LEGACY_MEDIA_PATH in path and MEDIA_FILE_PATH not in path:
        return path.replace(LEGACY_MEDIA_PATH, MEDIA_FILE_PATH)
    return path


def resolve_media_url(value: str | None, base_url: str) -> str | None:
    """把完整 URL、根相对路径或文件名/ID 解析为绝对 URL。

    分支按顺序互斥：http 开头 -> "/" 开头 -> 不含 "/" -> 其余直接拼接。
    空白输入或拼出的地址不合法时返回 None，不抛异常。
    """
    if not value:
        return None
    processed = value.strip()
    if not processed:
        return None

    if processed.startswith("http"):
        return _to_url(canonicalize_host(processed))

    if processed.startswith("/"):
        return _to_url(f"{base_url}{canonicalize_media_path(processed)}")

    if "/" not in processed:
        return _to_url(f"{base_url}{MEDIA_FILE_PATH}{processed}")

    return _to_url(f"{base_url}{processed}")


def process_video_url(url: str) -> str:
    """播放前修正视频地址：去掉 www、补全 /api/media/file/、强制 https。

    修正后不合法时原样返回。
    """
    processed = canonicalize_media_path(canonicalize_host(url))
    if processed.startswith("http://"):
        processed = processed.replace("http://", "https://")
    return processed if _is_absolute_url(processed) else url


def build_api_url(config: Config, path: str) -> str:
    return f"{config.base_api_url}/{path.lstrip('/')}"


class MediaURLResolver:
    """绑定一份 Config 的解析器，供页面直接调用。"""

    def __init__(self, config: Config) -> None:
        self.config = config

    def resolve(self, value: str | None) -> str | None:
        return resolve_media_url(value, self.config.base_api_url)

    def __call__(self, value: str | None) -> str | None:
        return self.resolve(value)
