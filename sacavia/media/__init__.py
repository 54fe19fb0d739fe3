"""媒体地址解析与帖子媒体选择。"""

from .models import MediaPost, has_video, looks_like_video, pick_image_url, pick_video_url
from .urls import (
    CANONICAL_HOST,
    LEGACY_HOST,
    LEGACY_MEDIA_PATH,
    MEDIA_FILE_PATH,
    MediaURLResolver,
    build_api_url,
    canonicalize_host,
    canonicalize_media_path,
    process_video_url,
    resolve_media_url,
)

__all__ = [
    "CANONICAL_HOST",
    "LEGACY_HOST",
    "LEGACY_MEDIA_PATH",
    "MEDIA_FILE_PATH",
    "MediaPost",
    "MediaURLResolver",
    "build_api_url",
    "canonicalize_host",
    "canonicalize_media_path",
    "has_video",
    "looks_like_video",
    "pick_image_url",
    "pick_video_url",
    "process_video_url",
    "resolve_media_url",
]
