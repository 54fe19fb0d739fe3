"""帖子媒体模型与封面/视频选择。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

VIDEO_MARKERS = ("video", ".mp4", ".mov")

Resolver = Callable[[str], Optional[str]]


def _as_mapping(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _read_optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _read_list_str(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]


def _read_media_url(data: Mapping[str, Any], key: str) -> str | None:
    # featuredImage 可能是字符串，也可能是带 url 的对象
    value = data.get(key)
    if isinstance(value, str):
        return value
    return _read_optional_str(_as_mapping(value), "url")


def looks_like_video(item: str) -> bool:
    return any(marker in item for marker in VIDEO_MARKERS)


@dataclass
class MediaPost:
    """帖子中与媒体相关的字段。"""

    id: str = ""
    featured_image: str | None = None
    image: str | None = None
    photos: list[str] | None = None
    media: list[str] | None = None
    video_thumbnail: str | None = None
    video: str | None = None
    videos: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "MediaPost":
        payload = _as_mapping(data)
        post_id = payload.get("id")
        return cls(
            id=post_id if isinstance(post_id, str) else "",
            featured_image=_read_media_url(payload, "featuredImage"),
            image=_read_optional_str(payload, "image"),
            photos=_read_list_str(payload, "photos"),
            media=_read_list_str(payload, "media"),
            video_thumbnail=_read_optional_str(payload, "videoThumbnail"),
            video=_read_optional_str(payload, "video"),
            videos=_read_list_str(payload, "videos"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "featuredImage": self.featured_image,
            "image": self.image,
            "photos": None if self.photos is None else list(self.photos),
            "media": None if self.media is None else list(self.media),
            "videoThumbnail": self.video_thumbnail,
            "video": self.video,
            "videos": None if self.videos is None else list(self.videos),
        }


def _image_candidates(post: MediaPost) -> list[tuple[str, str | None]]:
    return [
        ("featured image", post.featured_image),
        ("main image", post.image),
        ("first photo", post.photos[0] if post.photos else None),
        ("first media", post.media[0] if post.media else None),
        ("video thumbnail", post.video_thumbnail),
    ]


def pick_image_url(post: MediaPost, resolve: Resolver) -> str | None:
    """按 封面 > 主图 > 首张照片 > 首个媒体 > 视频缩略图 的顺序选图。

    命中第一个存在的字段后直接返回其解析结果，即使结果为 None。
    """
    for label, candidate in _image_candidates(post):
        if candidate is None:
            continue
        url = resolve(candidate)
        logger.debug("帖子 %s 使用 %s: %s", post.id, label, url)
        return url
    logger.debug("帖子 %s 没有可用图片", post.id)
    return None


def has_video(post: MediaPost) -> bool:
    if post.video is not None:
        return True
    if post.videos:
        return True
    return any(looks_like_video(item) for item in post.media or [])


def pick_video_url(post: MediaPost, resolve: Resolver) -> str | None:
    if post.video is not None:
        return resolve(post.video)
    if post.videos:
        return resolve(post.videos[0])
    for item in post.media or []:
        if looks_like_video(item):
            return resolve(item)
    return None
