"""用户资料展示相关工具。"""

from .initials import compact_initials, get_initials

__all__ = ["compact_initials", "get_initials"]
