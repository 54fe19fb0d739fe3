"""头像占位用的姓名缩写。"""

from __future__ import annotations

import unicodedata

FALLBACK_INITIALS = "U"


def _leading_chars(text: str, count: int) -> str:
    """取前 count 个字符，组合附加符号跟随其基字符（"e\\u0301" 算一个）。

    只合并 unicodedata 的组合符号，emoji ZWJ 序列仍按码点计数。
    """
    taken = 0
    end = 0
    for index, ch in enumerate(text):
        if unicodedata.combining(ch) and index > 0:
            end = index + 1
            continue
        if taken == count:
            break
        taken += 1
        end = index + 1
    return text[:end]


def get_initials(name: str) -> str:
    """取姓名缩写。

    按单个空格切分并保留空段，所以 " John" 得到 "J"（第一段为空），
    "John  Smith" 的第二段也是空串，只得到 "J"。空字符串视为零段，返回 "U"。
    """
    components = name.split(" ") if name else []
    if len(components) >= 2:
        return _leading_chars(components[0], 1).upper() + _leading_chars(components[1], 1).upper()
    if len(components) == 1:
        return _leading_chars(components[0], 2).upper()
    return FALLBACK_INITIALS


def compact_initials(name: str) -> str:
    """关注者列表用的缩写：丢弃空段，取各词首字母，最多两位。"""
    letters = "".join(_leading_chars(word, 1) for word in name.split(" ") if word)
    return _leading_chars(letters.upper(), 2)
