"""预设目录

进程级只读数据：按 (类型, 等级) 索引的要求组。应用预设时把其中的
Requirement 复制进构建器（Requirement 本身不可变，目录不会被实例修改）。

    password: low / medium / high
    username: standard / strict

使用示例:
    from regexcraft.presets import get_preset, PresetType

    for requirement in get_preset(PresetType.PASSWORD, "high"):
        print(requirement.message)
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from .exceptions import PresetNotFoundError
from .fragments import (
    DIGIT_CLASS,
    LOWERCASE_CLASS,
    UPPERCASE_CLASS,
    Fragment,
    Requirement,
    at_least,
)


class PresetType(str, Enum):
    """预设类型"""

    PASSWORD = "password"
    USERNAME = "username"


# 密码预设使用的特殊字符集
PASSWORD_SPECIAL_CLASS = "!@#$%^&*"


def _min_chars(length: int) -> Fragment:
    return Fragment.lookahead(f".{{{length},}}")


_PASSWORD_PRESETS: Dict[str, Tuple[Requirement, ...]] = {
    "low": (
        Requirement(_min_chars(6), "At least 6 characters"),
        Requirement(at_least(DIGIT_CLASS), "At least one number"),
    ),
    "medium": (
        Requirement(_min_chars(8), "At least 8 characters"),
        Requirement(at_least(DIGIT_CLASS), "At least one number"),
        Requirement(at_least(LOWERCASE_CLASS), "At least one lowercase letter"),
        Requirement(at_least(UPPERCASE_CLASS), "At least one uppercase letter"),
    ),
    "high": (
        Requirement(_min_chars(10), "At least 10 characters"),
        Requirement(at_least(DIGIT_CLASS, 2), "At least two numbers"),
        Requirement(at_least(LOWERCASE_CLASS), "At least one lowercase letter"),
        Requirement(at_least(UPPERCASE_CLASS), "At least one uppercase letter"),
        Requirement(at_least(PASSWORD_SPECIAL_CLASS), "At least one special character"),
    ),
}

_USERNAME_PRESETS: Dict[str, Tuple[Requirement, ...]] = {
    "standard": (
        Requirement(
            Fragment.anchored("[a-zA-Z][a-zA-Z0-9_]{2,29}"),
            "Letters, numbers and underscore only, at least 2 characters",
        ),
    ),
    "strict": (
        Requirement(
            Fragment.anchored("[a-zA-Z][a-zA-Z0-9]{5,29}"),
            "Letters and numbers only, at least 5 characters",
        ),
    ),
}

PRESETS: Mapping[PresetType, Mapping[str, Tuple[Requirement, ...]]] = MappingProxyType({
    PresetType.PASSWORD: MappingProxyType(_PASSWORD_PRESETS),
    PresetType.USERNAME: MappingProxyType(_USERNAME_PRESETS),
})


def get_preset(preset_type: Union[str, PresetType], level: str) -> Tuple[Requirement, ...]:
    """获取预设要求组

    Args:
        preset_type: 预设类型（password / username）
        level: 等级

    Returns:
        按顺序排列的 Requirement 元组

    Raises:
        PresetNotFoundError: 类型或等级不存在
    """
    try:
        key = PresetType(preset_type)
    except ValueError:
        raise PresetNotFoundError(str(preset_type), str(level)) from None

    levels = PRESETS[key]
    if level not in levels:
        raise PresetNotFoundError(key.value, str(level), available_levels=list(levels))
    return levels[level]


def get_preset_levels(preset_type: Union[str, PresetType]) -> list:
    """获取某类型下可用的等级列表，未知类型返回空列表"""
    try:
        return list(PRESETS[PresetType(preset_type)])
    except ValueError:
        return []


__all__ = [
    "PresetType",
    "PRESETS",
    "PASSWORD_SPECIAL_CLASS",
    "get_preset",
    "get_preset_levels",
]
