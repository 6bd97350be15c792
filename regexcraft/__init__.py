"""regexcraft

链式构建字符串验证正则：累积长度、字符计数、格式、预设等要求，
组合成一个 AND 正则，并能逐条诊断某个值未满足哪些要求。

快速开始:
    from regexcraft import RegexCraft

    craft = RegexCraft().use_preset("password", "low")
    craft.test_one("trsting").failed_requirements   # ["At least one number"]
    craft.visualize().pattern
"""

from .builder import RegexCraft
from .catalogs import DateFormat, PhoneRegion, get_supported_phone_regions
from .composer import compose, diagnose
from .constraints import CraftStr, craft_validator
from .exceptions import (
    ErrorCode,
    RegexCraftException,
    PresetNotFoundError,
    UnknownRuleError,
    RuleParameterError,
    PatternError,
)
from .fragments import Fragment, FragmentKind, Requirement
from .presets import PresetType, get_preset, get_preset_levels
from .results import TestResult, VisualizationResult

__version__ = "1.0.0"

__all__ = [
    # 构建器
    "RegexCraft",
    # 片段
    "Fragment",
    "FragmentKind",
    "Requirement",
    "compose",
    "diagnose",
    # 目录
    "DateFormat",
    "PhoneRegion",
    "get_supported_phone_regions",
    "PresetType",
    "get_preset",
    "get_preset_levels",
    # 结果
    "TestResult",
    "VisualizationResult",
    # pydantic
    "CraftStr",
    "craft_validator",
    # 异常
    "ErrorCode",
    "RegexCraftException",
    "PresetNotFoundError",
    "UnknownRuleError",
    "RuleParameterError",
    "PatternError",
]
