"""异常类定义

定义 regexcraft 使用的异常类体系。所有异常都同步抛给直接调用方，
构建器内部不做重试或回滚（抛出前已追加的要求保持不变）。

使用示例:
    from regexcraft import RegexCraft, PresetNotFoundError

    try:
        RegexCraft().use_preset("password", "extreme")
    except PresetNotFoundError as e:
        print(e.code, e.extra["available_levels"])
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ErrorCode(str, Enum):
    """错误代码枚举

    继承自 str，可以直接作为字符串使用和比较。
    """

    REGEXCRAFT_ERROR = "REGEXCRAFT_ERROR"

    # ==================== 预设相关 ====================
    PRESET_NOT_FOUND = "PRESET_NOT_FOUND"

    # ==================== 规则字符串相关 ====================
    UNKNOWN_RULE = "UNKNOWN_RULE"
    INVALID_RULE_PARAMETER = "INVALID_RULE_PARAMETER"

    # ==================== 正则相关 ====================
    INVALID_PATTERN = "INVALID_PATTERN"


# 类型别名，支持枚举和字符串
ErrorCodeType = Union[str, ErrorCode]


class RegexCraftException(Exception):
    """异常基类

    属性:
        message: 错误消息
        code: 错误代码（ErrorCode 枚举或字符串）
        details: 详细错误信息列表
        extra: 额外的上下文信息
    """

    def __init__(
        self,
        message: str,
        code: ErrorCodeType = ErrorCode.REGEXCRAFT_ERROR,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.message = message
        self.code = code
        self.details = details or []
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式

        Returns:
            包含异常信息的字典
        """
        return {
            "message": self.message,
            "code": self.code,
            # 返回深拷贝，避免调用方修改返回值反向污染异常对象
            "details": copy.deepcopy(self.details),
            "extra": copy.deepcopy(self.extra),
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r})"
        )


class PresetNotFoundError(RegexCraftException):
    """预设不存在异常

    当 (type, level) 组合不在预设目录中时抛出。

    使用示例:
        raise PresetNotFoundError("password", "extreme", available_levels=["low", "medium", "high"])
    """

    def __init__(
        self,
        preset_type: str,
        level: str,
        available_levels: Optional[List[str]] = None,
    ):
        available_levels = list(available_levels or [])
        details = []
        if available_levels:
            details.append(f"Available levels: {', '.join(available_levels)}")
        super().__init__(
            message=f"Preset not found: {preset_type}:{level}",
            code=ErrorCode.PRESET_NOT_FOUND,
            details=details,
            preset_type=preset_type,
            level=level,
            available_levels=available_levels,
        )


class UnknownRuleError(RegexCraftException):
    """未知规则异常

    规则字符串中出现不在规则表内的 token 时抛出。
    """

    def __init__(self, rule_name: str, rules: Optional[str] = None):
        super().__init__(
            message=f"Unknown validation rule: {rule_name}",
            code=ErrorCode.UNKNOWN_RULE,
            rule_name=rule_name,
            rules=rules,
        )


class RuleParameterError(RegexCraftException):
    """规则参数异常

    min / max / exact 等规则缺少参数或参数不是整数时抛出。
    """

    def __init__(self, rule_name: str, param: Optional[str]):
        super().__init__(
            message=f"Invalid parameter for rule {rule_name}: {param!r}",
            code=ErrorCode.INVALID_RULE_PARAMETER,
            rule_name=rule_name,
            param=param,
        )


class PatternError(RegexCraftException):
    """正则片段异常

    存储的片段不是合法正则时，在组合或诊断阶段抛出（追加时不检查）。

    Attributes:
        pattern: 出错的正则文本
        requirement: 对应要求的描述信息
    """

    def __init__(self, pattern: str, reason: str, requirement: Optional[str] = None):
        message = f"Invalid pattern {pattern!r}: {reason}"
        details = [requirement] if requirement else []
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_PATTERN,
            details=details,
            pattern=pattern,
            requirement=requirement,
        )
        self.pattern = pattern
        self.requirement = requirement


__all__ = [
    "ErrorCode",
    "ErrorCodeType",
    "RegexCraftException",
    "PresetNotFoundError",
    "UnknownRuleError",
    "RuleParameterError",
    "PatternError",
]
