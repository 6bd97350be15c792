"""Pydantic 约束适配

把配置好的 RegexCraft 转换为 pydantic 验证器，便于在 DTO 中声明式使用。

使用示例:
    from typing import Annotated
    from pydantic import BaseModel
    from regexcraft import RegexCraft, CraftStr

    password = RegexCraft().use_preset("password", "high")

    class UserCreate(BaseModel):
        username: CraftStr(RegexCraft().use_preset("username"))
        password: Annotated[str, password.as_validator()]

验证失败时抛出 PydanticCustomError（type 为 value_error.regexcraft），
错误信息列出所有未满足的要求。验证器基于转换时的要求快照，
之后继续修改构建器不会影响已生成的验证器。
"""

from typing import Annotated

from pydantic.functional_validators import BeforeValidator
from pydantic_core import PydanticCustomError

from .composer import compose, diagnose

ERROR_TYPE = "value_error.regexcraft"

# 组合正则不匹配、但逐条诊断全部通过时只可能是空串
EMPTY_VALUE_MESSAGE = "Value must not be empty"


def craft_validator(craft) -> BeforeValidator:
    """生成 BeforeValidator

    Args:
        craft: RegexCraft 实例

    Returns:
        BeforeValidator，None 原样通过
    """
    requirements = craft.requirements
    flags = craft.flags
    regex = compose(requirements, flags)

    def _validate(v):
        if v is None:
            return v
        v = str(v)
        if regex.match(v) is None:
            failed = diagnose(requirements, v, flags) or [EMPTY_VALUE_MESSAGE]
            raise PydanticCustomError(
                ERROR_TYPE,
                "{failed}",
                {"failed": "; ".join(failed)},
            )
        return v

    return BeforeValidator(_validate)


def CraftStr(craft):
    """直接作为字段类型使用的 Annotated[str, ...]"""
    return Annotated[str, craft_validator(craft)]


__all__ = [
    "ERROR_TYPE",
    "EMPTY_VALUE_MESSAGE",
    "craft_validator",
    "CraftStr",
]
