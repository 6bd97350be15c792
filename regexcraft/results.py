"""结果模型"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TestResult(BaseModel):
    """单个值的测试结果

    Attributes:
        value: 被测试的值
        is_valid: 组合正则是否匹配
        failed_requirements: 未满足的要求描述（按声明顺序）
    """

    # 防止 pytest 把它当成测试类收集
    __test__ = False

    model_config = ConfigDict(frozen=True)

    value: str
    is_valid: bool
    failed_requirements: List[str] = Field(default_factory=list)


class VisualizationResult(BaseModel):
    """构建器配置概览

    Attributes:
        pattern: 组合正则文本
        requirements: 要求描述列表（按声明顺序）
    """

    model_config = ConfigDict(frozen=True)

    pattern: str
    requirements: List[str] = Field(default_factory=list)


__all__ = ["TestResult", "VisualizationResult"]
