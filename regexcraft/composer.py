"""组合器与诊断器

compose: 把所有片段以前瞻形式拼接成一个 AND 正则
diagnose: 逐个片段单独编译、在位置 0 探测，返回失败要求的描述信息

两者满足：compose(R).match(v) 成功 <=> diagnose(R, v) == [] 且 v 非空。
最后的消耗子句 (?s:.+) 只负责“非空”，不单独出现在诊断结果中。
"""

import logging
import re
from typing import List, Optional, Sequence

from .exceptions import PatternError
from .fragments import Requirement

logger = logging.getLogger(__name__)

# 没有任何要求时接受所有字符串（包括空串）
ACCEPT_ALL = r"^(?s:.*)\Z"

# 组合结果末尾的消耗子句：至少一个字符（含换行）
CONSUME_CLAUSE = r"(?s:.+)"


def _compile(pattern: str, flags: int, requirement: Optional[Requirement] = None) -> "re.Pattern":
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        message = requirement.message if requirement is not None else None
        raise PatternError(pattern, str(e), requirement=message) from e


def compose_pattern(requirements: Sequence[Requirement]) -> str:
    """组合出正则文本（不编译）"""
    if not requirements:
        return ACCEPT_ALL
    lookaheads = "".join(r.fragment.as_lookahead() for r in requirements)
    return f"^{lookaheads}{CONSUME_CLAUSE}\\Z"


def compose(requirements: Sequence[Requirement], flags: int = 0) -> "re.Pattern":
    """组合为一个已编译的正则

    每个片段先单独编译，出错的片段以 PatternError 报告并带上其描述信息，
    避免畸形片段在拼接后“恰好”合法而被掩盖。

    Raises:
        PatternError: 某个片段不是合法正则
    """
    for requirement in requirements:
        _compile(requirement.fragment.render(), flags, requirement)

    pattern = compose_pattern(requirements)
    compiled = _compile(pattern, flags)
    logger.debug(f"组合正则完成，共 {len(requirements)} 条要求: {pattern}")
    return compiled


def diagnose(requirements: Sequence[Requirement], value: str, flags: int = 0) -> List[str]:
    """返回 value 未满足的要求描述（按存储顺序）

    Raises:
        PatternError: 某个片段不是合法正则
    """
    failed = []
    for requirement in requirements:
        regex = _compile(requirement.fragment.render(), flags, requirement)
        if regex.match(value) is None:
            failed.append(requirement.message)
    return failed


__all__ = [
    "ACCEPT_ALL",
    "CONSUME_CLAUSE",
    "compose_pattern",
    "compose",
    "diagnose",
]
