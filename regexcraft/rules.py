"""规则字符串解析

把 "required|min:3|email" 这样的规则字符串映射为构建器调用。
规则表是封闭的，未知规则抛 UnknownRuleError。

规则（name[:param]）:
    required            非空
    email               邮箱
    phone[:CODE]        电话号码（CODE 为地区代码）
    password[:LEVEL]    password 预设，默认取配置 default_password_level
    username[:LEVEL]    username 预设，默认取配置 default_username_level
    min:N / max:N / exact:N   长度
    url                 URL（协议前缀可选）
    date[:FORMAT]       日期

规则从左到右依次应用；中途出错时，之前追加的要求保留在构建器中。
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import RuleParameterError, UnknownRuleError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"


def parse_rules(rules: str) -> List[Tuple[str, Optional[str]]]:
    """解析规则字符串为 (name, param) 列表

    参数只按第一个冒号切分，因此 "date:YYYY-MM-DD" 之类的参数可以保留原样。
    """
    parsed = []
    for token in rules.split(RULE_SEPARATOR):
        token = token.strip()
        name, sep, param = token.partition(PARAM_SEPARATOR)
        parsed.append((name.strip(), param.strip() if sep else None))
    return parsed


def _int_param(rule_name: str, param: Optional[str]) -> int:
    try:
        value = int(param)
    except (TypeError, ValueError):
        raise RuleParameterError(rule_name, param) from None
    if value < 0:
        raise RuleParameterError(rule_name, param)
    return value


def _required(craft, name, param):
    craft.is_required(f"{name} is required")


def _email(craft, name, param):
    craft.is_email(f"{name} must be a valid email")


def _phone(craft, name, param):
    craft.is_phone(param or None, f"{name} must be a valid phone number")


def _password(craft, name, param):
    craft.use_preset("password", param or None)


def _username(craft, name, param):
    craft.use_preset("username", param or None)


def _min(craft, name, param):
    length = _int_param("min", param)
    craft.has_min_length(length, f"{name} must be at least {length} characters")


def _max(craft, name, param):
    length = _int_param("max", param)
    craft.has_max_length(length, f"{name} must be at most {length} characters")


def _exact(craft, name, param):
    length = _int_param("exact", param)
    craft.has_exact_length(length, f"{name} must be exactly {length} characters")


def _url(craft, name, param):
    craft.is_url(False, f"{name} must be a valid URL")


def _date(craft, name, param):
    craft.is_date(param or None, f"{name} must be a valid date")


RULE_HANDLERS: Dict[str, Callable] = {
    "required": _required,
    "email": _email,
    "phone": _phone,
    "password": _password,
    "username": _username,
    "min": _min,
    "max": _max,
    "exact": _exact,
    "url": _url,
    "date": _date,
}


def apply_rules(craft, name: str, rules: str) -> None:
    """把规则字符串逐条应用到构建器

    Args:
        craft: RegexCraft 实例
        name: 字段名
        rules: 规则字符串

    Raises:
        UnknownRuleError: 未知规则
        RuleParameterError: 规则参数缺失或非法
    """
    for rule_name, param in parse_rules(rules):
        handler = RULE_HANDLERS.get(rule_name)
        if handler is None:
            raise UnknownRuleError(rule_name, rules=rules)
        handler(craft, name, param)
    logger.debug(f"字段 {name} 应用规则: {rules}")


__all__ = [
    "RULE_HANDLERS",
    "parse_rules",
    "apply_rules",
]
