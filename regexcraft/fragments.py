"""正则片段与片段工厂

每个构建器调用都会产生一个 Requirement（片段 + 描述信息）。片段分两类：

- LOOKAHEAD: 零宽断言，从字符串起始处探测，不消耗输入（长度、字符计数）
- ANCHORED: 完整匹配整个字符串的形状（邮箱、URL、日期、电话等）

组合器把两类片段都放进前瞻里，因此片段之间互不影响光标位置，
声明顺序不影响 AND 语义。

使用示例:
    from regexcraft.fragments import min_length, digits

    fragment, message = min_length(8)
    fragment.render()   # "(?=.{8,})"
    message             # "Minimum length of 8 characters"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .catalogs import (
    DateFormat,
    PhoneRegion,
    EMAIL_PATTERN,
    IPV4_PATTERN,
    date_pattern,
    phone_pattern,
    url_pattern,
)


class FragmentKind(str, Enum):
    """片段类型"""

    LOOKAHEAD = "lookahead"
    """零宽断言，渲染为 (?=body)"""

    ANCHORED = "anchored"
    """整串形状，渲染为 ^(?:body)\\Z"""


@dataclass(frozen=True)
class Fragment:
    """正则片段

    body 为片段主体，kind 决定渲染方式。不要直接拼接原始正则，
    通过 Fragment.lookahead / Fragment.anchored 构造。
    """

    body: str
    kind: FragmentKind

    @classmethod
    def lookahead(cls, body: str) -> "Fragment":
        return cls(body=body, kind=FragmentKind.LOOKAHEAD)

    @classmethod
    def anchored(cls, body: str) -> "Fragment":
        return cls(body=body, kind=FragmentKind.ANCHORED)

    def render(self) -> str:
        """单独使用时的正则文本"""
        if self.kind is FragmentKind.LOOKAHEAD:
            return f"(?={self.body})"
        return f"^(?:{self.body})\\Z"

    def as_lookahead(self) -> str:
        """组合时使用的零宽形式

        LOOKAHEAD 片段本身已是零宽，ANCHORED 片段再包一层前瞻。
        """
        if self.kind is FragmentKind.LOOKAHEAD:
            return self.render()
        return f"(?={self.render()})"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Requirement:
    """一条要求：片段 + 失败时展示的描述信息"""

    fragment: Fragment
    message: str


FragmentSpec = Tuple[Fragment, str]


def _check_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _plural(count: int, noun: str) -> str:
    return f"{noun}s" if count > 1 else noun


# ==================== 长度 ====================

def min_length(length: int, message: Optional[str] = None) -> FragmentSpec:
    """最少 length 个字符"""
    _check_count("length", length)
    return (
        Fragment.lookahead(f".{{{length},}}"),
        message or f"Minimum length of {length} characters",
    )


def max_length(length: int, message: Optional[str] = None) -> FragmentSpec:
    """最多 length 个字符"""
    _check_count("length", length)
    return (
        Fragment.lookahead(f".{{0,{length}}}\\Z"),
        message or f"Maximum length of {length} characters",
    )


def length_between(
    min_len: int,
    max_len: int,
    message: Optional[str] = None,
) -> FragmentSpec:
    """长度在 [min_len, max_len] 之间

    min_len > max_len 时不在这里报错，组合时以 PatternError 暴露。
    """
    _check_count("min_length", min_len)
    _check_count("max_length", max_len)
    return (
        Fragment.lookahead(f".{{{min_len},{max_len}}}\\Z"),
        message or f"Length should be between {min_len} and {max_len} characters",
    )


def exact_length(length: int, message: Optional[str] = None) -> FragmentSpec:
    """恰好 length 个字符"""
    _check_count("length", length)
    return (
        Fragment.lookahead(f".{{{length}}}\\Z"),
        message or f"Length should be exactly {length} characters",
    )


def required(message: Optional[str] = None) -> FragmentSpec:
    """非空"""
    return Fragment.lookahead("."), message or "Value is required"


# ==================== 字符计数 ====================

# 字符类 -> 默认描述中的名词
LETTER_CLASS = "a-zA-Z"
LOWERCASE_CLASS = "a-z"
UPPERCASE_CLASS = "A-Z"
DIGIT_CLASS = "0-9"
SPECIAL_CLASS = "!@#$%^&*?~"


def at_least(char_class: str, count: int = 1) -> Fragment:
    """字符类至少出现 count 次（任意位置）

    写成 (?:[^C]*[C]){N}，每轮只能前进到下一个命中字符，
    不会像 (?:.*C){N} 那样在整串上回溯。
    """
    _check_count("count", count)
    return Fragment.lookahead(f"(?:[^{char_class}]*[{char_class}]){{{count}}}")


def letters(count: int = 1, message: Optional[str] = None) -> FragmentSpec:
    return (
        at_least(LETTER_CLASS, count),
        message or f"At least {count} {_plural(count, 'letter')}",
    )


def lowercase(count: int = 1, message: Optional[str] = None) -> FragmentSpec:
    return (
        at_least(LOWERCASE_CLASS, count),
        message or f"At least {count} lowercase {_plural(count, 'letter')}",
    )


def uppercase(count: int = 1, message: Optional[str] = None) -> FragmentSpec:
    return (
        at_least(UPPERCASE_CLASS, count),
        message or f"At least {count} uppercase {_plural(count, 'letter')}",
    )


def digits(count: int = 1, message: Optional[str] = None) -> FragmentSpec:
    return (
        at_least(DIGIT_CLASS, count),
        message or f"At least {count} {_plural(count, 'number')}",
    )


def special_characters(count: int = 1, message: Optional[str] = None) -> FragmentSpec:
    return (
        at_least(SPECIAL_CLASS, count),
        message or f"At least {count} special {_plural(count, 'character')}",
    )


# ==================== 格式 ====================

def email(message: Optional[str] = None) -> FragmentSpec:
    return Fragment.anchored(EMAIL_PATTERN), message or "Must be a valid email address"


def url(protocol: bool = True, message: Optional[str] = None) -> FragmentSpec:
    """URL 格式

    Args:
        protocol: True 要求 http(s):// 前缀，False 时前缀可选
    """
    return Fragment.anchored(url_pattern(protocol)), message or "Valid URL"


def ipv4(message: Optional[str] = None) -> FragmentSpec:
    return Fragment.anchored(IPV4_PATTERN), message or "Valid IPv4 address"


def date(date_format=DateFormat.YYYY_MM_DD, message: Optional[str] = None) -> FragmentSpec:
    """日期格式，无法识别的格式回退为 YYYY-MM-DD"""
    resolved = DateFormat.resolve(date_format)
    return (
        Fragment.anchored(date_pattern(resolved)),
        message or f"Valid date in {resolved.value} format",
    )


def phone(region=PhoneRegion.INTERNATIONAL, message: Optional[str] = None) -> FragmentSpec:
    """电话号码格式，无法识别的地区回退为国际通用格式

    默认描述使用调用方传入的地区代码。
    """
    resolved = PhoneRegion.resolve(region)
    label = region.value if isinstance(region, PhoneRegion) else (region or resolved.value)
    return (
        Fragment.anchored(phone_pattern(resolved)),
        message or f"Valid {label} phone number",
    )


__all__ = [
    "FragmentKind",
    "Fragment",
    "Requirement",
    "at_least",
    "min_length",
    "max_length",
    "length_between",
    "exact_length",
    "required",
    "letters",
    "lowercase",
    "uppercase",
    "digits",
    "special_characters",
    "email",
    "url",
    "ipv4",
    "date",
    "phone",
]
