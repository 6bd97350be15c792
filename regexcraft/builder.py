"""RegexCraft 链式构建器

把相互独立的字符串要求（长度、字符计数、格式、预设）累积起来，
组合成一个正则：当且仅当所有要求都满足时匹配。同时可以列出某个值
未满足哪些要求，以及输出可读的要求概览。

使用示例:
    from regexcraft import RegexCraft

    craft = (
        RegexCraft()
        .has_min_length(8)
        .has_upper_case()
        .has_number(2)
    )

    pattern = craft.build()
    pattern.match("Secret12")          # 匹配

    result = craft.test_one("secret")
    result.is_valid                    # False
    result.failed_requirements         # ["Minimum length of 8 characters", ...]

    # 预设与规则字符串
    RegexCraft().use_preset("password", "high")
    RegexCraft().field("Email", "required|email")

build() 不会冻结构建器：之后仍可继续追加要求，每次 build() 都重新组合，
已经返回的正则是当时状态的快照。
"""

import re
from typing import Iterable, List, Optional, Tuple, Union

from . import fragments
from .catalogs import DateFormat, PhoneRegion
from .composer import compose, diagnose
from .config import RegexCraftSettings, get_settings
from .fragments import Fragment, Requirement
from .log import get_logger
from .presets import PresetType, get_preset
from .results import TestResult, VisualizationResult

logger = get_logger()


class RegexCraft:
    """正则要求构建器

    Args:
        flags: 编译正则使用的 re 标志，默认取配置 default_flags
        settings: 配置对象，默认使用进程级配置
    """

    def __init__(
        self,
        flags: Optional[int] = None,
        settings: Optional[RegexCraftSettings] = None,
    ):
        self.settings = settings or get_settings()
        self.flags = self.settings.default_flags if flags is None else flags
        self._requirements: List[Requirement] = []

    # ==================== 要求存储 ====================

    def add_requirement(self, fragment: Fragment, message: str) -> "RegexCraft":
        """追加一条要求

        片段是否为合法正则在这里不检查，组合或诊断时以 PatternError 暴露。
        """
        if not isinstance(fragment, Fragment):
            raise TypeError(
                f"fragment must be a Fragment, got {type(fragment).__name__}; "
                "wrap raw patterns with Fragment.lookahead() or Fragment.anchored()"
            )
        self._requirements.append(Requirement(fragment, message))
        logger.debug(f"追加要求: {fragment.render()} ({message})")
        return self

    def _add(self, item: Tuple[Fragment, str]) -> "RegexCraft":
        fragment, message = item
        return self.add_requirement(fragment, message)

    @property
    def requirements(self) -> Tuple[Requirement, ...]:
        """当前要求（只读视图）"""
        return tuple(self._requirements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(requirements={len(self._requirements)}, flags={self.flags})"

    # ==================== 长度 ====================

    def has_min_length(self, length: int, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.min_length(length, message))

    def has_max_length(self, length: int, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.max_length(length, message))

    def has_length_between(
        self,
        min_length: int,
        max_length: int,
        message: Optional[str] = None,
    ) -> "RegexCraft":
        return self._add(fragments.length_between(min_length, max_length, message))

    def has_exact_length(self, length: int, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.exact_length(length, message))

    def is_required(self, message: Optional[str] = None) -> "RegexCraft":
        """要求非空"""
        return self._add(fragments.required(message))

    # ==================== 字符计数 ====================

    def has_letter(self, count: int = 1, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.letters(count, message))

    def has_lower_case(self, count: int = 1, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.lowercase(count, message))

    def has_upper_case(self, count: int = 1, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.uppercase(count, message))

    def has_number(self, count: int = 1, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.digits(count, message))

    def has_special_character(self, count: int = 1, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.special_characters(count, message))

    # ==================== 格式 ====================

    def is_email(self, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.email(message))

    def is_url(self, protocol: Optional[bool] = None, message: Optional[str] = None) -> "RegexCraft":
        """URL 格式

        Args:
            protocol: 是否要求 http(s):// 前缀，默认取配置 url_require_protocol
        """
        if protocol is None:
            protocol = self.settings.url_require_protocol
        return self._add(fragments.url(protocol, message))

    def is_ipv4(self, message: Optional[str] = None) -> "RegexCraft":
        return self._add(fragments.ipv4(message))

    def is_date(
        self,
        date_format: Union[str, DateFormat, None] = None,
        message: Optional[str] = None,
    ) -> "RegexCraft":
        """日期格式，未知格式回退为 YYYY-MM-DD"""
        if date_format is None:
            date_format = self.settings.default_date_format
        return self._add(fragments.date(date_format, message))

    def is_phone(
        self,
        region: Union[str, PhoneRegion, None] = None,
        message: Optional[str] = None,
    ) -> "RegexCraft":
        """电话号码格式，未知地区回退为国际通用格式"""
        if region is None:
            region = self.settings.default_phone_region
        return self._add(fragments.phone(region, message))

    def matches(self, pattern: str, message: str) -> "RegexCraft":
        """自定义整串形状

        Args:
            pattern: 正则主体，不需要自带 ^ / $
            message: 失败时的描述信息
        """
        return self.add_requirement(Fragment.anchored(pattern), message)

    # ==================== 预设与规则 ====================

    def _default_level(self, preset_type: Union[str, PresetType]) -> Optional[str]:
        """配置中的默认等级，未知类型返回 None，交给 get_preset 报错"""
        levels = {
            PresetType.PASSWORD: self.settings.default_password_level,
            PresetType.USERNAME: self.settings.default_username_level,
        }
        try:
            return levels[PresetType(preset_type)]
        except ValueError:
            return None

    def use_preset(
        self,
        preset_type: Union[str, PresetType],
        level: Optional[str] = None,
    ) -> "RegexCraft":
        """应用预设

        Args:
            preset_type: 预设类型（password / username）
            level: 等级，默认取配置中对应类型的默认等级

        Raises:
            PresetNotFoundError: 类型或等级不存在
        """
        if level is None:
            level = self._default_level(preset_type)
        preset = get_preset(preset_type, level)
        self._requirements.extend(preset)
        logger.debug(f"应用预设 {PresetType(preset_type).value}:{level}，追加 {len(preset)} 条要求")
        return self

    def field(self, name: str, rules: str) -> "RegexCraft":
        """按规则字符串追加要求

        Args:
            name: 字段名，用于生成描述信息
            rules: 以 | 分隔的规则，如 "required|min:3|email"

        Raises:
            UnknownRuleError: 未知规则
            RuleParameterError: 规则参数缺失或非法
        """
        from .rules import apply_rules

        apply_rules(self, name, rules)
        return self

    # ==================== 构建与测试 ====================

    def build(self) -> "re.Pattern":
        """组合当前所有要求为一个已编译正则

        Raises:
            PatternError: 某个片段不是合法正则
        """
        return compose(self._requirements, self.flags)

    def failed_requirements(self, value: str) -> List[str]:
        """value 未满足的要求描述（按声明顺序）"""
        return diagnose(self._requirements, value, self.flags)

    def is_valid(self, value: str) -> bool:
        return self.build().match(value) is not None

    def test_one(self, value: str) -> TestResult:
        """测试单个值"""
        regex = self.build()
        return TestResult(
            value=value,
            is_valid=regex.match(value) is not None,
            failed_requirements=self.failed_requirements(value),
        )

    def test(self, values: Iterable[str]) -> List[TestResult]:
        """逐个测试，结果顺序与输入一致"""
        return [self.test_one(value) for value in values]

    def visualize(self) -> VisualizationResult:
        """返回组合正则文本与要求描述列表"""
        return VisualizationResult(
            pattern=self.build().pattern,
            requirements=[r.message for r in self._requirements],
        )

    def as_validator(self):
        """转换为 pydantic BeforeValidator（当前要求的快照）"""
        from .constraints import craft_validator

        return craft_validator(self)


__all__ = ["RegexCraft"]
