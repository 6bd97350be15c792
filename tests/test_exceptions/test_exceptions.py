"""异常类测试"""

import re

import pytest

from regexcraft import RegexCraft
from regexcraft.exceptions import (
    ErrorCode,
    PatternError,
    PresetNotFoundError,
    RegexCraftException,
    RuleParameterError,
    UnknownRuleError,
)


class TestRegexCraftException:
    """异常基类测试"""

    def test_defaults(self):
        error = RegexCraftException("boom")

        assert str(error) == "boom"
        assert error.code == ErrorCode.REGEXCRAFT_ERROR
        assert error.details == []
        assert error.extra == {}

    def test_to_dict_returns_copies(self):
        error = RegexCraftException("boom", code="CUSTOM", details=["a"], field={"name": "x"})

        data = error.to_dict()
        data["details"].append("b")
        data["extra"]["field"]["name"] = "y"

        assert data["code"] == "CUSTOM"
        assert error.details == ["a"]
        assert error.extra["field"]["name"] == "x"

    def test_repr(self):
        error = RegexCraftException("boom")

        assert repr(error) == "RegexCraftException(message='boom', code=<ErrorCode.REGEXCRAFT_ERROR: 'REGEXCRAFT_ERROR'>)"

    def test_error_code_is_str(self):
        assert ErrorCode.PRESET_NOT_FOUND == "PRESET_NOT_FOUND"

    @pytest.mark.parametrize("cls", [
        PresetNotFoundError,
        UnknownRuleError,
        RuleParameterError,
        PatternError,
    ])
    def test_hierarchy(self, cls):
        assert issubclass(cls, RegexCraftException)


class TestSpecificErrors:
    """具体异常测试"""

    def test_preset_not_found_details(self):
        error = PresetNotFoundError("password", "extreme", available_levels=["low", "high"])

        assert error.details == ["Available levels: low, high"]
        assert error.to_dict()["extra"]["level"] == "extreme"

    def test_unknown_rule_keeps_rule_string(self):
        error = UnknownRuleError("bogus", rules="min:3|bogus")

        assert error.extra == {"rule_name": "bogus", "rules": "min:3|bogus"}

    def test_rule_parameter_error_message(self):
        error = RuleParameterError("min", "abc")

        assert error.message == "Invalid parameter for rule min: 'abc'"

    def test_pattern_error_from_builder(self):
        craft = RegexCraft().matches("[unclosed", "Custom shape")

        with pytest.raises(PatternError) as exc_info:
            craft.visualize()

        error = exc_info.value
        assert error.code == ErrorCode.INVALID_PATTERN
        assert error.pattern == r"^(?:[unclosed)\Z"
        assert error.requirement == "Custom shape"
        assert error.details == ["Custom shape"]
        assert isinstance(error.__cause__, re.error)
