"""规则字符串测试"""

import pytest

from regexcraft import RegexCraft
from regexcraft.config import configure
from regexcraft.exceptions import ErrorCode, RuleParameterError, UnknownRuleError
from regexcraft.rules import RULE_HANDLERS, parse_rules


class TestParseRules:
    """解析测试"""

    def test_tokens_and_params(self):
        assert parse_rules("required|min:3|email") == [
            ("required", None),
            ("min", "3"),
            ("email", None),
        ]

    def test_param_split_on_first_colon_only(self):
        assert parse_rules("date:ISO") == [("date", "ISO")]
        assert parse_rules("x:a:b") == [("x", "a:b")]

    def test_whitespace_is_ignored(self):
        assert parse_rules(" min : 3 | email ") == [("min", "3"), ("email", None)]

    def test_rule_table_is_closed(self):
        assert set(RULE_HANDLERS) == {
            "required", "email", "phone", "password", "username",
            "min", "max", "exact", "url", "date",
        }


class TestField:
    """field 规则应用测试"""

    def test_messages_use_field_name(self):
        craft = RegexCraft().field("Title", "required|min:2|max:10|exact:5|email|url|date|phone")

        assert craft.visualize().requirements == [
            "Title is required",
            "Title must be at least 2 characters",
            "Title must be at most 10 characters",
            "Title must be exactly 5 characters",
            "Title must be a valid email",
            "Title must be a valid URL",
            "Title must be a valid date",
            "Title must be a valid phone number",
        ]

    def test_required(self):
        craft = RegexCraft().field("Name", "required")

        assert craft.test_one("").failed_requirements == ["Name is required"]
        assert craft.is_valid("x") is True

    def test_url_rule_does_not_require_protocol(self):
        craft = RegexCraft().field("Site", "url")

        assert craft.is_valid("example.com") is True
        assert craft.is_valid("https://example.com") is True

    def test_phone_rule_with_region(self):
        craft = RegexCraft().field("Mobile", "phone:RW")

        assert craft.is_valid("0781234567") is True
        assert craft.is_valid("+1-555-555-5555") is False

    def test_date_rule_with_format(self):
        craft = RegexCraft().field("Born", "date:DD/MM/YYYY")

        assert craft.is_valid("31/12/1999") is True
        assert craft.is_valid("1999-12-31") is False

    def test_password_and_username_defaults(self):
        password = RegexCraft().field("Password", "password")
        username = RegexCraft().field("Login", "username")
        strict = RegexCraft().field("Login", "username:strict")

        assert len(password.requirements) == 4
        assert password.is_valid("Password123") is True
        assert username.is_valid("john_doe") is True
        assert strict.is_valid("john_doe") is False

    def test_password_and_username_follow_configured_defaults(self):
        configure(default_password_level="high", default_username_level="strict")

        password = RegexCraft().field("Password", "password")
        username = RegexCraft().field("Login", "username")

        assert [r.message for r in password.requirements] == [
            r.message for r in RegexCraft().use_preset("password").requirements
        ]
        assert password.requirements[0].message == "At least 10 characters"
        assert password.test_one("Password123").failed_requirements == [
            "At least one special character",
        ]
        assert username.is_valid("john_doe") is False
        assert username.is_valid("johndoe") is True

    def test_explicit_level_wins_over_configured_default(self):
        configure(default_password_level="high")

        craft = RegexCraft().field("Password", "password:low")

        assert len(craft.requirements) == 2

    def test_password_level(self):
        craft = RegexCraft().field("Password", "password:low")

        assert craft.test_one("trsting").failed_requirements == ["At least one number"]


class TestRuleErrors:
    """规则错误测试"""

    def test_unknown_rule(self):
        with pytest.raises(UnknownRuleError) as exc_info:
            RegexCraft().field("Name", "required|nickname")

        assert exc_info.value.code == ErrorCode.UNKNOWN_RULE
        assert exc_info.value.message == "Unknown validation rule: nickname"

    def test_empty_token_is_unknown(self):
        with pytest.raises(UnknownRuleError):
            RegexCraft().field("Name", "required|")

    def test_requirements_before_failure_are_kept(self):
        craft = RegexCraft()

        with pytest.raises(UnknownRuleError):
            craft.field("Name", "min:3|bogus|email")

        assert [r.message for r in craft.requirements] == ["Name must be at least 3 characters"]

    @pytest.mark.parametrize("rules", ["min", "min:", "max:abc", "exact:-1", "min:3.5"])
    def test_bad_length_parameter(self, rules):
        with pytest.raises(RuleParameterError) as exc_info:
            RegexCraft().field("Name", rules)

        assert exc_info.value.code == ErrorCode.INVALID_RULE_PARAMETER

    def test_unknown_preset_level(self):
        from regexcraft.exceptions import PresetNotFoundError

        with pytest.raises(PresetNotFoundError):
            RegexCraft().field("Password", "password:extreme")
