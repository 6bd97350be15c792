"""配置类测试"""

import re

from regexcraft.config import (
    LoggingSettings,
    RegexCraftSettings,
    configure,
    get_settings,
    reset_settings,
)


class TestRegexCraftSettings:
    """RegexCraftSettings 测试"""

    def test_defaults(self):
        settings = RegexCraftSettings()

        assert settings.default_flags == 0
        assert settings.default_phone_region == "international"
        assert settings.default_date_format == "YYYY-MM-DD"
        assert settings.url_require_protocol is True
        assert settings.default_password_level == "medium"
        assert settings.default_username_level == "standard"
        assert isinstance(settings.logging, LoggingSettings)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("REGEXCRAFT_DEFAULT_PHONE_REGION", "RW")
        monkeypatch.setenv("REGEXCRAFT_URL_REQUIRE_PROTOCOL", "false")

        settings = RegexCraftSettings()

        assert settings.default_phone_region == "RW"
        assert settings.url_require_protocol is False

    def test_logging_env_override(self, monkeypatch):
        monkeypatch.setenv("REGEXCRAFT_LOG_LEVEL", "DEBUG")

        assert RegexCraftSettings().logging.level == "DEBUG"

    def test_init_args_win_over_env(self, monkeypatch):
        monkeypatch.setenv("REGEXCRAFT_DEFAULT_DATE_FORMAT", "ISO")

        assert RegexCraftSettings(default_date_format="MM/DD/YYYY").default_date_format == "MM/DD/YYYY"

    def test_flags_from_re(self):
        assert RegexCraftSettings(default_flags=re.IGNORECASE).default_flags == re.IGNORECASE


class TestGlobalSettings:
    """进程级配置测试"""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_configure_overrides(self):
        configure(default_phone_region="NG")

        assert get_settings().default_phone_region == "NG"
        assert get_settings().default_date_format == "YYYY-MM-DD"

    def test_configure_with_instance(self):
        settings = RegexCraftSettings(default_username_level="strict")

        assert configure(settings) is settings
        assert get_settings() is settings

    def test_reset(self):
        configure(default_phone_region="NG")
        reset_settings()

        assert get_settings().default_phone_region == "international"
