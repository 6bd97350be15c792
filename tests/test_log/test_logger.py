"""日志模块测试"""

import logging
import re

import pytest

from regexcraft.config import LoggingSettings
from regexcraft.log import (
    MicrosecondFormatter,
    create_formatter,
    get_logger,
    setup_logger,
    setup_package_logger,
)


@pytest.fixture
def restore_logger():
    """测试后恢复 regexcraft 日志器，避免影响 caplog"""
    names = []

    def _track(name):
        names.append(name)
        return name

    yield _track

    for name in names:
        _logger = logging.getLogger(name)
        for handler in list(_logger.handlers):
            handler.close()
        _logger.handlers.clear()
        _logger.propagate = True
        _logger.setLevel(logging.NOTSET)


class TestGetLogger:
    """get_logger 测试"""

    def test_infers_module_name(self):
        assert get_logger().name == __name__

    def test_short_name_prefixed(self):
        assert get_logger("builder").name == "regexcraft.builder"

    def test_dotted_name_kept(self):
        assert get_logger("myapp.forms").name == "myapp.forms"

    def test_package_name_kept(self):
        assert get_logger("regexcraft").name == "regexcraft"


class TestFormatter:
    """格式化器测试"""

    def test_microseconds(self):
        formatter = MicrosecondFormatter(fmt="%(asctime)s %(message)s")
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)

        output = formatter.format(record)

        assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6} hello$", output)

    def test_create_formatter_plain(self):
        formatter = create_formatter("%(message)s", use_microseconds=False)

        assert not isinstance(formatter, MicrosecondFormatter)


class TestSetupLogger:
    """setup_logger 测试"""

    def test_writes_to_file(self, tmp_path, restore_logger):
        log_file = tmp_path / "logs" / "craft.log"
        _logger = setup_logger(
            restore_logger("regexcraft.test_file"),
            level="DEBUG",
            log_file=str(log_file),
            log_format="%(levelname)s %(message)s",
            console=False,
        )

        _logger.debug("追加要求")
        for handler in _logger.handlers:
            handler.flush()

        assert log_file.read_text(encoding="utf-8").strip() == "DEBUG 追加要求"

    def test_replaces_handlers(self, restore_logger):
        name = restore_logger("regexcraft.test_handlers")
        setup_logger(name, console=True)
        _logger = setup_logger(name, console=True)

        assert len(_logger.handlers) == 1
        assert _logger.level == logging.INFO


class TestSetupPackageLogger:
    """setup_package_logger 测试"""

    def test_from_settings(self, restore_logger):
        restore_logger("regexcraft")
        _logger = setup_package_logger(LoggingSettings(level="DEBUG", enable_console=False))

        assert _logger.name == "regexcraft"
        assert _logger.level == logging.DEBUG
        assert _logger.propagate is False
        assert _logger.handlers == []

    def test_kwargs_override(self, restore_logger):
        restore_logger("regexcraft")
        _logger = setup_package_logger(LoggingSettings(level="DEBUG"), level="WARNING", console=False)

        assert _logger.level == logging.WARNING

    def test_builder_logs_reach_package_logger(self, tmp_path, restore_logger):
        from regexcraft import RegexCraft

        restore_logger("regexcraft")
        log_file = tmp_path / "craft.log"
        setup_package_logger(
            LoggingSettings(level="DEBUG", enable_console=False, file_path=str(log_file)),
            log_format="%(name)s %(message)s",
        )

        RegexCraft().has_min_length(3)
        for handler in logging.getLogger("regexcraft").handlers:
            handler.flush()

        assert "regexcraft.builder" in log_file.read_text(encoding="utf-8")
