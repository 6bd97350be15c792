"""日志模块

使用示例:
    from regexcraft.log import setup_package_logger, get_logger

    setup_package_logger()          # 按全局 LoggingSettings 配置
    logger = get_logger("forms")    # -> "regexcraft.forms"
"""

from .logger import (
    setup_logger,
    setup_package_logger,
    create_formatter,
    MicrosecondFormatter,
    DEFAULT_LOG_FORMAT,
    logger,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_package_logger",
    "create_formatter",
    "MicrosecondFormatter",
    "DEFAULT_LOG_FORMAT",
    "logger",
    "get_logger",
]
