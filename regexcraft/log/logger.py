"""日志工具

regexcraft 只在 DEBUG 级别记录：追加要求、应用预设、组合正则、目录回退。
包本身不安装处理器，是否输出由应用调用 setup_package_logger 决定。
"""

import inspect
import logging
import os
from datetime import datetime
from typing import Any, List, Optional

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MicrosecondFormatter(logging.Formatter):
    """时间戳精确到微秒（6 位）"""

    def formatTime(self, record, datefmt=None):
        created = datetime.fromtimestamp(record.created)
        return f"{created.strftime(datefmt or DEFAULT_DATE_FORMAT)}.{created.microsecond:06d}"


def create_formatter(log_format: Optional[str] = None, use_microseconds: bool = True) -> logging.Formatter:
    formatter_class = MicrosecondFormatter if use_microseconds else logging.Formatter
    return formatter_class(log_format or DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)


def _build_handlers(console: bool, log_file: Optional[str], encoding: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler())
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding=encoding))
    return handlers


def setup_logger(
    name: Optional[str] = None,
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    console: bool = True,
    use_microseconds: bool = True,
    propagate: bool = True,
    encoding: str = "utf-8",
) -> logging.Logger:
    """配置日志器

    重复调用会关闭并替换之前安装的处理器。name 为空时配置 root logger。

    使用示例:
        from regexcraft.log import setup_logger

        setup_logger("regexcraft", level="DEBUG", log_file="logs/regexcraft.log")
    """
    target = logging.getLogger(name)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    target.propagate = propagate

    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()

    formatter = create_formatter(log_format, use_microseconds)
    for handler in _build_handlers(console, log_file, encoding):
        handler.setFormatter(formatter)
        target.addHandler(handler)
    return target


def setup_package_logger(config: Any = None, **kwargs) -> logging.Logger:
    """按配置对象设置 regexcraft 包日志器

    Args:
        config: LoggingSettings 或具有相同属性的对象；为空时使用全局配置
        **kwargs: 覆盖 setup_logger 的参数

    Returns:
        名为 "regexcraft" 的日志记录器

    使用示例:
        from regexcraft.config import LoggingSettings
        from regexcraft.log import setup_package_logger

        setup_package_logger(LoggingSettings(level="DEBUG"))
    """
    if config is None:
        from ..config import get_settings
        config = get_settings().logging

    options = {
        "name": "regexcraft",
        "level": getattr(config, "level", "INFO"),
        "log_file": getattr(config, "file_path", None),
        "log_format": getattr(config, "log_format", None),
        "console": getattr(config, "enable_console", True),
        "use_microseconds": getattr(config, "use_microseconds", True),
        "encoding": getattr(config, "file_encoding", "utf-8"),
        "propagate": False,
    }
    options.update(kwargs)
    return setup_logger(**options)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取日志记录器，支持自动推断模块名

    无参数调用时，自动从调用栈获取模块的 __name__ 作为日志器名称。
    简写名称（不含点号）自动添加 'regexcraft.' 前缀。

    使用示例:
        logger = get_logger()               # 调用模块的 __name__
        logger = get_logger("builder")      # -> "regexcraft.builder"
        logger = get_logger("myapp.forms")  # -> "myapp.forms"
    """
    if name is None:
        frame = inspect.currentframe()
        if frame is not None and frame.f_back is not None:
            name = frame.f_back.f_globals.get('__name__', 'regexcraft')
        else:
            name = 'regexcraft'
    elif name != 'regexcraft' and '.' not in name:
        name = f"regexcraft.{name}"

    return logging.getLogger(name)


# 通用日志记录器
logger = logging.getLogger("regexcraft")
