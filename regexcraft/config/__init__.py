"""配置模块

提供配置管理功能：
- RegexCraftSettings: 构建器默认配置，支持 YAML + 环境变量
- LoggingSettings: 日志配置
- ConfigLoader: YAML 配置加载器

快速开始:
    from regexcraft.config import RegexCraftSettings, load_yaml_config, configure

    settings = load_yaml_config("config/regexcraft.yaml", RegexCraftSettings)
    configure(settings)
"""

from .settings import (
    RegexCraftSettings,
    LoggingSettings,
    get_settings,
    configure,
    reset_settings,
)

from .loader import (
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "RegexCraftSettings",
    "LoggingSettings",
    "get_settings",
    "configure",
    "reset_settings",
    "ConfigLoader",
    "load_yaml_config",
]
