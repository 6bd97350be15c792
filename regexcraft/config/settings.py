"""
配置模块
提供 regexcraft 的默认配置，支持 YAML + 环境变量覆盖
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """日志配置

    使用示例:
        from regexcraft.config import LoggingSettings

        log_config = LoggingSettings(level="DEBUG", file_path="logs/regexcraft.log")
    """
    level: str = Field(default="INFO", description="日志级别")
    file_path: Optional[str] = Field(default=None, description="日志文件路径，为空时不写文件")
    file_encoding: str = Field(default="utf-8", description="文件编码")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")
    log_format: Optional[str] = Field(default=None, description="日志格式，为空时使用默认格式")
    use_microseconds: bool = Field(default=True, description="时间戳是否精确到微秒")

    model_config = SettingsConfigDict(env_prefix="REGEXCRAFT_LOG_")


class RegexCraftSettings(BaseSettings):
    """构建器默认配置

    构建器方法的可选参数为 None 时，从这里取默认值。

    配置优先级（从高到低）:
        构造参数 > 环境变量 > 代码中的默认值

    环境变量示例:
        REGEXCRAFT_DEFAULT_PHONE_REGION=RW
        REGEXCRAFT_URL_REQUIRE_PROTOCOL=false
        REGEXCRAFT_LOG_LEVEL=DEBUG

    YAML 配置示例 (config/regexcraft.yaml):
        default_phone_region: "KE"
        default_date_format: "DD/MM/YYYY"
        default_password_level: "high"
        logging:
          level: "DEBUG"
    """
    default_flags: int = Field(default=0, description="编译正则时使用的 re 标志")
    default_phone_region: str = Field(default="international", description="is_phone 默认地区")
    default_date_format: str = Field(default="YYYY-MM-DD", description="is_date 默认格式")
    url_require_protocol: bool = Field(default=True, description="is_url 是否默认要求协议前缀")
    default_password_level: str = Field(default="medium", description="password 预设默认等级")
    default_username_level: str = Field(default="standard", description="username 预设默认等级")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="REGEXCRAFT_")


_settings: Optional[RegexCraftSettings] = None


def get_settings() -> RegexCraftSettings:
    """获取进程级默认配置（首次调用时创建）"""
    global _settings
    if _settings is None:
        _settings = RegexCraftSettings()
    return _settings


def configure(settings: Optional[RegexCraftSettings] = None, **overrides) -> RegexCraftSettings:
    """替换进程级默认配置

    Args:
        settings: 完整的配置对象；为空时基于当前配置叠加 overrides
        **overrides: 需要覆盖的字段

    使用示例:
        from regexcraft.config import configure

        configure(default_phone_region="RW", url_require_protocol=False)
    """
    global _settings
    base = settings or get_settings()
    _settings = base.model_copy(update=overrides) if overrides else base
    return _settings


def reset_settings() -> None:
    """恢复为默认配置（下次 get_settings 时重新读取环境变量）"""
    global _settings
    _settings = None
