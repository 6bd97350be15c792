"""YAML 配置加载

配置文件只在第一次读取时解析，之后从缓存返回；文件变更后需要 clear_cache()。

使用示例:
    from regexcraft.config import load_yaml_config, RegexCraftSettings, configure

    configure(load_yaml_config("config/regexcraft.yaml", RegexCraftSettings))
"""

import os
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

T = TypeVar("T")


class ConfigLoader:
    """按绝对路径缓存的 YAML 读取器"""

    _cache: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def load(cls, config_path: str, base_dir: Optional[str] = None) -> Dict[str, Any]:
        """读取配置文件为字典

        Args:
            config_path: 配置文件路径，相对路径基于 base_dir（默认当前目录）
            base_dir: 相对路径的基础目录

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML 解析错误
        """
        if not os.path.isabs(config_path):
            config_path = os.path.join(base_dir or os.getcwd(), config_path)

        cached = cls._cache.get(config_path)
        if cached is not None:
            return cached

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        cls._cache[config_path] = config
        return config

    @classmethod
    def clear_cache(cls):
        cls._cache.clear()


def load_yaml_config(
    config_path: str,
    settings_class: Type[T],
    base_dir: Optional[str] = None,
    **overrides
) -> T:
    """加载 YAML 配置并创建 Settings 实例

    overrides 优先于文件内容，文件内容优先于环境变量。

    使用示例:
        settings = load_yaml_config(
            "config/regexcraft.yaml",
            RegexCraftSettings,
            default_phone_region="KE",
        )
    """
    # 复制一份，避免 overrides 污染缓存中的字典
    config = dict(ConfigLoader.load(config_path, base_dir))
    config.update(overrides)
    return settings_class(**config)
