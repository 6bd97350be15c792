"""
Pytest 公共配置和 Fixtures

提供测试所需的公共资源：
- 全局配置隔离
- 构建器实例
- 临时文件
"""

import os

import pytest

from regexcraft import RegexCraft
from regexcraft.config import ConfigLoader, reset_settings


@pytest.fixture(autouse=True)
def isolated_settings():
    """每个测试前后重置进程级配置和配置缓存"""
    reset_settings()
    ConfigLoader.clear_cache()
    yield
    reset_settings()
    ConfigLoader.clear_cache()


@pytest.fixture
def craft():
    """空构建器"""
    return RegexCraft()


@pytest.fixture
def temp_file(tmp_path):
    """创建临时文件的工厂函数"""

    def _create_file(filename: str, content: str = "") -> str:
        filepath = os.path.join(str(tmp_path), filename)
        os.makedirs(os.path.dirname(filepath), exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
        return filepath

    return _create_file


@pytest.fixture
def sample_yaml_config(temp_file):
    """示例 YAML 配置文件"""
    content = """
default_phone_region: "RW"
default_date_format: "DD/MM/YYYY"
url_require_protocol: false
default_password_level: "high"
logging:
  level: "DEBUG"
  enable_console: false
"""
    return temp_file("config/regexcraft.yaml", content)
