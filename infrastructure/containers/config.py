"""
配置容器（ConfigContainer）

提供全局配置，供基础设施容器和应用容器依赖。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import get_settings


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器 - 管理应用配置"""

    settings = providers.Singleton(get_settings)
