"""
DI 容器

用法：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.resolve_visit_handler()
"""

from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers

from infrastructure.config.settings import Settings
from .application import AppContainer
from .config import ConfigContainer
from .infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    创建并装配所有容器

    Args:
        settings: 显式配置，默认从环境变量读取

    Returns:
        Bootstrap 实例
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(providers.Object(settings))

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = [
    "AppContainer",
    "Bootstrap",
    "ConfigContainer",
    "InfraContainer",
    "bootstrap",
]
