"""
基础设施容器（InfraContainer）

管理所有基础设施组件：时钟、黑名单、等待者注册表等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from domain.verification.value_objects.block_list import BlockList
from infrastructure.verification.registry.in_memory_waiter_registry import (
    InMemoryWaiterRegistry,
    utc_now,
)


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 时钟 ============

    # 时钟函数（测试时可 override）
    clock = providers.Object(utc_now)

    # ============ 黑名单 ============

    block_list = providers.Singleton(
        BlockList,
        entries=config.settings.provided.block_list,
    )

    # ============ 注册表 ============

    # 等待者注册表（单例，整个进程共享同一个实例）
    waiter_registry = providers.Singleton(
        InMemoryWaiterRegistry,
        clock=clock,
    )
