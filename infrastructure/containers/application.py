"""
应用容器（AppContainer）

管理应用层组件：命令处理器、应用服务等。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.commands.verification import (
    AwaitVerificationHandler,
    ResolveVisitHandler,
)
from application.verification.services.expired_wait_sweeper import ExpiredWaitSweeper


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    # 等待验证 Handler
    await_verification_handler = providers.Factory(
        AwaitVerificationHandler,
        registry=infra.waiter_registry,
    )

    # 处理验证访问 Handler
    resolve_visit_handler = providers.Factory(
        ResolveVisitHandler,
        registry=infra.waiter_registry,
        timeout=config.settings.provided.verify_timeout,
        block_list=infra.block_list,
        clock=infra.clock,
    )

    # ============ 应用服务 ============

    # 过期记录清理服务（单例，仅在配置了清理间隔时创建）
    expired_wait_sweeper = providers.Singleton(
        ExpiredWaitSweeper,
        registry=infra.waiter_registry,
        timeout=config.settings.provided.verify_timeout,
        interval=config.settings.provided.sweep_interval_seconds,
        clock=infra.clock,
    )
