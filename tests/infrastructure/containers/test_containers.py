"""DI 容器测试"""

from dependency_injector import providers

from application.commands.verification import AwaitVerificationHandler, ResolveVisitHandler
from application.verification.services.expired_wait_sweeper import ExpiredWaitSweeper
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap
from infrastructure.verification.registry.in_memory_waiter_registry import (
    InMemoryWaiterRegistry,
)


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestBootstrap:
    """bootstrap 测试"""

    def test_uses_explicit_settings(self):
        """测试使用显式传入的配置"""
        settings = make_settings(verify_timeout_seconds=7)

        boot = bootstrap(settings)

        assert boot.config.settings() is settings

    def test_registry_is_singleton(self):
        """测试注册表在容器内唯一"""
        boot = bootstrap(make_settings())

        registry = boot.infra.waiter_registry()

        assert isinstance(registry, InMemoryWaiterRegistry)
        assert boot.infra.waiter_registry() is registry

    def test_separate_bootstraps_have_separate_registries(self):
        """测试不同的容器各自持有注册表"""
        first = bootstrap(make_settings())
        second = bootstrap(make_settings())

        assert first.infra.waiter_registry() is not second.infra.waiter_registry()

    def test_block_list_from_settings(self):
        """测试黑名单来自配置"""
        boot = bootstrap(make_settings(block_list={"9.9.9.9": "abuse"}))

        assert boot.infra.block_list().reason_for("9.9.9.9") == "abuse"

    def test_handlers_share_registry(self):
        """测试处理器共享同一个注册表"""
        boot = bootstrap(make_settings(verify_timeout_seconds=3))

        await_handler = boot.app.await_verification_handler()
        resolve_handler = boot.app.resolve_visit_handler()

        assert isinstance(await_handler, AwaitVerificationHandler)
        assert isinstance(resolve_handler, ResolveVisitHandler)
        assert await_handler._registry is resolve_handler._registry
        assert resolve_handler.timeout.total_seconds() == 3

    def test_clock_override(self, clock):
        """测试替换时钟"""
        boot = bootstrap(make_settings())
        boot.infra.clock.override(providers.Object(clock))

        record = boot.infra.waiter_registry().register("abc")

        assert record.started_at == clock.now

    def test_sweeper(self):
        """测试清理服务"""
        boot = bootstrap(make_settings(sweep_interval_seconds=1.5))

        sweeper = boot.app.expired_wait_sweeper()

        assert isinstance(sweeper, ExpiredWaitSweeper)
        assert sweeper.interval == 1.5
