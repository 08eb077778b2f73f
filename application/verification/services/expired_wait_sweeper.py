"""过期等待记录清理服务"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from domain.verification.repositories.waiter_registry import WaiterRegistry


class ExpiredWaitSweeper:
    """
    过期等待记录清理服务

    按固定间隔把已超过时限的等待记录判定为 TIMED_OUT 并删除，
    这样即使链接一直没人访问，等待方也会被唤醒，记录也不会一直留在内存中。
    清理后的标识符再被访问时视为不存在。
    """

    DEFAULT_INTERVAL: float = 5.0  # 默认清理间隔（秒）

    def __init__(
        self,
        registry: WaiterRegistry,
        timeout: timedelta,
        interval: float = DEFAULT_INTERVAL,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化清理服务

        Args:
            registry: 等待者注册表
            timeout: 等待时限
            interval: 清理间隔（秒）
            clock: 时钟函数（测试时可替换）
            logger: 可选的日志记录器
        """
        if interval <= 0:
            raise ValueError("Sweep interval must be positive")
        self._registry = registry
        self._timeout = timeout
        self._interval = interval
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logger or logging.getLogger(__name__)

        self._task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """检查清理服务是否正在运行"""
        return self._running and self._task is not None

    @property
    def interval(self) -> float:
        """获取清理间隔（秒）"""
        return self._interval

    def sweep_once(self) -> int:
        """
        执行一次清理

        Returns:
            清理的记录数量
        """
        return self._registry.sweep_expired(self._clock(), self._timeout)

    async def start(self) -> None:
        """
        启动清理服务

        如果服务已在运行，则不会重复启动。
        """
        if self._running:
            self._logger.warning("Sweeper already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._sweep_loop())
        self._logger.info(
            f"Expired wait sweeper started "
            f"(interval={self._interval}s, timeout={self._timeout.total_seconds()}s)"
        )

    async def stop(self) -> None:
        """停止清理服务"""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._logger.info("Expired wait sweeper stopped")

    async def _sweep_loop(self) -> None:
        """清理主循环"""
        while self._running:
            await asyncio.sleep(self._interval)
            if not self._running:  # sleep 期间可能已被停止
                break
            try:
                self.sweep_once()
            except Exception as e:
                self._logger.error(f"Failed to sweep expired wait records: {e}")
