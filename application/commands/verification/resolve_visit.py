"""处理验证访问命令"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from domain.verification.repositories.waiter_registry import WaiterRegistry
from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome


@dataclass
class ResolveVisitCommand:
    """处理验证访问命令

    Attributes:
        identifier: 访问路径中的标识符
        client_address: 访问者地址（可能为空）
    """

    identifier: str
    client_address: Optional[str] = None


@dataclass
class VisitResult:
    """访问处理结果

    Attributes:
        found: 是否存在等待中的记录
        outcome: 判定结果（found 为 False 时为 None）
        reason: 拦截原因（仅 BLOCKED 时有值）
    """

    found: bool
    outcome: Optional[Outcome] = None
    reason: Optional[str] = None


class ResolveVisitHandler:
    """处理验证访问处理器

    用当前时间、配置的时限和黑名单完成标识符对应的等待记录。
    同一标识符只有第一次访问能拿到结果，之后的访问都视为不存在。
    """

    def __init__(
        self,
        registry: WaiterRegistry,
        timeout: timedelta,
        block_list: Optional[BlockList] = None,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            registry: 等待者注册表
            timeout: 等待时限
            block_list: 黑名单，默认为空
            clock: 时钟函数（测试时可替换）
            logger: 日志记录器
        """
        if timeout <= timedelta(0):
            raise ValueError("Timeout must be positive")
        self._registry = registry
        self._timeout = timeout
        self._block_list = block_list or BlockList()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logger or logging.getLogger(__name__)

    @property
    def timeout(self) -> timedelta:
        """等待时限"""
        return self._timeout

    @property
    def block_list(self) -> BlockList:
        """黑名单"""
        return self._block_list

    def handle(self, command: ResolveVisitCommand) -> VisitResult:
        """
        处理验证访问

        Args:
            command: 处理验证访问命令

        Returns:
            访问处理结果
        """
        decision = self._registry.try_resolve(
            command.identifier,
            command.client_address,
            self._clock(),
            self._timeout,
            self._block_list,
        )

        if decision is None:
            self._logger.debug(
                f"No pending verification: identifier={command.identifier}, "
                f"client={command.client_address}"
            )
            return VisitResult(found=False)

        if decision.outcome == Outcome.BLOCKED:
            self._logger.warning(
                f"Blocked verification visit: identifier={command.identifier}, "
                f"client={command.client_address}, reason={decision.reason}"
            )

        return VisitResult(found=True, outcome=decision.outcome, reason=decision.reason)
