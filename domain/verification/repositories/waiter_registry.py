"""等待者注册表接口"""

from datetime import datetime, timedelta
from typing import Optional, Protocol

from domain.verification.entities.wait_record import WaitRecord
from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome
from domain.verification.value_objects.visit_decision import VisitDecision


class WaiterRegistry(Protocol):
    """等待者注册表接口

    标识符到等待记录的映射，定义注册、判定和过期清理的契约。
    具体实现在 infrastructure 层。
    """

    def register(self, identifier: str) -> WaitRecord:
        """注册等待记录

        Args:
            identifier: 标识符

        Returns:
            新创建的等待记录

        Raises:
            DuplicateIdentifierException: 同一标识符已有等待中的记录
            ValueError: 标识符为空
        """
        ...

    def try_resolve(
        self,
        identifier: str,
        client_address: Optional[str],
        now: datetime,
        timeout: timedelta,
        block_list: BlockList,
    ) -> Optional[VisitDecision]:
        """尝试用一次访问完成等待记录

        查找、判定、唤醒和删除作为一个原子步骤执行。

        Args:
            identifier: 被访问的标识符
            client_address: 访问者地址
            now: 访问时间
            timeout: 等待时限
            block_list: 黑名单

        Returns:
            判定结果；没有等待中的记录时返回 None
        """
        ...

    def await_outcome(self, identifier: str) -> Outcome:
        """注册并阻塞直到结果写入

        Args:
            identifier: 标识符

        Returns:
            判定结果
        """
        ...

    def sweep_expired(self, now: datetime, timeout: timedelta) -> int:
        """将所有已超时的记录判定为 TIMED_OUT 并删除

        Returns:
            清理的记录数量
        """
        ...

    def is_pending(self, identifier: str) -> bool:
        """标识符是否有等待中的记录"""
        ...

    @property
    def pending_count(self) -> int:
        """等待中的记录数量"""
        ...
