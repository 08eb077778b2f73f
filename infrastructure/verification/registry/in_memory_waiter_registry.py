"""等待者注册表内存实现"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from domain.common.exceptions import DuplicateIdentifierException
from domain.verification.entities.wait_record import WaitRecord
from domain.verification.repositories.waiter_registry import WaiterRegistry
from domain.verification.services.rendezvous_policy import decide_visit
from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome
from domain.verification.value_objects.visit_decision import VisitDecision


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """默认时钟"""
    return datetime.now(timezone.utc)


class InMemoryWaiterRegistry(WaiterRegistry):
    """
    等待者注册表内存实现

    进程内的标识符 -> 等待记录映射，所有读写都在同一把锁内完成。
    记录不会跨进程重启保留。
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化注册表

        Args:
            clock: 时钟函数，返回带时区的当前时间（测试时可替换）
            logger: 日志记录器
        """
        self._clock = clock or utc_now
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._records: Dict[str, WaitRecord] = {}

    def register(self, identifier: str) -> WaitRecord:
        """注册等待记录"""
        with self._lock:
            if identifier in self._records:
                raise DuplicateIdentifierException(identifier)
            record = WaitRecord.create(identifier, self._clock())
            self._records[identifier] = record

        self._logger.debug(f"Wait record registered: identifier={identifier}")
        return record

    def try_resolve(
        self,
        identifier: str,
        client_address: Optional[str],
        now: datetime,
        timeout: timedelta,
        block_list: BlockList,
    ) -> Optional[VisitDecision]:
        """尝试用一次访问完成等待记录"""
        with self._lock:
            record = self._records.get(identifier)
            if record is None:
                return None

            decision = decide_visit(record, client_address, now, timeout, block_list)
            record.resolve(decision.outcome)
            del self._records[identifier]

        self._logger.info(
            f"Wait record resolved: identifier={identifier}, "
            f"outcome={decision.outcome.value}, client={client_address}"
        )
        return decision

    def await_outcome(self, identifier: str) -> Outcome:
        """注册并阻塞直到结果写入"""
        record = self.register(identifier)
        outcome = record.wait()
        self._logger.debug(
            f"Wait record delivered: identifier={identifier}, outcome={outcome.value}"
        )
        return outcome

    def sweep_expired(self, now: datetime, timeout: timedelta) -> int:
        """将所有已超时的记录判定为 TIMED_OUT 并删除"""
        expired: List[WaitRecord] = []
        with self._lock:
            for identifier, record in list(self._records.items()):
                if record.is_expired(now, timeout):
                    record.resolve(Outcome.TIMED_OUT)
                    del self._records[identifier]
                    expired.append(record)

        if expired:
            self._logger.info(f"Swept {len(expired)} expired wait records")
        return len(expired)

    def is_pending(self, identifier: str) -> bool:
        """标识符是否有等待中的记录"""
        with self._lock:
            return identifier in self._records

    @property
    def pending_count(self) -> int:
        """等待中的记录数量"""
        with self._lock:
            return len(self._records)
