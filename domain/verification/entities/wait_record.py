"""等待记录实体"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.common.exceptions import InvalidStateTransitionException
from domain.verification.value_objects.outcome import Outcome


@dataclass(eq=False)
class WaitRecord:
    """等待记录实体

    表示一个尚未完成的点击验证。调用方注册标识符后阻塞在 wait() 上，
    直到某次访问调用 resolve() 写入结果。

    结果槽只能写入一次，写入方不会等待读取方，读取方只有最初的等待者。

    Attributes:
        identifier: 调用方提供的标识符
        started_at: 注册时间，用于计算是否超时
    """

    identifier: str
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _outcome: Optional[Outcome] = field(default=None, init=False, repr=False)
    _signal: threading.Event = field(default_factory=threading.Event, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def create(cls, identifier: str, now: datetime) -> "WaitRecord":
        """工厂方法创建等待记录

        Args:
            identifier: 标识符
            now: 注册时间

        Returns:
            新创建的等待记录
        """
        if not identifier:
            raise ValueError("Identifier cannot be empty")
        return cls(identifier=identifier, started_at=now)

    def elapsed(self, now: datetime) -> timedelta:
        """计算自注册以来经过的时间"""
        return now - self.started_at

    def is_expired(self, now: datetime, timeout: timedelta) -> bool:
        """是否已超过等待时限（恰好等于时限也视为超时）"""
        return self.elapsed(now) >= timeout

    def resolve(self, outcome: Outcome) -> None:
        """写入结果并唤醒等待者

        Args:
            outcome: 判定结果

        Raises:
            InvalidStateTransitionException: 如果记录已经有结果
        """
        with self._lock:
            if self._outcome is not None:
                raise InvalidStateTransitionException(
                    entity="WaitRecord",
                    from_state=self._outcome.value,
                    to_state=outcome.value,
                    reason="A wait record can only be resolved once",
                )
            self._outcome = outcome
        self._signal.set()

    def wait(self, timeout: Optional[float] = None) -> Optional[Outcome]:
        """阻塞直到结果写入

        Args:
            timeout: 最长等待秒数，None 表示无限等待

        Returns:
            判定结果；指定了 timeout 且到期仍无结果时返回 None
        """
        if not self._signal.wait(timeout):
            return None
        return self._outcome

    @property
    def outcome(self) -> Optional[Outcome]:
        """当前结果（未完成时为 None）"""
        return self._outcome

    @property
    def is_pending(self) -> bool:
        """是否仍在等待"""
        return self._outcome is None

    @property
    def is_resolved(self) -> bool:
        """是否已有结果"""
        return self._outcome is not None
