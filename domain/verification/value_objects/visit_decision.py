"""访问判定值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.verification.value_objects.outcome import Outcome


@dataclass(frozen=True)
class VisitDecision(BaseValueObject):
    """一次访问对等待记录做出的判定

    reason 只用于展示层（BLOCKED 时的拦截原因），不属于 Outcome 本身。

    Attributes:
        identifier: 被访问的标识符
        outcome: 判定结果
        reason: 拦截原因（仅 BLOCKED 时有值）
    """

    identifier: str
    outcome: Outcome
    reason: Optional[str] = None

    def validate(self) -> None:
        if self.reason is not None and self.outcome != Outcome.BLOCKED:
            raise ValueError("Reason is only allowed for blocked outcomes")
