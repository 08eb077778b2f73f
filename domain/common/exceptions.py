"""领域异常定义"""

from typing import Optional


class DomainException(Exception):
    """领域异常基类"""


class InvalidStateTransitionException(DomainException):
    """非法状态转换异常

    当实体从当前状态无法转换到目标状态时抛出。

    Attributes:
        entity: 实体名称
        from_state: 当前状态
        to_state: 目标状态
        reason: 原因说明
    """

    def __init__(
        self,
        entity: str,
        from_state: str,
        to_state: str,
        reason: Optional[str] = None,
    ):
        self.entity = entity
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason
        message = f"{entity}: cannot transition from '{from_state}' to '{to_state}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DuplicateIdentifierException(DomainException):
    """标识符重复异常

    同一标识符已有等待中的记录时再次注册会抛出此异常，
    避免覆盖旧记录导致其等待方永远无法被唤醒。
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Identifier already pending: {identifier}")
