"""等待验证命令"""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.verification.repositories.waiter_registry import WaiterRegistry
from domain.verification.value_objects.outcome import Outcome


@dataclass
class AwaitVerificationCommand:
    """等待验证命令

    Attributes:
        identifier: 标识符（通常嵌在发给用户的验证链接中）
    """

    identifier: str


class AwaitVerificationHandler:
    """等待验证处理器

    注册标识符并阻塞调用线程，直到某次访问给出结果。
    处理器本身没有超时，时限由访问判定或后台清理负责。
    """

    def __init__(
        self,
        registry: WaiterRegistry,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            registry: 等待者注册表
            logger: 日志记录器
        """
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, command: AwaitVerificationCommand) -> Outcome:
        """
        处理等待验证命令（阻塞）

        Args:
            command: 等待验证命令

        Returns:
            判定结果

        Raises:
            DuplicateIdentifierException: 同一标识符已有等待中的记录
        """
        self._logger.info(f"Awaiting verification: identifier={command.identifier}")

        outcome = self._registry.await_outcome(command.identifier)

        self._logger.info(
            f"Verification finished: identifier={command.identifier}, "
            f"outcome={outcome.value}"
        )
        return outcome
