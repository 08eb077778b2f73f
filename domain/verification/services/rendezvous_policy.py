"""访问判定策略

按固定优先级判定一次访问的结果，先命中的规则生效：

1. 超时：超时优先于黑名单，迟到的黑名单地址被判定为 TIMED_OUT
2. 黑名单：判定为 BLOCKED，并携带拦截原因
3. 其余情况：FULFILLED
"""

from datetime import datetime, timedelta
from typing import Optional

from domain.verification.entities.wait_record import WaitRecord
from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome
from domain.verification.value_objects.visit_decision import VisitDecision


def decide_visit(
    record: WaitRecord,
    client_address: Optional[str],
    now: datetime,
    timeout: timedelta,
    block_list: BlockList,
) -> VisitDecision:
    """判定一次访问的结果（不修改记录）

    Args:
        record: 等待中的记录
        client_address: 访问者地址
        now: 访问时间
        timeout: 等待时限
        block_list: 黑名单

    Returns:
        访问判定
    """
    if record.is_expired(now, timeout):
        return VisitDecision(identifier=record.identifier, outcome=Outcome.TIMED_OUT)

    reason = block_list.reason_for(client_address)
    if reason is not None:
        return VisitDecision(
            identifier=record.identifier,
            outcome=Outcome.BLOCKED,
            reason=reason,
        )

    return VisitDecision(identifier=record.identifier, outcome=Outcome.FULFILLED)
