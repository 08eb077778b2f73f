"""Verification 领域模块

点击验证的领域层，包含等待记录实体、判定策略、值对象和注册表接口。
"""

from domain.verification.entities.wait_record import WaitRecord
from domain.verification.repositories.waiter_registry import WaiterRegistry
from domain.verification.services.rendezvous_policy import decide_visit
from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome
from domain.verification.value_objects.visit_decision import VisitDecision

__all__ = [
    "BlockList",
    "Outcome",
    "VisitDecision",
    "WaitRecord",
    "WaiterRegistry",
    "decide_visit",
]
