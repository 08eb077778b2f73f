"""Verification 领域值对象模块"""

from domain.verification.value_objects.block_list import BlockList
from domain.verification.value_objects.outcome import Outcome
from domain.verification.value_objects.visit_decision import VisitDecision

__all__ = ["BlockList", "Outcome", "VisitDecision"]
