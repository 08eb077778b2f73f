"""Verification 领域服务模块"""

from domain.verification.services.rendezvous_policy import decide_visit

__all__ = ["decide_visit"]
