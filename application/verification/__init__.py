"""点击验证应用层模块"""

from application.verification.services import ExpiredWaitSweeper

__all__ = ["ExpiredWaitSweeper"]
