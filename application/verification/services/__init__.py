"""验证应用服务"""

from application.verification.services.expired_wait_sweeper import ExpiredWaitSweeper

__all__ = ["ExpiredWaitSweeper"]
