"""Verification 命令模块"""

from application.commands.verification.await_verification import (
    AwaitVerificationCommand,
    AwaitVerificationHandler,
)
from application.commands.verification.resolve_visit import (
    ResolveVisitCommand,
    ResolveVisitHandler,
    VisitResult,
)

__all__ = [
    "AwaitVerificationCommand",
    "AwaitVerificationHandler",
    "ResolveVisitCommand",
    "ResolveVisitHandler",
    "VisitResult",
]
