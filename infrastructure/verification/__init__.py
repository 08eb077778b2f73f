"""Verification 基础设施模块

提供等待者注册表的进程内实现。
"""

from infrastructure.verification.registry.in_memory_waiter_registry import (
    InMemoryWaiterRegistry,
    utc_now,
)

__all__ = [
    "InMemoryWaiterRegistry",
    "utc_now",
]
