"""验证结果值对象"""

from enum import Enum


class Outcome(str, Enum):
    """一次验证等待的终态结果

    Attributes:
        FULFILLED: 已完成 - 超时前收到来自非黑名单地址的访问
        TIMED_OUT: 已超时 - 访问到达时已超过等待时限
        BLOCKED: 已拦截 - 访问来自黑名单地址
    """

    FULFILLED = "fulfilled"
    TIMED_OUT = "timed_out"
    BLOCKED = "blocked"
