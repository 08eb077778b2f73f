"""测试公共 fixtures"""

from datetime import datetime, timedelta, timezone

import pytest


class FakeClock:
    """可手动推进的时钟"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    """创建固定起点的时钟"""
    return FakeClock(datetime(2025, 1, 15, 10, 0, 0, tzinfo=timezone.utc))
