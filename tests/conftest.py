"""
测试公用的随机数来源替身
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from dicetab.components.random_source import RandomSource, RandomSourceError


class SequenceRandomSource(RandomSource):
    """按固定序列返回随机数，序列耗尽时视为来源失效"""

    def __init__(self, values):
        self.values = list(values)
        self.requests = []

    def draw(self, n: int) -> int:
        self.requests.append(n)
        if not self.values:
            raise RandomSourceError("序列已耗尽")
        return self.values.pop(0)


class BrokenRandomSource(RandomSource):
    """总是失败的随机数来源"""

    def draw(self, n: int) -> int:
        raise RandomSourceError("error")


@pytest.fixture
def sequence_source():
    return SequenceRandomSource


@pytest.fixture
def broken_source():
    return BrokenRandomSource()
