"""
掷骰
"""
from typing import List, Optional

from ..core import get_logger
from ..core.models import DieKind, Throw, ThrowGroup
from .random_source import RandomSource, RandomSourceError, SystemRandomSource

logger = get_logger(__name__)


class Roller:
    def __init__(self, source: Optional[RandomSource] = None):
        self.source = source or SystemRandomSource()

    def _draw(self, kind: DieKind) -> int:
        n = self.source.draw(kind.face_count)
        # 越界的随机数同样视为来源失效，不能悄悄给出错误结果
        if not isinstance(n, int) or not 0 <= n < kind.face_count:
            raise RandomSourceError(f"随机数越界: {n!r} 不在 [0, {kind.face_count}) 内")
        return n

    def roll_die(self, kind: DieKind) -> int:
        """
        掷一个骰子并归一化
        百分骰 0-9 -> 0,10,...,90；其余 0..n-1 -> 1..n（命运骰保留原始 1-6）
        """
        selected = self._draw(kind)
        if kind.is_percentile:
            return selected * 10
        return selected + 1

    def roll(self, group: ThrowGroup) -> List[Throw]:
        """
        掷出整组骰子
        常量不掷，直接作为一个结果；结果顺序不保证，展示前需要排序
        """
        results = []

        for kind, count in group.items():
            if kind.is_constant:
                results.append(Throw(kind, count))
                continue
            for _ in range(count):
                results.append(Throw(kind, self.roll_die(kind)))

        logger.debug(f"掷骰结果: {[t.number for t in results]}")
        return results
