"""
掷骰结果排序，只影响展示顺序，不影响总和
"""
from typing import Iterable, List, Tuple

from ..core.models import Throw


def throw_sort_key(throw: Throw) -> Tuple[int, int, int, int, int]:
    """
    排序规则，优先级从高到低：
    1. 骰子在前，常量在后
    2. 面数大的在前；同面数时百分骰 > 普通骰 > 命运骰；再按点数从大到小
    3. 常量按数值从小到大
    """
    kind = throw.kind
    if kind.is_constant:
        return (1, 0, 0, 0, throw.number)
    return (
        0,
        -kind.face_count,
        0 if kind.is_percentile else 1,
        1 if kind.is_fudge else 0,
        -throw.number,
    )


def sort_throws(throws: Iterable[Throw]) -> List[Throw]:
    return sorted(throws, key=throw_sort_key)
