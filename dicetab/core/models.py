"""
models模块
定义了程序中，模块间传递信息的数据结构
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

# 骰子种类对应的显示面
PERCENTILE_FACE = "%"
FUDGE_FACE = "F"


@dataclass(frozen=True)
class DieKind:
    """
    骰子种类，按值比较，可作为字典键
    face_count: 骰子面数；常量固定为 0
    is_percentile: 百分骰 d%，内部按 10 面骰处理，结果乘以 10
    is_fudge: 命运骰 dF，内部按 6 面骰处理，结果映射为 -1/0/1
    is_constant: 常量项，不掷骰
    """
    face_count: int = 0
    is_percentile: bool = False
    is_fudge: bool = False
    is_constant: bool = False

    @property
    def face_display(self) -> str:
        if self.is_percentile:
            return PERCENTILE_FACE
        if self.is_fudge:
            return FUDGE_FACE
        return str(self.face_count)


# 每个表达式里的所有常量合并到同一个键下
CONSTANT = DieKind(is_constant=True)


@dataclass
class ThrowGroup:
    """
    一个表达式中的全部骰子，例如 2d6+1d10
    counts: 骰子种类 -> 数量；常量键对应的是常量累加值，可以为负数或 0
    """
    counts: Dict[DieKind, int] = field(default_factory=dict)

    def add(self, kind: DieKind, count: int) -> bool:
        """合并同类项，返回该种类是否第一次出现"""
        is_new = kind not in self.counts
        self.counts[kind] = self.counts.get(kind, 0) + count
        return is_new

    def items(self) -> Iterator[Tuple[DieKind, int]]:
        return iter(self.counts.items())

    def __len__(self) -> int:
        return len(self.counts)


@dataclass(frozen=True)
class Throw:
    """
    一次掷骰结果
    number: 原始点数；命运骰为 1-6，常量为累加值
    """
    kind: DieKind
    number: int

    @property
    def value(self) -> int:
        """计入总和的语义值，命运骰 1,2 -> -1，3,4 -> 0，5,6 -> 1"""
        if self.kind.is_fudge:
            if self.number <= 2:
                return -1
            if self.number <= 4:
                return 0
            return 1
        return self.number
