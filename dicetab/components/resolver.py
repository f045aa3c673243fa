from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core import get_logger
from ..core.models import Throw
from .builder import parse_args
from .random_source import RandomSource
from .roller import Roller
from .sorter import sort_throws

logger = get_logger(__name__)


@dataclass
class RowResult:
    """一个表达式的掷骰结果，throws 已排序"""
    throws: List[Throw]
    total: int


@dataclass
class RollReport:
    rows: List[RowResult] = field(default_factory=list)
    column_count: int = 0

    @property
    def grand_total(self) -> int:
        return sum(row.total for row in self.rows)

    @property
    def show_grand_total(self) -> bool:
        return len(self.rows) > 1

    def show_row_total(self, row: RowResult) -> bool:
        """多于一项或多于一个表达式时才显示本行总和"""
        return len(self.rows) > 1 or len(row.throws) > 1


class Resolver:
    def __init__(self, source: Optional[RandomSource] = None):
        self.roller = Roller(source)

    def evaluate(self, args: Sequence[str]) -> RollReport:
        """
        处理命令行参数的主要入口点。
        按输入顺序逐个掷骰；随机数来源失效时 RandomSourceError 直接向上抛出
        """
        groups, column_count = parse_args(args)
        report = RollReport(column_count=column_count)

        for group in groups:
            throws = sort_throws(self.roller.roll(group))
            total = sum(t.value for t in throws)
            report.rows.append(RowResult(throws=throws, total=total))

        logger.debug(f"总计: {report.grand_total}")
        return report
