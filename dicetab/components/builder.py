"""
把命令行参数整理成 ThrowGroup
"""
from typing import List, Optional, Sequence, Tuple

from ..core import get_logger
from ..core.models import ThrowGroup
from .notation import (
    InvalidExpressionError,
    InvalidTermError,
    parse_term,
    split_on_operators,
)

logger = get_logger(__name__)

INVALID_ENTRY_MESSAGE = "invalid dice entry: {}"


def report_invalid(expr: str):
    """提示信息引用原始表达式，而不是出错的那一项"""
    print(INVALID_ENTRY_MESSAGE.format(expr))


class ThrowGroupBuilder:
    """
    累加一个表达式中的各项
    columns: 该表达式占用的列数，每个骰子一列，常量合并后占一列
    """
    def __init__(self, expr: str):
        self.expr = expr
        self.group = ThrowGroup()
        self.columns = 0

    def add_term(self, term: str):
        parsed = parse_term(term)

        is_new = self.group.add(parsed.kind, parsed.count)
        if parsed.is_constant:
            if is_new:
                self.columns += 1
        else:
            self.columns += parsed.count

    def build(self) -> Optional[ThrowGroup]:
        """
        解析整个表达式
        表达式作废时返回 None，跳过的项只打印提示
        """
        for term in split_on_operators(self.expr):
            if term == "":
                continue
            try:
                self.add_term(term)
            except InvalidTermError as e:
                logger.debug(f"跳过 {term!r}（{self.expr!r}）: {e}")
                report_invalid(self.expr)
            except InvalidExpressionError as e:
                logger.debug(f"丢弃表达式 {self.expr!r}: {e}")
                report_invalid(self.expr)
                return None
        return self.group


def parse_args(args: Sequence[str]) -> Tuple[List[ThrowGroup], int]:
    """
    返回 (有效的 ThrowGroup 列表, 最大列数)
    作废的表达式与空表达式不参与列数计算，也不出现在结果中
    """
    groups = []
    column_count = 0

    for arg in args:
        builder = ThrowGroupBuilder(arg)
        group = builder.build()
        if group is None:
            continue

        # 记录最长的一行，用于对齐
        column_count = max(column_count, builder.columns)

        if len(group) > 0:
            groups.append(group)

    logger.debug(f"共 {len(groups)} 个表达式，最大列数 {column_count}")
    return groups, column_count
