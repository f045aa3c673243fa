"""
Components 模块
表达式解析、掷骰、排序与汇总
"""
from .notation import (
    InvalidEntryError,
    InvalidTermError,
    InvalidExpressionError,
    ParsedTerm,
    split_on_operators,
    parse_term,
)
from .builder import ThrowGroupBuilder, parse_args
from .random_source import RandomSource, RandomSourceError, SystemRandomSource
from .roller import Roller
from .sorter import sort_throws
from .resolver import Resolver, RollReport, RowResult

__all__ = [
    "InvalidEntryError",
    "InvalidTermError",
    "InvalidExpressionError",
    "ParsedTerm",
    "split_on_operators",
    "parse_term",
    "ThrowGroupBuilder",
    "parse_args",
    "RandomSource",
    "RandomSourceError",
    "SystemRandomSource",
    "Roller",
    "sort_throws",
    "Resolver",
    "RollReport",
    "RowResult",
]
