"""
dicetab - 命令行掷骰工具
"""
from .components import Resolver, parse_args, sort_throws
from .interfaces import main, run

__all__ = [
    "Resolver",
    "parse_args",
    "sort_throws",
    "main",
    "run",
]
