"""
Utils 工具模块
"""
from .tabwriter import TabWriter

__all__ = [
    "TabWriter",
]
