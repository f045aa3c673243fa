"""
Interfaces 模块
接口层：CLI
"""
from .cli_runner import main, run
from .table_view import render_report

__all__ = [
    "main",
    "run",
    "render_report",
]
