"""
命令行入口
用法: dice 2d6+1d10 8-4 3dF
"""
import sys
from typing import List, Optional

from ..components.random_source import RandomSource, RandomSourceError
from ..components.resolver import Resolver
from ..core import get_logger, get_settings
from .table_view import render_report

logger = get_logger(__name__)


def run(args: List[str], source: Optional[RandomSource] = None) -> str:
    """解析、掷骰并返回排好版的表格文本"""
    report = Resolver(source).evaluate(args)
    return render_report(report)


def main(argv: Optional[List[str]] = None, source: Optional[RandomSource] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    settings.apply_logging()
    logger.debug(f"{settings.PROJECT_NAME} 参数: {args}")

    try:
        output = run(args, source)
    except RandomSourceError as e:
        # 随机数不可靠时不输出任何结果
        logger.critical(f"随机数来源失效，终止: {e}", exc_info=settings.DEBUG)
        return 1

    # 表格在内存中排好后一次性写出
    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
