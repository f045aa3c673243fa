"""
把掷骰结果排成表格
每个骰子占三个单元格：运算符、"d6( "、"4 )"；每行第一个骰子没有运算符
"""
from ..components.resolver import RollReport, RowResult
from ..core.models import Throw
from ..utils.tabwriter import TabWriter

CELLS_PER_COLUMN = 3


def format_number(throw: Throw) -> str:
    """百分骰的 0 显示为 00"""
    value = throw.value
    if value == 0 and not throw.kind.is_fudge:
        return "00"
    return str(value)


def write_row(tab: TabWriter, row: RowResult, report: RollReport):
    for i, throw in enumerate(row.throws):
        handled_negative = False

        if i > 0:
            if throw.number >= 0:
                tab.write(" + \t")
            else:
                tab.write(" - \t")
                handled_negative = True

        if throw.kind.is_constant:
            number = abs(throw.number) if handled_negative else throw.number
            tab.write(f"\t{number}\t")
            continue

        tab.write(f"d{throw.kind.face_display}( \t{format_number(throw)} )\t")

    if report.show_row_total(row):
        # 补齐缺少的列，让总和对齐
        missing = report.column_count - len(row.throws)
        tab.write("\t" * (missing * CELLS_PER_COLUMN))
        tab.write(f" = \t{row.total}\t")

    tab.write("\n")


def render_report(report: RollReport) -> str:
    tab = TabWriter(minwidth=0, padding=0, padchar=" ", align_right=True)

    for row in report.rows:
        write_row(tab, row, report)

    # 多于一个表达式时输出总计
    if report.show_grand_total:
        tab.write("\t" * (report.column_count * CELLS_PER_COLUMN - 1))
        tab.write(f"= \t{report.grand_total}\t\n")

    return tab.getvalue()
