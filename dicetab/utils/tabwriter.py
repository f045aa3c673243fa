"""
制表位对齐
以 \t 结尾的文本为一个单元格，每行最后一个不以 \t 结尾的单元格不参与对齐。
同一列的宽度只在"连续拥有该列单元格的行"之间统一（列块）。
"""
from typing import List


class TabWriter:
    """
    累积写入的文本，在 getvalue() 时一次性完成对齐
    align_right: 单元格内容右对齐（在左侧补齐）
    """
    def __init__(self, minwidth: int = 0, padding: int = 0, padchar: str = " ", align_right: bool = True):
        self.minwidth = minwidth
        self.padding = padding
        self.padchar = padchar
        self.align_right = align_right
        self._chunks: List[str] = []

    def write(self, text: str):
        self._chunks.append(text)

    def _column_widths(self, lines: List[List[str]]) -> List[List[int]]:
        """每行每个已结束单元格的宽度"""
        widths = [[0] * (len(cells) - 1) for cells in lines]
        max_columns = max((len(cells) - 1 for cells in lines), default=0)

        for column in range(max_columns):
            this = 0
            while this < len(lines):
                if column >= len(lines[this]) - 1:
                    this += 1
                    continue

                # 列块：连续拥有该列单元格的行
                start = this
                width = self.minwidth
                while this < len(lines) and column < len(lines[this]) - 1:
                    width = max(width, len(lines[this][column]) + self.padding)
                    this += 1

                for i in range(start, this):
                    widths[i][column] = width

        return widths

    def getvalue(self) -> str:
        lines = [line.split("\t") for line in "".join(self._chunks).split("\n")]
        widths = self._column_widths(lines)

        out = []
        for cells, line_widths in zip(lines, widths):
            parts = []
            for j, cell in enumerate(cells):
                if j < len(line_widths):
                    pad = self.padchar * (line_widths[j] - len(cell))
                    parts.append(pad + cell if self.align_right else cell + pad)
                else:
                    parts.append(cell)
            out.append("".join(parts))

        return "\n".join(out)
