"""
骰子表达式解析

支持格式：
- 标准骰: "2d6"、"8D20"、"d10"（省略数量时默认 1 个）
- 百分骰: "d%"
- 命运骰: "3dF"
- 常量: "8"、"-4"
- 组合: "2d6+1d10-2"
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from ..core import get_logger
from ..core.models import DieKind, CONSTANT

logger = get_logger(__name__)

DIE_MARKER = "D"
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class InvalidEntryError(ValueError):
    """无效的骰子项"""


class InvalidTermError(InvalidEntryError):
    """只跳过当前项，表达式其余部分照常处理"""


class InvalidExpressionError(InvalidEntryError):
    """整个表达式作废"""


@dataclass(frozen=True)
class ParsedTerm:
    kind: DieKind
    count: int

    @property
    def is_constant(self) -> bool:
        return self.kind.is_constant


def split_on_operators(expr: str) -> List[str]:
    """
    按 + / - 拆分表达式
    "+" 本身丢弃，"-" 保留在下一项开头，使该项为负
    """
    grouped = []
    start = 0

    for i, ch in enumerate(expr):
        if ch == "+":
            grouped.append(expr[start:i])
            start = i + 1
        elif ch == "-":
            grouped.append(expr[start:i])
            start = i

    grouped.append(expr[start:])
    return grouped


def _parse_int(text: str) -> Optional[int]:
    """严格的十进制整数解析，不接受空白和下划线，超出 64 位范围视为无效"""
    if not INTEGER_RE.fullmatch(text):
        return None
    try:
        value = int(text)
    except ValueError:
        # 超长数字串
        return None
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_term(term: str) -> ParsedTerm:
    """
    解析单个带符号的项

    数量无法解析、面数无法解析或小于 1 时抛出 InvalidExpressionError；
    骰子数量小于 1 时抛出 InvalidTermError。
    """
    # 拆分骰子数量与面数
    parts = term.upper().split(DIE_MARKER)

    # 未给出数量时默认 1 个
    count_text = parts[0] or "1"
    count = _parse_int(count_text)
    if count is None:
        raise InvalidExpressionError(f"无法解析数量: {count_text!r}")

    if len(parts) == 1:
        return ParsedTerm(CONSTANT, count)

    if count < 1:
        raise InvalidTermError(f"骰子数量必须为正数: {count}")

    face_text = parts[1]
    if face_text == "%":
        kind = DieKind(face_count=10, is_percentile=True)
    elif face_text == "F":
        kind = DieKind(face_count=6, is_fudge=True)
    else:
        faces = _parse_int(face_text)
        if faces is None or faces < 1:
            raise InvalidExpressionError(f"无效的骰子面数: {face_text!r}")
        kind = DieKind(face_count=faces)

    logger.debug(f"解析 {term!r} -> {count} x {kind}")
    return ParsedTerm(kind, count)
