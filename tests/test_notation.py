"""
表达式拆分与单项解析
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from dicetab.components.notation import (
    InvalidEntryError,
    InvalidExpressionError,
    InvalidTermError,
    parse_term,
    split_on_operators,
)
from dicetab.core.models import CONSTANT, DieKind


@pytest.mark.parametrize("expr, expected", [
    ("", [""]),
    ("d6", ["d6"]),
    ("2d6+1d10", ["2d6", "1d10"]),
    ("8-4", ["8", "-4"]),
    ("d6+1-2", ["d6", "1", "-2"]),
    ("-1d6", ["", "-1d6"]),
    ("d6+", ["d6", ""]),
    ("1++2", ["1", "", "2"]),
])
def test_split_on_operators(expr, expected):
    assert split_on_operators(expr) == expected


def test_split_is_pure():
    expr = "3d6-2+d%"
    assert split_on_operators(expr) == split_on_operators(expr)


@pytest.mark.parametrize("term, kind, count", [
    ("d6", DieKind(face_count=6), 1),
    ("8D20", DieKind(face_count=20), 8),
    ("d%", DieKind(face_count=10, is_percentile=True), 1),
    ("6d%", DieKind(face_count=10, is_percentile=True), 6),
    ("3dF", DieKind(face_count=6, is_fudge=True), 3),
    ("3df", DieKind(face_count=6, is_fudge=True), 3),
    ("7", CONSTANT, 7),
    ("-4", CONSTANT, -4),
    ("0", CONSTANT, 0),
])
def test_parse_term(term, kind, count):
    parsed = parse_term(term)
    assert parsed.kind == kind
    assert parsed.count == count


@pytest.mark.parametrize("term", ["-1d6", "0d6", "0d%", "-2dF"])
def test_non_positive_count_skips_term(term):
    with pytest.raises(InvalidTermError):
        parse_term(term)


@pytest.mark.parametrize("term", ["Hd2", "d0", "d-", "dX", "2d", "-", "abc", " 1", "1_0", "d6 "])
def test_malformed_term_aborts_expression(term):
    with pytest.raises(InvalidExpressionError):
        parse_term(term)


def test_errors_are_value_errors():
    assert issubclass(InvalidTermError, InvalidEntryError)
    assert issubclass(InvalidExpressionError, InvalidEntryError)
    assert issubclass(InvalidEntryError, ValueError)


@pytest.mark.parametrize("term", [
    "1" * 5000,
    "d" + "9" * 25,
    "9223372036854775808d6",
    "d9223372036854775808",
    "-9223372036854775809",
])
def test_out_of_range_integers_abort_expression(term):
    """超出 64 位范围或超长的数字与无法解析的数字同样处理"""
    with pytest.raises(InvalidExpressionError):
        parse_term(term)


def test_int64_bounds_accepted():
    assert parse_term("9223372036854775807").count == 2**63 - 1
    assert parse_term("-9223372036854775808").count == -2**63
    assert parse_term("d9223372036854775807").kind == DieKind(face_count=2**63 - 1)
