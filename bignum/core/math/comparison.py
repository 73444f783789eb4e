"""
Comparison — Полный порядок над DecimalValue

Порядок (фиксированный, задокументированный):

    FINITE (по magnitude)  <  INFINITE  <  NAN

- Два INFINITE равны между собой, два NAN равны между собой. Это сознательное
  упрощение, НЕ семантика IEEE-754 (где NaN != NaN).
- Конечные значения сравниваются по magnitude напрямую: совпадение precision —
  ответственность вызывающего (123.45@2 и 123.450@3 НЕ равны).
"""

from typing import Final

from bignum.core.domain.decimal_value import DecimalValue, NumberKind

_KIND_RANK: Final[dict[NumberKind, int]] = {
    NumberKind.FINITE: 0,
    NumberKind.INFINITE: 1,
    NumberKind.NAN: 2,
}


def compare(left: DecimalValue, right: DecimalValue) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если left < right
         0 если left == right
        +1 если left > right

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> compare(parse("1.5", 1), parse("inf", 1))
        -1
        >>> compare(parse("nan", 1), parse("nan", 1))
        0
    """
    left_rank = _KIND_RANK[left.kind]
    right_rank = _KIND_RANK[right.kind]

    if left_rank != right_rank:
        return -1 if left_rank < right_rank else 1

    if left.kind is not NumberKind.FINITE:
        return 0

    if left.magnitude < right.magnitude:
        return -1
    if left.magnitude > right.magnitude:
        return 1
    return 0


def is_zero(value: DecimalValue) -> bool:
    """True только для конечного нуля (Infinity/NaN — не ноль)."""
    return value.is_finite and value.magnitude == 0


def equal(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) == 0


def less_than(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) < 0


def greater_than(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) > 0


def less_or_equal(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) <= 0


def greater_or_equal(left: DecimalValue, right: DecimalValue) -> bool:
    return compare(left, right) >= 0
