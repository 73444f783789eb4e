"""
Arithmetic Engine — Сложение, вычитание, умножение, деление, остаток, степень

Все операции — чистые функции над DecimalValue, результат всегда новое значение.

Общее предусловие (check_operands):
- оба операнда FINITE, иначе UndefinedOperationError
- для add/subtract/divide/modulo precision операндов совпадает, иначе PrecisionError
  (multiply precision не проверяет)

Результат бинарной операции наследует rounding_mode ЛЕВОГО операнда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply точны (без потери цифр)
2. multiply: precision результата = p1 + p2
3. divide/modulo: 0 в делителе → DivisionByZeroError, 0 / 0 → UndefinedOperationError
4. modulo — усечённый (truncating): знак результата = знак делимого
5. Переполнение невозможно по построению (int произвольной длины); Overflow —
   только явный потолок числа цифр max_digits, заданный вызывающим
"""

from bignum.core.domain.decimal_value import DecimalValue
from bignum.core.domain.digits import digit_count
from bignum.core.errors import (
    DecimalOverflowError,
    DivisionByZeroError,
    PrecisionError,
    UndefinedOperationError,
)
from bignum.core.math.rounding import divide_integer


# =============================================================================
# ПРЕДУСЛОВИЯ
# =============================================================================


def check_special(*values: DecimalValue) -> None:
    """
    Проверка, что все операнды конечны.

    Raises:
        UndefinedOperationError: Если хотя бы один операнд Infinity или NaN
    """
    for value in values:
        if value.is_infinite:
            raise UndefinedOperationError("one of the operands is infinity")
        if value.is_nan:
            raise UndefinedOperationError("one of the operands is NaN")


def check_operands(
    left: DecimalValue,
    right: DecimalValue,
    require_same_precision: bool = True,
) -> None:
    """
    Общее предусловие бинарных операций.

    Args:
        left: Левый операнд
        right: Правый операнд
        require_same_precision: Требовать равенства precision (False для multiply)

    Raises:
        UndefinedOperationError: Если операнд Infinity или NaN
        PrecisionError: Если require_same_precision и precision различаются
    """
    check_special(left, right)

    if require_same_precision and left.precision != right.precision:
        raise PrecisionError(
            "cannot perform operation with BigNumbers of different precisions: "
            f"{left.precision} != {right.precision}"
        )


def _result(left: DecimalValue, magnitude: int, precision: int) -> DecimalValue:
    return DecimalValue(
        magnitude=magnitude,
        precision=precision,
        rounding_mode=left.rounding_mode,
    )


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / УМНОЖЕНИЕ
# =============================================================================


def add(left: DecimalValue, right: DecimalValue) -> DecimalValue:
    """
    Точная сумма двух значений одной precision.

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> str(add(parse("123.4567", 4), parse("8.9012", 4)))
        '132.3579'
    """
    check_operands(left, right)
    return _result(left, left.magnitude + right.magnitude, left.precision)


def subtract(left: DecimalValue, right: DecimalValue) -> DecimalValue:
    """Точная разность двух значений одной precision."""
    check_operands(left, right)
    return _result(left, left.magnitude - right.magnitude, left.precision)


def multiply(left: DecimalValue, right: DecimalValue) -> DecimalValue:
    """
    Точное произведение.

    Произведение scaled integers на шкале p1 + p2 представляет математическое
    произведение без потерь. Уменьшение precision — отдельный явный round.

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> product = multiply(parse("1.5", 1), parse("2.25", 2))
        >>> product.precision, str(product)
        (3, '3.375')
    """
    check_operands(left, right, require_same_precision=False)
    return _result(
        left,
        left.magnitude * right.magnitude,
        left.precision + right.precision,
    )


# =============================================================================
# ДЕЛЕНИЕ / ОСТАТОК
# =============================================================================


def _check_divisor(left: DecimalValue, right: DecimalValue) -> None:
    if right.magnitude == 0:
        if left.magnitude == 0:
            raise UndefinedOperationError("zero divided by zero is undefined")
        raise DivisionByZeroError("cannot divide by zero")


def divide(left: DecimalValue, right: DecimalValue) -> DecimalValue:
    """
    Частное на precision делимого.

    Делимое масштабируется на 10**precision перед целочисленным делением на
    magnitude делителя; отброшенный остаток округляется по rounding_mode
    левого операнда. Знак результата алгебраический.

    Raises:
        PrecisionError: Разные precision
        UndefinedOperationError: Infinity/NaN операнд или 0 / 0
        DivisionByZeroError: Делитель равен нулю

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> str(divide(parse("123.45", 2), parse("-67.89", 2)))
        '-1.82'
    """
    check_operands(left, right)
    _check_divisor(left, right)

    scaled_dividend = left.magnitude * 10**left.precision
    quotient = divide_integer(scaled_dividend, right.magnitude, left.rounding_mode)

    return _result(left, quotient, left.precision)


def modulo(left: DecimalValue, right: DecimalValue) -> DecimalValue:
    """
    Усечённый остаток: left - right * trunc(left / right).

    Знак результата совпадает со знаком делимого, precision — precision делимого.

    Raises:
        PrecisionError: Разные precision
        UndefinedOperationError: Infinity/NaN операнд
        DivisionByZeroError: Делитель равен нулю

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> str(modulo(parse("123.45", 2), parse("67.89", 2)))
        '55.56'
        >>> str(modulo(parse("-7", 0), parse("2", 0)))
        '-1'
    """
    check_operands(left, right)
    if right.magnitude == 0:
        raise DivisionByZeroError("cannot perform modulo by zero")

    # Обе magnitude на одной шкале: частное безразмерно
    truncated = abs(left.magnitude) // abs(right.magnitude)
    if (left.magnitude < 0) != (right.magnitude < 0):
        truncated = -truncated

    return _result(left, left.magnitude - right.magnitude * truncated, left.precision)


# =============================================================================
# СТЕПЕНЬ / МОДУЛЬ / СМЕНА ЗНАКА
# =============================================================================


def exponentiate(
    value: DecimalValue,
    exponent: int,
    max_digits: int | None = None,
) -> DecimalValue:
    """
    Целая степень значения на precision основания.

    Степень magnitude вычисляется точно (шкала precision * |exponent|), затем
    приводится к precision основания одним округлением по rounding_mode значения.
    Отрицательная степень — деление единицы на точную степень.

    Args:
        value: Основание
        exponent: Целый показатель (может быть отрицательным)
        max_digits: Потолок числа цифр magnitude результата (None — без ограничения)

    Returns:
        value ** exponent на precision основания. 0 ** 0 == 1.

    Raises:
        UndefinedOperationError: Основание Infinity или NaN
        DivisionByZeroError: Нулевое основание при отрицательной степени
        DecimalOverflowError: Цифр в результате больше max_digits

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> str(exponentiate(parse("2.5", 2), 3))
        '15.63'
        >>> str(exponentiate(parse("2.5", 2), -2))
        '0.16'
    """
    check_special(value)

    precision = value.precision
    power_scale = precision * abs(exponent)
    power = value.magnitude ** abs(exponent)

    if exponent >= 0:
        # value**n = power / 10**power_scale; на шкале precision:
        magnitude = divide_integer(
            power * 10**precision, 10**power_scale, value.rounding_mode
        )
    else:
        if power == 0:
            raise DivisionByZeroError("cannot raise zero to a negative power")
        # value**-n = 10**power_scale / power; на шкале precision:
        magnitude = divide_integer(
            10 ** (power_scale + precision), power, value.rounding_mode
        )

    if max_digits is not None and digit_count(magnitude) > max_digits:
        raise DecimalOverflowError(
            f"exponentiation result has {digit_count(magnitude)} digits, "
            f"limit is {max_digits}"
        )

    return DecimalValue(
        magnitude=magnitude,
        precision=precision,
        rounding_mode=value.rounding_mode,
    )


def absolute_value(value: DecimalValue) -> DecimalValue:
    """Модуль значения. Infinity/NaN возвращаются как есть."""
    if not value.is_finite:
        return value
    return value.model_copy(update={"magnitude": abs(value.magnitude)})


def negate(value: DecimalValue) -> DecimalValue:
    """Смена знака. Infinity/NaN возвращаются как есть."""
    if not value.is_finite:
        return value
    return value.model_copy(update={"magnitude": -value.magnitude})
