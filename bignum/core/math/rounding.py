"""
Rounding Engine — Перевод scaled integer между precision

Чистые функции над целыми числами: никакого float, результат всегда точен
с точностью до выбранного режима округления.

Режимы (применяются к отбрасываемым цифрам):
- ROUND_DOWN: усечение к нулю
- ROUND_UP: от нуля, если отброшена хоть одна ненулевая цифра
- ROUND_TO_NEAREST: к ближайшему, ровно половина — от нуля
- ROUND_TO_EVEN: к ближайшему, ровно половина — к чётной последней цифре

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Увеличение precision точно (умножение на степень 10)
2. Округление симметрично относительно нуля: f(-x) == -f(x) для всех режимов
3. Результат round_value всегда имеет precision == target_precision
"""

from bignum.core.domain.decimal_value import DecimalValue, RoundingMode
from bignum.core.errors import DivisionByZeroError, InvalidInputError


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ
# =============================================================================


def divide_integer(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Частное numerator / denominator, округлённое до целого по mode.

    Деление выполняется над модулями, знак восстанавливается в конце,
    поэтому все режимы симметричны относительно нуля.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)
        mode: Режим округления остатка

    Returns:
        Округлённое целое частное

    Raises:
        DivisionByZeroError: Если denominator == 0

    Examples:
        >>> divide_integer(25, 10, RoundingMode.ROUND_TO_NEAREST)
        3
        >>> divide_integer(25, 10, RoundingMode.ROUND_TO_EVEN)
        2
        >>> divide_integer(-21, 10, RoundingMode.ROUND_UP)
        -3
        >>> divide_integer(-29, 10, RoundingMode.ROUND_DOWN)
        -2
    """
    if denominator == 0:
        raise DivisionByZeroError("cannot divide by zero")

    negative = (numerator < 0) != (denominator < 0)
    abs_denominator = abs(denominator)
    quotient, remainder = divmod(abs(numerator), abs_denominator)

    if remainder:
        if mode == RoundingMode.ROUND_UP:
            quotient += 1
        elif mode == RoundingMode.ROUND_TO_NEAREST:
            if 2 * remainder >= abs_denominator:
                quotient += 1
        elif mode == RoundingMode.ROUND_TO_EVEN:
            twice = 2 * remainder
            if twice > abs_denominator or (twice == abs_denominator and quotient % 2 == 1):
                quotient += 1
        # ROUND_DOWN: остаток отбрасывается

    return -quotient if negative else quotient


def rescale(
    magnitude: int,
    from_precision: int,
    to_precision: int,
    mode: RoundingMode,
) -> int:
    """
    Перевод scaled integer из from_precision в to_precision.

    Examples:
        >>> rescale(12345, 2, 4, RoundingMode.ROUND_DOWN)
        1234500
        >>> rescale(12345678, 5, 2, RoundingMode.ROUND_TO_NEAREST)
        12346
    """
    if to_precision >= from_precision:
        return magnitude * 10 ** (to_precision - from_precision)

    return divide_integer(magnitude, 10 ** (from_precision - to_precision), mode)


# =============================================================================
# ОКРУГЛЕНИЕ ЗНАЧЕНИЯ
# =============================================================================


def round_value(value: DecimalValue, target_precision: int) -> DecimalValue:
    """
    Новое значение с precision == target_precision.

    Используется rounding_mode самого значения. Специальные значения
    (Infinity/NaN) переносятся с новой precision без изменений.

    Args:
        value: Исходное значение
        target_precision: Целевая precision (>= 0)

    Returns:
        Округлённое значение (или само value, если precision совпадает)

    Raises:
        InvalidInputError: Если target_precision < 0
    """
    if target_precision < 0:
        raise InvalidInputError(f"precision must be non-negative, got {target_precision}")

    if target_precision == value.precision:
        return value

    if not value.is_finite:
        return DecimalValue(
            precision=target_precision,
            rounding_mode=value.rounding_mode,
            kind=value.kind,
        )

    return DecimalValue(
        magnitude=rescale(
            value.magnitude, value.precision, target_precision, value.rounding_mode
        ),
        precision=target_precision,
        rounding_mode=value.rounding_mode,
    )
