"""
Formatting — Текстовые и float-представления DecimalValue

- to_decimal_string: "123.45", "-0.05", "42" (precision 0), "Infinity", "NaN"
- to_scientific_notation: "1.2345e+02", мантисса с одной ненулевой цифрой
  до точки, хвостовые нули мантиссы отбрасываются, экспонента со знаком и
  минимум двумя цифрами; ноль — "0e+00". Маркер экспоненты — строчная "e",
  как у format(x, "e") и repr(float) в Python: строка читается обратно
  float() и decimal.Decimal() без преобразований
- to_float: приближение float (inf / nan для специальных значений)
"""

import math

from bignum.core.domain.decimal_value import DecimalValue
from bignum.core.domain.digits import int_to_digits
from bignum.core.errors import DecimalOverflowError, InvalidInputError

INFINITY_TEXT = "Infinity"
NAN_TEXT = "NaN"


def _special_text(value: DecimalValue) -> str | None:
    if value.is_infinite:
        return INFINITY_TEXT
    if value.is_nan:
        return NAN_TEXT
    return None


def to_decimal_string(value: DecimalValue) -> str:
    """
    Десятичная запись: знак, цифры |magnitude|, точка за precision цифр
    от правого края, дополнение нулями слева.

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> to_decimal_string(parse("-123.45", 2))
        '-123.45'
        >>> to_decimal_string(parse("0.05", 2))
        '0.05'
        >>> to_decimal_string(parse("42.9", 0))
        '42'
    """
    special = _special_text(value)
    if special is not None:
        return special

    sign = "-" if value.magnitude < 0 else ""
    digits = int_to_digits(value.magnitude)

    if value.precision == 0:
        return sign + digits

    digits = digits.rjust(value.precision + 1, "0")
    return f"{sign}{digits[:-value.precision]}.{digits[-value.precision:]}"


def to_scientific_notation(
    value: DecimalValue,
    significant_digits: int | None = None,
) -> str:
    """
    Научная запись d.ddde±NN.

    Args:
        value: Значение
        significant_digits: Максимум значащих цифр мантиссы (None — все цифры).
            Лишние цифры округляются по rounding_mode значения.

    Raises:
        InvalidInputError: Если significant_digits < 1

    Examples:
        >>> from bignum.core.domain.parser import parse
        >>> to_scientific_notation(parse("1234567890.1234567890", 10))
        '1.234567890123456789e+09'
        >>> to_scientific_notation(parse("1234567890.1234567890", 10), significant_digits=17)
        '1.2345678901234568e+09'
        >>> to_scientific_notation(parse("-0.00012", 5))
        '-1.2e-04'
    """
    special = _special_text(value)
    if special is not None:
        return special

    if significant_digits is not None and significant_digits < 1:
        raise InvalidInputError(
            f"significant_digits must be positive, got {significant_digits}"
        )

    if value.magnitude == 0:
        return "0e+00"

    sign = "-" if value.magnitude < 0 else ""
    digits = int_to_digits(value.magnitude)
    exponent = len(digits) - 1 - value.precision

    if significant_digits is not None and len(digits) > significant_digits:
        from bignum.core.math.rounding import divide_integer

        dropped = len(digits) - significant_digits
        rounded = divide_integer(abs(value.magnitude), 10**dropped, value.rounding_mode)
        digits = int_to_digits(rounded)
        if len(digits) > significant_digits:
            # Перенос 9.99 -> 10.0: сдвиг экспоненты
            digits = digits[:significant_digits]
            exponent += 1

    digits = digits.rstrip("0")
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += "." + digits[1:]

    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{sign}{mantissa}e{exponent_sign}{abs(exponent):02d}"


def to_float(value: DecimalValue) -> float:
    """
    Ближайший float (деление int / int в Python корректно округляется).

    Raises:
        DecimalOverflowError: Конечное значение вне диапазона float
    """
    if value.is_infinite:
        return math.inf
    if value.is_nan:
        return math.nan

    try:
        return value.magnitude / 10**value.precision
    except OverflowError as error:
        raise DecimalOverflowError(f"value is too large to convert to float: {error}") from error
