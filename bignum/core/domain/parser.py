"""
Parser — Построение DecimalValue из текста

Грамматика:
    "inf" | "nan"                        (регистр не важен)
    -?[0-9]+(\\.[0-9]+)?                 (только ASCII-цифры)

Дробные цифры сверх precision УСЕКАЮТСЯ (не округляются), недостающие
дополняются нулями справа до ровно precision цифр:

    magnitude = sign * (int_digits * 10**precision + frac_digits)

Examples:
    >>> parse("123.4567", 2).magnitude
    12345
    >>> parse("-1.5", 3).magnitude
    -1500
"""

import re
from typing import Final

from bignum.core.domain.decimal_value import DecimalValue, NumberKind, RoundingMode
from bignum.core.domain.digits import digits_to_int
from bignum.core.errors import InvalidInputError

# [0-9] вместо \d: \d в Python пропускает не-ASCII цифры
_NUMBER_PATTERN: Final = re.compile(r"(-)?([0-9]+)(?:\.([0-9]+))?")

_SPECIAL_KINDS: Final[dict[str, NumberKind]] = {
    "inf": NumberKind.INFINITE,
    "nan": NumberKind.NAN,
}


def parse(
    text: str,
    precision: int,
    rounding_mode: RoundingMode = RoundingMode.ROUND_TO_NEAREST,
) -> DecimalValue:
    """
    Разбор десятичного текста в DecimalValue.

    Args:
        text: Текст числа ("123.45", "-0.5", "inf", "NaN")
        precision: Количество дробных цифр результата (>= 0)
        rounding_mode: Режим округления, сохраняемый в значении

    Returns:
        DecimalValue с заданными precision и rounding_mode

    Raises:
        InvalidInputError: Пустой текст, текст вне грамматики или precision < 0
    """
    if precision < 0:
        raise InvalidInputError(f"precision must be non-negative, got {precision}")

    if not text:
        raise InvalidInputError("empty string provided")

    special = _SPECIAL_KINDS.get(text.lower())
    if special is not None:
        return DecimalValue(precision=precision, rounding_mode=rounding_mode, kind=special)

    match = _NUMBER_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidInputError(f"invalid number: {text!r}")

    sign_part, integer_part, fraction_part = match.groups()

    # Усечение до precision и дополнение нулями справа
    fraction_digits = (fraction_part or "")[:precision].ljust(precision, "0")

    magnitude = digits_to_int(integer_part) * 10**precision
    if fraction_digits:
        magnitude += digits_to_int(fraction_digits)

    if sign_part:
        magnitude = -magnitude

    return DecimalValue(
        magnitude=magnitude,
        precision=precision,
        rounding_mode=rounding_mode,
    )
