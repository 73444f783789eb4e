"""
Domain: DecimalValue, разбор текста и форматирование.
"""

from bignum.core.domain.decimal_value import DecimalValue, NumberKind, RoundingMode
from bignum.core.domain.digits import digit_count, digits_to_int, int_to_digits
from bignum.core.domain.parser import parse
from bignum.core.domain.formatting import (
    INFINITY_TEXT,
    NAN_TEXT,
    to_decimal_string,
    to_float,
    to_scientific_notation,
)

__all__ = [
    # Value model
    "DecimalValue",
    "NumberKind",
    "RoundingMode",
    # Digits
    "digit_count",
    "digits_to_int",
    "int_to_digits",
    # Parser
    "parse",
    # Formatting
    "INFINITY_TEXT",
    "NAN_TEXT",
    "to_decimal_string",
    "to_float",
    "to_scientific_notation",
]
