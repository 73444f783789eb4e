"""
bignum — fixed-point десятичные числа произвольной точности

Значение хранится как scaled integer (magnitude / 10**precision) с режимом
округления и видом (FINITE / INFINITE / NAN). Все операции чистые и
возвращают новые immutable значения.

Example:
    >>> from bignum import parse
    >>> str(parse("123.4567", 4) + parse("8.9012", 4))
    '132.3579'
"""

from bignum.core.errors import (
    BigNumberError,
    DecimalOverflowError,
    DivisionByZeroError,
    ErrorKind,
    InvalidInputError,
    PrecisionError,
    UndefinedOperationError,
)
from bignum.core.domain import (
    DecimalValue,
    NumberKind,
    RoundingMode,
    parse,
    to_decimal_string,
    to_float,
    to_scientific_notation,
)
from bignum.core.math import (
    ApproximationConfig,
    absolute_value,
    add,
    check_operands,
    compare,
    cosine,
    divide,
    divide_integer,
    equal,
    exp,
    exponentiate,
    greater_or_equal,
    greater_than,
    is_zero,
    less_or_equal,
    less_than,
    log,
    modulo,
    multiply,
    negate,
    rescale,
    round_value,
    sine,
    square_root,
    subtract,
    tangent,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "BigNumberError",
    "DecimalOverflowError",
    "DivisionByZeroError",
    "ErrorKind",
    "InvalidInputError",
    "PrecisionError",
    "UndefinedOperationError",
    # Value
    "DecimalValue",
    "NumberKind",
    "RoundingMode",
    "parse",
    # Formatting
    "to_decimal_string",
    "to_float",
    "to_scientific_notation",
    # Rounding
    "divide_integer",
    "rescale",
    "round_value",
    # Arithmetic
    "absolute_value",
    "add",
    "check_operands",
    "divide",
    "exponentiate",
    "modulo",
    "multiply",
    "negate",
    "subtract",
    # Transcendental
    "ApproximationConfig",
    "cosine",
    "exp",
    "log",
    "sine",
    "square_root",
    "tangent",
    # Comparison
    "compare",
    "equal",
    "greater_or_equal",
    "greater_than",
    "is_zero",
    "less_or_equal",
    "less_than",
]
