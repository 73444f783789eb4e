"""
Core math modules для bignum

Rounding engine, арифметика, трансцендентные функции и сравнение над DecimalValue.
"""

# Rounding Engine
from bignum.core.math.rounding import (
    divide_integer,
    rescale,
    round_value,
)

# Arithmetic Engine
from bignum.core.math.arithmetic import (
    absolute_value,
    add,
    check_operands,
    check_special,
    divide,
    exponentiate,
    modulo,
    multiply,
    negate,
    subtract,
)

# Transcendental Approximator
from bignum.core.math.transcendental import (
    DEFAULT_GUARD_DIGITS,
    DEFAULT_ITERATIONS_PER_DIGIT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_RESULT_DIGITS,
    DEFAULT_MIN_ITERATIONS,
    ApproximationConfig,
    cosine,
    exp,
    log,
    sine,
    square_root,
    tangent,
)

# Comparison
from bignum.core.math.comparison import (
    compare,
    equal,
    greater_or_equal,
    greater_than,
    is_zero,
    less_or_equal,
    less_than,
)

__all__ = [
    # Rounding
    "divide_integer",
    "rescale",
    "round_value",
    # Arithmetic
    "absolute_value",
    "add",
    "check_operands",
    "check_special",
    "divide",
    "exponentiate",
    "modulo",
    "multiply",
    "negate",
    "subtract",
    # Transcendental: Constants
    "DEFAULT_GUARD_DIGITS",
    "DEFAULT_ITERATIONS_PER_DIGIT",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_MAX_RESULT_DIGITS",
    "DEFAULT_MIN_ITERATIONS",
    # Transcendental: Config
    "ApproximationConfig",
    # Transcendental: Functions
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
