#!/usr/bin/env python3
"""
bignum vs decimal Benchmark
Throughput of DecimalValue operations against the standard-library decimal module
"""

import random
import timeit
from decimal import Decimal

from bignum import RoundingMode, parse

INTEGER_DIGITS = 3
DECIMAL_DIGITS = 3
REPEAT = 20_000


def random_number(integer_digits: int, decimal_digits: int) -> str:
    """Случайное число ровно с заданным числом целых и дробных цифр."""
    integer = random.randint(10 ** (integer_digits - 1), 10**integer_digits - 1)
    fraction = random.randint(1, 10**decimal_digits - 1)
    return f"{integer}.{fraction:0{decimal_digits}d}"


def main() -> None:
    text_a = random_number(INTEGER_DIGITS, DECIMAL_DIGITS)
    text_b = random_number(INTEGER_DIGITS, DECIMAL_DIGITS)

    d1, d2 = Decimal(text_a), Decimal(text_b)
    bn1 = parse(text_a, DECIMAL_DIGITS, RoundingMode.ROUND_TO_NEAREST)
    bn2 = parse(text_b, DECIMAL_DIGITS, RoundingMode.ROUND_TO_NEAREST)

    cases = [
        ("addition", lambda: d1 + d2, lambda: bn1 + bn2),
        ("subtraction", lambda: d1 - d2, lambda: bn1 - bn2),
        ("multiplication", lambda: d1 * d2, lambda: bn1 * bn2),
        ("division", lambda: d1 / d2, lambda: bn1 / bn2),
        ("square root", lambda: d1.sqrt(), lambda: bn1.square_root()),
    ]

    print(f"operands: {text_a}, {text_b}  ({REPEAT} iterations)")
    print(f"{'operation':<16}{'decimal (us)':>14}{'bignum (us)':>14}")
    for name, decimal_op, bignum_op in cases:
        decimal_time = timeit.timeit(decimal_op, number=REPEAT) / REPEAT * 1e6
        bignum_time = timeit.timeit(bignum_op, number=REPEAT) / REPEAT * 1e6
        print(f"{name:<16}{decimal_time:>14.3f}{bignum_time:>14.3f}")


if __name__ == "__main__":
    main()
