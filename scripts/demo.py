#!/usr/bin/env python3
"""
bignum Demonstration
Arithmetic, rounding modes and transcendental functions on DecimalValue
"""

import logging

from bignum import (
    BigNumberError,
    RoundingMode,
    parse,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

print('=' * 60)
print('BIGNUM DEMONSTRATION')
print('=' * 60)

# Arithmetic
print('\n--- Arithmetic (precision 4) ---')
a = parse('123.4567', 4)
b = parse('8.9012', 4)
print(f'{a} + {b} = {a + b}')
print(f'{a} - {b} = {a - b}')
print(f'{a} * {b} = {a * b}  (precision {(a * b).precision})')
print(f'{a} / {b} = {a / b}')
print(f'{a} % {b} = {a % b}')
print(f'{b} ** 3 = {b ** 3}')

# Rounding modes
print('\n--- Rounding 123.455 to 2 digits ---')
for mode in RoundingMode:
    value = parse('123.455', 3, mode)
    print(f'{mode.value:>18}: {value.round(2)}')

# Transcendental functions
print('\n--- Transcendental (precision 20) ---')
x = parse('0.5', 20)
print(f'sqrt(2)  = {parse("2", 20).square_root()}')
print(f'sin(0.5) = {x.sine()}')
print(f'cos(0.5) = {x.cosine()}')
print(f'tan(0.5) = {x.tangent()}')
print(f'exp(1)   = {parse("1", 20).exp()}')
print(f'ln(10)   = {parse("10", 20).log()}')

# Formatting
print('\n--- Scientific notation ---')
big = parse('1234567890.1234567890', 10)
print(f'{big} -> {big.to_scientific_notation()}')
print(f'{big} -> {big.to_scientific_notation(significant_digits=5)}')

# Errors
print('\n--- Errors ---')
for label, operation in [
    ('1 / 0', lambda: parse('1', 2) / parse('0', 2)),
    ('sqrt(-9)', lambda: parse('-9', 2).square_root()),
    ('1.0 + 1.00', lambda: parse('1', 1) + parse('1', 2)),
    ('parse("1e5")', lambda: parse('1e5', 2)),
]:
    try:
        operation()
    except BigNumberError as error:
        print(f'{label:>12}: {error}')

print('\n' + '=' * 60)
