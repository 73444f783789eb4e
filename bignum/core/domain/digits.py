"""
Digits — Преобразования целое <-> строка десятичных цифр

int(str) и str(int) в CPython ограничены sys.get_int_max_str_digits()
(4300 цифр по умолчанию). Scaled integer может быть длиннее, поэтому
преобразования идут через decimal.Decimal: конструктор Decimal и int(Decimal)
точны и лимиту не подчиняются.
"""

from decimal import Decimal


def digits_to_int(digits: str) -> int:
    """
    Строка ASCII-цифр (без знака) -> целое.

    Examples:
        >>> digits_to_int("00123")
        123
    """
    return int(Decimal(digits))


def int_to_digits(value: int) -> str:
    """
    |value| -> строка десятичных цифр без знака и ведущих нулей.

    Examples:
        >>> int_to_digits(-1200)
        '1200'
    """
    return format(Decimal(abs(value)), "f")


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр |value| (для нуля — 1).

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-99999)
        5
    """
    if value == 0:
        return 1
    return Decimal(abs(value)).adjusted() + 1
