"""
Errors — Таксономия ошибок BigNumber

Все операции над DecimalValue сообщают об ошибке синхронно, исключением
одного из классов ниже. Частичных результатов не бывает: значения immutable,
результат публикуется только при успехе.

Каждый класс дополнительно наследует ближайшее встроенное исключение Python,
чтобы вызывающий код мог ловить как BigNumberError, так и, например,
ZeroDivisionError.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки"""

    OVERFLOW = "overflow"
    PRECISION = "precision"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_INPUT = "invalid_input"
    UNDEFINED_OPERATION = "undefined_operation"


class BigNumberError(Exception):
    """
    Базовая ошибка операций над DecimalValue.

    Attributes:
        kind: Вид ошибки (ErrorKind)
        message: Человекочитаемое описание
    """

    kind: ErrorKind = ErrorKind.UNDEFINED_OPERATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"BigNumber error: {self.message} ({self.kind.value})"


class DecimalOverflowError(BigNumberError, OverflowError):
    """
    Результат превышает заданный вызывающим потолок числа цифр
    (или диапазон промежуточного decimal-представления).
    """

    kind = ErrorKind.OVERFLOW


class PrecisionError(BigNumberError):
    """Операнды имеют разную precision там, где она должна совпадать."""

    kind = ErrorKind.PRECISION


class DivisionByZeroError(BigNumberError, ZeroDivisionError):
    """Делитель равен нулю (деление или остаток)."""

    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidInputError(BigNumberError, ValueError):
    """Некорректный текст или параметры при построении значения."""

    kind = ErrorKind.INVALID_INPUT


class UndefinedOperationError(BigNumberError, ArithmeticError):
    """
    Математически неопределённый результат:
    - операция над Infinity/NaN там, где это запрещено
    - квадратный корень из отрицательного числа
    - логарифм неположительного числа
    - 0 / 0
    """

    kind = ErrorKind.UNDEFINED_OPERATION
