"""
DecimalValue — Fixed-point десятичное число произвольной точности

Immutable Pydantic модель. Число хранится как scaled integer:

    value = magnitude / 10**precision

где magnitude — знаковое целое Python произвольной длины, precision — количество
подразумеваемых дробных цифр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно один kind (FINITE / INFINITE / NAN)
2. Для INFINITE / NAN magnitude всегда 0 (числового содержимого нет)
3. precision фиксирована на всё время жизни значения
4. Значение immutable: любая операция возвращает новое значение

Бинарные операции используют rounding_mode ЛЕВОГО операнда.

Методы модели делегируют в функциональные модули bignum.core.math и
bignum.core.domain.formatting (импорт внутри методов: модуль представления
остаётся листом графа зависимостей).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления при уменьшении precision"""

    ROUND_UP = "round_up"  # От нуля, если отброшена хоть одна ненулевая цифра
    ROUND_DOWN = "round_down"  # К нулю (усечение)
    ROUND_TO_NEAREST = "round_to_nearest"  # К ближайшему, половина от нуля
    ROUND_TO_EVEN = "round_to_even"  # К ближайшему, половина к чётному (banker's)


class NumberKind(str, Enum):
    """Вид значения"""

    FINITE = "finite"
    INFINITE = "infinite"
    NAN = "nan"


# =============================================================================
# DECIMAL VALUE MODEL
# =============================================================================


class DecimalValue(BaseModel):
    """
    Fixed-point десятичное число произвольной точности.

    Immutable модель (frozen=True).

    Examples:
        >>> v = DecimalValue(magnitude=12345, precision=2)
        >>> str(v)
        '123.45'
    """

    magnitude: int = Field(0, description="Scaled integer: value * 10**precision")
    precision: int = Field(..., ge=0, description="Количество дробных цифр")
    rounding_mode: RoundingMode = Field(
        RoundingMode.ROUND_TO_NEAREST, description="Режим округления значения"
    )
    kind: NumberKind = Field(NumberKind.FINITE, description="FINITE / INFINITE / NAN")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def clear_special_magnitude(cls, data: Any) -> Any:
        """У специальных значений нет числового содержимого: magnitude = 0"""
        if isinstance(data, dict):
            kind = data.get("kind", NumberKind.FINITE)
            if NumberKind(kind) is not NumberKind.FINITE:
                data = {**data, "magnitude": 0}
        return data

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(
        cls,
        value: int,
        precision: int,
        rounding_mode: RoundingMode = RoundingMode.ROUND_TO_NEAREST,
    ) -> "DecimalValue":
        """Целое число value, представленное с заданной precision."""
        return cls(
            magnitude=value * 10**precision,
            precision=precision,
            rounding_mode=rounding_mode,
        )

    @classmethod
    def infinity(
        cls,
        precision: int,
        rounding_mode: RoundingMode = RoundingMode.ROUND_TO_NEAREST,
    ) -> "DecimalValue":
        return cls(precision=precision, rounding_mode=rounding_mode, kind=NumberKind.INFINITE)

    @classmethod
    def nan(
        cls,
        precision: int,
        rounding_mode: RoundingMode = RoundingMode.ROUND_TO_NEAREST,
    ) -> "DecimalValue":
        return cls(precision=precision, rounding_mode=rounding_mode, kind=NumberKind.NAN)

    @classmethod
    def from_string(
        cls,
        text: str,
        precision: int,
        rounding_mode: RoundingMode = RoundingMode.ROUND_TO_NEAREST,
    ) -> "DecimalValue":
        """Разбор текста, см. bignum.core.domain.parser.parse"""
        from bignum.core.domain.parser import parse

        return parse(text, precision, rounding_mode)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_finite(self) -> bool:
        return self.kind is NumberKind.FINITE

    @property
    def is_infinite(self) -> bool:
        return self.kind is NumberKind.INFINITE

    @property
    def is_nan(self) -> bool:
        return self.kind is NumberKind.NAN

    @property
    def is_negative(self) -> bool:
        return self.magnitude < 0

    # -------------------------------------------------------------------------
    # Округление
    # -------------------------------------------------------------------------

    def round(self, precision: int) -> "DecimalValue":
        from bignum.core.math.rounding import round_value

        return round_value(self, precision)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "DecimalValue") -> "DecimalValue":
        from bignum.core.math.arithmetic import add

        return add(self, other)

    def subtract(self, other: "DecimalValue") -> "DecimalValue":
        from bignum.core.math.arithmetic import subtract

        return subtract(self, other)

    def multiply(self, other: "DecimalValue") -> "DecimalValue":
        from bignum.core.math.arithmetic import multiply

        return multiply(self, other)

    def divide(self, other: "DecimalValue") -> "DecimalValue":
        from bignum.core.math.arithmetic import divide

        return divide(self, other)

    def modulo(self, other: "DecimalValue") -> "DecimalValue":
        from bignum.core.math.arithmetic import modulo

        return modulo(self, other)

    def exponentiate(self, exponent: int, max_digits: int | None = None) -> "DecimalValue":
        from bignum.core.math.arithmetic import exponentiate

        return exponentiate(self, exponent, max_digits=max_digits)

    def absolute_value(self) -> "DecimalValue":
        from bignum.core.math.arithmetic import absolute_value

        return absolute_value(self)

    def negate(self) -> "DecimalValue":
        from bignum.core.math.arithmetic import negate

        return negate(self)

    # -------------------------------------------------------------------------
    # Трансцендентные функции
    # -------------------------------------------------------------------------

    def square_root(self) -> "DecimalValue":
        from bignum.core.math.transcendental import square_root

        return square_root(self)

    def sine(self) -> "DecimalValue":
        from bignum.core.math.transcendental import sine

        return sine(self)

    def cosine(self) -> "DecimalValue":
        from bignum.core.math.transcendental import cosine

        return cosine(self)

    def tangent(self) -> "DecimalValue":
        from bignum.core.math.transcendental import tangent

        return tangent(self)

    def log(self) -> "DecimalValue":
        from bignum.core.math.transcendental import log

        return log(self)

    def exp(self) -> "DecimalValue":
        from bignum.core.math.transcendental import exp

        return exp(self)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        from bignum.core.math.comparison import is_zero

        return is_zero(self)

    def compare(self, other: "DecimalValue") -> int:
        from bignum.core.math.comparison import compare

        return compare(self, other)

    def equal(self, other: "DecimalValue") -> bool:
        return self.compare(other) == 0

    def less_than(self, other: "DecimalValue") -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: "DecimalValue") -> bool:
        return self.compare(other) > 0

    def less_or_equal(self, other: "DecimalValue") -> bool:
        return self.compare(other) <= 0

    def greater_or_equal(self, other: "DecimalValue") -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        from bignum.core.domain.formatting import to_decimal_string

        return to_decimal_string(self)

    def to_scientific_notation(self, significant_digits: int | None = None) -> str:
        from bignum.core.domain.formatting import to_scientific_notation

        return to_scientific_notation(self, significant_digits=significant_digits)

    def to_float(self) -> float:
        from bignum.core.domain.formatting import to_float

        return to_float(self)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __float__(self) -> float:
        return self.to_float()

    def __hash__(self) -> int:
        # Согласовано с __eq__: precision в сравнении не участвует
        return hash((self.kind, self.magnitude))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.less_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.greater_or_equal(other)

    def __neg__(self) -> "DecimalValue":
        return self.negate()

    def __abs__(self) -> "DecimalValue":
        return self.absolute_value()

    def __add__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.modulo(other)

    def __pow__(self, exponent: object) -> "DecimalValue":
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.exponentiate(exponent)
