"""
Тесты для formatting

Проверяет:
- to_decimal_string: знак, дополнение нулями, precision 0, специальные значения
- Обратимость parse(to_decimal_string(x))
- to_scientific_notation: мантисса, экспонента, округление значащих цифр, ноль
- to_float: приближение, inf / nan, переполнение
"""

import math
from decimal import Decimal

import pytest

from bignum.core.domain import (
    DecimalValue,
    RoundingMode,
    parse,
    to_decimal_string,
    to_float,
    to_scientific_notation,
)
from bignum.core.errors import DecimalOverflowError, InvalidInputError


# =============================================================================
# DECIMAL STRING
# =============================================================================


class TestDecimalString:
    """Тесты десятичной записи"""

    @pytest.mark.parametrize(
        "text,precision,expected",
        [
            ("123.45", 2, "123.45"),
            ("-123.45", 2, "-123.45"),
            ("0.05", 2, "0.05"),
            ("-0.05", 2, "-0.05"),
            ("0", 2, "0.00"),
            ("7", 3, "7.000"),
            ("42.9", 0, "42"),
            ("-42", 0, "-42"),
            ("0", 0, "0"),
        ],
    )
    def test_rendering(self, text: str, precision: int, expected: str) -> None:
        assert to_decimal_string(parse(text, precision)) == expected

    def test_special_values(self) -> None:
        """Infinity / NaN"""
        assert to_decimal_string(parse("inf", 2)) == "Infinity"
        assert to_decimal_string(parse("nan", 2)) == "NaN"

    @pytest.mark.parametrize(
        "text,precision",
        [
            ("123.45", 2),
            ("-0.001", 3),
            ("98765432109876543210.0123456789", 10),
            ("5", 0),
        ],
    )
    def test_parse_round_trip(self, text: str, precision: int) -> None:
        """parse(to_decimal_string(x)) восстанавливает x"""
        value = parse(text, precision)
        restored = parse(to_decimal_string(value), precision)

        assert restored.magnitude == value.magnitude
        assert to_decimal_string(restored) == text

    def test_str_uses_decimal_string(self) -> None:
        assert str(parse("-1.5", 1)) == "-1.5"


# =============================================================================
# SCIENTIFIC NOTATION
# =============================================================================


class TestScientificNotation:
    """Тесты научной записи"""

    @pytest.fixture
    def big(self) -> DecimalValue:
        return parse("1234567890.1234567890", 10)

    def test_all_digits(self, big: DecimalValue) -> None:
        """Хвостовые нули мантиссы отбрасываются"""
        assert to_scientific_notation(big) == "1.234567890123456789e+09"

    def test_significant_digits(self, big: DecimalValue) -> None:
        """17 значащих цифр с округлением к ближайшему"""
        assert to_scientific_notation(big, significant_digits=17) == "1.2345678901234568e+09"

    def test_significant_digits_round_down(self) -> None:
        """Округление мантиссы по режиму значения"""
        value = parse("1234567890.1234567890", 10, RoundingMode.ROUND_DOWN)
        assert to_scientific_notation(value, significant_digits=17) == "1.2345678901234567e+09"

    def test_carry_shifts_exponent(self) -> None:
        """9.99 до 2 значащих цифр -> 1e+01"""
        assert to_scientific_notation(parse("9.99", 2), significant_digits=2) == "1e+01"

    @pytest.mark.parametrize(
        "text,precision,expected",
        [
            ("123.45", 2, "1.2345e+02"),
            ("-0.00012", 5, "-1.2e-04"),
            ("0.001", 3, "1e-03"),
            ("5", 0, "5e+00"),
            ("1" + "0" * 120, 0, "1e+120"),
        ],
    )
    def test_exponent(self, text: str, precision: int, expected: str) -> None:
        """Экспонента со знаком и минимум двумя цифрами"""
        assert to_scientific_notation(parse(text, precision)) == expected

    @pytest.mark.parametrize(
        "text,precision",
        [("123.45", 2), ("-0.00012", 5), ("1234567890.1234567890", 10)],
    )
    def test_lowercase_marker_reads_back(self, text: str, precision: int) -> None:
        """Строчная e читается обратно float() и Decimal()"""
        rendered = to_scientific_notation(parse(text, precision))

        assert "e" in rendered and "E" not in rendered
        assert Decimal(rendered) == Decimal(text)
        assert float(rendered) == float(text)

    def test_zero(self) -> None:
        """Ноль -> 0e+00"""
        assert to_scientific_notation(parse("0", 4)) == "0e+00"

    def test_special_values(self) -> None:
        assert to_scientific_notation(parse("inf", 2)) == "Infinity"
        assert to_scientific_notation(parse("nan", 2)) == "NaN"

    def test_invalid_significant_digits(self) -> None:
        """significant_digits < 1 -> InvalidInputError"""
        with pytest.raises(InvalidInputError, match="significant_digits"):
            to_scientific_notation(parse("1.5", 1), significant_digits=0)


# =============================================================================
# FLOAT
# =============================================================================


class TestToFloat:
    """Тесты преобразования во float"""

    def test_finite(self) -> None:
        assert to_float(parse("123.45", 2)) == 123.45
        assert float(parse("-0.5", 1)) == -0.5

    def test_special_values(self) -> None:
        assert to_float(parse("inf", 2)) == math.inf
        assert math.isnan(to_float(parse("nan", 2)))

    def test_overflow(self) -> None:
        """Значение вне диапазона float -> DecimalOverflowError"""
        huge = DecimalValue(magnitude=10**400, precision=0)

        with pytest.raises(DecimalOverflowError):
            to_float(huge)
