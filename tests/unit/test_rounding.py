"""
Тесты для rounding engine

Проверяет:
- divide_integer во всех четырёх режимах, включая ровно половину
- Симметрию округления относительно нуля
- rescale вверх (точно) и вниз (по режиму)
- round_value: precision результата, сохранение режима, специальные значения
"""

import pytest

from bignum.core.domain import RoundingMode, parse
from bignum.core.errors import DivisionByZeroError, InvalidInputError
from bignum.core.math import divide_integer, rescale, round_value

ALL_MODES = list(RoundingMode)


# =============================================================================
# DIVIDE INTEGER
# =============================================================================


class TestDivideInteger:
    """Тесты целочисленного деления с округлением"""

    @pytest.mark.parametrize(
        "numerator,denominator,mode,expected",
        [
            (25, 10, RoundingMode.ROUND_DOWN, 2),
            (25, 10, RoundingMode.ROUND_UP, 3),
            (25, 10, RoundingMode.ROUND_TO_NEAREST, 3),
            (25, 10, RoundingMode.ROUND_TO_EVEN, 2),
            (35, 10, RoundingMode.ROUND_TO_EVEN, 4),
            (24, 10, RoundingMode.ROUND_TO_NEAREST, 2),
            (26, 10, RoundingMode.ROUND_TO_EVEN, 3),
            (21, 10, RoundingMode.ROUND_UP, 3),
            (29, 10, RoundingMode.ROUND_DOWN, 2),
            (20, 10, RoundingMode.ROUND_UP, 2),
        ],
    )
    def test_modes(
        self, numerator: int, denominator: int, mode: RoundingMode, expected: int
    ) -> None:
        """Каждый режим на типичных остатках"""
        assert divide_integer(numerator, denominator, mode) == expected

    @pytest.mark.parametrize("mode", ALL_MODES)
    @pytest.mark.parametrize("numerator", [1, 5, 15, 25, 49, 50, 51, 99, 12345])
    def test_symmetric_around_zero(self, mode: RoundingMode, numerator: int) -> None:
        """f(-x) == -f(x) для всех режимов"""
        positive = divide_integer(numerator, 10, mode)

        assert divide_integer(-numerator, 10, mode) == -positive
        assert divide_integer(numerator, -10, mode) == -positive
        assert divide_integer(-numerator, -10, mode) == positive

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_exact_division_unaffected(self, mode: RoundingMode) -> None:
        """Без остатка режим не влияет на результат"""
        assert divide_integer(1200, 100, mode) == 12

    def test_zero_denominator(self) -> None:
        """Деление на ноль -> DivisionByZeroError"""
        with pytest.raises(DivisionByZeroError):
            divide_integer(1, 0, RoundingMode.ROUND_DOWN)

    def test_string_mode_accepted(self) -> None:
        """Строковое значение режима эквивалентно члену enum"""
        assert divide_integer(25, 10, "round_to_even") == 2


# =============================================================================
# RESCALE
# =============================================================================


class TestRescale:
    """Тесты перевода magnitude между precision"""

    def test_increase_is_exact(self) -> None:
        """Увеличение precision - умножение на степень 10"""
        assert rescale(12345, 2, 5, RoundingMode.ROUND_DOWN) == 12345000

    def test_same_precision(self) -> None:
        """Та же precision - magnitude без изменений"""
        assert rescale(-777, 3, 3, RoundingMode.ROUND_UP) == -777

    def test_decrease_rounds(self) -> None:
        """Уменьшение precision округляет по режиму"""
        assert rescale(12345678, 5, 2, RoundingMode.ROUND_TO_NEAREST) == 12346
        assert rescale(12345678, 5, 2, RoundingMode.ROUND_DOWN) == 12345


# =============================================================================
# ROUND VALUE
# =============================================================================


class TestRoundValue:
    """Тесты округления значения до целевой precision"""

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (RoundingMode.ROUND_TO_EVEN, "-2"),
            (RoundingMode.ROUND_TO_NEAREST, "-3"),
            (RoundingMode.ROUND_UP, "-3"),
            (RoundingMode.ROUND_DOWN, "-2"),
        ],
    )
    def test_negative_half(self, mode: RoundingMode, expected: str) -> None:
        """-2.5 до 0 цифр во всех режимах"""
        value = parse("-2.5", 1, mode)

        assert str(round_value(value, 0)) == expected

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (RoundingMode.ROUND_TO_NEAREST, "123.46"),
            (RoundingMode.ROUND_UP, "123.46"),
            (RoundingMode.ROUND_DOWN, "123.45"),
            (RoundingMode.ROUND_TO_EVEN, "123.46"),
        ],
    )
    def test_modes_on_long_fraction(self, mode: RoundingMode, expected: str) -> None:
        """123.45679 до 2 цифр"""
        assert str(parse("123.456789", 5, mode).round(2)) == expected

    def test_half_even_on_odd_digit(self) -> None:
        """123.455 -> 123.46 (5 нечётное, округление к чётному вверх)"""
        value = parse("123.455", 3, RoundingMode.ROUND_TO_EVEN)
        assert str(value.round(2)) == "123.46"

    def test_half_even_on_even_digit(self) -> None:
        """122.465 -> 122.46 при ROUND_TO_EVEN, 122.47 при ROUND_TO_NEAREST"""
        assert str(parse("122.465", 3, RoundingMode.ROUND_TO_EVEN).round(2)) == "122.46"
        assert str(parse("122.465", 3, RoundingMode.ROUND_TO_NEAREST).round(2)) == "122.47"

    def test_round_up_any_nonzero_digit(self) -> None:
        """ROUND_UP уходит от нуля при любой ненулевой отброшенной цифре"""
        assert str(parse("1.001", 3, RoundingMode.ROUND_UP).round(2)) == "1.01"
        assert str(parse("-1.001", 3, RoundingMode.ROUND_UP).round(2)) == "-1.01"

    def test_increase_precision(self) -> None:
        """Увеличение precision дописывает нули и обратимо"""
        value = parse("123.45", 2)
        widened = value.round(4)

        assert widened.precision == 4
        assert str(widened) == "123.4500"
        assert widened.round(2).magnitude == value.magnitude

    def test_same_precision_returns_value(self) -> None:
        """Та же precision - исходное значение"""
        value = parse("1.25", 2)
        assert round_value(value, 2) is value

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_result_keeps_mode_and_target_precision(self, mode: RoundingMode) -> None:
        """Результат имеет целевую precision и режим исходного значения"""
        rounded = round_value(parse("9.87654", 5, mode), 1)

        assert rounded.precision == 1
        assert rounded.rounding_mode is mode

    def test_special_values_carried(self) -> None:
        """Infinity / NaN переносятся с новой precision"""
        inf = round_value(parse("inf", 4), 1)
        nan = round_value(parse("nan", 1), 6)

        assert inf.is_infinite and inf.precision == 1
        assert nan.is_nan and nan.precision == 6

    def test_negative_target_rejected(self) -> None:
        """Отрицательная целевая precision -> InvalidInputError"""
        with pytest.raises(InvalidInputError):
            round_value(parse("1.5", 1), -1)
