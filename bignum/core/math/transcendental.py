"""
Transcendental Approximator — sqrt, sin, cos, tan, ln, exp

Промежуточное представление — decimal.Decimal с precision + guard_digits
значащими цифрами (плюс целые цифры операнда/результата). Вычисления идут
только внутри decimal.localcontext(): глобальный/thread-local контекст decimal
не изменяется.

Схема каждой функции:
    DecimalValue -> Decimal (точно) -> итерационное приближение
    -> текст -> parse на precision + guard_digits + 1 (+ sticky-признак
       отброшенных ненулевых цифр) -> round до precision по rounding_mode

Методы:
- square_root: итерация Ньютона (Heron) y := (y + x / y) / 2
- sine / cosine: редукция аргумента по модулю 2*pi (pi рядом Чудновского,
  binary splitting), ряд Тейлора
- tangent: sine / cosine; у полюса пересчёт с дополнительными цифрами
- log: итерация Ньютона y := y - (exp(y) - x) / exp(y)
- exp: усечённый ряд sum(x**n / n!) после редукции |x| < 1 делением пополам

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый цикл ограничен ApproximationConfig.iteration_limit(precision):
   вызов всегда завершается, даже если порог сходимости недостижим
   (pi: фиксированное число членов ряда Чудновского по точности)
2. Достижение лимита — не ошибка: используется текущее приближение, пишется warning
3. Infinity / NaN операнд → UndefinedOperationError во всех функциях
"""

import decimal
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Final

from bignum.core.domain.decimal_value import DecimalValue
from bignum.core.domain.parser import parse
from bignum.core.errors import DecimalOverflowError, UndefinedOperationError
from bignum.core.math.arithmetic import check_special
from bignum.core.math.rounding import divide_integer

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ СХОДИМОСТИ
# =============================================================================

# Дополнительные значащие цифры промежуточного представления
DEFAULT_GUARD_DIGITS: Final[int] = 10

# Бюджет итераций на одну цифру precision + guard
DEFAULT_ITERATIONS_PER_DIGIT: Final[int] = 4

# Нижняя граница лимита итераций (малые precision)
DEFAULT_MIN_ITERATIONS: Final[int] = 64

# Жёсткий потолок лимита итераций, независимый от precision
DEFAULT_MAX_ITERATIONS: Final[int] = 2000

# Потолок числа целых цифр результата exp (защита памяти)
DEFAULT_MAX_RESULT_DIGITS: Final[int] = 100_000

_LOG10_E: Final[float] = 0.4342944819032518
_LN_10: Final[float] = 2.302585092994046


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ApproximationConfig:
    """Конфигурация итерационных приближений.

    Параметры точности промежуточного представления и лимитов итераций.
    """

    # Дополнительные цифры промежуточного представления
    guard_digits: int = DEFAULT_GUARD_DIGITS

    # Лимит итераций = iterations_per_digit * (precision + guard_digits),
    # ограниченный снизу min_iterations и сверху max_iterations
    iterations_per_digit: int = DEFAULT_ITERATIONS_PER_DIGIT
    min_iterations: int = DEFAULT_MIN_ITERATIONS
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    # Максимум целых цифр результата exp
    max_result_digits: int = DEFAULT_MAX_RESULT_DIGITS

    def __post_init__(self) -> None:
        if self.guard_digits < 0:
            raise ValueError(f"guard_digits must be non-negative, got {self.guard_digits}")
        if self.iterations_per_digit <= 0:
            raise ValueError(
                f"iterations_per_digit must be positive, got {self.iterations_per_digit}"
            )
        if self.min_iterations <= 0 or self.max_iterations < self.min_iterations:
            raise ValueError(
                "iteration bounds must satisfy 0 < min_iterations <= max_iterations, "
                f"got {self.min_iterations}, {self.max_iterations}"
            )

    def iteration_limit(self, precision: int) -> int:
        """
        Лимит итераций для заданной precision.

        Examples:
            >>> ApproximationConfig().iteration_limit(2)
            64
            >>> ApproximationConfig().iteration_limit(10_000)
            2000
        """
        budget = self.iterations_per_digit * (precision + self.guard_digits)
        return min(max(self.min_iterations, budget), self.max_iterations)

    def threshold(self, precision: int) -> Decimal:
        """Порог сходимости 10**-(precision + guard_digits)."""
        return Decimal((0, (1,), -(precision + self.guard_digits)))


_DEFAULT_CONFIG: Final = ApproximationConfig()


# =============================================================================
# ПРЕОБРАЗОВАНИЯ DecimalValue <-> Decimal
# =============================================================================


def _to_decimal(value: DecimalValue) -> Decimal:
    """Точное Decimal-представление конечного значения (без округления контекстом)."""
    digits = Decimal(abs(value.magnitude)).as_tuple().digits
    sign = 1 if value.magnitude < 0 else 0
    return Decimal((sign, digits, -value.precision))


def _from_decimal(
    result: Decimal,
    value: DecimalValue,
    config: ApproximationConfig,
) -> DecimalValue:
    """
    Текст промежуточного результата -> parse с guard-цифрами -> round.

    parse усекает цифры за precision + guard_digits + 1. Если среди них есть
    ненулевые, к удвоенному magnitude добавляется sticky-единица со знаком
    результата: значение лежит строго между соседними рабочими единицами,
    и ROUND_UP / ROUND_TO_EVEN видят неточность, которую скрыло усечение.
    """
    dropped_digits = config.guard_digits + 1
    working_precision = value.precision + dropped_digits
    text = format(result, "f")
    working = parse(text, working_precision, value.rounding_mode)

    _, _, fraction = text.partition(".")
    sticky = 0
    if fraction[working_precision:].strip("0"):
        sticky = -1 if result.is_signed() else 1

    magnitude = divide_integer(
        2 * working.magnitude + sticky,
        2 * 10**dropped_digits,
        value.rounding_mode,
    )
    return DecimalValue(
        magnitude=magnitude,
        precision=value.precision,
        rounding_mode=value.rounding_mode,
    )


def _integer_digits(x: Decimal) -> int:
    """Число цифр целой части |x| (0 для |x| < 1)."""
    if x.is_zero():
        return 0
    return max(x.adjusted() + 1, 0)


def _prepare_context(ctx: decimal.Context, significant_digits: int) -> None:
    ctx.prec = max(significant_digits, 1)
    ctx.Emax = decimal.MAX_EMAX
    ctx.Emin = decimal.MIN_EMIN
    ctx.rounding = decimal.ROUND_HALF_EVEN


def _cap_reached(name: str, limit: int) -> None:
    logger.warning(
        "%s: iteration limit %d reached before convergence, using current estimate",
        name,
        limit,
    )


def _context_threshold() -> Decimal:
    """10**-(prec + 1) активного контекста: слагаемое ниже младшей цифры."""
    return Decimal((0, (1,), -(decimal.getcontext().prec + 1)))


# =============================================================================
# ВНУТРЕННИЕ ПРИБЛИЖЕНИЯ (активный decimal-контекст)
# =============================================================================


def _sqrt_newton(x: Decimal, threshold: Decimal, limit: int) -> Decimal:
    # Начальное приближение: float-корень мантиссы, экспонента пополам
    half_exponent = x.adjusted() // 2
    mantissa = x.scaleb(-2 * half_exponent)
    y = Decimal(math.sqrt(float(mantissa))).scaleb(half_exponent)

    for iteration in range(1, limit + 1):
        next_y = (y + x / y) / 2
        delta = abs(next_y - y)
        y = next_y
        if delta < threshold:
            logger.debug("square_root converged in %d iterations", iteration)
            break
    else:
        _cap_reached("square_root", limit)

    return y


# Константы ряда Чудновского
_CHUDNOVSKY_A: Final[int] = 13591409
_CHUDNOVSKY_B: Final[int] = 545140134
_CHUDNOVSKY_C3_OVER_24: Final[int] = 640320**3 // 24

# Верных цифр pi на один член ряда Чудновского
_CHUDNOVSKY_DIGITS_PER_TERM: Final[float] = 14.181647462725477


def _chudnovsky_split(a: int, b: int) -> tuple[int, int, int]:
    """Binary splitting членов [a, b) ряда Чудновского: целые (P, Q, T)."""
    if b - a == 1:
        if a == 0:
            p = q = 1
        else:
            p = (6 * a - 5) * (2 * a - 1) * (6 * a - 1)
            q = a * a * a * _CHUDNOVSKY_C3_OVER_24
        t = p * (_CHUDNOVSKY_A + _CHUDNOVSKY_B * a)
        if a & 1:
            t = -t
        return p, q, t

    m = (a + b) // 2
    p1, q1, t1 = _chudnovsky_split(a, m)
    p2, q2, t2 = _chudnovsky_split(m, b)
    return p1 * p2, q1 * q2, t1 * q2 + t2 * p1


def _pi() -> Decimal:
    """
    pi до точности активного контекста.

    Число членов задаётся точностью контекста (~14 цифр на член), глубина
    рекурсии log2(terms).
    """
    digits = decimal.getcontext().prec + 2
    terms = int(digits / _CHUDNOVSKY_DIGITS_PER_TERM) + 2
    _, q, t = _chudnovsky_split(0, terms)
    return 426880 * Decimal(10005).sqrt() * q / t


def _reduce_angle(x: Decimal) -> Decimal:
    """x по модулю 2*pi в диапазон [-pi, pi]."""
    two_pi = 2 * _pi()
    if abs(x) <= two_pi / 2:
        return x
    return x.remainder_near(two_pi)


def _sine_series(r: Decimal, threshold: Decimal, limit: int) -> Decimal:
    # sin(r) = r - r**3/3! + r**5/5! - ...
    total = r
    term = r
    r_squared = r * r

    for n in range(1, limit + 1):
        term = -term * r_squared / ((2 * n) * (2 * n + 1))
        total += term
        if abs(term) < threshold:
            break
    else:
        _cap_reached("sine", limit)

    return total


def _cosine_series(r: Decimal, threshold: Decimal, limit: int) -> Decimal:
    # cos(r) = 1 - r**2/2! + r**4/4! - ...
    total = Decimal(1)
    term = Decimal(1)
    r_squared = r * r

    for n in range(1, limit + 1):
        term = -term * r_squared / ((2 * n - 1) * (2 * n))
        total += term
        if abs(term) < threshold:
            break
    else:
        _cap_reached("cosine", limit)

    return total


def _exp_series(x: Decimal, limit: int) -> Decimal:
    """
    exp(x) усечённым рядом sum(x**n / n!).

    Ряд видит только |r| < 1: x делится на 2**k, результат возводится в
    квадрат k раз; отрицательный x — через 1 / exp(|x|). Порог — младшая
    цифра контекста (относительная точность нужна после k возведений в
    квадрат), контекст должен иметь запас цифр на эти возведения.
    """
    if x.is_zero():
        return Decimal(1)

    threshold = _context_threshold()
    r = abs(x)
    halvings = 0
    while r >= 1:
        r /= 2
        halvings += 1

    total = Decimal(1)
    term = Decimal(1)
    for n in range(1, limit + 1):
        term = term * r / n
        total += term
        if term < threshold:
            break
    else:
        _cap_reached("exp", limit)

    for _ in range(halvings):
        total *= total

    if x < 0:
        return 1 / total
    return total


def _log_newton(x: Decimal, threshold: Decimal, limit: int) -> Decimal:
    # Начальное приближение: ln(мантисса) + экспонента * ln(10) во float
    exponent = x.adjusted()
    mantissa = x.scaleb(-exponent)
    y = Decimal(math.log(float(mantissa)) + exponent * _LN_10)

    for iteration in range(1, limit + 1):
        exp_y = _exp_series(y, limit)
        # y := y - (exp(y) - x) / exp(y)
        delta = (exp_y - x) / exp_y
        y -= delta
        if abs(delta) < threshold:
            logger.debug("log converged in %d iterations", iteration)
            break
    else:
        _cap_reached("log", limit)

    return y


# =============================================================================
# PUBLIC API
# =============================================================================


def square_root(
    value: DecimalValue,
    config: ApproximationConfig | None = None,
) -> DecimalValue:
    """
    Квадратный корень на precision значения.

    Raises:
        UndefinedOperationError: Infinity/NaN или отрицательное значение

    Examples:
        >>> str(square_root(parse("9", 2)))
        '3.00'
    """
    config = config or _DEFAULT_CONFIG
    check_special(value)

    if value.magnitude < 0:
        raise UndefinedOperationError("square root of a negative number is undefined")
    if value.magnitude == 0:
        return value

    x = _to_decimal(value)
    with localcontext() as ctx:
        _prepare_context(
            ctx,
            value.precision + config.guard_digits + _integer_digits(x) // 2 + 2,
        )
        result = _sqrt_newton(
            x,
            config.threshold(value.precision),
            config.iteration_limit(value.precision),
        )

    return _from_decimal(result, value, config)


def _trig(
    value: DecimalValue,
    config: ApproximationConfig,
    extra_digits: int = 0,
) -> tuple[Decimal, Decimal]:
    """
    (sin(x), cos(x)) промежуточного представления.

    extra_digits сужает порог и расширяет контекст сверх precision + guard
    (tangent у полюса).
    """
    x = _to_decimal(value)
    threshold = config.threshold(value.precision + extra_digits)
    # Целые цифры x теряются при редукции по модулю 2*pi
    working_digits = value.precision + _integer_digits(x) + extra_digits
    limit = config.iteration_limit(working_digits)

    with localcontext() as ctx:
        _prepare_context(ctx, working_digits + config.guard_digits + 2)
        r = _reduce_angle(x)
        return _sine_series(r, threshold, limit), _cosine_series(r, threshold, limit)


def sine(value: DecimalValue, config: ApproximationConfig | None = None) -> DecimalValue:
    """
    Синус (аргумент в радианах).

    Raises:
        UndefinedOperationError: Infinity/NaN

    Examples:
        >>> str(sine(parse("0.5", 10)))
        '0.4794255386'
    """
    config = config or _DEFAULT_CONFIG
    check_special(value)
    sin_x, _ = _trig(value, config)
    return _from_decimal(sin_x, value, config)


def cosine(value: DecimalValue, config: ApproximationConfig | None = None) -> DecimalValue:
    """Косинус (аргумент в радианах)."""
    config = config or _DEFAULT_CONFIG
    check_special(value)
    _, cos_x = _trig(value, config)
    return _from_decimal(cos_x, value, config)


def tangent(value: DecimalValue, config: ApproximationConfig | None = None) -> DecimalValue:
    """
    Тангенс (аргумент в радианах).

    У полюса |tan| ~ 1 / |cos|: абсолютная ошибка cos усиливается в 1 / cos**2
    раз. При |cos| < 1 sin и cos пересчитываются с 2 * (-cos.adjusted())
    дополнительными цифрами, контекст деления расширяется на целые цифры tan.

    Raises:
        UndefinedOperationError: Infinity/NaN или cos(x) == 0 на рабочей точности
    """
    config = config or _DEFAULT_CONFIG
    check_special(value)
    sin_x, cos_x = _trig(value, config)

    if cos_x.is_zero():
        raise UndefinedOperationError("tangent is undefined where cosine is zero")

    pole_digits = max(-cos_x.adjusted(), 0)
    if pole_digits:
        extra_digits = 2 * pole_digits + 2
        logger.debug("tangent near a pole, recomputing with %d extra digits", extra_digits)
        sin_x, cos_x = _trig(value, config, extra_digits=extra_digits)
        if cos_x.is_zero():
            raise UndefinedOperationError("tangent is undefined where cosine is zero")

    with localcontext() as ctx:
        _prepare_context(ctx, value.precision + config.guard_digits + pole_digits + 3)
        ratio = sin_x / cos_x

    return _from_decimal(ratio, value, config)


def log(value: DecimalValue, config: ApproximationConfig | None = None) -> DecimalValue:
    """
    Натуральный логарифм.

    Итерация Ньютона с exp в качестве прямой функции; остановка при
    |delta| < 10**-(precision + guard_digits) или по лимиту итераций.

    Raises:
        UndefinedOperationError: Infinity/NaN, ноль или отрицательное значение

    Examples:
        >>> str(log(parse("2.71828", 5)))
        '1.00000'
    """
    config = config or _DEFAULT_CONFIG
    check_special(value)

    if value.magnitude == 0:
        raise UndefinedOperationError("logarithm of zero is undefined")
    if value.magnitude < 0:
        raise UndefinedOperationError("logarithm of a negative number is undefined")

    x = _to_decimal(value)
    # Целые цифры ln(x): ln(10**k) ~ 2.3 * k
    log_digits = len(str(abs(x.adjusted()) + 1)) + 1

    with localcontext() as ctx:
        # Второй log_digits: запас на возведения в квадрат внутри exp(y)
        _prepare_context(ctx, value.precision + config.guard_digits + 2 * log_digits + 2)
        result = _log_newton(
            x,
            config.threshold(value.precision),
            config.iteration_limit(value.precision),
        )

    return _from_decimal(result, value, config)


def exp(value: DecimalValue, config: ApproximationConfig | None = None) -> DecimalValue:
    """
    Экспонента e**x.

    Raises:
        UndefinedOperationError: Infinity/NaN
        DecimalOverflowError: Целых цифр результата больше config.max_result_digits

    Examples:
        >>> str(exp(parse("1", 5)))
        '2.71828'
        >>> str(exp(parse("0", 2)))
        '1.00'
    """
    config = config or _DEFAULT_CONFIG
    check_special(value)

    x = _to_decimal(value)
    # float(x) для огромных x даёт +-inf, этого достаточно для оценки
    estimated_digits = float(x) * _LOG10_E

    if x > 0 and estimated_digits > config.max_result_digits:
        raise DecimalOverflowError(
            f"exp result would exceed {config.max_result_digits} integer digits"
        )
    if x < 0 and -estimated_digits > value.precision + config.guard_digits + 1:
        # 0 < exp(x) < 10**-(precision + guard_digits + 1): ноль для всех
        # режимов, кроме ROUND_UP (одна единица)
        tiny = Decimal((0, (1,), -(value.precision + config.guard_digits + 2)))
        return _from_decimal(tiny, value, config)

    # Запас на возведения в квадрат после редукции аргумента
    squarings = _integer_digits(x) * 4
    result_digits = max(int(estimated_digits), 0) + 1

    try:
        with localcontext() as ctx:
            _prepare_context(
                ctx,
                value.precision + config.guard_digits + result_digits + squarings // 3 + 2,
            )
            result = _exp_series(x, config.iteration_limit(value.precision))
    except decimal.Overflow as error:
        raise DecimalOverflowError(f"exp overflowed the intermediate range: {error}") from error

    return _from_decimal(result, value, config)
