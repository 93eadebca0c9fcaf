"""
Scalar Kernel — Transcendental Approximations without a Platform Math Library

Скалярное ядро движка: квадратный корень, экспонента, логарифмы,
тригонометрия, гиперболические функции и степень. Каждая функция построена
на итерационном методе или ряде с явным критерием остановки.

МЕТОДЫ:
    sqrt         Newton-Raphson, ровно SQRT_ITERATIONS итераций от x / 2
    exp          ряд Тейлора
    ln           atanh-ряд по y = (x - 1) / (x + 1)
    sin/cos      ряд Тейлора после приведения аргумента по модулю 2·PI
    asin/atan    ряд Тейлора
    power        целая часть умножением, дробная — линейной аппроксимацией

КРИТЕРИЙ ОСТАНОВКИ РЯДОВ:
    Члены добавляются, пока abs(term) > eps. Дополнительно цикл ограничен
    потолком max_iterations; при его достижении пишется WARNING.

ОШИБКИ ДОМЕНА (sentinel, без исключений):
    sqrt(x < 0)            → -inf
    ln(x <= 0)             → -inf
    asin(|x| > 1)          → -inf
    acos(|x| > 1)          → +inf
    tan при cos(x) == 0    → +inf
    factorial(n < 0)       → -inf
"""

import logging
from typing import Final

from engine_utilities.core.math.numerical_safeguards import (
    EPSILON,
    NEGATIVE_INFINITY,
    NOT_A_NUMBER,
    POSITIVE_INFINITY,
    approx_equal,
    ieee_divide,
    is_valid_float,
    validate_eps,
    validate_max_iterations,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PI: Final[float] = 3.14159265358979323846
EULER: Final[float] = 2.71828182845904523536
TWO_PI: Final[float] = 2.0 * PI
HALF_PI: Final[float] = PI / 2.0

# Натуральные логарифмы для log10 и приведения аргумента ln
LN10: Final[float] = 2.302585093
LN2: Final[float] = 0.6931471805599453

# Фиксированное число итераций Newton-Raphson в sqrt
SQRT_ITERATIONS: Final[int] = 20

# Потолок итераций любого ряда (гарантия завершения у границы сходимости)
SERIES_MAX_ITERATIONS: Final[int] = 10_000

# Выше этого частного modulo сначала приводит аргумент оператором %
MODULO_LOOP_LIMIT: Final[int] = 1_000

# Выше этой целой части степени power переходит на возведение квадратами
POWER_LOOP_LIMIT: Final[int] = 4_096

# |x| выше порога: asin через половинный угол, atan через деление аргумента
ASIN_REFLECTION_THRESHOLD: Final[float] = 0.5
ATAN_HALVING_THRESHOLD: Final[float] = 0.5


def _check_series_params(eps: float, max_iterations: int) -> None:
    validate_eps(eps)
    validate_max_iterations(max_iterations)


def _series_cap_reached(name: str, x: float, eps: float, max_iterations: int) -> None:
    logger.warning(
        "%s(%r): series did not converge below eps=%g within %d iterations",
        name,
        x,
        eps,
        max_iterations,
    )


# =============================================================================
# БАЗОВЫЕ ФУНКЦИИ
# =============================================================================


def square(x: float) -> float:
    return x * x


def cube(x: float) -> float:
    return x * x * x


def absolute(x: float) -> float:
    return -x if x < 0 else x


def maximum(a: float, b: float) -> float:
    return a if a > b else b


def minimum(a: float, b: float) -> float:
    return a if a < b else b


def round_half_away(x: float) -> float:
    """
    Округление до ближайшего целого, половины — от нуля (2.5 → 3, -2.5 → -3).

    Returns:
        int для конечного x; сам x для ±inf и NaN
    """
    if not is_valid_float(x):
        return x
    return int(x + 0.5) if x >= 0.0 else int(x - 0.5)


def floor_int(x: float) -> float:
    """Наибольшее целое <= x; ±inf и NaN возвращаются как есть."""
    if not is_valid_float(x):
        return x
    i = int(x)
    return i - 1 if x < 0.0 and x != i else i


def ceil_int(x: float) -> float:
    """Наименьшее целое >= x; ±inf и NaN возвращаются как есть."""
    if not is_valid_float(x):
        return x
    i = int(x)
    return i + 1 if x > 0.0 and x != i else i


def modulo(a: float, b: float) -> float:
    """
    Вещественный остаток a по модулю b в диапазоне [0, b).

    Вычитает/прибавляет b, пока a не попадёт в [0, b). Для больших
    частных (|a| > b * MODULO_LOOP_LIMIT) аргумент сначала приводится
    оператором %, чтобы цикл оставался O(1).

    Args:
        a: Делимое
        b: Модуль (должен быть конечным и > 0)

    Returns:
        Остаток в [0, b), либо NaN если a не конечно или b <= 0

    Examples:
        >>> modulo(7.0, 3.0)
        1.0
        >>> modulo(-1.0, 3.0)
        2.0
    """
    if not is_valid_float(a) or not is_valid_float(b) or b <= 0.0:
        return NOT_A_NUMBER

    if absolute(a) > b * MODULO_LOOP_LIMIT:
        a = a % b

    while a >= b:
        a -= b
    while a < 0.0:
        a += b
    return a


def interpolate(a: float, b: float, t: float) -> float:
    """Линейная интерполяция a + (b - a) * t (без ограничения t)."""
    return a + (b - a) * t


def factorial(n: int) -> float:
    """
    Факториал n как float.

    Returns:
        n!, либо -inf для n < 0
    """
    if n < 0:
        return NEGATIVE_INFINITY
    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


# =============================================================================
# КОРЕНЬ И СТЕПЕНЬ
# =============================================================================


def sqrt(x: float, iterations: int = SQRT_ITERATIONS) -> float:
    """
    Квадратный корень методом Newton-Raphson.

    Ровно `iterations` итераций от начальной оценки x / 2, без проверки
    сходимости. Для очень больших x двадцати итераций может не хватить:
    это свойство метода, а не ошибка.

    Args:
        x: Аргумент
        iterations: Число итераций Newton-Raphson (default: SQRT_ITERATIONS)

    Returns:
        Приближение sqrt(x); -inf для x < 0; x для 0 и +inf; NaN для NaN

    Examples:
        >>> sqrt(25.0)
        5.0
        >>> sqrt(-1.0)
        -inf
    """
    if x < 0.0:
        return NEGATIVE_INFINITY
    if x == 0.0 or x == POSITIVE_INFINITY:
        return x

    estimate = x / 2.0
    if estimate == 0.0:
        # наименьшие субнормальные числа: x / 2 округляется в ноль
        estimate = x

    for _ in range(iterations):
        estimate = (estimate + x / estimate) / 2.0
    return estimate


def _power_by_squaring(base: float, n: int) -> float:
    result = 1.0
    while n > 0:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


def power(base: float, exponent: float) -> float:
    """
    Legacy power approximation: base ** exponent.

    Целая часть показателя — повторным умножением, дробная часть —
    линейной аппроксимацией 1 + frac * (base - 1). Это НЕ настоящая
    дробная степень: точна только для целых показателей и грубо
    приближает малые дробные. Для корректной дробной степени
    использовать power_exact.

    Args:
        base: Основание
        exponent: Показатель (отрицательный → обратная величина)

    Returns:
        Приближение base ** exponent:
        - 0.0 если base == 0 и exponent <= 0
        - 1.0 если exponent == 0
        - NaN если exponent не конечен

    Examples:
        >>> power(2.0, 10.0)
        1024.0
        >>> power(0.0, -1.0)
        0.0
        >>> power(4.0, 0.5)  # 1 + 0.5 * 3
        2.5
    """
    if base == 0.0 and exponent <= 0.0:
        return 0.0
    if exponent == 0.0:
        return 1.0
    if not is_valid_float(exponent):
        return NOT_A_NUMBER

    negative = exponent < 0.0
    if negative:
        exponent = -exponent

    whole = int(exponent)
    fraction = exponent - whole

    if whole <= POWER_LOOP_LIMIT:
        result = 1.0
        for _ in range(whole):
            result *= base
    else:
        result = _power_by_squaring(base, whole)

    if fraction > 0.0:
        result *= 1.0 + fraction * (base - 1.0)

    return ieee_divide(1.0, result) if negative else result


def power_exact(
    base: float,
    exponent: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Степень с настоящей дробной частью: base^whole * exp(frac * ln(base)).

    Отличается от power только обработкой дробной части показателя.
    Отрицательное основание с дробным показателем не имеет
    вещественного результата → NaN.

    Examples:
        >>> abs(power_exact(4.0, 0.5) - 2.0) < 1e-6
        True
    """
    if base == 0.0 and exponent <= 0.0:
        return 0.0
    if exponent == 0.0:
        return 1.0
    if not is_valid_float(exponent):
        return NOT_A_NUMBER

    negative = exponent < 0.0
    if negative:
        exponent = -exponent

    whole = int(exponent)
    fraction = exponent - whole
    result = _power_by_squaring(base, whole)

    if fraction > 0.0:
        if base < 0.0:
            return NOT_A_NUMBER
        result *= exp(fraction * ln(base, eps, max_iterations), eps, max_iterations)

    return ieee_divide(1.0, result) if negative else result


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def _exp_series(x: float, eps: float, max_iterations: int) -> float:
    result = 1.0
    term = 1.0
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("exp", x, eps, max_iterations)
            break
        term *= x / n
        result += term
        n += 1
        if term == POSITIVE_INFINITY:
            # переполнение: сумма уже +inf и дальше не изменится
            break
    return result


def exp(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Экспонента e^x рядом Тейлора: сумма x^n / n!, пока abs(term) > eps.

    Для x < 0 вычисляется 1 / exp(-x): знакопеременный ряд теряет
    точность из-за взаимного уничтожения членов.

    Examples:
        >>> abs(exp(1.0) - EULER) < 1e-6
        True
    """
    _check_series_params(eps, max_iterations)

    if x < 0.0:
        return 1.0 / _exp_series(-x, eps, max_iterations)
    return _exp_series(x, eps, max_iterations)


def _ln_series(x: float, eps: float, max_iterations: int) -> float:
    y = (x - 1.0) / (x + 1.0)
    y_squared = y * y
    total = 0.0
    term = y
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("ln", x, eps, max_iterations)
            break
        total += term / (2 * n - 1)
        term *= y_squared
        n += 1
    return 2.0 * total


def ln(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Натуральный логарифм через atanh-ряд.

    ln(x) = 2 * sum(y^(2n-1) / (2n-1)), y = (x - 1) / (x + 1).

    Аргумент предварительно приводится к m в [0.5, 2] (x = m * 2^k),
    ln(x) = ln(m) + k * LN2: вне этого отрезка ряд сходится медленно.

    Args:
        x: Аргумент (> 0)
        eps: Порог усечения ряда
        max_iterations: Потолок итераций

    Returns:
        ln(x); -inf для x <= 0; +inf для +inf; NaN для NaN

    Examples:
        >>> ln(1.0)
        0.0
        >>> ln(0.0)
        -inf
    """
    _check_series_params(eps, max_iterations)

    if x <= 0.0:
        return NEGATIVE_INFINITY
    if not is_valid_float(x):
        return x

    k = 0
    m = x
    while m > 2.0:
        m /= 2.0
        k += 1
    while m < 0.5:
        m *= 2.0
        k -= 1

    return _ln_series(m, eps, max_iterations) + k * LN2


def log10(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """Десятичный логарифм: ln(x) / LN10."""
    return ln(x, eps, max_iterations) / LN10


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def to_radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


def to_degrees(radians: float) -> float:
    return radians * (180.0 / PI)


def sin(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Синус рядом Тейлора после приведения x по модулю 2·PI.

    Examples:
        >>> abs(sin(PI / 2) - 1.0) < 1e-6
        True
    """
    _check_series_params(eps, max_iterations)

    x = modulo(x, TWO_PI)
    total = x
    term = x
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("sin", x, eps, max_iterations)
            break
        term *= -x * x / ((2 * n) * (2 * n + 1))
        total += term
        n += 1
    return total


def cos(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """Косинус рядом Тейлора после приведения x по модулю 2·PI."""
    _check_series_params(eps, max_iterations)

    x = modulo(x, TWO_PI)
    if not is_valid_float(x):
        return x

    total = 1.0
    term = 1.0
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("cos", x, eps, max_iterations)
            break
        term *= -x * x / ((2 * n - 1) * (2 * n))
        total += term
        n += 1
    return total


def tan(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Тангенс sin(x) / cos(x).

    Returns:
        +inf если cos(x) точно равен нулю
    """
    s = sin(x, eps, max_iterations)
    c = cos(x, eps, max_iterations)
    return s / c if c != 0.0 else POSITIVE_INFINITY


def _asin_series(x: float, eps: float, max_iterations: int) -> float:
    total = x
    term = x
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("asin", x, eps, max_iterations)
            break
        term *= (2.0 * n - 1) * (2.0 * n - 1) * x * x / ((2.0 * n) * (2.0 * n + 1))
        total += term
        n += 1
    return total


def asin(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Арксинус рядом Тейлора.

    Около ±1 ряд сходится как n^(-3/2), поэтому для |x| > 0.5
    используется тождество половинного угла:
        asin(x) = PI/2 - 2 * asin(sqrt((1 - x) / 2)),  x > 0

    Args:
        x: Аргумент в [-1, 1]

    Returns:
        asin(x) в [-PI/2, PI/2]; -inf для x вне [-1, 1]

    Examples:
        >>> asin(2.0)
        -inf
    """
    _check_series_params(eps, max_iterations)

    if x < -1.0 or x > 1.0:
        return NEGATIVE_INFINITY

    if absolute(x) > ASIN_REFLECTION_THRESHOLD:
        half = sqrt((1.0 - absolute(x)) / 2.0)
        result = HALF_PI - 2.0 * _asin_series(half, eps, max_iterations)
        return result if x > 0.0 else -result

    return _asin_series(x, eps, max_iterations)


def acos(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Арккосинус PI/2 - asin(x).

    Returns:
        acos(x) в [0, PI]; +inf для x вне [-1, 1]
    """
    return HALF_PI - asin(x, eps, max_iterations)


def _atan_series(x: float, eps: float, max_iterations: int) -> float:
    total = x
    term = x
    n = 1
    while absolute(term) > eps:
        if n > max_iterations:
            _series_cap_reached("atan", x, eps, max_iterations)
            break
        term *= -x * x * (2.0 * n - 1) / (2.0 * n + 1)
        total += term
        n += 1
    return total


def atan(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """
    Арктангенс рядом Тейлора.

    Ряд сходится только при |x| <= 1 и медленно около 1, поэтому:
        |x| > 1:    atan(x) = sign(x) * PI/2 - atan(1 / x)
        |x| > 0.5:  atan(x) = 2 * atan(x / (1 + sqrt(1 + x^2)))

    Returns:
        atan(x) в [-PI/2, PI/2]; ±PI/2 для ±inf; NaN для NaN
    """
    _check_series_params(eps, max_iterations)

    if x != x:
        return x
    if x == POSITIVE_INFINITY:
        return HALF_PI
    if x == NEGATIVE_INFINITY:
        return -HALF_PI

    if absolute(x) > 1.0:
        reflected = atan(1.0 / x, eps, max_iterations)
        return (HALF_PI if x > 0.0 else -HALF_PI) - reflected

    if absolute(x) > ATAN_HALVING_THRESHOLD:
        halved = x / (1.0 + sqrt(1.0 + x * x))
        return 2.0 * _atan_series(halved, eps, max_iterations)

    return _atan_series(x, eps, max_iterations)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    return (exp(x, eps, max_iterations) - exp(-x, eps, max_iterations)) / 2.0


def cosh(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    return (exp(x, eps, max_iterations) + exp(-x, eps, max_iterations)) / 2.0


def tanh(
    x: float,
    eps: float = EPSILON,
    max_iterations: int = SERIES_MAX_ITERATIONS,
) -> float:
    """Гиперболический тангенс (e^2x - 1) / (e^2x + 1); насыщается в ±1."""
    e2x = exp(2.0 * x, eps, max_iterations)
    if e2x == POSITIVE_INFINITY:
        return 1.0
    return (e2x - 1.0) / (e2x + 1.0)


__all__ = [
    "PI",
    "EULER",
    "EPSILON",
    "TWO_PI",
    "HALF_PI",
    "LN10",
    "LN2",
    "SQRT_ITERATIONS",
    "SERIES_MAX_ITERATIONS",
    "approx_equal",
    "square",
    "cube",
    "absolute",
    "maximum",
    "minimum",
    "round_half_away",
    "floor_int",
    "ceil_int",
    "modulo",
    "interpolate",
    "factorial",
    "sqrt",
    "power",
    "power_exact",
    "exp",
    "ln",
    "log10",
    "to_radians",
    "to_degrees",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
]
