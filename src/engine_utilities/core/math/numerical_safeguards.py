"""
Numerical Safeguards — Sentinel-aware Float Primitives

Модуль задаёт соглашение ядра об ошибках домена и примитивы, на которых
оно держится:
- Сравнение float с толерантностью (approx_equal)
- IEEE-деление: деление на ноль возвращает ±inf / NaN вместо ZeroDivisionError
- Распознавание sentinel-значений (±inf, NaN), которыми ядро сигнализирует
  о нарушении домена
- Checked-слой: DomainError для вызывающего кода, которому нужен exception

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции ядра никогда не бросают исключений на числовых входах
2. Нарушение домена кодируется в самом результате (±inf / NaN)
3. DomainError бросается только явно запрошенными checked-вариантами
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог усечения рядов и толерантность сравнения по умолчанию
EPSILON: Final[float] = 1e-6

POSITIVE_INFINITY: Final[float] = math.inf
NEGATIVE_INFINITY: Final[float] = -math.inf
NOT_A_NUMBER: Final[float] = math.nan


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(ValueError):
    """
    Вход вне области определения функции.

    Бросается только checked-вариантами (engine_utilities.core.math.checked).
    Функции ядра по умолчанию возвращают sentinel вместо исключения.
    """

    def __init__(self, operation: str, value: float):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}: result {value!r} is outside the valid domain")


# =============================================================================
# SENTINEL-ЗНАЧЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или ±Inf
    """
    return math.isfinite(value)


def is_domain_error(value: float) -> bool:
    """
    Проверка, является ли результат ядра sentinel-значением ошибки домена.

    Любой результат -inf / +inf / NaN вызывающий код обязан трактовать
    как нарушение домена.

    Examples:
        >>> is_domain_error(float("-inf"))
        True
        >>> is_domain_error(2.0)
        False
    """
    return not is_valid_float(value)


def require_finite(value: float, operation: str) -> float:
    """
    Преобразование sentinel-результата в DomainError.

    Args:
        value: Результат функции ядра
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        value, если оно конечное

    Raises:
        DomainError: если value равно ±inf или NaN
    """
    if is_domain_error(value):
        raise DomainError(operation, value)
    return value


# =============================================================================
# IEEE-ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 для нулевого делителя.

    Python бросает ZeroDivisionError на x / 0.0, тогда как ядро
    опирается на in-band результат деления на ноль:
        x > 0  →  +inf (со знаком нуля в делителе)
        x < 0  →  -inf
        x == 0 или NaN  →  NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator или IEEE-результат деления на ноль

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return NOT_A_NUMBER

    # Знак результата = знак числителя * знак нуля (-0.0 тоже ноль)
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(POSITIVE_INFINITY, sign)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Симметричное сравнение float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < epsilon

    Args:
        a: Первое значение
        b: Второе значение
        epsilon: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если значения отличаются меньше чем на epsilon

    Examples:
        >>> approx_equal(1.0, 1.0 + 1e-7)
        True
        >>> approx_equal(1.0, 1.1)
        False
    """
    return abs(a - b) < epsilon


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_eps(eps: float) -> None:
    """
    Валидация порога сходимости рядов.

    Raises:
        ValueError: если eps <= 0 или NaN/Inf
    """
    if not is_valid_float(eps) or eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def validate_max_iterations(max_iterations: int) -> None:
    """
    Валидация потолка итераций рядов.

    Raises:
        ValueError: если max_iterations < 1
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
