"""
Checked Kernel — DomainError instead of Sentinel Values

Обёртки над функциями скалярного ядра для вызывающего кода, которому нужен
exception вместо sentinel-значения. Сигнатуры совпадают с функциями ядра.

Функции ядра по умолчанию остаются sentinel-версиями: этот модуль ничего
в них не меняет.

Examples:
    >>> from engine_utilities.core.math import checked
    >>> checked.sqrt(4.0)
    2.0
    >>> checked.sqrt(-1.0)
    Traceback (most recent call last):
        ...
    DomainError: sqrt: result -inf is outside the valid domain
"""

import functools
from typing import Callable

from engine_utilities.core.math import scalar_kernel
from engine_utilities.core.math.numerical_safeguards import require_finite


def _checked(func: Callable[..., float]) -> Callable[..., float]:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> float:
        return require_finite(func(*args, **kwargs), func.__name__)

    return wrapper


sqrt = _checked(scalar_kernel.sqrt)
power = _checked(scalar_kernel.power)
ln = _checked(scalar_kernel.ln)
log10 = _checked(scalar_kernel.log10)
tan = _checked(scalar_kernel.tan)
asin = _checked(scalar_kernel.asin)
acos = _checked(scalar_kernel.acos)
factorial = _checked(scalar_kernel.factorial)

__all__ = [
    "sqrt",
    "power",
    "ln",
    "log10",
    "tan",
    "asin",
    "acos",
    "factorial",
]
