"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Сравнение float с толерантностью (approx_equal)
2. IEEE-деление на ноль без ZeroDivisionError
3. Распознавание sentinel-значений и DomainError
4. Валидацию параметров рядов
"""

import math

import pytest

from engine_utilities.core.math.numerical_safeguards import (
    EPSILON,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    DomainError,
    approx_equal,
    ieee_divide,
    is_domain_error,
    is_valid_float,
    require_finite,
    validate_eps,
    validate_max_iterations,
)

# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestApproxEqual:
    """Тесты для approx_equal"""

    def test_default_epsilon_is_shared_constant(self) -> None:
        """Толерантность по умолчанию — общий EPSILON = 1e-6"""
        assert EPSILON == 1e-6
        assert approx_equal(1.0, 1.0 + 5e-7)
        assert not approx_equal(1.0, 1.0 + 5e-6)

    def test_exact_values_equal(self) -> None:
        """Одинаковые значения равны"""
        assert approx_equal(0.0, 0.0)
        assert approx_equal(-3.5, -3.5)

    def test_comparison_is_strict(self) -> None:
        """Разница ровно epsilon — уже не равенство"""
        assert not approx_equal(0.0, 0.5, epsilon=0.5)
        assert approx_equal(0.0, 0.49, epsilon=0.5)

    def test_symmetric(self) -> None:
        """approx_equal(a, b) == approx_equal(b, a)"""
        pairs = [(1.0, 1.0000001), (2.0, 2.1), (-1.0, 1.0)]
        for a, b in pairs:
            assert approx_equal(a, b) == approx_equal(b, a)

    def test_custom_epsilon(self) -> None:
        """Пользовательская толерантность"""
        assert approx_equal(10.0, 10.05, epsilon=0.1)
        assert not approx_equal(10.0, 10.2, epsilon=0.1)

    def test_nan_never_equal(self) -> None:
        """NaN не равен ничему, включая себя"""
        assert not approx_equal(math.nan, math.nan)
        assert not approx_equal(math.nan, 0.0)


# =============================================================================
# ТЕСТЫ IEEE-ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Ненулевой делитель — обычное деление"""
        assert ieee_divide(6.0, 3.0) == 2.0
        assert ieee_divide(-1.0, 4.0) == -0.25

    def test_positive_over_zero_is_positive_infinity(self) -> None:
        """x > 0 / 0 → +inf"""
        assert ieee_divide(1.0, 0.0) == POSITIVE_INFINITY

    def test_negative_over_zero_is_negative_infinity(self) -> None:
        """x < 0 / 0 → -inf"""
        assert ieee_divide(-1.0, 0.0) == NEGATIVE_INFINITY

    def test_negative_zero_divisor_flips_sign(self) -> None:
        """Знак нуля в делителе учитывается"""
        assert ieee_divide(1.0, -0.0) == NEGATIVE_INFINITY
        assert ieee_divide(-1.0, -0.0) == POSITIVE_INFINITY

    def test_zero_over_zero_is_nan(self) -> None:
        """0 / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_over_zero_is_nan(self) -> None:
        """NaN / 0 → NaN"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_never_raises(self) -> None:
        """Деление на ноль не бросает ZeroDivisionError"""
        for numerator in (1.0, -1.0, 0.0, math.inf, math.nan):
            ieee_divide(numerator, 0.0)


# =============================================================================
# ТЕСТЫ SENTINEL-ЗНАЧЕНИЙ
# =============================================================================


class TestSentinels:
    """Тесты для is_valid_float / is_domain_error / require_finite"""

    def test_finite_values_are_valid(self) -> None:
        """Конечные значения валидны"""
        for value in (0.0, -1.0, 1e300, 5e-324):
            assert is_valid_float(value)
            assert not is_domain_error(value)

    def test_non_finite_values_are_domain_errors(self) -> None:
        """±inf и NaN — sentinel ошибки домена"""
        for value in (math.inf, -math.inf, math.nan):
            assert not is_valid_float(value)
            assert is_domain_error(value)

    def test_require_finite_passes_value_through(self) -> None:
        """Конечное значение возвращается без изменений"""
        assert require_finite(2.5, "op") == 2.5

    def test_require_finite_raises_domain_error(self) -> None:
        """Sentinel → DomainError с именем операции"""
        with pytest.raises(DomainError, match="sqrt"):
            require_finite(-math.inf, "sqrt")

    def test_domain_error_is_value_error(self) -> None:
        """DomainError совместим с обработчиками ValueError"""
        with pytest.raises(ValueError):
            require_finite(math.nan, "ln")

    def test_domain_error_attributes(self) -> None:
        """DomainError хранит операцию и значение"""
        error = DomainError("asin", -math.inf)
        assert error.operation == "asin"
        assert error.value == -math.inf


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


class TestValidation:
    """Тесты для validate_eps / validate_max_iterations"""

    def test_valid_eps_accepted(self) -> None:
        """Положительный eps принимается"""
        validate_eps(1e-6)
        validate_eps(0.5)

    def test_invalid_eps_raises(self) -> None:
        """eps <= 0 или NaN → ValueError"""
        for eps in (0.0, -1e-6, math.nan, math.inf):
            with pytest.raises(ValueError, match="eps must be positive"):
                validate_eps(eps)

    def test_valid_max_iterations_accepted(self) -> None:
        """max_iterations >= 1 принимается"""
        validate_max_iterations(1)
        validate_max_iterations(10_000)

    def test_invalid_max_iterations_raises(self) -> None:
        """max_iterations < 1 → ValueError"""
        with pytest.raises(ValueError, match="max_iterations must be >= 1"):
            validate_max_iterations(0)
