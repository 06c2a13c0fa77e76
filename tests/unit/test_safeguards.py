"""
Тесты для модулей Safeguards и Reduction

Проверяет:
1. NaN/Inf детекцию
2. Целочисленные проверки (bool отвергается)
3. Валидацию положительности параметров
4. Основание системы счисления
5. clamp
6. reduce_ratio: знак в числителе, gcd == 1, ноль = 0/1
"""

import math

import pytest

from src.bigfraction.math.reduction import reduce_ratio
from src.bigfraction.math.safeguards import (
    clamp,
    is_strict_int,
    is_valid_float,
    require_finite,
    require_int,
    validate_positive,
    validate_radix,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestFloatChecks:
    """Тесты для is_valid_float / require_finite"""

    def test_finite_values(self) -> None:
        """Конечные значения, включая -0.0 и субнормальные"""
        for value in (0.0, -0.0, 1.5, 5e-324, 1.7976931348623157e308):
            assert is_valid_float(value)
            require_finite(value, "value")

    def test_non_finite_values(self) -> None:
        """NaN и ±Inf"""
        for value in (math.nan, math.inf, -math.inf):
            assert not is_valid_float(value)
            with pytest.raises(ValueError, match="value must be a finite number"):
                require_finite(value, "value")


# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННЫХ ПРОВЕРОК
# =============================================================================


class TestIntChecks:
    """Тесты для is_strict_int / require_int / validate_positive"""

    def test_strict_int(self) -> None:
        """int да, bool и float нет"""
        assert is_strict_int(0)
        assert is_strict_int(-(10**40))
        assert not is_strict_int(True)
        assert not is_strict_int(1.0)
        assert not is_strict_int("1")

    def test_require_int(self) -> None:
        """TypeError с именем параметра"""
        require_int(5, "digits")
        with pytest.raises(TypeError, match="digits must be an int, got float"):
            require_int(2.0, "digits")
        with pytest.raises(TypeError, match="got bool"):
            require_int(False, "digits")

    def test_validate_positive(self) -> None:
        """Положительные значения проходят"""
        validate_positive(1, "max_den")
        validate_positive(10**30, "max_den")

    def test_validate_positive_rejects(self) -> None:
        """Ноль и отрицательные значения → ValueError, нецелые → TypeError"""
        with pytest.raises(ValueError, match="max_den must be positive, got 0"):
            validate_positive(0, "max_den")
        with pytest.raises(ValueError):
            validate_positive(-3, "max_den")
        with pytest.raises(TypeError):
            validate_positive(2.5, "max_den")

    def test_validate_radix(self) -> None:
        """Основания 2..36; остальные → ValueError, нецелые → TypeError"""
        for radix in (2, 10, 16, 36):
            validate_radix(radix)
        for radix in (-2, 0, 1, 37):
            with pytest.raises(ValueError, match=rf"radix must be in \[2, 36\], got {radix}"):
                validate_radix(radix)
        with pytest.raises(TypeError):
            validate_radix(True)


# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_bounds(self) -> None:
        """Значения за границами прижимаются"""
        assert clamp(300, -128, 127) == 127
        assert clamp(-300, -128, 127) == -128

    def test_open_bounds(self) -> None:
        """Необязательные границы"""
        assert clamp(-(10**50), min_value=0) == 0
        assert clamp(10**50, max_value=7) == 7
        assert clamp(10**50) == 10**50


# =============================================================================
# ТЕСТЫ REDUCTION
# =============================================================================


class TestReduceRatio:
    """Тесты для reduce_ratio"""

    def test_sign_moves_to_numerator(self) -> None:
        assert reduce_ratio(3, -4) == (-3, 4)
        assert reduce_ratio(-3, -4) == (3, 4)

    def test_reduces(self) -> None:
        assert reduce_ratio(12, 8) == (3, 2)
        assert reduce_ratio(-100, 10) == (-10, 1)
        assert reduce_ratio(2**200, 2**199) == (2, 1)

    def test_zero(self) -> None:
        """Ноль всегда 0/1"""
        assert reduce_ratio(0, -17) == (0, 1)
        assert reduce_ratio(0, 10**30) == (0, 1)

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError, match="denominator is zero"):
            reduce_ratio(1, 0)
