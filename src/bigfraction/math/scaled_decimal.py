"""
Scaled Decimal Bridge — Exact Decimal ⇄ Ratio Conversion

Масштабированная десятичная величина (unscaled, scale) означает unscaled × 10^-scale.
В Python её стандартное воплощение — decimal.Decimal.

Модуль обеспечивает:
- Точное преобразование scaled decimal / Decimal → несократимая дробь
- Обратное преобразование, точное только для знаменателей вида 2^a·5^b
- Приближение Decimal с заданной точностью (HALF_EVEN) для остальных дробей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Прямое преобразование всегда точно
2. Обратное точное преобразование для знаменателя с иным простым
   множителем → NoExactValueError (никогда не округляет молча)
3. Decimal NaN/Inf → ValueError
"""

import math
from decimal import Decimal
from typing import Final, NamedTuple

from src.bigfraction.math.narrowing import NoExactValueError
from src.bigfraction.math.rounding import RoundingMode, round_ratio

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Число значащих цифр для Decimal-приближения нетерминирующихся дробей
DECIMAL_FALLBACK_PRECISION: Final[int] = 18


# =============================================================================
# ТИПЫ
# =============================================================================


class ScaledDecimal(NamedTuple):
    """Значение unscaled × 10^-scale."""

    unscaled: int
    scale: int

    def to_decimal(self) -> Decimal:
        return Decimal(f"{self.unscaled}E{-self.scale}")


# =============================================================================
# SCALED → RATIO
# =============================================================================


def scaled_to_ratio(unscaled: int, scale: int) -> tuple[int, int]:
    """
    Точное преобразование unscaled × 10^-scale в несократимую дробь.

    Examples:
        >>> scaled_to_ratio(125, 2)
        (5, 4)
        >>> scaled_to_ratio(-3, -2)
        (-300, 1)
        >>> scaled_to_ratio(0, 500)
        (0, 1)
    """
    if scale <= 0:
        return unscaled * 10 ** (-scale), 1

    denominator = 10**scale
    g = math.gcd(unscaled, denominator)
    return unscaled // g, denominator // g


def decimal_to_scaled(value: Decimal) -> ScaledDecimal:
    """
    Разложение конечного Decimal на (unscaled, scale).

    Raises:
        ValueError: Если value NaN или Infinity
    """
    if not value.is_finite():
        raise ValueError(f"Decimal value must be finite, got {value}")

    sign, digits, exponent = value.as_tuple()
    unscaled = int("".join(str(digit) for digit in digits) or "0")

    return ScaledDecimal(-unscaled if sign else unscaled, -exponent)


def decimal_to_ratio(value: Decimal) -> tuple[int, int]:
    """
    Точное преобразование Decimal в несократимую дробь.

    Examples:
        >>> decimal_to_ratio(Decimal("-0.75"))
        (-3, 4)
        >>> decimal_to_ratio(Decimal("1.5E+3"))
        (1500, 1)
    """
    return scaled_to_ratio(*decimal_to_scaled(value))


# =============================================================================
# RATIO → SCALED
# =============================================================================


def terminating_scale(denominator: int) -> int | None:
    """
    Минимальный scale s, при котором denominator делит 10^s.

    Args:
        denominator: Положительный знаменатель

    Returns:
        s = max(a, b) для denominator = 2^a·5^b, иначе None

    Examples:
        >>> terminating_scale(8)
        3
        >>> terminating_scale(50)
        2
        >>> terminating_scale(3) is None
        True
    """
    twos = (denominator & -denominator).bit_length() - 1
    rest = denominator >> twos

    fives = 0
    while rest % 5 == 0:
        rest //= 5
        fives += 1

    if rest != 1:
        return None
    return max(twos, fives)


def ratio_to_scaled(numerator: int, denominator: int) -> ScaledDecimal:
    """
    Точное представление дроби в виде scaled decimal.

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)

    Returns:
        ScaledDecimal с минимальным неотрицательным scale

    Raises:
        NoExactValueError: Если десятичное разложение не конечно
    """
    scale = terminating_scale(denominator)
    if scale is None:
        raise NoExactValueError(
            f"{numerator}/{denominator} has a non-terminating decimal expansion"
        )
    return ScaledDecimal(numerator * (10**scale // denominator), scale)


def ratio_to_decimal(numerator: int, denominator: int, precision: int | None = None) -> Decimal:
    """
    Преобразование дроби в Decimal.

    Без precision: точное значение, если знаменатель вида 2^a·5^b,
    иначе DECIMAL_FALLBACK_PRECISION значащих цифр (HALF_EVEN).
    С precision: precision значащих цифр (HALF_EVEN); точные частные
    не дополняются хвостовыми нулями дробной части.

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        precision: Число значащих цифр (optional, > 0)

    Returns:
        Decimal

    Examples:
        >>> ratio_to_decimal(1000, 3)
        Decimal('333.333333333333333')
        >>> ratio_to_decimal(500, 7, 6)
        Decimal('71.4286')
        >>> ratio_to_decimal(-3, 10)
        Decimal('-0.3')
    """
    if precision is None:
        scale = terminating_scale(denominator)
        if scale is not None:
            return ratio_to_scaled(numerator, denominator).to_decimal()
        precision = DECIMAL_FALLBACK_PRECISION
    elif precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")

    if numerator == 0:
        return Decimal(0)

    sign = "-" if numerator < 0 else ""
    n = abs(numerator)

    # Десятичный порядок a: 10^a <= n/d < 10^(a+1)
    a = len(str(n)) - len(str(denominator))
    if a >= 0:
        if n < denominator * 10**a:
            a -= 1
    elif n * 10 ** (-a) < denominator:
        a -= 1

    shift = precision - 1 - a
    if shift >= 0:
        scaled_num, scaled_den = n * 10**shift, denominator
    else:
        scaled_num, scaled_den = n, denominator * 10 ** (-shift)

    digits = round_ratio(scaled_num, scaled_den, RoundingMode.HALF_EVEN)

    if digits == 10**precision:
        # Перенос 99..9 → 100..0
        digits //= 10
        shift -= 1
    elif scaled_num % scaled_den == 0:
        # Точное частное: убираем хвостовые нули дробной части
        while shift > 0 and digits % 10 == 0:
            digits //= 10
            shift -= 1

    return Decimal(f"{sign}{digits}E{-shift}")
