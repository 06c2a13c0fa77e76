"""
Narrowing — Fixed-Width Integer Conversions

Модуль сужает точные отношения до целых фиксированной разрядности
(знаковые 8/16/32/64 бит) в двух вариантах:
- Насыщающий: усечение к нулю (RoundingMode.DOWN) + clamp к [min, max] ширины
- Точный: значение обязано быть целым и помещаться в ширину, иначе NoExactValueError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Насыщающее сужение никогда не бросает исключений (saturation — явный контракт)
2. Точное сужение проверяет min_value <= value <= max_value: минимум ширины
   (например, -2^63 для INT64) допустим, а +2^63 нет
3. Дробное значение никогда не сужается точно
"""

from enum import Enum

from src.bigfraction.math.rounding import RoundingMode, round_ratio
from src.bigfraction.math.safeguards import clamp


# =============================================================================
# ENUMS
# =============================================================================


class IntegerWidth(str, Enum):
    """Разрядность знакового целого"""

    INT8 = "int8"  # byte
    INT16 = "int16"  # short
    INT32 = "int32"  # int
    INT64 = "int64"  # long

    @property
    def bits(self) -> int:
        return int(self.value[3:])

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NoExactValueError(OverflowError):
    """
    Значение не имеет точного представления в целевом типе:
    дробное значение для целой ширины, выход за диапазон ширины,
    непредставимый float, нетерминирующаяся десятичная дробь.
    """

    pass


# =============================================================================
# СУЖЕНИЕ
# =============================================================================


def saturate(value: int, width: IntegerWidth) -> int:
    """
    Ограничение целого диапазоном ширины.

    Examples:
        >>> saturate(300, IntegerWidth.INT8)
        127
        >>> saturate(-2 ** 70, IntegerWidth.INT64)
        -9223372036854775808
    """
    width = IntegerWidth(width)
    return clamp(value, width.min_value, width.max_value)


def fits(value: int, width: IntegerWidth) -> bool:
    """True если value помещается в знаковое целое ширины width."""
    width = IntegerWidth(width)
    return width.min_value <= value <= width.max_value


def narrow_ratio(numerator: int, denominator: int, width: IntegerWidth) -> int:
    """
    Насыщающее сужение отношения к целому ширины width.

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        width: Целевая ширина

    Returns:
        trunc(numerator/denominator), ограниченное диапазоном ширины

    Examples:
        >>> narrow_ratio(-7, 2, IntegerWidth.INT32)
        -3
        >>> narrow_ratio(1000, 1, IntegerWidth.INT8)
        127
    """
    return saturate(round_ratio(numerator, denominator, RoundingMode.DOWN), width)


def narrow_ratio_exact(numerator: int, denominator: int, width: IntegerWidth) -> int:
    """
    Точное сужение отношения к целому ширины width.

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        width: Целевая ширина

    Returns:
        numerator/denominator как int

    Raises:
        NoExactValueError: Если значение не целое или не помещается в ширину
    """
    width = IntegerWidth(width)

    quotient, remainder = divmod(numerator, denominator)
    if remainder != 0:
        raise NoExactValueError(
            f"{numerator}/{denominator} has a nonzero fractional part, no exact {width.value} value"
        )

    if not fits(quotient, width):
        raise NoExactValueError(f"{quotient} is out of {width.value} range")

    return quotient
