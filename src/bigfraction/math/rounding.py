"""
Rounding — Exact Rounding of Integer Ratios

Модуль содержит единственный примитив принятия решения об округлении,
используемый всеми операциями пакета:
- BigFraction.round (округление к целому)
- BigFraction.round_to_denominator (округление к заданному знаменателю)
- BigFraction.to_decimal_string (округление к N десятичным знакам)
- IEEE-754 narrowing (HALF_EVEN к ближайшему представимому float)

Частное n/d раскладывается в усечённое (toward zero) частное q и остаток r.
Решение "увеличить |q| на единицу" принимается функцией should_increment
по остатку, знаку значения, чётности q и режиму округления.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой остаток никогда не вызывает инкремент (точные значения неизменны)
2. Сравнение с половиной делается точно: 2·|r| vs |d| (без float)
3. CEILING/FLOOR определяются знаком значения, а не знаком q
   (значения из (-1, 0) имеют q == 0, но округляются вниз в FLOOR)
4. UNNECESSARY на неточном значении → RoundingNecessaryError
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления"""

    UP = "up"  # от нуля
    DOWN = "down"  # к нулю (truncation)
    CEILING = "ceiling"  # к +inf
    FLOOR = "floor"  # к -inf
    HALF_UP = "half_up"  # к ближайшему, половина от нуля
    HALF_DOWN = "half_down"  # к ближайшему, половина к нулю
    HALF_EVEN = "half_even"  # к ближайшему, половина к чётному
    UNNECESSARY = "unnecessary"  # значение обязано быть точным


class DivisionMode(str, Enum):
    """
    Режим целочисленного деления.

    Определяет частное q и остаток r = x - q·y:
    - TRUNCATED: q округляется к нулю, знак r совпадает со знаком делимого
    - FLOORED: q округляется к -inf, знак r совпадает со знаком делителя
    - EUCLIDEAN: r всегда неотрицателен
    """

    TRUNCATED = "truncated"
    FLOORED = "floored"
    EUCLIDEAN = "euclidean"


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Режим округления по умолчанию для round / round_to_denominator / to_decimal_string
DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RoundingNecessaryError(ArithmeticError):
    """
    Режим UNNECESSARY применён к значению, которое не является точным
    в целевой сетке (целые, знаменатель, десятичные знаки).
    """

    pass


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ
# =============================================================================


def truncated_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю.

    Python divmod использует floor-семантику; здесь частное усекается к нулю,
    а остаток имеет знак делимого.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        (q, r) такие, что numerator == q·denominator + r и |r| < |denominator|

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> truncated_divmod(7, 2)
        (3, 1)
        >>> truncated_divmod(-7, 2)
        (-3, -1)
        >>> truncated_divmod(7, -2)
        (-3, 1)
    """
    if denominator == 0:
        raise ZeroDivisionError("division by zero")

    q, r = divmod(abs(numerator), abs(denominator))
    if (numerator < 0) != (denominator < 0):
        q = -q
    if numerator < 0:
        r = -r
    return q, r


# =============================================================================
# ПРИМИТИВ ОКРУГЛЕНИЯ
# =============================================================================


def should_increment(
    remainder: int,
    divisor: int,
    negative: bool,
    quotient_is_odd: bool,
    mode: RoundingMode,
) -> bool:
    """
    Решение об увеличении модуля усечённого частного на единицу.

    Args:
        remainder: Модуль остатка |r| (0 <= remainder < divisor)
        divisor: Модуль делителя |d| (> 0)
        negative: True если округляемое значение отрицательно
        quotient_is_odd: Чётность модуля усечённого частного (для HALF_EVEN)
        mode: Режим округления

    Returns:
        True если |q| нужно увеличить на 1

    Raises:
        RoundingNecessaryError: Если mode == UNNECESSARY и remainder != 0

    Examples:
        >>> should_increment(1, 2, False, False, RoundingMode.HALF_EVEN)
        False
        >>> should_increment(1, 2, False, True, RoundingMode.HALF_EVEN)
        True
        >>> should_increment(1, 3, True, False, RoundingMode.FLOOR)
        True
    """
    if remainder == 0:
        return False

    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative
    if mode is RoundingMode.UNNECESSARY:
        raise RoundingNecessaryError(
            f"rounding necessary: remainder {remainder}/{divisor} is not zero"
        )

    # HALF_*: точное сравнение остатка с половиной делителя
    twice = 2 * remainder
    if twice != divisor:
        return twice > divisor
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_EVEN:
        return quotient_is_odd

    raise ValueError(f"Unknown rounding mode: {mode!r}")


def round_ratio(
    numerator: int,
    denominator: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> int:
    """
    Округление отношения numerator/denominator к целому.

    Единая точка композиции: truncated_divmod + should_increment.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль, любой знак)
        mode: Режим округления (default: HALF_UP)

    Returns:
        Целое, полученное округлением точного значения numerator/denominator

    Raises:
        ZeroDivisionError: Если denominator == 0
        RoundingNecessaryError: Если mode == UNNECESSARY и значение не целое

    Examples:
        >>> round_ratio(5, 2, RoundingMode.HALF_EVEN)
        2
        >>> round_ratio(-5, 2, RoundingMode.HALF_UP)
        -3
        >>> round_ratio(-1, 3, RoundingMode.FLOOR)
        -1
        >>> round_ratio(-1, 3, RoundingMode.CEILING)
        0
    """
    if denominator == 0:
        raise ZeroDivisionError("division by zero")

    mode = RoundingMode(mode)
    negative = (numerator < 0) != (denominator < 0)
    q, r = truncated_divmod(numerator, denominator)

    if should_increment(abs(r), abs(denominator), negative, q & 1 == 1, mode):
        q += -1 if negative else 1

    return q


def integral_quotient(numerator: int, denominator: int, mode: DivisionMode) -> int:
    """
    Целочисленное частное для режима деления.

    Знак denominator трактуется как знак делителя (для EUCLIDEAN).

    Args:
        numerator: Числитель отношения делимое/делитель
        denominator: Знаменатель отношения (не ноль)
        mode: Режим деления

    Returns:
        Целое частное q

    Examples:
        >>> integral_quotient(-4, 3, DivisionMode.TRUNCATED)
        -1
        >>> integral_quotient(-4, 3, DivisionMode.FLOORED)
        -2
        >>> integral_quotient(4, -3, DivisionMode.EUCLIDEAN)
        -1
    """
    mode = DivisionMode(mode)

    if mode is DivisionMode.TRUNCATED:
        return round_ratio(numerator, denominator, RoundingMode.DOWN)
    if mode is DivisionMode.FLOORED:
        return round_ratio(numerator, denominator, RoundingMode.FLOOR)

    # EUCLIDEAN: остаток >= 0 → floor для положительного делителя, ceiling для отрицательного
    if denominator > 0:
        return round_ratio(numerator, denominator, RoundingMode.FLOOR)
    return round_ratio(numerator, denominator, RoundingMode.CEILING)
