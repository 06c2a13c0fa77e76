"""
Reduction — Canonical Form of Integer Ratios

Единственная процедура приведения пары (numerator, denominator) к
каноническому виду. Используется всеми путями конструирования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator == 0 → ZeroDivisionError (до сокращения)
2. Результат: denominator > 0, gcd(|numerator|, denominator) == 1
3. Ноль всегда 0/1
"""

import math


def reduce_ratio(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение дроби и перенос знака в числитель.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)

    Returns:
        (numerator, denominator) в каноническом виде

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> reduce_ratio(6, -4)
        (-3, 2)
        >>> reduce_ratio(0, -7)
        (0, 1)
        >>> reduce_ratio(-10, -5)
        (2, 1)
    """
    if denominator == 0:
        raise ZeroDivisionError(f"denominator is zero in {numerator}/{denominator}")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    # gcd(0, d) == d, поэтому ноль приводится к 0/1
    g = math.gcd(numerator, denominator)
    if g != 1:
        numerator, denominator = numerator // g, denominator // g

    return numerator, denominator
