"""
Farey — Stern-Brocot Navigation over Bounded Denominators

Ряд Фарея F_N — все несократимые дроби со знаменателем <= N.
Модуль работает с каноническими парами (numerator, denominator > 0):
- mediant: (a+c)/(b+d), сокращённая
- farey_next / farey_prev: ближайший сосед в F_N строго справа / слева
- farey_closest: наилучшее приближение из F_N

АЛГОРИТМ (пакетный спуск по дереву Штерна-Броко):
    x = floor(x) + p/q, 0 <= p/q < 1
    Интервал a/b <= p/q < c/d, начиная с 0/1 и 1/1, инвариант c·b - a·d = 1.
    Вместо шага по одной медианте делаем k шагов сразу:
        влево  (a/b ← (a+k·c)/(b+k·d)): k = (p·b - a·q) // (c·q - p·d)
        вправо (c/d ← (c+k·a)/(d+k·b)): k = (c·q - p·d - 1) // (p·b - a·q)
    оба k ограничены условием знаменатель <= N.
    Число итераций — O(число членов цепной дроби), а не O(N).
    Когда следующая медианта превышает N, между a/b и c/d нет дробей из F_N.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. max_den <= 0 → ValueError
2. farey_next(x) > x, farey_prev(x) < x, знаменатель результата <= max_den
3. Между x и farey_next(x) нет дробей со знаменателем <= max_den
4. farey_prev(x) == -farey_next(-x)
5. farey_closest возвращает x без изменений, если знаменатель x <= max_den
"""

import logging

from src.bigfraction.math.reduction import reduce_ratio
from src.bigfraction.math.safeguards import validate_positive

logger = logging.getLogger(__name__)


# =============================================================================
# MEDIANT
# =============================================================================


def mediant(a: int, b: int, c: int, d: int) -> tuple[int, int]:
    """
    Медианта a/b и c/d: (a+c)/(b+d), приведённая к каноническому виду.

    Examples:
        >>> mediant(1, 2, 2, 3)
        (3, 5)
        >>> mediant(1, 2, 1, 2)
        (1, 2)
        >>> mediant(-19, 81, 19, 81)
        (0, 1)
    """
    return reduce_ratio(a + c, b + d)


# =============================================================================
# STERN-BROCOT BRACKET
# =============================================================================


def _bracket(p: int, q: int, max_den: int) -> tuple[int, int, int, int]:
    """
    Соседи p/q в F_max_den на [0, 1]: a/b <= p/q < c/d.

    Требует 0 <= p < q.
    """
    a, b, c, d = 0, 1, 1, 1
    steps = 0

    while b + d <= max_den:
        # Влево: максимальное число медиант, не превосходящих p/q
        k = min((p * b - a * q) // (c * q - p * d), (max_den - b) // d)
        a, b = a + k * c, b + k * d
        steps += 1

        if b + d > max_den:
            break

        # Вправо: максимальное число медиант, строго больших p/q
        gap = p * b - a * q
        k_bound = (max_den - d) // b
        k = k_bound if gap == 0 else min((c * q - p * d - 1) // gap, k_bound)
        c, d = c + k * a, d + k * b
        steps += 1

    logger.debug("stern-brocot bracket of %d/%d at N=%d: %d batched steps", p, q, max_den, steps)
    return a, b, c, d


# =============================================================================
# FAREY NEIGHBOURS
# =============================================================================


def farey_next(numerator: int, denominator: int, max_den: int) -> tuple[int, int]:
    """
    Наименьшая дробь со знаменателем <= max_den, строго большая numerator/denominator.

    Args:
        numerator: Числитель (каноническая пара)
        denominator: Знаменатель (> 0)
        max_den: Граница знаменателя (> 0)

    Returns:
        (numerator, denominator) соседа

    Raises:
        ValueError: Если max_den <= 0

    Examples:
        >>> farey_next(1, 3, 5)
        (2, 5)
        >>> farey_next(2, 1, 4)
        (9, 4)
        >>> farey_next(-1, 3, 5)
        (-1, 4)
    """
    validate_positive(max_den, "max_den")

    whole, p = divmod(numerator, denominator)
    _, _, c, d = _bracket(p, denominator, max_den)

    return whole * d + c, d


def farey_prev(numerator: int, denominator: int, max_den: int) -> tuple[int, int]:
    """
    Наибольшая дробь со знаменателем <= max_den, строго меньшая numerator/denominator.

    Examples:
        >>> farey_prev(1, 3, 5)
        (1, 4)
        >>> farey_prev(2, 1, 4)
        (7, 4)
    """
    n, d = farey_next(-numerator, denominator, max_den)
    return -n, d


def farey_closest(numerator: int, denominator: int, max_den: int) -> tuple[int, int]:
    """
    Ближайшая к numerator/denominator дробь со знаменателем <= max_den.

    При равенстве расстояний выбирается меньший знаменатель,
    затем меньшее значение.

    Args:
        numerator: Числитель (каноническая пара)
        denominator: Знаменатель (> 0)
        max_den: Граница знаменателя (> 0)

    Returns:
        (numerator, denominator) наилучшего приближения

    Raises:
        ValueError: Если max_den <= 0

    Examples:
        >>> farey_closest(355, 113, 7)
        (22, 7)
        >>> farey_closest(3, 4, 10)
        (3, 4)
    """
    validate_positive(max_den, "max_den")

    if denominator <= max_den:
        return numerator, denominator

    whole, p = divmod(numerator, denominator)
    q = denominator
    a, b, c, d = _bracket(p, q, max_den)

    # p/q строго внутри (a/b, c/d): сравниваем (p/q - a/b) и (c/d - p/q) через общий знаменатель
    below = (p * b - a * q) * d
    above = (c * q - p * d) * b

    if below < above or (below == above and b <= d):
        return whole * b + a, b
    return whole * d + c, d
