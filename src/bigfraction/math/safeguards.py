"""
Safeguards — Argument Guards for Exact Arithmetic

Модуль собирает проверки аргументов, общие для всех модулей пакета:
- NaN/Inf детекция для входных float значений
- Проверка, что аргумент является целым числом (bool отвергается)
- Проверка положительности целочисленных параметров (знаменатели, границы)
- Проверка основания системы счисления (2..36)
- Ограничение целого значения диапазоном (saturation)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в точную арифметику (ValueError)
2. bool не считается целым числом, хотя является подклассом int
3. Все проверки детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# Допустимые основания текстовых форм: цифры 0-9 и буквы a-z
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36
DEFAULT_RADIX: Final[int] = 10


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что float не является NaN или Inf.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно, False иначе

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float("nan"))
        False
        >>> is_valid_float(float("-inf"))
        False
    """
    return math.isfinite(value)


def require_finite(value: float, name: str) -> None:
    """
    Валидация, что float конечен.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равен NaN или ±Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite number (not NaN/Inf), got {value}")


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРОВЕРКИ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """True для int, но не для bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(value: object, name: str) -> None:
    """
    Валидация, что значение является целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")


def validate_positive(value: int, name: str) -> None:
    """
    Валидация, что целое значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int
        ValueError: Если value <= 0
    """
    require_int(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_radix(radix: int) -> None:
    """
    Валидация основания системы счисления.

    Raises:
        TypeError: Если radix не int
        ValueError: Если radix вне [MIN_RADIX, MAX_RADIX]

    Examples:
        >>> validate_radix(16)
        >>> validate_radix(37)
        Traceback (most recent call last):
        ...
        ValueError: radix must be in [2, 36], got 37
    """
    require_int(radix, "radix")

    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}")


# =============================================================================
# UTILITIES
# =============================================================================


def clamp(value: int, min_value: int | None = None, max_value: int | None = None) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(300, -128, 127)
        127
        >>> clamp(-300, -128, 127)
        -128
        >>> clamp(5, 0, 10)
        5
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
