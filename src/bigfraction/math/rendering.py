"""
Rendering — Text Forms of Exact Fractions

Модуль формирует текстовые представления канонических пар (n, d)
в любом основании от 2 до 36 (цифры 0-9, затем строчные a-z):
- canonical_string: "n/d" (знаменатель выводится всегда, если не запрошено иное)
- decimal_string: фиксированное число знаков после точки с округлением
- mixed_string: смешанная дробь "1 1/3"
- repeating_digit_string: периодическая запись "0.(3)"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decimal_string округляет через rounding.round_ratio (единый примитив)
2. Знак берётся у округлённого значения: "-0.000" никогда не выводится
3. Перенос разряда корректен: 9.95 → "10.0"
4. Отрицательное digits округляет до radix^|digits| ("1200" для digits=-2)
5. Все формы для radix == 10 совпадают с str(int)
"""

from typing import Final

from src.bigfraction.math.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, round_ratio
from src.bigfraction.math.safeguards import DEFAULT_RADIX, validate_radix

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Основания, для которых у format() есть встроенный спецификатор
_FORMAT_SPECS: Final[dict[int, str]] = {2: "b", 8: "o", 10: "d", 16: "x"}


# =============================================================================
# ЦИФРЫ
# =============================================================================


def format_int(value: int, radix: int = DEFAULT_RADIX) -> str:
    """
    Запись целого в основании radix.

    Examples:
        >>> format_int(-255, 16)
        '-ff'
        >>> format_int(46617, 36)
        'zyx'
        >>> format_int(0, 7)
        '0'
    """
    validate_radix(radix)

    format_spec = _FORMAT_SPECS.get(radix)
    if format_spec is not None:
        return format(value, format_spec)

    if value < 0:
        return "-" + format_int(-value, radix)

    digits: list[str] = []
    while True:
        value, digit = divmod(value, radix)
        digits.append(DIGITS[digit])
        if value == 0:
            break
    return "".join(reversed(digits))


# =============================================================================
# CANONICAL / MIXED
# =============================================================================


def canonical_string(
    numerator: int,
    denominator: int,
    radix: int = DEFAULT_RADIX,
    denominator_optional: bool = False,
) -> str:
    """
    Каноническая форма "n/d".

    С denominator_optional целые выводятся без "/1".

    Examples:
        >>> canonical_string(-255, 172, 16)
        '-ff/ac'
        >>> canonical_string(7, 1, denominator_optional=True)
        '7'
    """
    if denominator_optional and denominator == 1:
        return format_int(numerator, radix)
    return f"{format_int(numerator, radix)}/{format_int(denominator, radix)}"


def mixed_string(numerator: int, denominator: int, radix: int = DEFAULT_RADIX) -> str:
    """
    Смешанная дробь: знак несёт только целая часть.

    Examples:
        >>> mixed_string(4, 3)
        '1 1/3'
        >>> mixed_string(-4, 3)
        '-1 1/3'
        >>> mixed_string(-2, 3)
        '-2/3'
        >>> mixed_string(6, 1)
        '6'
        >>> mixed_string(31, 15, 16)
        '2 1/f'
    """
    if denominator == 1:
        return format_int(numerator, radix)

    if abs(numerator) < denominator:
        return canonical_string(numerator, denominator, radix)

    whole, rest = divmod(abs(numerator), denominator)
    sign = "-" if numerator < 0 else ""
    return f"{sign}{format_int(whole, radix)} {format_int(rest, radix)}/{format_int(denominator, radix)}"


# =============================================================================
# FIXED DIGITS
# =============================================================================


def decimal_string(
    numerator: int,
    denominator: int,
    digits: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
    radix: int = DEFAULT_RADIX,
) -> str:
    """
    Запись в основании radix с ровно digits знаками после точки.

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        digits: Число знаков после точки; 0 — округление к целому,
            отрицательное — округление до radix^|digits|
        mode: Режим округления (default: HALF_UP)
        radix: Основание (default: 10)

    Returns:
        Строка с точкой-разделителем

    Raises:
        RoundingNecessaryError: Если mode == UNNECESSARY и округление требуется

    Examples:
        >>> decimal_string(995, 100, 1)
        '10.0'
        >>> decimal_string(-5, 10000, 3, RoundingMode.DOWN)
        '0.000'
        >>> decimal_string(1, 2, 3)
        '0.500'
        >>> decimal_string(1234, 1, -2)
        '1200'
        >>> decimal_string(14, 64, 2, RoundingMode.HALF_UP, 4)
        '0.10'
    """
    validate_radix(radix)

    if digits == 0:
        return format_int(round_ratio(numerator, denominator, mode), radix)

    if digits < 0:
        rounded = round_ratio(numerator, denominator * radix ** (-digits), mode)
        if rounded == 0:
            return "0"
        return f"{format_int(rounded, radix)}{'0' * (-digits)}"

    rounded = round_ratio(numerator * radix**digits, denominator, mode)
    sign = "-" if rounded < 0 else ""
    text = format_int(abs(rounded), radix).rjust(digits + 1, "0")

    return f"{sign}{text[:-digits]}.{text[-digits:]}"


# =============================================================================
# REPEATING DIGITS
# =============================================================================


def repeating_digit_string(
    numerator: int,
    denominator: int,
    force_repeating: bool = False,
    radix: int = DEFAULT_RADIX,
) -> str:
    """
    Запись с периодом в скобках.

    Период ищется длинным делением: повтор остатка означает начало периода.
    С force_repeating конечная запись выводится через период из старшей
    цифры основания: 0.5 → "0.4(9)", 12 в base 16 → "b.(f)".

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        force_repeating: Всегда выводить период
        radix: Основание (default: 10)

    Returns:
        Строка вида "45.(45)", "2.0(45)", "0.125"

    Examples:
        >>> repeating_digit_string(1, 9)
        '0.(1)'
        >>> repeating_digit_string(45, 22)
        '2.0(45)'
        >>> repeating_digit_string(1, 100, force_repeating=True)
        '0.00(9)'
        >>> repeating_digit_string(1, 10, radix=2)
        '0.0(0011)'
    """
    validate_radix(radix)
    max_digit = DIGITS[radix - 1]

    if numerator == 0:
        return "0.(0)" if force_repeating else "0.0"

    sign = "-" if numerator < 0 else ""
    whole, remainder = divmod(abs(numerator), denominator)

    if remainder == 0:
        if force_repeating:
            return f"{sign}{format_int(whole - 1, radix)}.({max_digit})"
        return f"{sign}{format_int(whole, radix)}.0"

    quotient: list[str] = []
    seen: dict[int, int] = {}
    while remainder != 0 and remainder not in seen:
        seen[remainder] = len(quotient)
        digit, remainder = divmod(remainder * radix, denominator)
        quotient.append(DIGITS[digit])

    head = f"{sign}{format_int(whole, radix)}."

    if remainder == 0:
        if not force_repeating:
            return head + "".join(quotient)
        # 0.11 → 0.10(9): уменьшаем последний знак, ведущие нули сохраняются
        adjusted = format_int(int("".join(quotient), radix) - 1, radix).rjust(len(quotient), "0")
        return f"{head}{adjusted}({max_digit})"

    start = seen[remainder]
    return f"{head}{''.join(quotient[:start])}({''.join(quotient[start:])})"
