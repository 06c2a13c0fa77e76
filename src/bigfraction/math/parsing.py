"""
Parsing — Text Grammar for Exact Fractions

Грамматика (digit — цифра основания radix, буквы без учёта регистра):
    fraction  := number ['/' number]
    number    := [sign] (radixed | repeating)
    radixed   := mantissa [('E' | 'e') [sign] 0-9...]   экспонента только при radix == 10
    mantissa  := digits ['.' [digits]] | '.' digits
    repeating := [digits] '.' [digits] '(' digits ')'

Каждая сторона '/' разбирается независимо как точное значение
(scaled decimal или периодическая дробь), отношение сокращается один раз.
Экспонента с периодической записью не допускается.

Примеры:
    "-1.0E2/-0.007E3"       → 100/7
    "+9.02E-10"             → 451/500000000000
    "0.(3)"                 → 1/3
    "12.34(56)"             → 122222/9900 = 61111/4950
    "dead/BEEF", radix=16   → 57005/48879
    "0.0(0011)", radix=2    → 1/10

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой знаменатель → ZeroDivisionError (а не ошибка формата)
2. Любое отклонение от грамматики → FractionFormatError
3. Разбор точен: никакого округления ни на одной стадии
"""

import logging
import re

from src.bigfraction.math.reduction import reduce_ratio
from src.bigfraction.math.safeguards import DEFAULT_RADIX, MAX_RADIX, MIN_RADIX, validate_radix
from src.bigfraction.math.scaled_decimal import scaled_to_ratio

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionFormatError(ValueError):
    """Текст не соответствует грамматике дроби."""

    pass


# =============================================================================
# ГРАММАТИКА
# =============================================================================


def _digit_class(radix: int) -> str:
    if radix <= 10:
        return f"[0-{radix - 1}]"
    return f"[0-9a-{chr(ord('a') + radix - 11)}]"


def _compile_number_pattern(radix: int) -> re.Pattern:
    digit = _digit_class(radix)
    exponent = r"(?:e(?P<exp>[+-]?[0-9]+))?" if radix == 10 else ""
    return re.compile(
        rf"""
        (?P<sign>[+-])?
        (?:
            (?P<int>{digit}*)\.(?P<frac>{digit}*)\((?P<rep>{digit}+)\)
          |
            (?P<mantissa>{digit}+(?:\.{digit}*)?|\.{digit}+)
            {exponent}
        )
        """,
        re.VERBOSE | re.IGNORECASE | re.ASCII,
    )


_NUMBER_PATTERNS = {radix: _compile_number_pattern(radix) for radix in range(MIN_RADIX, MAX_RADIX + 1)}


def parse_number(text: str, radix: int = DEFAULT_RADIX) -> tuple[int, int]:
    """
    Разбор одной стороны дроби в несократимое отношение.

    Args:
        text: Запись в основании radix (с экспонентой для radix == 10 или с периодом)
        radix: Основание (default: 10)

    Returns:
        (numerator, denominator)

    Raises:
        FractionFormatError: Если text не соответствует грамматике

    Examples:
        >>> parse_number("-0.007E3")
        (-7, 1)
        >>> parse_number(".(4)")
        (4, 9)
        >>> parse_number("1.23(4)")
        (1111, 900)
        >>> parse_number("0.1(9)", 16)
        (1, 10)
    """
    validate_radix(radix)

    match = _NUMBER_PATTERNS[radix].fullmatch(text)
    if match is None:
        raise FractionFormatError(f"Invalid base-{radix} number: {text!r}")

    negative = match.group("sign") == "-"

    if match.group("rep") is not None:
        numerator, denominator = _repeating_to_ratio(
            match.group("int"), match.group("frac"), match.group("rep"), radix
        )
    else:
        whole, _, frac = match.group("mantissa").partition(".")
        unscaled = int(whole + frac or "0", radix)
        if radix == 10:
            exponent = int(match.group("exp") or 0)
            numerator, denominator = scaled_to_ratio(unscaled, len(frac) - exponent)
        else:
            numerator, denominator = reduce_ratio(unscaled, radix ** len(frac))

    return (-numerator if negative else numerator), denominator


def _repeating_to_ratio(whole: str, frac: str, rep: str, radix: int) -> tuple[int, int]:
    # I.F(R) = (IF·(b^|R| - 1) + R) / ((b^|R| - 1)·b^|F|)
    nines = radix ** len(rep) - 1
    head = int(whole + frac or "0", radix)
    return reduce_ratio(head * nines + int(rep, radix), nines * radix ** len(frac))


def parse_ratio(text: str, radix: int = DEFAULT_RADIX) -> tuple[int, int]:
    """
    Разбор текстовой дроби в каноническое отношение.

    Args:
        text: Запись вида number или number/number (окружающие пробелы допустимы)
        radix: Основание обеих сторон (default: 10)

    Returns:
        (numerator, denominator) в каноническом виде

    Raises:
        FractionFormatError: Если text не соответствует грамматике
        ZeroDivisionError: Если знаменатель равен нулю
        ValueError: Если radix вне [2, 36]

    Examples:
        >>> parse_ratio("-1.0E2/-0.007E3")
        (100, 7)
        >>> parse_ratio("+9.02E-10")
        (451, 500000000000)
        >>> parse_ratio("-0.000000E+500")
        (0, 1)
        >>> parse_ratio("lAzY.fOx", 36)
        (15459161339, 15552)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    validate_radix(radix)

    stripped = text.strip()
    sides = stripped.split("/")

    try:
        if len(sides) > 2:
            raise FractionFormatError(f"Too many '/' separators in {text!r}")

        top_num, top_den = parse_number(sides[0], radix)
        if len(sides) == 1:
            return top_num, top_den

        bottom_num, bottom_den = parse_number(sides[1], radix)
    except FractionFormatError:
        logger.debug("rejected base-%d fraction text %r", radix, text)
        raise

    if bottom_num == 0:
        raise ZeroDivisionError(f"denominator is zero in {text!r}")

    return reduce_ratio(top_num * bottom_den, top_den * bottom_num)
