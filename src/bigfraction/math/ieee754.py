"""
IEEE-754 Bridge — Exact Float ⇄ Ratio Conversion

Модуль обеспечивает мост между двоичными форматами IEEE-754 и точными
отношениями целых чисел:
- float_to_ratio: точное разложение float в несократимую дробь (без потерь)
- ratio_to_float: ближайший представимый float (round-half-even, с потерями)
- Реестр форматов (binary64 = Python float, binary32 = single precision)

ФОРМУЛЫ (p = precision, bias = emax):
    normal:    (2^(p-1) + mantissa) × 2^(E - bias - (p-1))
    subnormal: mantissa × 2^(emin - (p-1))
    binary64:  минимальный subnormal = 2^-1074
    binary32:  минимальный subnormal = 2^-149

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf → ValueError (не имеют точного рационального значения)
2. -0.0 → 0/1
3. float_to_ratio точен: ratio_to_float(float_to_ratio(x)) == x для любого конечного x
4. ratio_to_float: значения за пределами диапазона → ±inf (явный контракт насыщения)
"""

import logging
import math
import struct
from dataclasses import dataclass
from typing import Final, NamedTuple

from src.bigfraction.math.rounding import RoundingMode, round_ratio
from src.bigfraction.math.safeguards import require_finite

logger = logging.getLogger(__name__)


# =============================================================================
# ФОРМАТЫ
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """
    Параметры двоичного формата IEEE-754.

    Экспоненты несмещённые: нормальные значения лежат в [2^emin, 2^(emax+1)).
    """

    name: str
    precision: int  # бит мантиссы, включая неявную единицу
    exponent_bits: int
    emin: int
    emax: int
    struct_code: str  # код формата для struct.pack

    @property
    def bias(self) -> int:
        return self.emax

    @property
    def mantissa_bits(self) -> int:
        return self.precision - 1

    @property
    def total_bits(self) -> int:
        return 1 + self.exponent_bits + self.mantissa_bits

    @property
    def min_exponent(self) -> int:
        """Экспонента младшего бита субнормального значения (-1074 для binary64)."""
        return self.emin - self.mantissa_bits


BINARY64: Final[FloatFormat] = FloatFormat(
    name="binary64", precision=53, exponent_bits=11, emin=-1022, emax=1023, struct_code="d"
)
BINARY32: Final[FloatFormat] = FloatFormat(
    name="binary32", precision=24, exponent_bits=8, emin=-126, emax=127, struct_code="f"
)

# Формат по умолчанию (Python float)
DEFAULT_FLOAT_FORMAT: Final[str] = "binary64"

_REGISTRY: Final[dict[str, FloatFormat]] = {
    "binary64": BINARY64,
    "float64": BINARY64,
    "double": BINARY64,
    "binary32": BINARY32,
    "float32": BINARY32,
    "single": BINARY32,
}


def get_float_format(fmt: "str | FloatFormat" = DEFAULT_FLOAT_FORMAT) -> FloatFormat:
    """
    Получение формата по имени.

    Args:
        fmt: Имя формата ('binary64', 'float32', 'double', ...) или FloatFormat

    Returns:
        FloatFormat

    Raises:
        ValueError: Если формат не поддерживается
    """
    if isinstance(fmt, FloatFormat):
        return fmt

    try:
        return _REGISTRY[fmt.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported float format '{fmt}'. Supported formats: {sorted(_REGISTRY)}"
        ) from None


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


class FloatParts(NamedTuple):
    """Битовые поля IEEE-754 значения."""

    negative: bool
    biased_exponent: int
    mantissa: int  # дробная часть без неявной единицы


def is_representable(value: float, fmt: "str | FloatFormat" = BINARY64) -> bool:
    """
    Проверка, что float точно представим в формате fmt.

    Args:
        value: Конечное значение
        fmt: Целевой формат

    Returns:
        True если упаковка в fmt не теряет информации
    """
    fmt = get_float_format(fmt)
    try:
        packed = struct.pack(f">{fmt.struct_code}", value)
    except OverflowError:
        return False
    return struct.unpack(f">{fmt.struct_code}", packed)[0] == value


def decompose(value: float, fmt: "str | FloatFormat" = BINARY64) -> FloatParts:
    """
    Разложение float на знак, смещённую экспоненту и мантиссу.

    Args:
        value: Значение (точно представимое в fmt)
        fmt: Формат

    Returns:
        FloatParts

    Examples:
        >>> decompose(1.0)
        FloatParts(negative=False, biased_exponent=1023, mantissa=0)
        >>> decompose(-2.0, "binary32")
        FloatParts(negative=True, biased_exponent=128, mantissa=0)
    """
    fmt = get_float_format(fmt)
    bits = int.from_bytes(struct.pack(f">{fmt.struct_code}", value), "big")

    negative = bool(bits >> (fmt.total_bits - 1))
    biased_exponent = (bits >> fmt.mantissa_bits) & ((1 << fmt.exponent_bits) - 1)
    mantissa = bits & ((1 << fmt.mantissa_bits) - 1)

    return FloatParts(negative, biased_exponent, mantissa)


# =============================================================================
# FLOAT → RATIO (точно)
# =============================================================================


def float_to_ratio(value: float, fmt: "str | FloatFormat" = BINARY64) -> tuple[int, int]:
    """
    Точное преобразование float в несократимую дробь.

    Args:
        value: Конечное значение
        fmt: Формат, в котором интерпретируется value (default: binary64)

    Returns:
        (numerator, denominator), denominator — степень двойки, gcd == 1

    Raises:
        ValueError: Если value NaN/Inf или не представимо точно в fmt

    Examples:
        >>> float_to_ratio(0.5)
        (1, 2)
        >>> float_to_ratio(-0.0)
        (0, 1)
        >>> float_to_ratio(1.1)
        (2476979795053773, 2251799813685248)
        >>> float_to_ratio(5e-324)[1] == 2 ** 1074
        True
    """
    require_finite(value, "value")
    fmt = get_float_format(fmt)

    if fmt is not BINARY64 and not is_representable(value, fmt):
        raise ValueError(f"value {value!r} is not exactly representable as {fmt.name}")

    parts = decompose(value, fmt)

    if parts.biased_exponent == 0:
        if parts.mantissa == 0:
            return 0, 1
        # Subnormal: без неявной единицы, экспонента зафиксирована на emin
        significand = parts.mantissa
        exponent = fmt.min_exponent
    else:
        significand = (1 << fmt.mantissa_bits) | parts.mantissa
        exponent = parts.biased_exponent - fmt.bias - fmt.mantissa_bits

    if exponent >= 0:
        numerator, denominator = significand << exponent, 1
    else:
        # Сокращение: denominator — степень двойки, снимаем общие двойки
        shift = min((significand & -significand).bit_length() - 1, -exponent)
        numerator, denominator = significand >> shift, 1 << (-exponent - shift)

    if parts.negative:
        numerator = -numerator

    return numerator, denominator


# =============================================================================
# RATIO → FLOAT (ближайшее представимое)
# =============================================================================


def ratio_to_float(
    numerator: int,
    denominator: int,
    fmt: "str | FloatFormat" = BINARY64,
) -> float:
    """
    Ближайший к numerator/denominator float формата fmt (round-half-even).

    Алгоритм:
    1. Находим e: 2^e <= |n/d| < 2^(e+1)
    2. Экспонента младшего бита: q = max(e, emin) - (p-1)
       (для субнормальных значений точность падает автоматически)
    3. m = round_half_even(|n/d| / 2^q); при переносе m == 2^p
    4. Если старшая экспонента > emax → ±inf

    Args:
        numerator: Числитель
        denominator: Знаменатель (> 0)
        fmt: Целевой формат (default: binary64)

    Returns:
        float (для binary32 — значение, точно представимое в binary32)

    Examples:
        >>> ratio_to_float(1, 3)
        0.3333333333333333
        >>> ratio_to_float(-7, 2)
        -3.5
        >>> ratio_to_float(2 ** 1024, 1)
        inf
    """
    fmt = get_float_format(fmt)

    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    negative = numerator < 0
    n = abs(numerator)

    if n == 0:
        return 0.0

    # 2^e <= n/d < 2^(e+1)
    e = n.bit_length() - denominator.bit_length()
    if e >= 0:
        if n < denominator << e:
            e -= 1
    elif n << -e < denominator:
        e -= 1

    q_exp = max(e, fmt.emin) - fmt.mantissa_bits

    if q_exp >= 0:
        m = round_ratio(n, denominator << q_exp, RoundingMode.HALF_EVEN)
    else:
        m = round_ratio(n << -q_exp, denominator, RoundingMode.HALF_EVEN)

    if m.bit_length() > fmt.precision:
        # Перенос 1.11..1 → 10.00..0: m == 2^p, сдвиг точен
        m >>= 1
        q_exp += 1

    if m == 0:
        return -0.0 if negative else 0.0

    if m.bit_length() - 1 + q_exp > fmt.emax:
        logger.debug("ratio %d/%d exceeds %s range, saturating to inf", numerator, denominator, fmt.name)
        return -math.inf if negative else math.inf

    result = math.ldexp(m, q_exp)
    return -result if negative else result
