"""
BigFraction — Exact Arbitrary-Precision Rational Number

Immutable Pydantic модель рационального числа numerator/denominator
с целыми произвольной точности. Никакой ошибки округления не возникает,
пока вызывающий код явно её не запросит (round, round_to_denominator,
to_decimal_string, narrowing к float или целому фиксированной ширины).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1, ноль — всегда 0/1
3. Нулевой знаменатель на любом пути конструирования → ZeroDivisionError
4. Immutable (frozen=True): каждая операция возвращает новый экземпляр
5. Равные значения дают равные экземпляры с одинаковым hash
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Any, NamedTuple, Union

from jsonschema import ValidationError
from pydantic import BaseModel, Field, model_validator

from src.bigfraction.contracts.validators import validate_fraction, validate_fraction_text
from src.bigfraction.math.farey import farey_closest, farey_next, farey_prev, mediant
from src.bigfraction.math.ieee754 import (
    BINARY32,
    BINARY64,
    FloatFormat,
    float_to_ratio,
    ratio_to_float,
)
from src.bigfraction.math.narrowing import (
    IntegerWidth,
    NoExactValueError,
    narrow_ratio,
    narrow_ratio_exact,
)
from src.bigfraction.math.parsing import FractionFormatError, parse_ratio
from src.bigfraction.math.reduction import reduce_ratio
from src.bigfraction.math.rendering import (
    canonical_string,
    decimal_string,
    mixed_string,
    repeating_digit_string,
)
from src.bigfraction.math.rounding import (
    DEFAULT_ROUNDING_MODE,
    DivisionMode,
    RoundingMode,
    integral_quotient,
    round_ratio,
)
from src.bigfraction.math.safeguards import (
    DEFAULT_RADIX,
    is_strict_int,
    require_int,
    validate_positive,
)
from src.bigfraction.math.scaled_decimal import (
    ScaledDecimal,
    decimal_to_ratio,
    ratio_to_decimal,
    ratio_to_scaled,
    scaled_to_ratio,
)

# Типы, которые операторы (+, -, <, ...) принимают как числовые операнды
_NUMERIC_TYPES = (int, float, Decimal, Fraction, ScaledDecimal)

Operand = Union["BigFraction", int, float, Decimal, Fraction, ScaledDecimal, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonPositiveDenominatorError(ArithmeticError):
    """Целевой знаменатель (или шаг округления) не положителен."""

    pass


# =============================================================================
# ROUNDED RATIO
# =============================================================================


class RoundedRatio(NamedTuple):
    """
    Результат round_to_denominator: numerator/denominator с ровно запрошенным
    знаменателем (не сокращается, 7/15 к знаменателю 30 → 14/30).
    """

    numerator: int
    denominator: int

    def to_fraction(self) -> "BigFraction":
        return BigFraction.from_pair(self.numerator, self.denominator)

    def __str__(self) -> str:
        return canonical_string(self.numerator, self.denominator)


# =============================================================================
# BIG FRACTION MODEL
# =============================================================================


class BigFraction(BaseModel):
    """
    Точное рациональное число произвольной точности.

    Конструирование:
        BigFraction(numerator=6, denominator=-4)  → -3/2 (сокращается валидатором)
        BigFraction.from_pair(6, -4)              → -3/2
        BigFraction.value_of(x)                   → из int/float/Decimal/Fraction/str
        BigFraction.parse("-1.0E2/-0.007E3")      → 100/7

    Immutable модель (frozen=True); strict=True отвергает нецелые поля.
    """

    numerator: int = Field(..., description="Числитель (несёт знак значения)")
    denominator: int = Field(default=1, gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def reduce_to_lowest_terms(cls, data: Any) -> Any:
        """Приведение к каноническому виду до валидации полей."""
        if isinstance(data, dict):
            numerator = data.get("numerator")
            denominator = data.get("denominator", 1)
            if is_strict_int(numerator) and is_strict_int(denominator):
                numerator, denominator = reduce_ratio(numerator, denominator)
                return {**data, "numerator": numerator, "denominator": denominator}
        return data

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def _from_reduced(cls, numerator: int, denominator: int) -> "BigFraction":
        # Пара уже каноническая: валидация не нужна
        return cls.model_construct(numerator=numerator, denominator=denominator)

    @classmethod
    def from_pair(cls, numerator: int, denominator: int = 1) -> "BigFraction":
        """
        Дробь из пары целых.

        Args:
            numerator: Числитель
            denominator: Знаменатель (не ноль, default: 1)

        Returns:
            Каноническая дробь

        Raises:
            TypeError: Если аргументы не int
            ZeroDivisionError: Если denominator == 0

        Examples:
            >>> str(BigFraction.from_pair(6, -4))
            '-3/2'
        """
        require_int(numerator, "numerator")
        require_int(denominator, "denominator")
        return cls._from_reduced(*reduce_ratio(numerator, denominator))

    @classmethod
    def from_int(cls, value: int) -> "BigFraction":
        require_int(value, "value")
        return cls._from_reduced(value, 1)

    @classmethod
    def from_float(cls, value: float, fmt: "str | FloatFormat" = BINARY64) -> "BigFraction":
        """
        Точное значение IEEE-754 float.

        Args:
            value: Конечное значение
            fmt: Формат интерпретации ('binary64' или 'binary32')

        Raises:
            ValueError: Если value NaN/Inf или не представимо в fmt

        Examples:
            >>> str(BigFraction.from_float(0.1))
            '3602879701896397/36028797018963968'
        """
        return cls._from_reduced(*float_to_ratio(value, fmt))

    @classmethod
    def from_float32(cls, value: float) -> "BigFraction":
        return cls.from_float(value, BINARY32)

    @classmethod
    def from_scaled_decimal(cls, unscaled: int, scale: int) -> "BigFraction":
        """Точное значение unscaled × 10^-scale."""
        require_int(unscaled, "unscaled")
        require_int(scale, "scale")
        return cls._from_reduced(*scaled_to_ratio(unscaled, scale))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "BigFraction":
        """Точное значение decimal.Decimal (NaN/Infinity → ValueError)."""
        return cls._from_reduced(*decimal_to_ratio(value))

    @classmethod
    def from_fraction(cls, value: Fraction) -> "BigFraction":
        return cls._from_reduced(value.numerator, value.denominator)

    @classmethod
    def parse(cls, text: str, radix: int = DEFAULT_RADIX) -> "BigFraction":
        """
        Разбор текстовой дроби: "[sign]mantissa[exp]['/'[sign]mantissa[exp]]".

        При radix != 10 стороны записываются цифрами основания (буквы без учёта
        регистра), экспонента не допускается, периодическая запись допустима.

        Raises:
            FractionFormatError: Если текст не соответствует грамматике
            ZeroDivisionError: Если знаменатель равен нулю
            ValueError: Если radix вне [2, 36]

        Examples:
            >>> BigFraction.parse("dead/BEEF", 16)
            BigFraction(numerator=57005, denominator=48879)
        """
        return cls._from_reduced(*parse_ratio(text, radix))

    @classmethod
    def from_canonical(cls, text: str) -> "BigFraction":
        """
        Разбор строго канонической формы "n/d" (несократимая, d > 0).

        Raises:
            FractionFormatError: Если text не является канонической формой
        """
        try:
            validate_fraction_text(text)
        except ValidationError as e:
            raise FractionFormatError(f"Not a canonical fraction: {text!r} ({e.message})") from e

        numerator, denominator = (int(part) for part in text.split("/"))
        if math.gcd(numerator, denominator) != 1:
            raise FractionFormatError(f"Not in lowest terms: {text!r}")

        return cls._from_reduced(numerator, denominator)

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigFraction":
        """
        Дробь из JSON контракта {"numerator": n, "denominator": d}.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            TypeError: Если поле целое по схеме, но не int (например, 2.0)
            FractionFormatError: Если пара не несократима
        """
        validate_fraction(data)

        numerator, denominator = data["numerator"], data["denominator"]
        # JSON Schema считает 2.0 целым
        require_int(numerator, "numerator")
        require_int(denominator, "denominator")
        if math.gcd(numerator, denominator) != 1:
            raise FractionFormatError(f"Not in lowest terms: {numerator}/{denominator}")

        return cls._from_reduced(numerator, denominator)

    @classmethod
    def value_of(cls, value: Operand, denominator: Operand | None = None) -> "BigFraction":
        """
        Универсальное конструирование из любого поддерживаемого представления.

        Args:
            value: BigFraction, int, float, Decimal, Fraction, ScaledDecimal или str
            denominator: Необязательный делитель того же набора типов

        Returns:
            value (или value / denominator) как BigFraction

        Raises:
            TypeError: Если тип не поддерживается
            ZeroDivisionError: Если denominator равен нулю

        Examples:
            >>> str(BigFraction.value_of(1.5, 0.25))
            '6/1'
            >>> str(BigFraction.value_of("2/3"))
            '2/3'
        """
        if denominator is not None:
            if is_strict_int(value) and is_strict_int(denominator):
                return cls.from_pair(value, denominator)
            return cls.value_of(value).divide(denominator)

        if isinstance(value, BigFraction):
            return value
        if is_strict_int(value):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, ScaledDecimal):
            return cls.from_scaled_decimal(value.unscaled, value.scale)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, str):
            return cls.parse(value)

        raise TypeError(f"Cannot convert {type(value).__name__} to BigFraction: {value!r}")

    @classmethod
    def _coerce(cls, other: Any) -> "BigFraction | None":
        # Операнд оператора: None → NotImplemented
        if isinstance(other, BigFraction):
            return other
        if isinstance(other, _NUMERIC_TYPES) and not isinstance(other, bool):
            return cls.value_of(other)
        return None

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: Operand) -> "BigFraction":
        other = BigFraction.value_of(other)
        if self.denominator == other.denominator:
            return BigFraction.from_pair(self.numerator + other.numerator, self.denominator)
        return BigFraction.from_pair(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: Operand) -> "BigFraction":
        return self.add(BigFraction.value_of(other).negate())

    def subtract_from(self, other: Operand) -> "BigFraction":
        """other - self"""
        return self.negate().add(other)

    def multiply(self, other: Operand) -> "BigFraction":
        other = BigFraction.value_of(other)
        return BigFraction.from_pair(
            self.numerator * other.numerator, self.denominator * other.denominator
        )

    def divide(self, other: Operand) -> "BigFraction":
        """
        Деление.

        Raises:
            ZeroDivisionError: Если other равен нулю
        """
        other = BigFraction.value_of(other)
        if other.numerator == 0:
            raise ZeroDivisionError(f"division of {self} by zero")
        return BigFraction.from_pair(
            self.numerator * other.denominator, self.denominator * other.numerator
        )

    def divide_into(self, other: Operand) -> "BigFraction":
        """other / self"""
        return BigFraction.value_of(other).divide(self)

    def reciprocal(self) -> "BigFraction":
        if self.numerator == 0:
            raise ZeroDivisionError("reciprocal of zero")
        if self.numerator < 0:
            return BigFraction._from_reduced(-self.denominator, -self.numerator)
        return BigFraction._from_reduced(self.denominator, self.numerator)

    def complement(self) -> "BigFraction":
        """1 - self"""
        return BigFraction._from_reduced(self.denominator - self.numerator, self.denominator)

    def negate(self) -> "BigFraction":
        return BigFraction._from_reduced(-self.numerator, self.denominator)

    def abs(self) -> "BigFraction":
        return self.negate() if self.numerator < 0 else self

    def signum(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    def with_sign(self, sign: int) -> "BigFraction":
        """
        |self| со знаком sign (отрицательный, ноль или положительный).

        Examples:
            >>> str(BigFraction.from_pair(2, 3).with_sign(-5))
            '-2/3'
        """
        if sign == 0 or self.numerator == 0:
            return ZERO
        if (sign < 0) != (self.numerator < 0):
            return self.negate()
        return self

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def pow(self, exponent: int) -> "BigFraction":
        """
        Возведение в целую степень.

        x^0 == 1 для любого x (включая ноль); отрицательная степень — через reciprocal.

        Raises:
            TypeError: Если exponent не int
            ZeroDivisionError: Если self == 0 и exponent < 0
        """
        require_int(exponent, "exponent")

        if exponent == 0:
            return ONE
        if exponent < 0:
            if self.numerator == 0:
                raise ZeroDivisionError("zero cannot be raised to a negative power")
            return self.reciprocal().pow(-exponent)

        # Степени взаимно простых чисел взаимно просты
        return BigFraction._from_reduced(self.numerator**exponent, self.denominator**exponent)

    def gcd(self, other: Operand) -> "BigFraction":
        """gcd(a/b, c/d) = gcd(a, c) / lcm(b, d)"""
        other = BigFraction.value_of(other)
        return BigFraction.from_pair(
            math.gcd(self.numerator, other.numerator),
            math.lcm(self.denominator, other.denominator),
        )

    def lcm(self, other: Operand) -> "BigFraction":
        """lcm(a/b, c/d) = lcm(a, c) / gcd(b, d)"""
        other = BigFraction.value_of(other)
        return BigFraction.from_pair(
            math.lcm(self.numerator, other.numerator),
            math.gcd(self.denominator, other.denominator),
        )

    # =========================================================================
    # ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ
    # =========================================================================

    def divide_to_integral_value(
        self, other: Operand, mode: DivisionMode = DivisionMode.TRUNCATED
    ) -> int:
        """
        Целое частное self / other в режиме деления mode.

        Raises:
            ZeroDivisionError: Если other равен нулю
        """
        other = BigFraction.value_of(other)
        if other.numerator == 0:
            raise ZeroDivisionError(f"integer division of {self} by zero")

        # Знак знаменателя отношения совпадает со знаком делителя
        return integral_quotient(
            self.numerator * other.denominator, self.denominator * other.numerator, mode
        )

    def remainder(self, other: Operand, mode: DivisionMode = DivisionMode.TRUNCATED) -> "BigFraction":
        return self.divide_and_remainder(other, mode)[1]

    def divide_and_remainder(
        self, other: Operand, mode: DivisionMode = DivisionMode.TRUNCATED
    ) -> tuple[int, "BigFraction"]:
        """
        Частное и остаток: self == q·other + r.

        Examples:
            >>> q, r = BigFraction.from_pair(-4, 3).divide_and_remainder(1, DivisionMode.FLOORED)
            >>> q, str(r)
            (-2, '2/3')
        """
        other = BigFraction.value_of(other)
        quotient = self.divide_to_integral_value(other, mode)
        return quotient, self.subtract(other.multiply(quotient))

    def integer_part(self, mode: DivisionMode = DivisionMode.TRUNCATED) -> int:
        return integral_quotient(self.numerator, self.denominator, mode)

    def fraction_part(self, mode: DivisionMode = DivisionMode.TRUNCATED) -> "BigFraction":
        return self.parts(mode)[1]

    def parts(self, mode: DivisionMode = DivisionMode.TRUNCATED) -> tuple[int, "BigFraction"]:
        """
        Разложение на целую и дробную части: ip + fp == self.

        Examples:
            >>> ip, fp = BigFraction.from_pair(-4, 3).parts()
            >>> ip, str(fp)
            (-1, '-1/3')
        """
        whole = self.integer_part(mode)
        # gcd(n - q·d, d) == gcd(n, d) == 1
        rest = BigFraction._from_reduced(self.numerator - whole * self.denominator, self.denominator)
        return whole, rest

    # =========================================================================
    # ОКРУГЛЕНИЕ
    # =========================================================================

    def round(self, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
        """
        Округление к целому.

        Raises:
            RoundingNecessaryError: Если mode == UNNECESSARY и значение не целое

        Examples:
            >>> BigFraction.from_pair(5, 2).round(RoundingMode.HALF_EVEN)
            2
            >>> BigFraction.from_pair(-1, 3).round(RoundingMode.FLOOR)
            -1
        """
        return round_ratio(self.numerator, self.denominator, mode)

    def round_to_denominator(
        self, denominator: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> RoundedRatio:
        """
        Ближайшая дробь с заданным знаменателем (несокращённая).

        Args:
            denominator: Целевой знаменатель (> 0)
            mode: Режим округления

        Returns:
            RoundedRatio(round(self·denominator), denominator)

        Raises:
            NonPositiveDenominatorError: Если denominator <= 0
            RoundingNecessaryError: Если mode == UNNECESSARY и округление требуется

        Examples:
            >>> BigFraction.from_pair(7, 15).round_to_denominator(6)
            RoundedRatio(numerator=3, denominator=6)
        """
        require_int(denominator, "denominator")
        if denominator <= 0:
            raise NonPositiveDenominatorError(f"denominator must be positive, got {denominator}")

        numerator = round_ratio(self.numerator * denominator, self.denominator, mode)
        return RoundedRatio(numerator, denominator)

    def round_to_number(
        self, step: Operand, mode: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> "BigFraction":
        """
        Ближайшее кратное step: round(self / step)·step.

        Raises:
            NonPositiveDenominatorError: Если step <= 0
        """
        step = BigFraction.value_of(step)
        if step.numerator <= 0:
            raise NonPositiveDenominatorError(f"step must be positive, got {step}")

        return step.multiply(self.divide(step).round(mode))

    # =========================================================================
    # ТЕКСТОВЫЕ ФОРМЫ
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, radix: int = DEFAULT_RADIX, denominator_optional: bool = False) -> str:
        """
        Форма "n/d" в основании radix; с denominator_optional целые без "/1".

        Examples:
            >>> BigFraction.from_pair(255, -172).to_string(16)
            '-ff/ac'
            >>> BigFraction.from_pair(14, 2).to_string(denominator_optional=True)
            '7'
        """
        return canonical_string(self.numerator, self.denominator, radix, denominator_optional)

    def to_decimal_string(
        self,
        digits: int,
        mode: RoundingMode = DEFAULT_ROUNDING_MODE,
        radix: int = DEFAULT_RADIX,
    ) -> str:
        """
        Запись с ровно digits знаками после точки (в основании radix).

        Examples:
            >>> BigFraction.parse("9.95").to_decimal_string(1)
            '10.0'
            >>> BigFraction.from_pair(1, 2).to_decimal_string(3)
            '0.500'
            >>> BigFraction.from_pair(1, 2).to_decimal_string(2, radix=2)
            '0.10'
        """
        require_int(digits, "digits")
        return decimal_string(self.numerator, self.denominator, digits, mode, radix)

    def to_mixed_string(self, radix: int = DEFAULT_RADIX) -> str:
        return mixed_string(self.numerator, self.denominator, radix)

    def to_repeating_digit_string(self, force_repeating: bool = False, radix: int = DEFAULT_RADIX) -> str:
        return repeating_digit_string(self.numerator, self.denominator, force_repeating, radix)

    def to_decimal(self, precision: int | None = None) -> Decimal:
        """
        Decimal: точный для знаменателей 2^a·5^b, иначе 18 значащих цифр (HALF_EVEN).
        """
        return ratio_to_decimal(self.numerator, self.denominator, precision)

    def to_scaled_decimal(self) -> ScaledDecimal:
        """
        Точное (unscaled, scale).

        Raises:
            NoExactValueError: Если десятичное разложение не конечно
        """
        return ratio_to_scaled(self.numerator, self.denominator)

    def to_contract(self) -> dict[str, int]:
        """JSON контракт {"numerator": n, "denominator": d}."""
        return self.model_dump()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, other: Operand) -> int:
        """
        Точное сравнение перекрёстным умножением.

        Returns:
            -1, 0 или 1
        """
        other = BigFraction.value_of(other)
        left = self.numerator * other.denominator
        right = other.numerator * self.denominator
        return (left > right) - (left < right)

    def equals_number(self, other: Any) -> bool:
        """Равенство значений с любым числовым операндом (в отличие от ==)."""
        if isinstance(other, float) and not math.isfinite(other):
            return False
        coerced = BigFraction._coerce(other)
        return coerced is not None and self.compare_to(coerced) == 0

    def min(self, other: Operand) -> "BigFraction":
        """Меньшее из self и other (self при равенстве)."""
        other = BigFraction.value_of(other)
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: Operand) -> "BigFraction":
        """Большее из self и other (self при равенстве)."""
        other = BigFraction.value_of(other)
        return self if self.compare_to(other) >= 0 else other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigFraction):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.compare_to(coerced) < 0

    def __le__(self, other: Any) -> bool:
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.compare_to(coerced) <= 0

    def __gt__(self, other: Any) -> bool:
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.compare_to(coerced) > 0

    def __ge__(self, other: Any) -> bool:
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.compare_to(coerced) >= 0

    # =========================================================================
    # FAREY / STERN-BROCOT
    # =========================================================================

    def mediant(self, other: Operand) -> "BigFraction":
        """(a+c)/(b+d), сокращённая; x.mediant(x) == x."""
        other = BigFraction.value_of(other)
        return BigFraction._from_reduced(
            *mediant(self.numerator, self.denominator, other.numerator, other.denominator)
        )

    def farey_next(self, max_den: int) -> "BigFraction":
        """
        Следующая дробь ряда Фарея F_max_den строго больше self.

        Raises:
            ValueError: Если max_den <= 0
        """
        return BigFraction._from_reduced(*farey_next(self.numerator, self.denominator, max_den))

    def farey_prev(self, max_den: int) -> "BigFraction":
        """
        Предыдущая дробь ряда Фарея F_max_den строго меньше self.

        Raises:
            ValueError: Если max_den <= 0
        """
        return BigFraction._from_reduced(*farey_prev(self.numerator, self.denominator, max_den))

    def farey_closest(self, max_den: int) -> "BigFraction":
        """
        Ближайшая к self дробь со знаменателем <= max_den.

        Examples:
            >>> str(BigFraction.from_float(3.141592653589793).farey_closest(113))
            '355/113'
        """
        validate_positive(max_den, "max_den")
        if self.denominator <= max_den:
            return self
        return BigFraction._from_reduced(*farey_closest(self.numerator, self.denominator, max_den))

    # =========================================================================
    # NARROWING
    # =========================================================================

    def to_int(self, width: IntegerWidth = IntegerWidth.INT64) -> int:
        """Усечение к нулю с насыщением к диапазону width."""
        return narrow_ratio(self.numerator, self.denominator, width)

    def to_int_exact(self, width: IntegerWidth = IntegerWidth.INT64) -> int:
        """
        Точное целое ширины width.

        Raises:
            NoExactValueError: Если значение не целое или вне диапазона
        """
        return narrow_ratio_exact(self.numerator, self.denominator, width)

    def long_value(self) -> int:
        return self.to_int(IntegerWidth.INT64)

    def int_value(self) -> int:
        return self.to_int(IntegerWidth.INT32)

    def short_value(self) -> int:
        return self.to_int(IntegerWidth.INT16)

    def byte_value(self) -> int:
        return self.to_int(IntegerWidth.INT8)

    def long_value_exact(self) -> int:
        return self.to_int_exact(IntegerWidth.INT64)

    def int_value_exact(self) -> int:
        return self.to_int_exact(IntegerWidth.INT32)

    def short_value_exact(self) -> int:
        return self.to_int_exact(IntegerWidth.INT16)

    def byte_value_exact(self) -> int:
        return self.to_int_exact(IntegerWidth.INT8)

    def to_float(self) -> float:
        """Ближайший binary64 (half-even); вне диапазона → ±inf."""
        return ratio_to_float(self.numerator, self.denominator, BINARY64)

    def to_float32(self) -> float:
        """Ближайший binary32 (half-even), возвращается как Python float; вне диапазона → ±inf."""
        return ratio_to_float(self.numerator, self.denominator, BINARY32)

    def to_float_exact(self) -> float:
        """
        Точный binary64.

        Raises:
            NoExactValueError: Если значение не представимо точно
        """
        return self._exact_float(self.to_float(), BINARY64)

    def to_float32_exact(self) -> float:
        return self._exact_float(self.to_float32(), BINARY32)

    def _exact_float(self, result: float, fmt: FloatFormat) -> float:
        if math.isinf(result) or BigFraction.from_float(result, fmt) != self:
            raise NoExactValueError(f"{self} is not exactly representable as {fmt.name}")
        return result

    double_value = to_float
    float_value = to_float32
    double_value_exact = to_float_exact
    float_value_exact = to_float32_exact

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.add(coerced)

    def __radd__(self, other: Any) -> "BigFraction":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.subtract(coerced)

    def __rsub__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.subtract_from(coerced)

    def __mul__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.multiply(coerced)

    def __rmul__(self, other: Any) -> "BigFraction":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.divide(coerced)

    def __rtruediv__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        return NotImplemented if coerced is None else self.divide_into(coerced)

    def __floordiv__(self, other: Any) -> int:
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.divide_to_integral_value(coerced, DivisionMode.FLOORED)

    def __rfloordiv__(self, other: Any) -> int:
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide_to_integral_value(self, DivisionMode.FLOORED)

    def __mod__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.remainder(coerced, DivisionMode.FLOORED)

    def __rmod__(self, other: Any) -> "BigFraction":
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.remainder(self, DivisionMode.FLOORED)

    def __divmod__(self, other: Any) -> tuple[int, "BigFraction"]:
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.divide_and_remainder(coerced, DivisionMode.FLOORED)

    def __rdivmod__(self, other: Any) -> tuple[int, "BigFraction"]:
        coerced = BigFraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide_and_remainder(self, DivisionMode.FLOORED)

    def __pow__(self, exponent: Any) -> "BigFraction":
        if not is_strict_int(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "BigFraction":
        return self.negate()

    def __pos__(self) -> "BigFraction":
        return self

    def __abs__(self) -> "BigFraction":
        return self.abs()

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __int__(self) -> int:
        return self.integer_part()

    def __float__(self) -> float:
        return self.to_float()


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = BigFraction._from_reduced(0, 1)
ONE = BigFraction._from_reduced(1, 1)
TEN = BigFraction._from_reduced(10, 1)
ONE_HALF = BigFraction._from_reduced(1, 2)
ONE_TENTH = BigFraction._from_reduced(1, 10)
