"""
Тесты для IEEE-754 Bridge

Проверяет:
1. Точное разложение float → дробь (normal, subnormal, -0.0)
2. NaN/Inf → ValueError
3. binary32: точная представимость и экстремальные значения
4. Обратное преобразование с round-half-even и насыщением к ±inf
5. Round-trip на детерминированной выборке битовых шаблонов
"""

import math
import random
import struct
import sys

import pytest

from src.bigfraction.domain import BigFraction
from src.bigfraction.math.ieee754 import (
    BINARY32,
    BINARY64,
    FloatParts,
    decompose,
    float_to_ratio,
    get_float_format,
    is_representable,
    ratio_to_float,
)
from src.bigfraction.math.narrowing import NoExactValueError

FLOAT32_MIN_VALUE = struct.unpack(">f", (1).to_bytes(4, "big"))[0]
FLOAT32_MIN_NORMAL = struct.unpack(">f", (0x00800000).to_bytes(4, "big"))[0]
FLOAT32_MAX_VALUE = struct.unpack(">f", (0x7F7FFFFF).to_bytes(4, "big"))[0]


def double_from_bits(bits: int) -> float:
    return struct.unpack(">d", bits.to_bytes(8, "big"))[0]


def float32_from_bits(bits: int) -> float:
    return struct.unpack(">f", bits.to_bytes(4, "big"))[0]


# =============================================================================
# ТЕСТЫ ФОРМАТОВ
# =============================================================================


class TestFloatFormats:
    """Тесты реестра форматов"""

    def test_binary64_parameters(self) -> None:
        """binary64: p=53, bias=1023, младший бит 2^-1074"""
        assert BINARY64.precision == 53
        assert BINARY64.bias == 1023
        assert BINARY64.total_bits == 64
        assert BINARY64.min_exponent == -1074

    def test_binary32_parameters(self) -> None:
        """binary32: p=24, bias=127, младший бит 2^-149"""
        assert BINARY32.precision == 24
        assert BINARY32.bias == 127
        assert BINARY32.total_bits == 32
        assert BINARY32.min_exponent == -149

    def test_aliases(self) -> None:
        """Альтернативные имена форматов"""
        assert get_float_format("double") is BINARY64
        assert get_float_format("FLOAT32") is BINARY32
        assert get_float_format(BINARY32) is BINARY32

    def test_unknown_format(self) -> None:
        """Неизвестный формат"""
        with pytest.raises(ValueError, match="Unsupported float format"):
            get_float_format("binary16")


# =============================================================================
# ТЕСТЫ FLOAT → RATIO
# =============================================================================


class TestFloatToRatio:
    """Тесты для float_to_ratio / BigFraction.from_float"""

    def test_decompose_fields(self) -> None:
        """Битовые поля"""
        assert decompose(1.0) == FloatParts(False, 1023, 0)
        assert decompose(-2.0, "binary32") == FloatParts(True, 128, 0)
        assert decompose(5e-324) == FloatParts(False, 0, 1)

    def test_simple_values(self) -> None:
        """Двоично-рациональные значения"""
        assert float_to_ratio(0.5) == (1, 2)
        assert float_to_ratio(-0.75) == (-3, 4)
        assert float_to_ratio(3.0) == (3, 1)
        assert float_to_ratio(1024.0) == (1024, 1)

    def test_one_point_one(self) -> None:
        """1.1 не равна 11/10"""
        assert float_to_ratio(1.1) == (2476979795053773, 2251799813685248)
        assert str(BigFraction.from_float(1.1)) == "2476979795053773/2251799813685248"

    def test_float32_one_point_one(self) -> None:
        """1.1f = 9227469/8388608"""
        value = float32_from_bits(0x3F8CCCCD)
        assert str(BigFraction.from_float32(value)) == "9227469/8388608"

    def test_zeros(self) -> None:
        """+0.0 и -0.0 → 0/1"""
        assert float_to_ratio(0.0) == (0, 1)
        assert float_to_ratio(-0.0) == (0, 1)
        assert BigFraction.from_float(-0.0) == BigFraction.from_pair(0, 1)

    def test_double_extremes(self) -> None:
        """MIN_VALUE, MIN_NORMAL, MAX_VALUE"""
        assert float_to_ratio(5e-324) == (1, 2**1074)
        assert float_to_ratio(sys.float_info.min) == (1, 2**1022)
        assert float_to_ratio(sys.float_info.max) == (2**1024 - 2**971, 1)
        assert float_to_ratio(-5e-324) == (-1, 2**1074)

    def test_float32_extremes(self) -> None:
        """Float MIN_VALUE, MIN_NORMAL, MAX_VALUE"""
        assert float_to_ratio(FLOAT32_MIN_VALUE, BINARY32) == (1, 2**149)
        assert float_to_ratio(FLOAT32_MIN_NORMAL, BINARY32) == (1, 2**126)
        assert float_to_ratio(FLOAT32_MAX_VALUE, BINARY32) == (2**128 - 2**104, 1)

    def test_largest_subnormal(self) -> None:
        """Наибольшее субнормальное значение"""
        value = double_from_bits(0x000FFFFFFFFFFFFF)
        assert float_to_ratio(value) == (2**52 - 1, 2**1074)

    def test_non_finite_rejected(self) -> None:
        """NaN/Inf → ValueError"""
        for value in (math.nan, math.inf, -math.inf):
            with pytest.raises(ValueError, match="finite"):
                float_to_ratio(value)
            with pytest.raises(ValueError):
                BigFraction.from_float(value)

    def test_binary32_requires_representable(self) -> None:
        """0.1 (binary64) не представимо точно в binary32"""
        assert is_representable(0.5, BINARY32)
        assert not is_representable(0.1, BINARY32)
        assert not is_representable(1e300, BINARY32)
        with pytest.raises(ValueError, match="binary32"):
            float_to_ratio(0.1, BINARY32)

    def test_result_is_reduced(self) -> None:
        """Знаменатель — степень двойки, числитель нечётный (если дробь не целая)"""
        rng = random.Random(20240101)
        for _ in range(200):
            value = rng.uniform(-1e6, 1e6)
            numerator, denominator = float_to_ratio(value)
            assert denominator & (denominator - 1) == 0
            assert denominator == 1 or numerator % 2 == 1


# =============================================================================
# ТЕСТЫ RATIO → FLOAT
# =============================================================================


class TestRatioToFloat:
    """Тесты для ratio_to_float / BigFraction.to_float"""

    def test_nearest_value(self) -> None:
        """Совпадение с корректно округлённым делением Python"""
        assert ratio_to_float(1, 3) == 1 / 3
        assert ratio_to_float(-7, 2) == -3.5
        assert ratio_to_float(2, 3) == 2 / 3
        assert ratio_to_float(10**30, 7) == 10**30 / 7

    def test_half_even_ties(self) -> None:
        """2^53 + 1 лежит ровно посередине → к чётной мантиссе"""
        assert ratio_to_float(2**53 + 1, 1) == float(2**53)
        assert ratio_to_float(2**53 + 3, 1) == float(2**53 + 4)

    def test_saturation_to_infinity(self) -> None:
        """Значения больше MAX_VALUE → ±inf"""
        assert ratio_to_float(2**1024, 1) == math.inf
        assert ratio_to_float(-(2**1024), 1) == -math.inf
        too_big = BigFraction.from_float(sys.float_info.max).multiply(4)
        assert too_big.to_float() == math.inf
        assert too_big.negate().to_float() == -math.inf

    def test_float32_saturation(self) -> None:
        """binary32: за пределами MAX_VALUE → inf"""
        too_big = BigFraction.from_float(FLOAT32_MAX_VALUE).multiply(2)
        assert too_big.to_float32() == math.inf
        assert BigFraction.from_float(FLOAT32_MAX_VALUE).to_float32() == FLOAT32_MAX_VALUE

    def test_underflow_to_zero(self) -> None:
        """Меньше половины MIN_VALUE → ноль"""
        assert ratio_to_float(1, 2**1076) == 0.0
        assert BigFraction.from_pair(1, 2**160).to_float32() == 0.0

    def test_subnormal_rounding(self) -> None:
        """Половина MIN_VALUE округляется к нулю (чётная мантисса), 3/4 — к MIN_VALUE"""
        assert ratio_to_float(1, 2**1075) == 0.0
        assert ratio_to_float(3, 2**1076) == 5e-324

    def test_float32_rounding(self) -> None:
        """1/3 в binary32"""
        expected = struct.unpack(">f", struct.pack(">f", 1 / 3))[0]
        assert BigFraction.from_pair(1, 3).to_float32() == expected

    def test_extremes_round_trip(self) -> None:
        """Экстремальные значения восстанавливаются точно"""
        for value in (5e-324, sys.float_info.min, sys.float_info.max):
            for signed in (value, -value):
                fraction = BigFraction.from_float(signed)
                assert fraction.to_float() == signed
                assert fraction.to_float_exact() == signed


# =============================================================================
# ТЕСТЫ ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """Round-trip на детерминированной выборке битовых шаблонов"""

    def test_binary64_bit_patterns(self) -> None:
        """Любой конечный double восстанавливается точно"""
        rng = random.Random(1074)
        for _ in range(2000):
            value = double_from_bits(rng.getrandbits(64))
            if not math.isfinite(value):
                continue
            fraction = BigFraction.from_float(value)
            assert fraction.to_float() == value
            assert float(fraction) == value

    def test_binary32_bit_patterns(self) -> None:
        """Любой конечный float32 восстанавливается точно"""
        rng = random.Random(149)
        for _ in range(2000):
            value = float32_from_bits(rng.getrandbits(32))
            if not math.isfinite(value):
                continue
            fraction = BigFraction.from_float32(value)
            assert fraction.to_float32() == value
            assert fraction.to_float32_exact() == value


# =============================================================================
# ТЕСТЫ ТОЧНОГО NARROWING
# =============================================================================


class TestExactFloat:
    """Тесты для to_float_exact / to_float32_exact"""

    def test_non_representable(self) -> None:
        """1/10 и 1/3 не представимы точно"""
        with pytest.raises(NoExactValueError):
            BigFraction.from_pair(1, 10).to_float_exact()
        with pytest.raises(NoExactValueError):
            BigFraction.from_pair(1, 3).double_value_exact()

    def test_out_of_range(self) -> None:
        """MAX_VALUE + 1 и MIN_VALUE / 2"""
        with pytest.raises(NoExactValueError):
            BigFraction.from_float(sys.float_info.max).add(1).to_float_exact()
        with pytest.raises(NoExactValueError):
            BigFraction.value_of(5e-324, 2).to_float_exact()

    def test_float32_exact(self) -> None:
        """0.1 (binary64) не представимо точно в binary32"""
        with pytest.raises(NoExactValueError):
            BigFraction.from_float(0.1).float_value_exact()
        assert BigFraction.from_pair(3, 8).float_value_exact() == 0.375
