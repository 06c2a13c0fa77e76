"""
Тесты для BigFraction — каноническая форма, конструирование, сравнение

Проверяет:
1. Инварианты: denominator > 0, gcd == 1, ноль = 0/1
2. Нулевой знаменатель → ZeroDivisionError на всех путях
3. Immutable модель (frozen) и strict валидацию полей
4. value_of для всех поддерживаемых типов
5. Равенство, hash, compare_to, min/max, rich comparisons
"""

import math
import random
from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from src.bigfraction.domain import (
    ONE,
    ONE_HALF,
    ONE_TENTH,
    TEN,
    ZERO,
    BigFraction,
)
from src.bigfraction.math.scaled_decimal import ScaledDecimal


def bf(numerator: int, denominator: int = 1) -> BigFraction:
    return BigFraction.from_pair(numerator, denominator)


# =============================================================================
# ТЕСТЫ КАНОНИЧЕСКОЙ ФОРМЫ
# =============================================================================


class TestCanonicalForm:
    """Тесты приведения к каноническому виду"""

    def test_reduction(self) -> None:
        """Сокращение и перенос знака в числитель"""
        assert str(bf(6, -4)) == "-3/2"
        assert str(bf(-6, -4)) == "3/2"
        assert str(bf(10, 5)) == "2/1"
        assert str(bf(0, -7)) == "0/1"

    def test_model_constructor_reduces(self) -> None:
        """Прямое конструирование модели проходит через валидатор"""
        value = BigFraction(numerator=6, denominator=-4)
        assert value.numerator == -3
        assert value.denominator == 2
        assert BigFraction(numerator=5).denominator == 1

    def test_invariants_on_random_pairs(self) -> None:
        """denominator > 0 и gcd == 1 для произвольных пар"""
        rng = random.Random(42)
        for _ in range(500):
            numerator = rng.randint(-10**30, 10**30)
            denominator = rng.choice([-1, 1]) * rng.randint(1, 10**30)
            value = bf(numerator, denominator)
            assert value.denominator > 0
            assert math.gcd(value.numerator, value.denominator) == 1
            assert value.numerator * denominator == numerator * value.denominator

    def test_zero_denominator_all_paths(self) -> None:
        """Нулевой знаменатель → ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            bf(1, 0)
        with pytest.raises(ZeroDivisionError):
            BigFraction(numerator=1, denominator=0)
        with pytest.raises(ZeroDivisionError):
            BigFraction.parse("3/0")
        with pytest.raises(ZeroDivisionError):
            BigFraction.value_of(1, 0)
        with pytest.raises(ZeroDivisionError):
            ONE.divide(ZERO)
        with pytest.raises(ZeroDivisionError):
            ZERO.reciprocal()

    def test_same_value_different_paths(self) -> None:
        """Разные пути → равные экземпляры и одинаковый hash"""
        values = [
            bf(3, 4),
            bf(-6, -8),
            BigFraction.parse("0.75"),
            BigFraction.parse("75E-2"),
            BigFraction.from_float(0.75),
            BigFraction.from_decimal(Decimal("0.750")),
            BigFraction.from_fraction(Fraction(3, 4)),
            BigFraction.from_scaled_decimal(75, 2),
            BigFraction(numerator=15, denominator=20),
        ]
        for value in values:
            assert value == values[0]
            assert hash(value) == hash(values[0])
        assert len(set(values)) == 1

    def test_constants(self) -> None:
        """Константы"""
        assert str(ZERO) == "0/1"
        assert str(ONE) == "1/1"
        assert str(TEN) == "10/1"
        assert str(ONE_HALF) == "1/2"
        assert str(ONE_TENTH) == "1/10"


# =============================================================================
# ТЕСТЫ PYDANTIC МОДЕЛИ
# =============================================================================


class TestModel:
    """Тесты immutable модели"""

    def test_frozen(self) -> None:
        """Поля нельзя изменить"""
        value = bf(1, 2)
        with pytest.raises(ValidationError):
            value.numerator = 5

    def test_strict_fields(self) -> None:
        """Нецелые поля отвергаются"""
        with pytest.raises(ValidationError):
            BigFraction(numerator=1.5, denominator=2)
        with pytest.raises(ValidationError):
            BigFraction(numerator="1", denominator=2)

    def test_from_pair_requires_int(self) -> None:
        """from_pair принимает только int (bool отвергается)"""
        with pytest.raises(TypeError, match="must be an int"):
            BigFraction.from_pair(1.0, 2)
        with pytest.raises(TypeError):
            BigFraction.from_pair(True, 2)

    def test_model_dump(self) -> None:
        """Сериализация в dict"""
        assert bf(-3, 6).model_dump() == {"numerator": -1, "denominator": 2}


# =============================================================================
# ТЕСТЫ value_of
# =============================================================================


class TestValueOf:
    """Тесты универсального конструирования"""

    def test_supported_types(self) -> None:
        """int, float, Decimal, Fraction, ScaledDecimal, str, BigFraction"""
        assert BigFraction.value_of(7) == bf(7)
        assert BigFraction.value_of(0.5) == ONE_HALF
        assert BigFraction.value_of(Decimal("0.1")) == ONE_TENTH
        assert BigFraction.value_of(Fraction(-2, 4)) == bf(-1, 2)
        assert BigFraction.value_of(ScaledDecimal(1, 1)) == ONE_TENTH
        assert BigFraction.value_of("10") == TEN
        half = bf(1, 2)
        assert BigFraction.value_of(half) is half

    def test_two_arguments(self) -> None:
        """value_of(a, b) == a / b"""
        assert BigFraction.value_of(1, 3) == bf(1, 3)
        assert BigFraction.value_of(1.5, 0.25) == bf(6)
        assert BigFraction.value_of("1/2", "3/4") == bf(2, 3)

    def test_float_is_exact(self) -> None:
        """float не округляется до 'красивого' значения"""
        assert BigFraction.value_of(0.1) != ONE_TENTH

    def test_unsupported(self) -> None:
        """Неподдерживаемые типы"""
        for value in (None, [1, 2], object(), True, complex(1, 2)):
            with pytest.raises(TypeError, match="Cannot convert"):
                BigFraction.value_of(value)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestOrdering:
    """Тесты упорядочивания и равенства"""

    def test_compare_to(self) -> None:
        """Точное сравнение перекрёстным умножением"""
        assert bf(1, 3).compare_to(bf(1, 2)) == -1
        assert bf(1, 2).compare_to(bf(2, 4)) == 0
        assert bf(-1, 2).compare_to(bf(-2, 3)) == 1
        assert bf(10**40 + 1, 10**40).compare_to(1) == 1

    def test_rich_comparisons_with_numbers(self) -> None:
        """<, <=, >, >= с числовыми операндами"""
        third = bf(1, 3)
        assert third < 0.34
        assert third > Fraction(1, 4)
        assert third <= bf(2, 6)
        assert third >= Decimal("0.333")
        assert 1 > third

    def test_comparison_with_unsupported_type(self) -> None:
        """Сравнение со строкой не поддерживается"""
        with pytest.raises(TypeError):
            bf(1, 3) < "1/2"

    def test_equality_only_between_fractions(self) -> None:
        """== истинно только для BigFraction; для чисел — equals_number"""
        assert bf(2) != 2
        assert bf(1, 2) != 0.5
        assert bf(2).equals_number(2)
        assert bf(1, 2).equals_number(0.5)
        assert bf(1, 2).equals_number(Decimal("0.50"))
        assert not bf(1, 3).equals_number(0.3333333333333333)
        assert not bf(1, 2).equals_number(math.nan)
        assert not bf(1, 2).equals_number("1/2")

    def test_sorting(self) -> None:
        """Сортировка согласована с compare_to"""
        values = [bf(n, d) for n in range(-20, 21) for d in range(1, 11)]
        rng = random.Random(7)
        rng.shuffle(values)
        ordered = sorted(values)
        for left, right in zip(ordered, ordered[1:]):
            assert left.compare_to(right) <= 0
            assert left.numerator * right.denominator <= right.numerator * left.denominator

    def test_min_max(self) -> None:
        """min/max, при равенстве возвращается self"""
        a, b = bf(1, 3), bf(1, 2)
        assert a.min(b) is a
        assert a.max(b) is b
        same = bf(2, 4)
        assert b.min(same) is b
        assert b.max(same) is b
        assert a.max(1) == ONE

    def test_hash_in_dict(self) -> None:
        """Использование в качестве ключа"""
        table = {bf(1, 2): "half"}
        assert table[BigFraction.parse("0.5")] == "half"
