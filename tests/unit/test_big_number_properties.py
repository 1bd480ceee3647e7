"""
Тесты алгебраических свойств BigNumber

Операнды генерируются детерминированно (random.Random с фиксированным seed),
встроенный int Python используется как оракул.

Проверяет:
1. Round-trip parse → to_string
2. Аддитивную единицу и обратный элемент
3. Коммутативность и ассоциативность
4. Тождество деления: q * b + r == a, |r| < |b|, знак r
5. Правила знаков умножения
6. Полноту порядка
7. Корректность обратного по модулю элемента
"""

import random

import pytest

from src.core.domain import ONE, ZERO, BigNumber

SEED = 20240512
SAMPLES = 40


def _random_int(rng: random.Random, max_digits: int = 60) -> int:
    """Знаковое целое со случайным числом цифр (включая ноль и короткие)."""
    length = rng.randint(1, max_digits)
    if length == 1:
        magnitude = rng.randint(0, 9)
    else:
        magnitude = rng.randrange(10 ** (length - 1), 10**length)
    return -magnitude if rng.random() < 0.5 else magnitude


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """divmod с усечением к нулю (остаток со знаком делимого)."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _pairs(count: int = SAMPLES, max_digits: int = 60) -> list[tuple[int, int]]:
    rng = random.Random(SEED + max_digits)
    return [(_random_int(rng, max_digits), _random_int(rng, max_digits)) for _ in range(count)]


def _triples(count: int = SAMPLES) -> list[tuple[int, int, int]]:
    rng = random.Random(SEED + 3)
    return [(_random_int(rng), _random_int(rng), _random_int(rng)) for _ in range(count)]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(params=_pairs())
def pair(request: pytest.FixtureRequest) -> tuple[int, int]:
    """Пара случайных знаковых целых."""
    return request.param


# =============================================================================
# ДИФФЕРЕНЦИАЛЬНЫЕ ТЕСТЫ (оракул: int)
# =============================================================================


class TestAgainstIntOracle:
    """Сравнение с арифметикой int"""

    def test_add(self, pair: tuple[int, int]) -> None:
        a, b = pair
        assert int(BigNumber.from_int(a) + BigNumber.from_int(b)) == a + b

    def test_subtract(self, pair: tuple[int, int]) -> None:
        a, b = pair
        assert int(BigNumber.from_int(a) - BigNumber.from_int(b)) == a - b

    def test_multiply(self, pair: tuple[int, int]) -> None:
        a, b = pair
        assert int(BigNumber.from_int(a) * BigNumber.from_int(b)) == a * b

    def test_divide(self, pair: tuple[int, int]) -> None:
        a, b = pair
        if b == 0:
            pytest.skip("zero divisor")
        quotient, remainder = BigNumber.from_int(a).divide(BigNumber.from_int(b))
        assert (int(quotient), int(remainder)) == _truncating_divmod(a, b)

    def test_compare(self, pair: tuple[int, int]) -> None:
        a, b = pair
        big_a, big_b = BigNumber.from_int(a), BigNumber.from_int(b)
        assert (big_a < big_b) == (a < b)
        assert (big_a > big_b) == (a > b)
        assert (big_a <= big_b) == (a <= b)
        assert (big_a >= big_b) == (a >= b)
        assert (big_a == big_b) == (a == b)

    def test_string_matches_int(self, pair: tuple[int, int]) -> None:
        a, _ = pair
        assert BigNumber.from_int(a).to_string() == str(a)


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


class TestAlgebraicProperties:
    """Свойства, не зависящие от оракула"""

    @pytest.mark.parametrize(
        "text, canonical",
        [
            ("0", "0"),
            ("-0", "0"),
            ("+0", "0"),
            ("0000", "0"),
            ("-000120", "-120"),
            ("+7", "7"),
            ("18446744073709551616", "18446744073709551616"),
        ],
    )
    def test_parse_round_trip(self, text: str, canonical: str) -> None:
        """parse(s).to_string() — та же величина в канонической форме"""
        number = BigNumber.parse(text)
        assert number.to_string() == canonical
        assert BigNumber.parse(number.to_string()) == number

    def test_additive_identity_and_inverse(self, pair: tuple[int, int]) -> None:
        a = BigNumber.from_int(pair[0])
        assert a + ZERO == a
        assert ZERO + a == a
        assert a + (-a) == ZERO
        assert (a + (-a)).negative is False

    def test_commutativity(self, pair: tuple[int, int]) -> None:
        a, b = BigNumber.from_int(pair[0]), BigNumber.from_int(pair[1])
        assert a + b == b + a
        assert a * b == b * a

    @pytest.mark.parametrize("a, b, c", _triples())
    def test_associativity(self, a: int, b: int, c: int) -> None:
        x, y, z = BigNumber.from_int(a), BigNumber.from_int(b), BigNumber.from_int(c)
        assert (x + y) + z == x + (y + z)
        assert (x * y) * z == x * (y * z)

    def test_division_identity(self, pair: tuple[int, int]) -> None:
        """q * b + r == a, |r| < |b|, знак r совпадает со знаком a или r == 0"""
        a, b = BigNumber.from_int(pair[0]), BigNumber.from_int(pair[1])
        if b.is_zero():
            pytest.skip("zero divisor")
        quotient, remainder = a.divide(b)
        assert quotient * b + remainder == a
        assert abs(remainder) < abs(b)
        assert remainder.is_zero() or remainder.negative == a.negative

    def test_sign_rules(self, pair: tuple[int, int]) -> None:
        a, b = BigNumber.from_int(pair[0]), BigNumber.from_int(pair[1])
        assert (-a) * (-b) == a * b
        assert (-a) * b == -(a * b)

    def test_ordering_totality(self, pair: tuple[int, int]) -> None:
        """Ровно одно из a < b, a == b, a > b"""
        a, b = BigNumber.from_int(pair[0]), BigNumber.from_int(pair[1])
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1


# =============================================================================
# ОБРАТНЫЙ ЭЛЕМЕНТ
# =============================================================================


class TestModInverseProperty:
    """(a * a^-1) % m == 1 для взаимно простых a, m > 1"""

    @pytest.mark.parametrize("a, m", _pairs(count=25, max_digits=30))
    def test_inverse_when_coprime(self, a: int, m: int) -> None:
        m = abs(m)
        if m <= 1:
            pytest.skip("modulus must be > 1")
        try:
            expected = pow(a, -1, m)
        except ValueError:
            pytest.skip("not coprime")

        inverse = BigNumber.from_int(a).mod_inverse(BigNumber.from_int(m))
        assert int(inverse) == expected
        assert (BigNumber.from_int(a % m) * inverse) % BigNumber.from_int(m) == ONE
