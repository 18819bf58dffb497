import random

import pytest

from algokit.bigint import BigInt


@pytest.fixture
def pairs():
    rng = random.Random(7)
    return [(rng.getrandbits(rng.randint(1, 300)), rng.getrandbits(rng.randint(1, 300))) for _ in range(40)]


def test_zero_prints_as_zero():
    assert str(BigInt()) == "0"
    assert BigInt("000").is_zero()


def test_string_round_trip():
    text = "123456789012345678901234567890"
    assert str(BigInt(text)) == text


def test_leading_zeros_dropped():
    assert str(BigInt("0000123")) == str(123)


def test_int_round_trip(pairs):
    for a, _ in pairs:
        assert int(BigInt(a)) == a
        assert str(BigInt(a)) == str(a)


def test_addition_matches_int(pairs):
    for a, b in pairs:
        assert str(BigInt(a) + BigInt(b)) == str(a + b)


def test_addition_carries_across_limbs():
    assert str(BigInt(10**9 - 1) + 1) == str(10**9)


def test_subtraction_matches_int(pairs):
    for a, b in pairs:
        big, small = max(a, b), min(a, b)
        assert str(BigInt(big) - BigInt(small)) == str(big - small)


def test_subtraction_underflow_raises():
    with pytest.raises(ValueError):
        BigInt(3) - BigInt(5)


def test_multiplication_matches_int(pairs):
    for a, b in pairs:
        assert str(BigInt(a) * BigInt(b)) == str(a * b)


def test_multiplication_by_zero():
    assert (BigInt("987654321987654321") * BigInt()).is_zero()


def test_division_and_mod_match_int(pairs):
    for a, b in pairs:
        d = b % 1_000_000 + 1
        assert int(BigInt(a) // d) == a // d
        assert int(BigInt(a) % d) == a % d


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        BigInt(10) // 0


def test_ordering_matches_int(pairs):
    for a, b in pairs:
        assert (BigInt(a) < BigInt(b)) == (a < b)
        assert (BigInt(a) == BigInt(b)) == (a == b)
        assert (BigInt(a) >= BigInt(b)) == (a >= b)


def test_mixed_with_int():
    assert BigInt(5) + 7 == BigInt(12)
    assert 3 * BigInt(4) == 12


def test_invalid_inputs():
    with pytest.raises(ValueError):
        BigInt(-1)
    with pytest.raises(ValueError):
        BigInt("12a")
    with pytest.raises(TypeError):
        BigInt(1.5)