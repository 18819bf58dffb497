import pytest

from algokit.modint import ALT_MOD, DEFAULT_MOD, ModInt


def test_default_and_alternative_moduli_reduce():
    assert ModInt(DEFAULT_MOD + 5) == 5
    assert ModInt(1_000_000_007) == 0
    assert ModInt(ALT_MOD + 5, ALT_MOD) == 5
    assert ModInt(998244353, ALT_MOD) == 0


@pytest.mark.parametrize("x,y", [(5, 7), (DEFAULT_MOD - 1, 3), (10 ** 15, 10 ** 12)])
def test_arithmetic_matches_int(x, y):
    a, b = ModInt(x), ModInt(y)
    assert int(a + b) == (x + y) % DEFAULT_MOD
    assert int(a - b) == (x - y) % DEFAULT_MOD
    assert int(a * b) == (x * y) % DEFAULT_MOD
    assert int(a + y) == int(y + a)
    assert int(x - b) == (x - y) % DEFAULT_MOD


def test_negative_is_normalised():
    assert ModInt(-1) + 1 == 0
    assert ModInt(-1) == DEFAULT_MOD - 1


@pytest.mark.parametrize("x", [1, 2, 12345, DEFAULT_MOD - 2])
def test_inverse(x):
    a = ModInt(x)
    assert a * a.inverse() == 1
    assert (a / a) == 1
    assert (1 / a) == a.inverse()


def test_division_round_trip():
    a, b = ModInt(987654321), ModInt(123456789)
    assert (a / b) * b == a


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ModInt(0).inverse()


@pytest.mark.parametrize("mod", [DEFAULT_MOD, ALT_MOD])
def test_power_matches_builtin(mod):
    a = ModInt(3, mod)
    assert int(a.power(1000)) == pow(3, 1000, mod)
    assert a ** (mod - 1) == 1
    assert a.power(ModInt(5, mod)) == a.power(5)


def test_negative_power_uses_inverse():
    a = ModInt(7)
    assert a.power(-3) * a.power(3) == 1


def test_mixed_moduli_rejected():
    with pytest.raises(ValueError):
        ModInt(1, DEFAULT_MOD) + ModInt(1, ALT_MOD)


def test_comparisons_and_mod():
    assert ModInt(3) < ModInt(5)
    assert ModInt(5) >= 5
    assert int(ModInt(17) % 5) == 17 % 5
    assert not ModInt(0)
    assert ~ModInt(4) == ~4


def test_hash_consistent_with_equality():
    assert hash(ModInt(42)) == hash(42)
    assert {ModInt(42): "x"}[42] == "x"