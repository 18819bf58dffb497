import itertools
import math

import pytest

from algokit import mathutils as mu


@pytest.mark.parametrize("n", [1, 2, 9, 12, 30, 97, 360])
def test_phi_gauss_identity(n):
    assert sum(mu.phi(d) for d in mu.get_divisors(n)) == n


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (0, 5), (100, 75)])
def test_gcd_and_lcm_match_stdlib(a, b):
    assert mu.gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert mu.lcm(a, b) == math.lcm(a, b)


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1001, 2 ** 10, 999983 * 3])
def test_prime_factorization_product(n):
    factors = mu.prime_factorization(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(mu.is_prime(p) for p in factors)


def test_prime_factorization_of_one_is_empty():
    assert mu.prime_factorization(1) == []


@pytest.mark.parametrize("n,r", [(5, 2), (10, 3), (20, 10), (7, 7), (30, 0)])
def test_ncr_matches_comb(n, r):
    assert mu.ncr(n, r) == math.comb(n, r)


def test_ncr_edge_cases():
    assert mu.ncr(3, 5) == 0
    assert mu.ncr(0, 0) == 0


@pytest.mark.parametrize("n,r", [(5, 2), (10, 3), (6, 6), (4, 0)])
def test_npr_matches_perm(n, r):
    assert mu.npr(n, r) == math.perm(n, r)
    assert mu.npr(r, n + 1) == 0


def test_big_mod():
    x = 123456789012345678901234567890
    assert mu.big_mod(str(x), 1_000_000_007) == x % 1_000_000_007


def test_bin_pow_and_bin_mul():
    assert mu.bin_pow(3, 13) == 3 ** 13
    assert mu.bin_pow(7, 100, 1_000_000_007) == pow(7, 100, 1_000_000_007)
    assert mu.bin_mul(10 ** 12, 10 ** 11, 1_000_000_007) == (10 ** 23) % 1_000_000_007
    with pytest.raises(ValueError):
        mu.bin_pow(2, -1)


@pytest.mark.parametrize("n", range(2, 60))
def test_is_prime_agrees_with_factorization(n):
    assert mu.is_prime(n) == (len(mu.prime_factorization(n)) == 1)


def test_is_prime_rejects_small():
    assert not mu.is_prime(1)
    assert not mu.is_prime(0)


@pytest.mark.parametrize("n", [1, 2, 12, 16, 36, 97, 100])
def test_divisor_functions_agree(n):
    divisors = mu.get_divisors(n)
    assert set(divisors) == {d for d in range(1, n + 1) if n % d == 0}
    assert len(divisors) == len(set(divisors))
    assert mu.number_of_divisors(n) == len(divisors)
    assert mu.sum_of_divisors(n) == sum(divisors)


@pytest.mark.parametrize("num", [1, 5, 10, 37])
def test_divisor_sum_is_cumulative(num):
    assert mu.divisor_sum(num) == sum(mu.sum_of_divisors(k) for k in range(1, num + 1))


def test_permutations_lexicographic():
    items = [3, 1, 2]
    expected = [list(p) for p in itertools.permutations(sorted(items))]
    assert list(mu.permutations(items)) == expected


def test_permutations_of_string_with_duplicates():
    result = list(mu.permutations("aab"))
    assert result == sorted(set("".join(p) for p in itertools.permutations("aab")))
    assert len(result) == 3


def test_summation():
    assert mu.summation(10) == sum(range(11))
    assert mu.summation(9, 4) == sum(range(4, 10))
    assert mu.summation(4, 9) == mu.summation(9, 4)


@pytest.mark.parametrize("a,b,c", [(1, 20, 3), (5, 50, 7), (10, 10, 5), (0, 12, 4)])
def test_divisible_counts_and_sums(a, b, c):
    hits = [x for x in range(max(a, 1), b + 1) if x % c == 0]
    assert mu.how_many_divisible(max(a, 1), b, c) == len(hits)
    assert mu.summation_of_divisible(max(a, 1), b, c) == sum(hits)


def test_logs_and_powers():
    exponent = 10
    assert mu.get_log(2 ** exponent, 2) == pytest.approx(exponent)
    assert mu.is_power(2, 2)
    assert not mu.is_power(6, 2)


def test_distance_and_slope():
    assert mu.dist(0, 0, 3, 4) == pytest.approx(5.0)
    assert mu.slope(1, 1, 1, 9) == 0
    assert mu.slope(0, 0, 2, 4) == mu.slope(1, 2, 3, 6)


def test_triangle_and_line():
    assert mu.is_triangle(3, 4, 5)
    assert not mu.is_triangle(1, 2, 3)
    assert not mu.is_triangle(0, 1, 1)
    assert mu.is_same_line(0, 0, 1, 1, 5, 5)
    assert not mu.is_same_line(0, 0, 1, 1, 5, 6)


@pytest.mark.parametrize("k", [0, 1, 7, 12345])
def test_perfect_square(k):
    assert mu.is_perfect_square(k * k)
    assert k == 0 or not mu.is_perfect_square(k * k + 1)
    assert not mu.is_perfect_square(-4)


@pytest.mark.parametrize("n,p", [(10, 2), (25, 5), (100, 3), (4, 7)])
def test_legendre(n, p):
    e = mu.fact_n_prime_powers(n, p)
    assert math.factorial(n) % p ** e == 0
    assert math.factorial(n) % p ** (e + 1) != 0


@pytest.mark.parametrize("a,b", [(30, 12), (17, 5), (7, 0), (240, 46)])
def test_extended_gcd(a, b):
    g, x, y = mu.extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,b,c", [(6, 9, 15), (-4, 6, 10), (3, -5, 7)])
def test_find_any_solution(a, b, c):
    x, y, g = mu.find_any_solution(a, b, c)
    assert a * x + b * y == c
    assert g == math.gcd(a, b)


def test_find_any_solution_impossible():
    assert mu.find_any_solution(4, 6, 5) is None


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 987654321])
def test_base_conversion_round_trip(n):
    assert mu.decimal_to_any_base(n, 16) == format(n, "X")
    assert mu.decimal_to_any_base(n, 2) == format(n, "b")
    for base in (2, 7, 16, 36):
        assert mu.any_base_to_decimal(mu.decimal_to_any_base(n, base), base) == n


def test_base_conversion_errors():
    with pytest.raises(ValueError):
        mu.decimal_to_any_base(-1, 10)
    with pytest.raises(ValueError):
        mu.decimal_to_any_base(10, 1)