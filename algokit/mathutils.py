"""Number theory, counting and small geometry helpers."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Any

EPS = 1e-9
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _small_divisors(n: int) -> Iterator[int]:
    """Yield divisors i of n with i * i < n, in increasing order."""
    i = 1
    while i * i < n:
        if n % i == 0:
            yield i
        i += 1


def _is_square(n: int) -> bool:
    return n >= 0 and math.isqrt(n) ** 2 == n


def phi(n: int) -> int:
    """Euler's totient: how many of 1..n are coprime with n."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a // gcd(a, b) * b


def prime_factorization(n: int) -> list[int]:
    """Prime factors of n with multiplicity, in increasing order."""
    factors: list[int] = []
    while n % 2 == 0 and n != 0:
        factors.append(2)
        n //= 2
    i = 3
    while n > 0 and i <= math.isqrt(n):
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2
    if n > 2:
        factors.append(n)
    return factors


def ncr(n: int, r: int) -> int:
    """Number of combinations; 0 when r > n or n < 1."""
    if r > n:
        return 0
    if n - r < r:
        r = n - r
    if n < 1:
        return 0
    p = k = 1
    while r > 0:
        p *= n
        k *= r
        g = math.gcd(p, k)
        p //= g
        k //= g
        n -= 1
        r -= 1
    return p


def npr(n: int, r: int) -> int:
    """Number of ordered arrangements of r out of n; 0 when r > n."""
    if r > n:
        return 0
    result = 1
    while r > 0:
        result *= n
        n -= 1
        r -= 1
    return result


def big_mod(digits: str, mod: int) -> int:
    """Remainder of a decimal number given as a string."""
    result = 0
    for ch in digits:
        result = (result * 10 + (ord(ch) - ord("0"))) % mod
    return result


def bin_pow(b: int, e: int, mod: int | None = None) -> int:
    """b to the power e, optionally reduced modulo mod."""
    if e < 0:
        raise ValueError("exponent must be non-negative")
    if mod is None:
        result = 1
        while e:
            if e & 1:
                result *= b
            e >>= 1
            b *= b
        return result
    return pow(b, e, mod)


def bin_mul(b: int, e: int, mod: int) -> int:
    """b times e modulo mod, by repeated doubling."""
    if e < 0:
        raise ValueError("multiplier must be non-negative")
    b %= mod
    result = 0
    while e:
        if e & 1:
            result = (result + b) % mod
        e >>= 1
        b = (b + b) % mod
    return result % mod


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2 or (n % 2 == 0 and n != 2):
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def number_of_divisors(n: int) -> int:
    """Count of the divisors of n."""
    return 2 * sum(1 for _ in _small_divisors(n)) + int(_is_square(n))


def sum_of_divisors(n: int) -> int:
    """Sum of the divisors of n."""
    total = sum(i + n // i for i in _small_divisors(n))
    return total + (math.isqrt(n) if _is_square(n) else 0)


def divisor_sum(num: int) -> int:
    """Sum of sum_of_divisors(k) over k in 1..num."""
    total = 0
    i = 1
    while i * i <= num:
        q = num // i
        total += i * (q - i + 1)
        total += q * (q + 1) // 2 - i * (i + 1) // 2
        i += 1
    return total


def get_divisors(n: int) -> list[int]:
    """Divisors of n, as pairs (i, n // i) followed by the square root if any."""
    divisors: list[int] = []
    for i in _small_divisors(n):
        divisors.extend((i, n // i))
    if _is_square(n):
        divisors.append(math.isqrt(n))
    return divisors


def permutations(items: Sequence[Any] | str) -> Iterator[Any]:
    """Yield the distinct permutations of items in lexicographic order.

    Strings yield strings; other sequences yield lists.
    """
    is_text = isinstance(items, str)
    current = sorted(items)
    while True:
        yield "".join(current) if is_text else list(current)
        i = len(current) - 2
        while i >= 0 and current[i] >= current[i + 1]:
            i -= 1
        if i < 0:
            return
        j = len(current) - 1
        while current[j] <= current[i]:
            j -= 1
        current[i], current[j] = current[j], current[i]
        current[i + 1:] = reversed(current[i + 1:])


def summation(r: int, l: int = 0) -> int:
    """Sum of the integers from l to r (or 0..r)."""
    if l > r:
        l, r = r, l
    return r * (r + 1) // 2 - l * (l - 1) // 2


def how_many_divisible(a: int, b: int, c: int) -> int:
    """How many numbers in [a, b] are divisible by c."""
    return _tdiv(b, c) - _tdiv(a - 1, c)


def summation_of_divisible(a: int, b: int, c: int) -> int:
    """Sum of the numbers in [a, b] divisible by c."""
    right = summation(_tdiv(b, c))
    left = summation(_tdiv(a - 1, c))
    return (right - left) * c


def get_log(a: float, b: float) -> float:
    """Logarithm of a in base b."""
    return math.log(a) / math.log(b)


def is_power(number: int, base: int = 2) -> bool:
    """Whether number is an integral power of base (floating-point check)."""
    value = get_log(number, base)
    return value - int(value) <= EPS


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def is_triangle(a: int, b: int, c: int) -> bool:
    """Whether three side lengths form a non-degenerate triangle."""
    return a + b > c and a + c > b and b + c > a and bool(a and b and c)


def slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Slope of the line through two points; 0 for a vertical line."""
    if x2 == x1:
        return 0
    return (y2 - y1) / (x2 - x1)


def is_same_line(x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> bool:
    """Whether three points are collinear."""
    return (y2 - y1) * (x3 - x1) == (y3 - y1) * (x2 - x1)


def is_perfect_square(n: int) -> bool:
    """Whether n is a perfect square."""
    return _is_square(n)


def fact_n_prime_powers(n: int, p: int) -> int:
    """Exponent of prime p in n! (Legendre's formula)."""
    powers = 0
    i = p
    while i <= n:
        powers += n // i
        i *= p
    return powers


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a * x + b * y == g == gcd(a, b)."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = extended_gcd(b, a % b)
    return g, y1, x1 - y1 * (a // b)


def find_any_solution(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """Solve a * x + b * y == c; return (x, y, g) or None if impossible."""
    g, x0, y0 = extended_gcd(abs(a), abs(b))
    if c % g:
        return None
    x0 *= c // g
    y0 *= c // g
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0, g


def decimal_to_any_base(decimal: int, base: int) -> str:
    """Write a non-negative integer in a base from 2 to 36."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError("base must be between 2 and 36")
    if decimal < 0:
        raise ValueError("number must be non-negative")
    if decimal == 0:
        return "0"
    digits: list[str] = []
    while decimal:
        decimal, rem = divmod(decimal, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def any_base_to_decimal(text: str, base: int) -> int:
    """Read a number written with digits 0-9 and A-Z in the given base."""

    def value(ch: str) -> int:
        return ord(ch) - ord("0") if "0" <= ch <= "9" else ord(ch) - ord("A") + 10

    num = 0
    for ch in text:
        num = num * base + value(ch)
    return num