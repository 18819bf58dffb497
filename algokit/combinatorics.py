"""Factorials and their modular inverses for counting."""

from __future__ import annotations

from itertools import accumulate

DEFAULT_MOD = 1_000_000_007


def fast_power(b: int, e: int, mod: int) -> int:
    """b to the power e modulo mod."""
    if e < 0:
        raise ValueError("exponent must be non-negative")
    return pow(b, e, mod) % mod


def inverse(n: int, mod: int) -> int:
    """Modular inverse of n for a prime modulus."""
    return fast_power(n, mod - 2, mod) % mod


class PowerInverse:
    """Precomputed factorials and inverse factorials for fixed n and r."""

    def __init__(self, n: int, r: int, mod: int = DEFAULT_MOD) -> None:
        if n < 0 or r < 0:
            raise ValueError("n and r must be non-negative")
        self.n = n
        self.r = r
        self.mod = mod
        self.fact = list(
            accumulate(range(1, n + 1), lambda acc, i: acc * i % mod, initial=1)
        )
        self.inv = [1] + [inverse(f, mod) for f in self.fact[1:]]

    def ncr(self) -> int:
        """n choose r modulo mod; 0 when r > n."""
        if self.r > self.n:
            return 0
        m = self.mod
        return self.fact[self.n] * self.inv[self.r] % m * self.inv[self.n - self.r] % m

    def npr(self) -> int:
        """n! divided by r! modulo mod; 0 when r > n."""
        if self.r > self.n:
            return 0
        return self.fact[self.n] * self.inv[self.r] % self.mod