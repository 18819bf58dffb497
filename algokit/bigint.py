"""Arbitrary-size non-negative integers stored as base 10**9 limbs."""

from __future__ import annotations

import functools
from itertools import zip_longest

BASE = 1_000_000_000
WIDTH = 9
_DECIMAL = frozenset("0123456789")


def _trim(limbs: list[int]) -> list[int]:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


@functools.total_ordering
class BigInt:
    """A non-negative integer kept as little-endian limbs of nine decimal digits."""

    __slots__ = ("_limbs",)

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            self._limbs = list(value._limbs)
        elif isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt holds non-negative values only")
            limbs: list[int] = []
            while value:
                value, rem = divmod(value, BASE)
                limbs.append(rem)
            self._limbs = limbs
        else:
            if not set(value) <= _DECIMAL:
                raise ValueError(f"not a decimal number: {value!r}")
            self._limbs = _trim(
                [
                    int(value[max(0, end - WIDTH):end])
                    for end in range(len(value), 0, -WIDTH)
                ]
            )

    @classmethod
    def _from_limbs(cls, limbs: list[int]) -> BigInt:
        result = cls()
        result._limbs = _trim(limbs)
        return result

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return not self._limbs

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __add__(self, other: object) -> BigInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        result: list[int] = []
        carry = 0
        for x, y in zip_longest(self._limbs, o._limbs, fillvalue=0):
            carry, digit = divmod(x + y + carry, BASE)
            result.append(digit)
        if carry:
            result.append(carry)
        return self._from_limbs(result)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self < o:
            raise ValueError("underflow: result would be negative")
        result: list[int] = []
        borrow = 0
        for x, y in zip_longest(self._limbs, o._limbs, fillvalue=0):
            digit = x - y - borrow
            borrow = 1 if digit < 0 else 0
            result.append(digit + BASE * borrow)
        return self._from_limbs(result)

    def __rsub__(self, other: object) -> BigInt:
        o = self._coerce(other)
        return NotImplemented if o is None else o - self

    def __mul__(self, other: object) -> BigInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b = self._limbs, o._limbs
        if not a or not b:
            return BigInt()
        result = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            if not x:
                continue
            carry = 0
            for j, y in enumerate(b):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)
            k = i + len(b)
            while carry:
                carry, result[k] = divmod(result[k] + carry, BASE)
                k += 1
        return self._from_limbs(result)

    __rmul__ = __mul__

    def _divmod_small(self, divisor: object) -> tuple[list[int], int] | None:
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return None
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        if divisor < 0:
            raise ValueError("divisor must be positive")
        quotient = [0] * len(self._limbs)
        rem = 0
        for i in reversed(range(len(self._limbs))):
            quotient[i], rem = divmod(self._limbs[i] + rem * BASE, divisor)
        return quotient, rem

    def __floordiv__(self, divisor: object) -> BigInt:
        result = self._divmod_small(divisor)
        return NotImplemented if result is None else self._from_limbs(result[0])

    def __mod__(self, divisor: object) -> BigInt:
        result = self._divmod_small(divisor)
        return NotImplemented if result is None else BigInt(result[1])

    def __lt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b = self._limbs, o._limbs
        return (len(a), a[::-1]) < (len(b), b[::-1])

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._limbs == o._limbs

    def __hash__(self) -> int:
        return hash(int(self))

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return value

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        head = str(self._limbs[-1])
        return head + "".join(f"{limb:0{WIDTH}d}" for limb in reversed(self._limbs[:-1]))

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"