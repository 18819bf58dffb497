"""Integers modulo a fixed modulus."""

from __future__ import annotations

import functools

DEFAULT_MOD = 1_000_000_007
ALT_MOD = 998_244_353


@functools.total_ordering
class ModInt:
    """An integer reduced modulo ``mod``."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int | ModInt = 0, mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        if isinstance(value, ModInt):
            value = value.value
        self.value = value % mod
        self.mod = mod

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _new(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self._new(self.value + v)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self._new(self.value - v)

    def __rsub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self._new(v - self.value)

    def __mul__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self._new(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self * self._new(v).inverse()

    def __rtruediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        return NotImplemented if v is None else self._new(v) * self.inverse()

    def __mod__(self, other: object) -> ModInt:
        if isinstance(other, ModInt):
            return self._new(self.value % other.value)
        if isinstance(other, int):
            return self._new(self.value % other)
        return NotImplemented

    def __pow__(self, n: int | ModInt) -> ModInt:
        return self.power(n)

    def __neg__(self) -> ModInt:
        return self._new(-self.value)

    def __invert__(self) -> int:
        return ~self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return self.value < other.value
        if isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"

    def __str__(self) -> str:
        return str(self.value)

    def inverse(self) -> ModInt:
        """Multiplicative inverse by Fermat's little theorem (prime modulus)."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._new(pow(self.value, self.mod - 2, self.mod))

    def power(self, n: int | ModInt) -> ModInt:
        """Raise to the power n; negative n uses the inverse."""
        e = n.value if isinstance(n, ModInt) else int(n)
        if e < 0:
            return self.inverse().power(-e)
        return self._new(pow(self.value, e, self.mod))