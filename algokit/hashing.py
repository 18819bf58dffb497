"""Double polynomial rolling hash over strings or integer sequences."""

from __future__ import annotations

from collections.abc import Sequence

P1, P2 = 313, 1013
M1, M2 = 1_000_000_007, 1_000_000_009


class StringHash:
    """Prefix hashes with 1-based inclusive positions."""

    def __init__(self, data: str | Sequence[int]) -> None:
        codes = [ord(c) for c in data] if isinstance(data, str) else list(data)
        self._n = len(codes)
        self._pow1 = [1]
        self._pow2 = [1]
        self._h1 = [1]
        self._h2 = [1]
        for code in codes:
            self._pow1.append(self._pow1[-1] * P1 % M1)
            self._pow2.append(self._pow2[-1] * P2 % M2)
            self._h1.append((self._h1[-1] * P1 + code) % M1)
            self._h2.append((self._h2[-1] * P2 + code) % M2)

    def __len__(self) -> int:
        return self._n

    def _check(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}] outside 1..{self._n}")

    def sub(self, l: int, r: int) -> tuple[int, int]:
        """Hash pair of the part at positions l..r."""
        self._check(l, r)
        length = r - l + 1
        first = (self._h1[r] - self._h1[l - 1] * self._pow1[length]) % M1
        second = (self._h2[r] - self._h2[l - 1] * self._pow2[length]) % M2
        return first, second

    def merge_hash(self, l1: int, r1: int, l2: int, r2: int) -> tuple[int, int]:
        """Hash of part l1..r1 followed by part l2..r2."""
        a = self.sub(l1, r1)
        b = self.sub(l2, r2)
        length = r2 - l2 + 1
        return (
            (a[0] * self._pow1[length] + b[0]) % M1,
            (a[1] * self._pow2[length] + b[1]) % M2,
        )

    def at(self, idx: int) -> tuple[int, int]:
        """Hash of the single element at position idx."""
        return self.sub(idx, idx)

    def equal(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Whether two parts hash the same."""
        return self.sub(l1, r1) == self.sub(l2, r2)