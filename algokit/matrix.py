"""Square matrices modulo 1e9+7 and Fibonacci-style terms by repeated squaring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


class Matrix:
    """A square matrix whose products are reduced modulo MOD."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Sequence[int]]) -> None:
        self.rows = [list(row) for row in rows]
        n = len(self.rows)
        if any(len(row) != n for row in self.rows):
            raise ValueError("matrix must be square")

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> list[int]:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError("matrices have different sizes")
        columns = list(zip(*other.rows))
        return Matrix(
            [
                [sum((x % MOD) * (y % MOD) for x, y in zip(row, col)) % MOD for col in columns]
                for row in self.rows
            ]
        )


def transition() -> Matrix:
    """The Fibonacci transition matrix [[0, 1], [1, 1]]."""
    return Matrix([[0, 1], [1, 1]])


def identity(n: int) -> Matrix:
    """The n by n identity matrix."""
    return Matrix([[int(i == j) for j in range(n)] for i in range(n)])


def zero(n: int) -> Matrix:
    """The n by n zero matrix."""
    return Matrix([[0] * n for _ in range(n)])


def power(matrix: Matrix, e: int) -> Matrix:
    """Return matrix multiplied by the e-th power of the transition matrix."""
    if e < 0:
        raise ValueError("exponent must be non-negative")
    result = matrix
    trans = transition()
    while e:
        if e & 1:
            result = result * trans
        trans = trans * trans
        e >>= 1
    return result


def kth_term(k: int, n: int) -> int:
    """The k-th term of the recurrence driven by the n by n transition matrix."""
    if n <= 0:
        return 0
    if n <= 1:
        return 1
    return power(identity(n), k + 1)[0][0]