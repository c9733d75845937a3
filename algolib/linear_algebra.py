"""Gauss-Jordan elimination for square systems and dense matrices."""

from __future__ import annotations

from typing import Any, Callable


def _exact_zero(x: Any) -> bool:
    return x == 0


class Gauss:
    """System of n equations sum(a[i][j] * x[j]) + a[i][n] == 0 in n unknowns."""

    def __init__(self, n: int = 0, is_zero: Callable[[Any], bool] | None = None) -> None:
        self.mat: list[list[Any]] = [[0] * (n + 1) for _ in range(n)]
        self.is_zero = is_zero or _exact_zero

    def __getitem__(self, i: int) -> list[Any]:
        return self.mat[i]

    def __len__(self) -> int:
        return len(self.mat)

    def transform(self) -> None:
        """Reduce the matrix so that every pivot sits on the diagonal."""
        mat, is_zero = self.mat, self.is_zero
        n = len(mat)
        used = [False] * n
        for col in range(n):
            row = next((r for r in range(n) if not used[r] and not is_zero(mat[r][col])), None)
            if row is None:
                continue
            mat[row], mat[col] = mat[col], mat[row]
            used[row] = used[col]
            used[col] = True
            pivot = mat[col]
            for i in range(n):
                if i == col:
                    continue
                coeff = mat[i][col] / pivot[col]
                if is_zero(coeff):
                    continue
                mat[i] = [a - p * coeff for a, p in zip(mat[i], pivot)]

    def solutions(self) -> list[Any]:
        """One solution of the system; unknowns without a pivot are left at 0."""
        self.transform()
        result: list[Any] = [0] * len(self.mat)
        for i, row in enumerate(self.mat):
            if not self.is_zero(row[i]):
                result[i] = -row[-1] / row[i]
        return result


class Matrix:
    """Dense matrix stored as a list of rows."""

    def __init__(self, rows: list[list[Any]] | None = None) -> None:
        self.rows = [list(row) for row in (rows or [])]

    @classmethod
    def zeros(cls, n: int, m: int | None = None) -> Matrix:
        """An n by m (default n by n) zero matrix."""
        return cls([[0] * (n if m is None else m) for _ in range(n)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        result = cls.zeros(n)
        for i in range(n):
            result.rows[i][i] = 1
        return result

    def __getitem__(self, i: int) -> list[Any]:
        return self.rows[i]

    def __len__(self) -> int:
        return len(self.rows)

    def shape(self) -> tuple[int, int]:
        if not self.rows:
            return 0, 0
        return len(self.rows), len(self.rows[0])

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        n1, n2 = self.shape()
        m1, m2 = other.shape()
        if n2 != m1:
            raise ValueError(f"cannot multiply {n1}x{n2} by {m1}x{m2}")
        columns = list(zip(*other.rows)) if other.rows else []
        return Matrix([[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self.rows])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def power(self, deg: int) -> Matrix:
        """This square matrix raised to a non-negative power."""
        if deg < 0:
            raise ValueError(f"degree must be non-negative, got {deg}")
        n, m = self.shape()
        if n != m:
            raise ValueError("only square matrices can be raised to a power")
        result = Matrix.identity(n)
        base = self
        while deg:
            if deg & 1:
                result = result * base
            base = base * base
            deg >>= 1
        return result