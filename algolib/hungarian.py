"""Minimum cost perfect assignment with the Hungarian algorithm."""

from __future__ import annotations

import math


class Hungarian:
    """Square cost matrix whose minimum cost assignment can be found in O(n^3)."""

    def __init__(self, matrix: list[list[float]] | None = None) -> None:
        rows = [list(row) for row in (matrix or [])]
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("cost matrix must be square")
        self._mat = rows
        n = len(rows)
        self.row_match = [-1] * n
        self.col_match = [-1] * n

    @classmethod
    def filled(cls, n: int, value: float = 0) -> Hungarian:
        """An n by n matrix with every cost equal to value."""
        return cls([[value] * n for _ in range(n)])

    def __getitem__(self, i: int) -> list[float]:
        return self._mat[i]

    def __len__(self) -> int:
        return len(self._mat)

    def min_cost(self) -> float:
        """Minimum total cost; row_match and col_match hold the assignment afterwards."""
        n, mat = len(self._mat), self._mat
        row_match = [-1] * n
        col_match = [-1] * n
        add_to_row = [0] * n
        add_to_col = [0] * n

        for first_row in range(n):
            used_col = [False] * n
            minimum: list[tuple[float, int]] = [(math.inf, -1)] * n
            parent_row = [-1] * n
            rows = [first_row]

            while True:
                row = rows[-1]
                col = -1
                for i in range(n):
                    if used_col[i]:
                        continue
                    candidate = (mat[row][i] + add_to_row[row] + add_to_col[i], row)
                    if candidate < minimum[i]:
                        minimum[i] = candidate
                    if col == -1 or minimum[i] < minimum[col]:
                        col = i
                if col == -1:
                    raise RuntimeError("no free column left")

                minimum_value, row = minimum[col]
                for i in range(n):
                    if used_col[i]:
                        add_to_col[i] += minimum_value
                    else:
                        minimum[i] = (minimum[i][0] - minimum_value, minimum[i][1])
                for r in rows:
                    add_to_row[r] -= minimum_value

                if col_match[col] == -1:
                    while row != -1:
                        col_match[col] = row
                        col, row_match[row] = row_match[row], col
                        row = parent_row[row]
                    break

                rows.append(col_match[col])
                parent_row[col_match[col]] = row
                used_col[col] = True

        self.row_match = row_match
        self.col_match = col_match
        return -sum(add_to_row) - sum(add_to_col)