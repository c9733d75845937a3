"""2-satisfiability solver built on strongly connected components."""

from __future__ import annotations

from algolib.scc import StronglyConnectedComponents


class TwoSat:
    """Boolean variables constrained by unit clauses and two-literal disjunctions."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self._graph = StronglyConnectedComponents(2 * n)

    def __len__(self) -> int:
        return self._n

    def _literal(self, v: int, value: bool) -> int:
        if not 0 <= v < self._n:
            raise IndexError(f"variable {v} is out of range")
        return 2 * v + int(bool(value))

    def add(self, v: int, value_v: bool, u: int | None = None, value_u: bool | None = None) -> None:
        """Require value(v) == value_v, or (value(v) == value_v) or (value(u) == value_u)."""
        a = self._literal(v, value_v)
        if u is None:
            if value_u is not None:
                raise ValueError("value_u given without u")
            self._graph.add(a ^ 1, a)
            return
        if value_u is None:
            raise ValueError("u given without value_u")
        b = self._literal(u, value_u)
        self._graph.add(a ^ 1, b)
        self._graph.add(b ^ 1, a)

    def solve(self) -> list[bool]:
        """An assignment satisfying every clause, or an empty list if none exists."""
        comp = self._graph.solve()
        solution = []
        for i in range(self._n):
            if comp[2 * i] == comp[2 * i + 1]:
                return []
            solution.append(comp[2 * i] < comp[2 * i + 1])
        return solution

    def any(self) -> bool:
        """Whether a satisfying assignment exists."""
        comp = self._graph.solve()
        return all(comp[2 * i] != comp[2 * i + 1] for i in range(self._n))