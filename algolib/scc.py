"""Strongly connected components of a directed graph."""

from __future__ import annotations


class StronglyConnectedComponents:
    """Directed graph whose components are numbered in topological order."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._reverse: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self._n

    def add(self, from_: int, to: int) -> None:
        """Add the directed edge from_ -> to."""
        if not (0 <= from_ < self._n and 0 <= to < self._n):
            raise IndexError(f"edge ({from_}, {to}) is out of range")
        self._graph[from_].append(to)
        self._reverse[to].append(from_)

    def solve(self) -> list[int]:
        """Component index of each vertex (Tarjan); reachable components never come earlier."""
        n = self._n
        index = [-1] * n
        low = [0] * n
        comp = [-1] * n
        stack: list[int] = []
        counter = 0
        count = 0

        for start in range(n):
            if index[start] != -1:
                continue
            index[start] = low[start] = counter
            counter += 1
            stack.append(start)
            work = [(start, iter(self._graph[start]))]
            while work:
                v, edges = work[-1]
                for u in edges:
                    if index[u] == -1:
                        index[u] = low[u] = counter
                        counter += 1
                        stack.append(u)
                        work.append((u, iter(self._graph[u])))
                        break
                    if comp[u] == -1:
                        low[v] = min(low[v], index[u])
                else:
                    work.pop()
                    if low[v] == index[v]:
                        while True:
                            w = stack.pop()
                            comp[w] = count
                            if w == v:
                                break
                        count += 1
                    if work:
                        parent = work[-1][0]
                        low[parent] = min(low[parent], low[v])

        return [count - 1 - c for c in comp]

    def kosaraju(self) -> list[int]:
        """Component index of each vertex using two passes (Kosaraju)."""
        n = self._n
        used = [False] * n
        finished: list[int] = []
        for start in range(n):
            if used[start]:
                continue
            used[start] = True
            work = [(start, iter(self._graph[start]))]
            while work:
                v, edges = work[-1]
                for u in edges:
                    if not used[u]:
                        used[u] = True
                        work.append((u, iter(self._graph[u])))
                        break
                else:
                    work.pop()
                    finished.append(v)

        comp = [-1] * n
        count = 0
        for v in reversed(finished):
            if comp[v] != -1:
                continue
            comp[v] = count
            pending = [v]
            while pending:
                w = pending.pop()
                for u in self._reverse[w]:
                    if comp[u] == -1:
                        comp[u] = count
                        pending.append(u)
            count += 1
        return comp