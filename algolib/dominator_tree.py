"""Immediate dominators of a directed graph (Lengauer-Tarjan)."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _LinkEval:
    """Forest with path-compressed minimum queries towards the root."""

    def __init__(self, n: int, initial: Any) -> None:
        self._parent = list(range(n))
        self._value = [initial] * n

    def set_value(self, v: int, value: Any) -> None:
        self._value[v] = value

    def _root(self, v: int) -> int:
        parent, value = self._parent, self._value
        path = []
        while parent[v] != v:
            path.append(v)
            v = parent[v]
        for x in reversed(path):
            value[x] = min(value[x], value[parent[x]])
            parent[x] = v
        return v

    def eval(self, v: int) -> Any:
        self._root(v)
        return self._value[v]

    def link(self, v: int, u: int) -> None:
        self._parent[self._root(v)] = self._root(u)


def _postorder(start: int, children: list[list[int]]) -> Iterator[int]:
    stack = [(start, iter(children[start]))]
    while stack:
        v, rest = stack[-1]
        child = next(rest, None)
        if child is None:
            stack.pop()
            yield v
        else:
            stack.append((child, iter(children[child])))


class DominatorTree:
    """Directed graph whose immediate dominators can be computed from a start vertex."""

    def __init__(self, n: int = 0) -> None:
        self._n = n
        self._graph: list[list[int]] = [[] for _ in range(n)]

    def add(self, from_: int, to: int) -> None:
        """Add the directed edge from_ -> to."""
        if not (0 <= from_ < self._n and 0 <= to < self._n):
            raise IndexError(f"edge ({from_}, {to}) is out of range")
        self._graph[from_].append(to)

    def solve(self, s: int) -> list[int]:
        """Immediate dominator of each vertex; s maps to itself, unreachable vertices to -1."""
        n = self._n
        if not 0 <= s < n:
            raise IndexError(f"vertex {s} is out of range")
        graph = self._graph
        tin = [-1] * n
        sdom = [-1] * n
        order: list[int] = []
        children: list[list[int]] = [[] for _ in range(n)]
        incoming: list[list[int]] = [[] for _ in range(n)]

        def visit(v: int) -> None:
            tin[v] = len(order)
            order.append(v)

        def classify(v: int, u: int) -> None:
            if tin[v] < tin[u]:
                sdom[u] = tin[v]
            elif u != v:
                incoming[u].append(v)

        visit(s)
        stack = [[s, 0]]
        while stack:
            frame = stack[-1]
            v, i = frame
            if i == len(graph[v]):
                stack.pop()
                if stack:
                    parent = stack[-1]
                    classify(parent[0], graph[parent[0]][parent[1]])
                    parent[1] += 1
                continue
            u = graph[v][i]
            if tin[u] == -1:
                children[v].append(u)
                visit(u)
                stack.append([u, 0])
            else:
                classify(v, u)
                frame[1] += 1

        for kids in children:
            kids.reverse()

        dsu = _LinkEval(n, 0)
        to_process: list[list[int]] = [[] for _ in range(n)]
        for v in _postorder(s, children):
            for u in incoming[v]:
                sdom[v] = min(sdom[v], dsu.eval(u))
            if v != s:
                to_process[order[sdom[v]]].append(v)
            dsu.set_value(v, sdom[v])
            for u in children[v]:
                dsu.link(u, v)

        linker = _LinkEval(n, (0, 0))
        dom = [-1] * n
        deferred: list[tuple[int, int]] = []
        for v in _postorder(s, children):
            for u in to_process[v]:
                best = linker.eval(u)[1]
                if best == u:
                    dom[u] = order[sdom[u]]
                else:
                    deferred.append((u, best))
            linker.set_value(v, (sdom[v], v))
            for u in children[v]:
                linker.link(u, v)

        for v, u in reversed(deferred):
            dom[v] = dom[u]
        dom[s] = s
        return dom