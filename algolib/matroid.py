"""Matroid intersection, plain and weighted, with a few ready-made matroids.

A matroid object offers add(item), which inserts an item keeping the set
independent, and independent_with(item), which tells whether the set would
stay independent after inserting item. Matroids are copied with deepcopy.
"""

from __future__ import annotations

import math
from collections import deque
from copy import deepcopy
from typing import Any, Sequence


class ColorfulMatroid:
    """Partition matroid: at most one item of each item.color."""

    def __init__(self) -> None:
        self._colors: set[Any] = set()

    def add(self, item: Any) -> None:
        if item.color in self._colors:
            raise ValueError(f"color {item.color!r} is already taken")
        self._colors.add(item.color)

    def independent_with(self, item: Any) -> bool:
        return item.color not in self._colors


class LinearMatroid:
    """Linear matroid over GF(2): item.value bit vectors must be linearly independent."""

    def __init__(self) -> None:
        self._basis: dict[int, int] = {}

    def add(self, item: Any) -> None:
        x = item.value
        while x:
            bit = x.bit_length() - 1
            if bit not in self._basis:
                self._basis[bit] = x
                return
            x ^= self._basis[bit]
        raise ValueError(f"{item.value} depends on the current set")

    def independent_with(self, item: Any) -> bool:
        x = item.value
        for bit in sorted(self._basis, reverse=True):
            x = min(x, x ^ self._basis[bit])
        return x > 0


class GraphMatroid:
    """Graphic matroid: edges (item.v, item.u) must form a forest on n vertices."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))

    def _root(self, v: int) -> int:
        parent = self._parent
        r = v
        while parent[r] != r:
            r = parent[r]
        while parent[v] != r:
            parent[v], v = r, parent[v]
        return r

    def independent_with(self, item: Any) -> bool:
        return self._root(item.v) != self._root(item.u)

    def add(self, item: Any) -> None:
        v, u = self._root(item.v), self._root(item.u)
        if v == u:
            raise ValueError(f"edge ({item.v}, {item.u}) closes a cycle")
        self._parent[v] = u


def _loaded(matroid: Any, ground_set: Sequence[Any], indices: list[int], skip: int = -1) -> Any:
    copy = deepcopy(matroid)
    for i in indices:
        if i != skip:
            copy.add(ground_set[i])
    return copy


def matroid_intersection(ground_set: Sequence[Any], matroid1: Any, matroid2: Any) -> list[Any]:
    """A largest subset of ground_set independent in both matroids."""
    n = len(ground_set)
    in_set = [False] * n

    while True:
        left = [i for i in range(n) if in_set[i]]
        right = [i for i in range(n) if not in_set[i]]
        m1 = _loaded(matroid1, ground_set, left)
        m2 = _loaded(matroid2, ground_set, left)

        in1 = [False] * n
        in2 = [False] * n
        found = False
        for i in right:
            in1[i] = m1.independent_with(ground_set[i])
            in2[i] = m2.independent_with(ground_set[i])
            if in1[i] and in2[i]:
                in_set[i] = True
                found = True
                break
        if found:
            continue

        used = [False] * n
        par = [-1] * n
        queue: deque[int] = deque()
        for i in right:
            if in1[i]:
                used[i] = True
                queue.append(i)

        while queue and not found:
            v = queue.popleft()
            if in_set[v]:
                m = _loaded(matroid1, ground_set, left, skip=v)
                for u in right:
                    if used[u] or not m.independent_with(ground_set[u]):
                        continue
                    par[u] = v
                    used[u] = True
                    queue.append(u)
                    if in2[u]:
                        found = True
                        while u != -1:
                            in_set[u] = not in_set[u]
                            u = par[u]
                        break
            else:
                for u in left:
                    if used[u]:
                        continue
                    m = _loaded(matroid2, ground_set, left, skip=u)
                    if m.independent_with(ground_set[v]):
                        par[u] = v
                        used[u] = True
                        queue.append(u)
        if not found:
            break

    return [item for item, chosen in zip(ground_set, in_set) if chosen]


def weighted_matroid_intersection(ground_set: Sequence[Any], matroid1: Any, matroid2: Any) -> list[list[Any]]:
    """Common independent sets of maximum total item.weight, one for each size 0, 1, 2, ..."""
    n = len(ground_set)
    in_set = [False] * n
    result: list[list[Any]] = []

    while True:
        result.append([item for item, chosen in zip(ground_set, in_set) if chosen])
        left = [i for i in range(n) if in_set[i]]
        right = [i for i in range(n) if not in_set[i]]
        m1 = _loaded(matroid1, ground_set, left)
        m2 = _loaded(matroid2, ground_set, left)
        in1 = [False] * n
        in2 = [False] * n
        for i in right:
            in1[i] = m1.independent_with(ground_set[i])
            in2[i] = m2.independent_with(ground_set[i])

        edges: list[tuple[int, int]] = []
        for i in left:
            m = _loaded(matroid1, ground_set, left, skip=i)
            edges.extend((i, j) for j in right if m.independent_with(ground_set[j]))
            m = _loaded(matroid2, ground_set, left, skip=i)
            edges.extend((j, i) for j in right if m.independent_with(ground_set[j]))

        dist: list[tuple[float, int]] = [(math.inf, -1)] * n
        par = [-1] * n
        for i in right:
            if in1[i]:
                dist[i] = (-ground_set[i].weight, 0)

        changed = True
        while changed:
            changed = False
            for v, u in edges:
                if dist[v][0] == math.inf:
                    continue
                coeff = -1 if in_set[v] else 1
                candidate = (dist[v][0] + coeff * ground_set[u].weight, dist[v][1] + 1)
                if dist[u] > candidate:
                    par[u] = v
                    dist[u] = candidate
                    changed = True

        finish = -1
        for v in right:
            if in2[v] and dist[v][0] != math.inf and (finish == -1 or dist[finish] > dist[v]):
                finish = v
        if finish == -1:
            break
        while finish != -1:
            in_set[finish] = not in_set[finish]
            finish = par[finish]

    return result